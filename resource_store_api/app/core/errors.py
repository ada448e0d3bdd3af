"""
Error types and JSON error rendering.

Services raise ``ResourceNotFoundError`` and ``MissingFieldsError``;
endpoints translate them into ``HTTPException``.  The handlers
registered by ``register_error_handlers`` render every HTTP error as
``{"error": "<message>"}`` instead of FastAPI's default ``detail``
envelope, so clients see one error shape across the whole API.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)


class ResourceNotFoundError(ValueError):
    """No entity with the requested id exists in the collection."""


class MissingFieldsError(ValueError):
    """A required field is missing or falsy in a create/replace payload."""


def error_body(message: str) -> dict:
    return {"error": message}


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Body parsing is the only validation FastAPI performs for us; every
    # payload is accepted as an arbitrary JSON value.
    logger.debug("Rejected request body for %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Invalid JSON body"),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the ``{"error": ...}`` renderers on ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
