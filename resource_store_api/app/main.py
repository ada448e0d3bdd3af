"""
Main entrypoint for the Resource Store API.

This module assembles the FastAPI application: logging, CORS, the
``{"error": ...}`` exception handlers, the resource store and the
routers.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``.  Run it
with uvicorn, e.g.::

    uvicorn resource_store_api.app.main:app --port 3000

or through ``run.py``, which reads the port from ``PORT``.
"""

import logging
from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging
from .services.store import ResourceStore

logger = logging.getLogger(__name__)


def describe_endpoints(app: FastAPI) -> List[str]:
    """Return ``"METHOD path"`` lines for every documented API route."""
    lines = []
    for route in app.routes:
        if not isinstance(route, APIRoute) or not route.include_in_schema:
            continue
        for method in sorted(route.methods):
            lines.append(f"{method:<6} {route.path}")
    return lines


def create_app(store: Optional[ResourceStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[ResourceStore]
        Store served by the application.  Defaults to a store holding
        the seed data, or an empty one when ``settings.seed_data`` is
        false.
    settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    if store is None:
        store = ResourceStore.seeded() if settings.seed_data else ResourceStore.empty()

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.store = store
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(router)

    @app.on_event("startup")
    async def log_endpoints() -> None:
        logger.info("Available endpoints:\n  %s", "\n  ".join(describe_endpoints(app)))

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
