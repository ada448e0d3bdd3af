"""
Shared FastAPI dependencies.

Handlers never import the store or settings directly; they receive the
instances attached to the running application in ``main.create_app``.
"""

import re
from typing import Any, Dict, Optional

from fastapi import Body, Request

from ..core.config import Settings
from ..services.store import ResourceStore


# Optional whitespace, optional sign, then the leading run of ASCII digits.
_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_id(raw: str) -> Optional[int]:
    """Parse the leading integer of a path segment.

    Trailing garbage is ignored (``"12abc"`` is ``12``, ``"1.5"`` is
    ``1``).  Returns ``None`` when the segment does not start with a
    number, or when the number is too long to convert; ``None`` never
    matches a stored record.
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # int() refuses strings past sys.get_int_max_str_digits().
        return None


def get_store(request: Request) -> ResourceStore:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def entity_id_param(entity_id: str) -> Optional[int]:
    """Path parameter ``{entity_id}`` parsed with :func:`parse_id`."""
    return parse_id(entity_id)


async def json_payload(payload: Any = Body(None)) -> Dict[str, Any]:
    """Request body as a mapping.

    A missing body, or a JSON value that is not an object, reads as an
    empty mapping.
    """
    if isinstance(payload, dict):
        return payload
    return {}
