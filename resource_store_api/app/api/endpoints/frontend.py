"""
Front‑end fallback route.

Any GET request that no API route matched is answered from the
front‑end directory: an existing file is sent as is, every other path
gets ``index.html`` so the companion single‑page app can handle its
own routing.  This router must be included after all API routers.
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import FileResponse

from ...core.config import Settings
from ..deps import get_settings

router = APIRouter()
logger = logging.getLogger(__name__)

ENTRY_DOCUMENT = "index.html"


def resolve_frontend_file(frontend_dir: str, request_path: str) -> Path:
    """Map a request path to a file inside ``frontend_dir``.

    Paths that do not name a file, or that resolve outside the
    directory, map to the entry document.  Raises
    ``FileNotFoundError`` when the entry document itself is missing.
    """
    root = Path(frontend_dir).resolve()
    if request_path:
        candidate = (root / request_path).resolve()
        if candidate.is_relative_to(root) and candidate.is_file():
            return candidate
    entry = root / ENTRY_DOCUMENT
    if not entry.is_file():
        raise FileNotFoundError(str(entry))
    return entry


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(full_path: str, settings: Settings = Depends(get_settings)) -> FileResponse:
    try:
        return FileResponse(resolve_frontend_file(settings.frontend_dir, full_path))
    except FileNotFoundError:
        logger.debug("No front end installed in %s", settings.frontend_dir)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
