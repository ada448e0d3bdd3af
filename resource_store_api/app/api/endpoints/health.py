"""
Health check endpoint.

Always answers 200 while the process is able to serve requests.  The
timestamp uses the JavaScript ``toISOString`` layout (millisecond
precision, ``Z`` suffix) that existing front ends parse.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from ...schemas.common import HealthRead

router = APIRouter()


def utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health", response_model=HealthRead)
@router.get("/health/", response_model=HealthRead, include_in_schema=False)
async def health() -> HealthRead:
    return HealthRead(status="OK", message="Server is running", timestamp=utc_timestamp())
