"""
Top‑level router for the application.

The CRUD routers for users and posts are mounted under ``/api``.  The
front‑end fallback matches every GET path, so it is included last.
"""

from fastapi import APIRouter

from ..schemas.post import PostRead
from ..schemas.user import UserRead
from .endpoints import frontend, health
from .endpoints.resources import create_resource_router

api_router = APIRouter()
api_router.include_router(create_resource_router("users", UserRead), prefix="/users", tags=["users"])
api_router.include_router(create_resource_router("posts", PostRead), prefix="/posts", tags=["posts"])

router = APIRouter()
router.include_router(health.router, tags=["health"])
router.include_router(api_router, prefix="/api")
router.include_router(frontend.router)
