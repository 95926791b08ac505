"""
Top‑level router of the API.

Aggregates domain‑specific routers.  The user routes are included
without a prefix of their own; the mount point is applied by
``create_app`` from ``settings.mount_path``.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, tags=["users"])
