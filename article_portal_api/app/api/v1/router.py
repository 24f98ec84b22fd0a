"""
Top‑level router for version 1 of the API.

Aggregates the domain routers.  When a new domain is introduced, add
its router here.
"""

from fastapi import APIRouter

from .endpoints import status, users

router = APIRouter()

# The status router defines ``/`` itself; no prefix.
router.include_router(status.router, tags=["status"])
router.include_router(users.router, prefix="/users", tags=["users"])
