"""
Top-level router.

Aggregates the JSON API under ``/api`` and the HTML pages at the root.
"""

from fastapi import APIRouter

from .endpoints import pages, users

router = APIRouter()

router.include_router(users.router, prefix="/api/users", tags=["users"])
router.include_router(pages.router)
