"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers.  They define their own
paths (``/issue``, ``/issues``, ``/users``) so no prefixes are added
here.
"""

from fastapi import APIRouter

from .endpoints import info, issues, users

router = APIRouter()

router.include_router(issues.router, tags=["issues"])
router.include_router(users.router, tags=["users"])
router.include_router(info.router, tags=["info"])
