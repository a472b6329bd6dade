"""API module for the journal.

All routes live under ``/api``.
"""

from fastapi import APIRouter

from app.api.auth import router as auth_router
from app.api.entries import router as entries_router

router = APIRouter(prefix="/api")
router.include_router(auth_router)
router.include_router(entries_router)

__all__ = ["router"]
