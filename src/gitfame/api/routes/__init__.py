"""API route registration for Git Fame."""

from fastapi import APIRouter

from . import fame, meta

router = APIRouter()
router.include_router(meta.router)
router.include_router(fame.router)

__all__ = ["router"]
