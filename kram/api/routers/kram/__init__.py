"""
Kram router package.

Combines the tag, generation and gallery endpoints under ``/kram``.
"""

from fastapi import APIRouter

from .gallery_router import router as gallery_router
from .generate_router import router as generate_router
from .tags_router import router as tags_router

router = APIRouter(prefix="/kram")
router.include_router(tags_router)
router.include_router(generate_router)
router.include_router(gallery_router)

__all__ = ["router"]
