"""Service orchestrators."""

from .gallery_service import GalleryService
from .generation_service import GenerationService
from .tag_service import TagService

__all__ = [
    "GalleryService",
    "GenerationService",
    "TagService",
]
