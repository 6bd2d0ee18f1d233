"""API routers."""

from .health import router as health_router
from .kram import router as kram_router

__all__ = [
    "health_router",
    "kram_router",
]
