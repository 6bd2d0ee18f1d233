"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_ai_client,
    get_gallery_service,
    get_generation_service,
    get_settings_dependency,
    get_tag_service,
)

__all__ = [
    "get_ai_client",
    "get_gallery_service",
    "get_generation_service",
    "get_settings_dependency",
    "get_tag_service",
]
