"""
Core business logic module.

Contains domain business logic, exception hierarchy, and the Kram pattern
generation pipeline. All business rules and domain-specific logic reside here.
"""

from kram.core.exceptions import (
    AIClientNotConfiguredError,
    AIErrorKind,
    AIServiceError,
    DatabaseUnavailableError,
    GalleryItemNotFoundError,
    GenerationPhase,
    KramException,
    KramPatternError,
    TagAlreadyExistsError,
    TagNotFoundError,
    ValidationError,
)

__all__ = [
    "AIClientNotConfiguredError",
    "AIErrorKind",
    "AIServiceError",
    "DatabaseUnavailableError",
    "GalleryItemNotFoundError",
    "GenerationPhase",
    "KramException",
    "KramPatternError",
    "TagAlreadyExistsError",
    "TagNotFoundError",
    "ValidationError",
]
