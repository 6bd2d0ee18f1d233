"""
Dependency injection container.

Factory functions for FastAPI dependencies. Long-lived resources (AI
client, session factory) are created in the application lifespan and
read from ``app.state``.

Dependencies: fastapi, kram.configs, kram.application, kram.boundary
System role: DI container for service injection
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from kram.application.services import GalleryService, GenerationService, TagService
from kram.boundary.ai.client import KramAIClient
from kram.boundary.db import get_async_db
from kram.configs import Settings, get_settings
from kram.core.exceptions import AIClientNotConfiguredError


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_ai_client(request: Request) -> KramAIClient:
    """
    Get the AI client created at start-up.

    Raises:
        AIClientNotConfiguredError: If no API key was configured
    """
    ai_client = getattr(request.app.state, "ai_client", None)
    if ai_client is None:
        raise AIClientNotConfiguredError()
    return ai_client


def get_tag_service(db: AsyncSession = Depends(get_async_db)) -> TagService:
    """
    Get tag service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        TagService: Tag service instance
    """
    return TagService(db=db)


def get_gallery_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> GalleryService:
    """
    Get gallery service instance.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        GalleryService: Gallery service with configured page bounds and retry policy
    """
    return GalleryService(db=db, settings=settings.gallery)


def get_generation_service(
    db: AsyncSession = Depends(get_async_db),
    ai_client: KramAIClient = Depends(get_ai_client),
) -> GenerationService:
    """
    Get generation service instance.

    Args:
        db: Async database session (injected via Depends)
        ai_client: AI client from app state (injected via Depends)

    Returns:
        GenerationService: Generation service instance
    """
    return GenerationService(db=db, ai_client=ai_client)
