"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database session, AI client doubles, sample rows
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest

from kram.boundary.ai.client import KramAIClient


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from kram.boundary.db.create_tables import create_all_tables, drop_all_tables

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all_tables(engine)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    await drop_all_tables(engine)
    await engine.dispose()


@pytest.fixture
def no_sleep() -> AsyncMock:
    """Awaitable sleep double that records requested delays."""
    return AsyncMock(return_value=None)


@pytest.fixture
def mock_ai_client() -> AsyncMock:
    """
    Create AI client double whose three calls succeed.

    Returns:
        AsyncMock: Spec'd KramAIClient with canned image, description and tags
    """
    client = AsyncMock(spec=KramAIClient)
    client.generate_image.return_value = MagicMock(
        image_url="https://images.example.com/kram.png",
        enhanced_prompt="enhanced prompt",
        generation_time_ms=1200,
    )
    client.generate_image_description.return_value = "ลายครามสีน้ำเงินเข้มบนพื้นขาว"
    client.generate_output_tags.return_value = "คราม, ลายเรขาคณิต, ผ้าทอ"
    return client


@pytest.fixture
def make_tag(test_async_db):
    """Factory inserting a tag row."""
    from kram.boundary.db.models import TagModel

    async def _make_tag(
        name: str = "Diamond",
        description: str = "Interlocking diamonds",
        image_url: str = "https://images.example.com/diamond.png",
    ) -> TagModel:
        tag = TagModel(name=name, description=description, image_url=image_url)
        test_async_db.add(tag)
        await test_async_db.flush()
        return tag

    return _make_tag


@pytest.fixture
def history_id() -> uuid.UUID:
    """Generate a test history ID."""
    return uuid.uuid4()
