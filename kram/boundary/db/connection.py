"""
Database connection management.

Provides the async SQLAlchemy engine, session factory, FastAPI dependency
for session injection, and a lightweight health probe.

The engine and session factory are created once in the application
lifespan and stored on ``app.state``; nothing here holds module-level
connection state.

Dependencies: sqlalchemy, kram.configs
System role: Database connection lifecycle management
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from kram.configs.database import DatabaseSettings


def create_engine_from_settings(db_config: DatabaseSettings) -> AsyncEngine:
    """
    Create async SQLAlchemy engine with connection pooling and health checks.

    pool_pre_ping=True verifies connections before use to detect
    stale/broken connections early. Pool sizing only applies to server
    databases; SQLite URLs get the driver's default pool.

    Args:
        db_config: Database settings

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails
    """
    url = db_config.async_database_url
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=db_config.echo_sql)

    return create_async_engine(
        url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Create async session factory for database operations.

    Sessions use autoflush=False and expire_on_commit=False so services
    control transactions explicitly and can read committed objects.

    Args:
        engine: Async engine to bind

    Returns:
        async_sessionmaker: Async session factory

    Usage:
        SessionFactory = create_session_factory(engine)
        async with SessionFactory() as session:
            session.add(obj)
            await session.commit()
    """
    return async_sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


async def get_async_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection with automatic cleanup.

    Opens a session from the factory stored on ``app.state`` and closes it
    once the route completes, even if exceptions occur. Uncommitted work is
    rolled back on close.

    Yields:
        AsyncSession: Async SQLAlchemy session scoped to the request

    Usage:
        @router.get("/tags")
        async def list_tags(db: AsyncSession = Depends(get_async_db)):
            return await tag_crud.list_ordered(db)
    """
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with session_factory() as session:
        yield session


async def ping_database(session: AsyncSession) -> None:
    """
    Run ``SELECT 1`` to confirm the connection is usable.

    Raises:
        SQLAlchemyError: If the database cannot be reached
    """
    await session.execute(text("SELECT 1"))
