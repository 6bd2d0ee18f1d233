"""
Database table creation script.

Creates the tags, history and output_generate tables from the ORM
metadata.

Dependencies: sqlalchemy, kram.configs
System role: Database schema initialization

Usage:
    python -m kram.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from kram.boundary.db.base import Base
from kram.boundary.db.connection import create_engine_from_settings
from kram.configs import get_settings

# Import all models to register them with Base.metadata
from kram.boundary.db.models import HistoryModel, OutputGenerateModel, TagModel  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables remain unchanged.

    Args:
        engine: Async engine of the target database

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("All tables created successfully")


async def drop_all_tables(engine: AsyncEngine) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Args:
        engine: Async engine of the target database
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("All tables dropped")


async def _main() -> None:
    engine = create_engine_from_settings(get_settings().database)
    try:
        await create_all_tables(engine)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(_main())
