"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin: Model building blocks
  - create_engine_from_settings(), create_session_factory(), get_async_db(): Connection management
  - TagModel, HistoryModel, OutputGenerateModel: Domain entities
  - tag_crud, history_crud, output_crud: CRUD operation singletons

Dependencies: sqlalchemy, kram.configs
System role: Database adapter providing persistent storage for tags,
generation history and generated outputs.
"""

from kram.boundary.db.base import Base, UUIDMixin
from kram.boundary.db.connection import (
    create_engine_from_settings,
    create_session_factory,
    get_async_db,
    ping_database,
)
from kram.boundary.db.models import HistoryModel, OutputGenerateModel, TagModel
from kram.boundary.db.CRUD import (
    BaseCRUD,
    HistoryCRUD,
    OutputGenerateCRUD,
    TagCRUD,
    history_crud,
    output_crud,
    tag_crud,
)

__all__ = [
    # Base classes
    "Base",
    "UUIDMixin",
    # Connection
    "create_engine_from_settings",
    "create_session_factory",
    "get_async_db",
    "ping_database",
    # Models
    "TagModel",
    "HistoryModel",
    "OutputGenerateModel",
    # CRUD classes
    "BaseCRUD",
    "TagCRUD",
    "HistoryCRUD",
    "OutputGenerateCRUD",
    # CRUD singletons
    "tag_crud",
    "history_crud",
    "output_crud",
]
