"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from kram.boundary.db.CRUD import tag_crud, history_crud

    tags = await tag_crud.list_ordered(db)
"""

from kram.boundary.db.CRUD.base_crud import BaseCRUD
from kram.boundary.db.CRUD.tag_crud import TagCRUD, tag_crud
from kram.boundary.db.CRUD.history_crud import HistoryCRUD, history_crud
from kram.boundary.db.CRUD.output_crud import OutputGenerateCRUD, output_crud

__all__ = [
    "BaseCRUD",
    "TagCRUD",
    "tag_crud",
    "HistoryCRUD",
    "history_crud",
    "OutputGenerateCRUD",
    "output_crud",
]
