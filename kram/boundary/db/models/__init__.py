"""
Database models package.

Exports:
  - TagModel: Style tag ORM model
  - HistoryModel: Generation request ORM model
  - OutputGenerateModel: Generated output ORM model

Dependencies: sqlalchemy, kram.boundary.db.base
System role: Database model definitions for domain entities
"""

from kram.boundary.db.models.tag_model import TagModel
from kram.boundary.db.models.history_model import HistoryModel
from kram.boundary.db.models.output_model import OutputGenerateModel

__all__ = [
    "TagModel",
    "HistoryModel",
    "OutputGenerateModel",
]
