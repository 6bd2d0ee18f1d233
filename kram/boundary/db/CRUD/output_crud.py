"""
OutputGenerate CRUD operations.

Outputs are only written here; the gallery reads them through
``HistoryModel.output_logs``.

Dependencies: sqlalchemy, kram.boundary.db.models
System role: Generated output persistence operations
"""

from kram.boundary.db.CRUD.base_crud import BaseCRUD
from kram.boundary.db.models.output_model import OutputGenerateModel


class OutputGenerateCRUD(BaseCRUD[OutputGenerateModel]):
    """CRUD operations for OutputGenerateModel."""

    def __init__(self) -> None:
        """Initialize OutputGenerateCRUD with OutputGenerateModel."""
        super().__init__(OutputGenerateModel)


output_crud = OutputGenerateCRUD()
