"""
History CRUD operations.

Provides gallery queries over history rows: free-text search across the
prompt, the primary tag and the generated outputs, sorting, pagination,
and single-item retrieval with relations eagerly loaded.

Dependencies: sqlalchemy, kram.boundary.db.models
System role: History persistence and gallery read model
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import ColumnElement, Select, exists, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from kram.boundary.db.CRUD.base_crud import BaseCRUD
from kram.boundary.db.models.history_model import HistoryModel
from kram.boundary.db.models.output_model import OutputGenerateModel
from kram.boundary.db.models.tag_model import TagModel

SORT_COLUMNS = {
    "create_at": HistoryModel.create_at,
    "prompt_message": HistoryModel.prompt_message,
}


def _search_filter(search: str) -> ColumnElement[bool]:
    """Case-insensitive substring match over prompt, tag and outputs.

    ``%`` and ``_`` in the search text are escaped and match literally.
    """
    output_match = exists().where(
        OutputGenerateModel.history_id == HistoryModel.id,
        or_(
            OutputGenerateModel.description.icontains(search, autoescape=True),
            OutputGenerateModel.output_tags.icontains(search, autoescape=True),
        ),
    )
    return or_(
        HistoryModel.prompt_message.icontains(search, autoescape=True),
        TagModel.name.icontains(search, autoescape=True),
        TagModel.description.icontains(search, autoescape=True),
        output_match,
    )


def _apply_search(stmt: Select, search: str) -> Select:
    stmt = stmt.outerjoin(TagModel, HistoryModel.tags_id == TagModel.id)
    if search:
        stmt = stmt.where(_search_filter(search))
    return stmt


class HistoryCRUD(BaseCRUD[HistoryModel]):
    """
    CRUD operations for HistoryModel.

    Extends BaseCRUD with gallery search and eager loading of the
    primary tag and output logs.
    """

    def __init__(self) -> None:
        """Initialize HistoryCRUD with HistoryModel."""
        super().__init__(HistoryModel)

    async def search_page(
        self,
        session: AsyncSession,
        search: str = "",
        sort_by: str = "create_at",
        sort_order: str = "desc",
        limit: int = 10,
        offset: int = 0,
    ) -> Sequence[HistoryModel]:
        """
        Retrieve one page of history rows matching ``search``.

        Args:
            session: Async database session
            search: Substring to match, empty for no filter
            sort_by: create_at or prompt_message
            sort_order: asc or desc
            limit: Page size
            offset: Rows to skip

        Returns:
            Sequence of HistoryModels with tag and output_logs loaded
        """
        column = SORT_COLUMNS.get(sort_by, HistoryModel.create_at)
        ordering = column.asc() if sort_order == "asc" else column.desc()

        stmt = _apply_search(select(HistoryModel), search)
        stmt = (
            stmt.options(
                selectinload(HistoryModel.tag),
                selectinload(HistoryModel.output_logs),
            )
            .order_by(ordering, HistoryModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_matching(self, session: AsyncSession, search: str = "") -> int:
        """
        Count history rows matching ``search``.

        Args:
            session: Async database session
            search: Substring to match, empty for no filter

        Returns:
            Number of matching rows
        """
        stmt = _apply_search(select(func.count(HistoryModel.id)), search)
        result = await session.execute(stmt)
        return result.scalar_one()

    async def get_with_outputs(
        self,
        session: AsyncSession,
        id: UUID,
    ) -> HistoryModel | None:
        """
        Retrieve one history row with its tag and output logs.

        Args:
            session: Async database session
            id: History UUID

        Returns:
            HistoryModel with relations loaded, None if not found
        """
        stmt = (
            select(HistoryModel)
            .where(HistoryModel.id == id)
            .options(
                selectinload(HistoryModel.tag),
                selectinload(HistoryModel.output_logs),
            )
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


history_crud = HistoryCRUD()
