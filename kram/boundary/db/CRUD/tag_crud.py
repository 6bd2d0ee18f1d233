"""
Tag CRUD operations.

Provides tag-specific queries: ordered listing, case-insensitive name
lookup and bulk fetch by ID.

Dependencies: sqlalchemy, kram.boundary.db.models
System role: Tag persistence operations
"""

from typing import Iterable, Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from kram.boundary.db.CRUD.base_crud import BaseCRUD
from kram.boundary.db.models.tag_model import TagModel


class TagCRUD(BaseCRUD[TagModel]):
    """CRUD operations for TagModel."""

    def __init__(self) -> None:
        """Initialize TagCRUD with TagModel."""
        super().__init__(TagModel)

    async def list_ordered(self, session: AsyncSession) -> Sequence[TagModel]:
        """
        Retrieve every tag ordered by name ascending.

        Args:
            session: Async database session

        Returns:
            Sequence of TagModels
        """
        stmt = select(TagModel).order_by(TagModel.name.asc())
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_by_name_insensitive(
        self,
        session: AsyncSession,
        name: str,
    ) -> TagModel | None:
        """
        Find a tag whose name equals ``name`` ignoring case.

        Args:
            session: Async database session
            name: Name to look up

        Returns:
            Matching TagModel, None if no tag has that name
        """
        stmt = select(TagModel).where(func.lower(TagModel.name) == name.lower()).limit(1)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_ids(
        self,
        session: AsyncSession,
        ids: Iterable[UUID],
    ) -> Sequence[TagModel]:
        """
        Retrieve all tags whose ID is in ``ids``.

        Unknown IDs are silently absent from the result; callers compare
        lengths to detect them.
        """
        id_list = list(ids)
        if not id_list:
            return []
        stmt = select(TagModel).where(TagModel.id.in_(id_list))
        result = await session.execute(stmt)
        return result.scalars().all()


tag_crud = TagCRUD()
