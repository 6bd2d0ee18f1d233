"""
Tag service orchestrator.

Lists the style tag catalog and creates new tags with case-insensitive
name uniqueness.

Dependencies: kram.boundary.db.CRUD, kram.core.exceptions
System role: Tag use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from kram.boundary.db.CRUD.tag_crud import tag_crud
from kram.boundary.db.models.tag_model import TagModel
from kram.core.exceptions import TagAlreadyExistsError, ValidationError

logger = logging.getLogger(__name__)


def _tag_to_dict(tag: TagModel) -> dict:
    return {
        "id": tag.id,
        "image_url": tag.image_url,
        "name": tag.name,
        "description": tag.description,
    }


class TagService:
    """Tag service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize tag service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def list_tags(self) -> list[dict]:
        """
        Get every tag ordered by name.

        Returns:
            list[dict]: Tag dicts with id, image_url, name, description
        """
        tags = await tag_crud.list_ordered(self.db)
        return [_tag_to_dict(tag) for tag in tags]

    async def create_tag(
        self,
        name: str | None,
        image_url: str | None,
        description: str | None,
    ) -> dict:
        """
        Create a tag from trimmed field values.

        Args:
            name: Tag name
            image_url: Illustration URL
            description: Tag description

        Returns:
            dict: Created tag

        Raises:
            ValidationError: If any field is missing or blank
            TagAlreadyExistsError: If a tag with the same name exists,
                ignoring case
        """
        name = (name or "").strip()
        image_url = (image_url or "").strip()
        description = (description or "").strip()

        if not name or not image_url or not description:
            raise ValidationError(
                "name, image_url, and description are required",
                label="Missing required fields",
            )

        existing = await tag_crud.get_by_name_insensitive(self.db, name)
        if existing is not None:
            logger.info("Duplicate tag rejected", extra={"tag_name": name})
            raise TagAlreadyExistsError(name)

        try:
            tag = await tag_crud.create(
                self.db,
                name=name,
                image_url=image_url,
                description=description,
            )
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to create tag",
                extra={"error": str(e), "tag_name": name},
            )
            raise

        logger.info("Tag created", extra={"tag_id": str(tag.id), "tag_name": name})
        return _tag_to_dict(tag)
