"""
Tag ORM model.

Represents a selectable style reference for Kram pattern generation.

Dependencies: sqlalchemy, kram.boundary.db.base
System role: Tag persistence for the style catalog
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from kram.boundary.db.base import Base, UUIDMixin


class TagModel(Base, UUIDMixin):
    """
    Tag ORM model.

    Name uniqueness is case-insensitive and checked by the tag service
    before insert. Deleting a tag leaves its history rows in place with
    ``tags_id`` set to NULL.

    Attributes:
        id: UUID primary key (auto-generated)
        image_url: Illustration of the pattern style
        name: Display name
        description: What the style looks like

    Relationships:
        histories: History rows whose primary tag is this tag
    """

    __tablename__ = "tags"

    image_url: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Illustration URL",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        doc="Tag name",
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Tag description",
    )

    # Relationships
    histories = relationship(
        "HistoryModel",
        back_populates="tag",
        passive_deletes=True,
    )
