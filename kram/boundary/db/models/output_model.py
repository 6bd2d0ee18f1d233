"""
OutputGenerate ORM model.

Generated artifact (image URL, description, tags) for one history row.

Dependencies: sqlalchemy, kram.boundary.db.base
System role: Generated output persistence
"""

import uuid

from sqlalchemy import ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from kram.boundary.db.base import Base, UUIDMixin


class OutputGenerateModel(Base, UUIDMixin):
    """
    OutputGenerate ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        history_id: Owning history row (RESTRICT on delete)
        prompt_image_url: URL of the generated image
        description: Generated gallery description
        output_tags: Comma-separated generated tags (format not enforced)

    Constraints:
        history_id: Foreign key ON DELETE RESTRICT to history.id
    """

    __tablename__ = "output_generate"

    history_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("history.id", ondelete="RESTRICT", onupdate="CASCADE"),
        nullable=False,
        index=True,
        doc="History row this output belongs to",
    )

    prompt_image_url: Mapped[str] = mapped_column(Text, nullable=False)

    description: Mapped[str] = mapped_column(Text, nullable=False)

    output_tags: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Comma-separated tags",
    )

    # Relationships
    history = relationship("HistoryModel", back_populates="output_logs")
