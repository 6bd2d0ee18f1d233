"""
History ORM model.

One row per successful generation request.

Dependencies: sqlalchemy, kram.boundary.db.base
System role: Generation request persistence for the gallery
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from kram.boundary.db.base import Base, UUIDMixin


class HistoryModel(Base, UUIDMixin):
    """
    History ORM model.

    Created once, after every AI phase of a generation has succeeded, and
    never updated. Only the primary tag is linked here; the full selected
    tag list is returned to the caller at generation time.

    Attributes:
        id: UUID primary key (auto-generated)
        prompt_message: Prompt as submitted by the user
        tags_id: Optional primary tag (SET NULL on tag deletion)
        create_at: Creation timestamp (UTC)

    Relationships:
        tag: Primary TagModel, if any
        output_logs: Generated outputs, ordered by id
    """

    __tablename__ = "history"

    prompt_message: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="User prompt",
    )

    tags_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("tags.id", ondelete="SET NULL", onupdate="CASCADE"),
        nullable=True,
        doc="Primary tag used for this generation",
    )

    create_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )

    # Relationships
    tag = relationship("TagModel", back_populates="histories")
    output_logs = relationship(
        "OutputGenerateModel",
        back_populates="history",
        order_by="OutputGenerateModel.id",
    )
