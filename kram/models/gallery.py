"""
Gallery domain models and schemas.

Query parameters and response shapes for browsing generated results.
Pagination keys are camelCase to match the public API.

Dependencies: pydantic
System role: Gallery API contracts
"""

import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from kram.models.tag import TagResponse

SortField = Literal["create_at", "prompt_message"]
SortOrder = Literal["asc", "desc"]

SORT_FIELDS: tuple[str, ...] = ("create_at", "prompt_message")
SORT_ORDERS: tuple[str, ...] = ("asc", "desc")


class GalleryQuery(BaseModel):
    """Normalized gallery query."""

    search: str = ""
    page: int = 1
    limit: int = 10
    sort_by: SortField = "create_at"
    sort_order: SortOrder = "desc"

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def from_params(
        cls,
        search: str | None = None,
        page: str | int | None = None,
        limit: str | int | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
        default_limit: int = 10,
        max_limit: int = 100,
    ) -> "GalleryQuery":
        """
        Build a query from raw request parameters.

        Unparseable or out-of-range values fall back to defaults: page is
        at least 1, limit is clamped to [1, max_limit], unknown sort
        fields and orders become create_at / desc.
        """
        parsed_page = _parse_int(page) or 1
        parsed_limit = _parse_int(limit) or default_limit
        return cls(
            search=(search or "").strip(),
            page=max(1, parsed_page),
            limit=min(max_limit, max(1, parsed_limit)),
            sort_by=sort_by if sort_by in SORT_FIELDS else "create_at",
            sort_order=sort_order if sort_order in SORT_ORDERS else "desc",
        )


def _parse_int(value: str | int | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class OutputLog(BaseModel):
    """Generated output as listed in the gallery."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    prompt_image_url: str
    description: str
    output_tags: str


class GalleryItem(BaseModel):
    """History record with its tag and outputs."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    prompt_message: str
    tags_id: uuid.UUID | None = None
    create_at: datetime
    tag: TagResponse | None = None
    output_logs: list[OutputLog] = Field(default_factory=list)


class Pagination(BaseModel):
    """Pagination metadata."""

    currentPage: int
    totalPages: int
    totalItems: int
    hasNext: bool
    hasPrev: bool
    limit: int

    @classmethod
    def build(cls, page: int, limit: int, total_items: int) -> "Pagination":
        total_pages = -(-total_items // limit) if limit else 0
        return cls(
            currentPage=page,
            totalPages=total_pages,
            totalItems=total_items,
            hasNext=page < total_pages,
            hasPrev=page > 1,
            limit=limit,
        )


class PaginatedGallery(BaseModel):
    """Page of gallery items plus pagination block."""

    data: list[GalleryItem]
    pagination: Pagination
