"""
Tag domain models and schemas.

Request/response schemas for style tag operations.

Dependencies: pydantic
System role: Tag API contracts
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field


class CreateTagRequest(BaseModel):
    """
    Request schema for creating a new tag.

    Fields are optional at the schema level so that missing values are
    reported through the API envelope rather than a 422.
    """

    name: str | None = Field(None, max_length=255, description="Tag name")
    image_url: str | None = Field(None, description="Illustration URL")
    description: str | None = Field(None, description="Tag description")


class TagResponse(BaseModel):
    """Response schema for tag operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    image_url: str
    name: str
    description: str
