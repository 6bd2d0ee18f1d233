"""
Kram pattern generation schemas.

Request/response schemas for the generate endpoint. Option values are
plain strings so the validator can report every bad value at once.

Dependencies: pydantic
System role: Generation API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class DalleOptions(BaseModel):
    """Image generation options."""

    size: str | None = Field(None, description="1024x1024, 1792x1024 or 1024x1792")
    quality: str | None = Field(None, description="standard or hd")
    style: str | None = Field(None, description="vivid or natural")


class ChatOptions(BaseModel):
    """Chat completion options for description and tag generation."""

    model: str | None = Field(None, description="gpt-4, gpt-4-turbo or gpt-3.5-turbo")
    max_tokens: int | None = Field(None, description="Between 50 and 2000")


class KramPatternRequest(BaseModel):
    """Request schema for generating a Kram pattern."""

    prompt: str = Field(default="", description="User prompt")
    tag_ids: list[str] = Field(default_factory=list, description="Optional style tag IDs")
    dalle_options: DalleOptions | None = None
    chat_options: ChatOptions | None = None


class SelectedTag(BaseModel):
    """Tag used as style context, without its image URL."""

    id: uuid.UUID
    name: str
    description: str


class GeneratedOutput(BaseModel):
    """One generated artifact."""

    id: uuid.UUID
    image_url: str
    description: str
    output_tags: str
    output_tag_list: list[str] = Field(default_factory=list, description="output_tags split on commas")


class KramPatternResponse(BaseModel):
    """Response schema for a successful generation."""

    history_id: uuid.UUID
    prompt_message: str
    selected_tags: list[SelectedTag]
    generated_outputs: list[GeneratedOutput]
    created_at: datetime
