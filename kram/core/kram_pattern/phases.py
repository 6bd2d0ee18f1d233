"""
Generation pipeline phase results.

Each phase produces an immutable record carrying everything later phases
need. Step functions accept only the previous record, so persistence
cannot be reached without an image, a description and tags.

Dependencies: None (pure domain layer)
System role: State carried through the Kram pattern pipeline
"""

import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Sequence, Union

from kram.core.kram_pattern.prompt_builder import TagContext


@dataclass(frozen=True)
class ResolvedTag:
    """Selected tag looked up from the store."""

    id: uuid.UUID
    name: str
    description: str
    image_url: str

    @property
    def context(self) -> TagContext:
        return TagContext(name=self.name, description=self.description)


@dataclass(frozen=True)
class GenerationOptions:
    """Request options with defaults applied."""

    size: str = "1024x1024"
    quality: str = "standard"
    style: str = "natural"
    chat_model: str | None = None
    description_max_tokens: int = 300
    tags_max_tokens: int = 100


@dataclass(frozen=True)
class Validated:
    prompt: str
    tags: tuple[ResolvedTag, ...]
    options: GenerationOptions

    @property
    def tag_contexts(self) -> tuple[TagContext, ...]:
        return tuple(tag.context for tag in self.tags)


@dataclass(frozen=True)
class ImageGenerated:
    validated: Validated
    image_url: str
    enhanced_prompt: str
    generation_time_ms: int


@dataclass(frozen=True)
class DescriptionGenerated:
    image: ImageGenerated
    description: str


@dataclass(frozen=True)
class TagsGenerated:
    described: DescriptionGenerated
    output_tags: str

    @property
    def validated(self) -> Validated:
        return self.described.image.validated

    @property
    def image_url(self) -> str:
        return self.described.image.image_url

    @property
    def description(self) -> str:
        return self.described.description


@dataclass(frozen=True)
class PersistedOutput:
    id: uuid.UUID
    image_url: str
    description: str
    output_tags: str


@dataclass(frozen=True)
class Persisted:
    generated: TagsGenerated
    history_id: uuid.UUID
    outputs: tuple[PersistedOutput, ...]
    created_at: datetime


PhaseResult = Union[Validated, ImageGenerated, DescriptionGenerated, TagsGenerated, Persisted]


def with_tags(validated: Validated, tags: Sequence[ResolvedTag]) -> Validated:
    """Return ``validated`` bound to the looked-up tags."""
    return replace(validated, tags=tuple(tags))
