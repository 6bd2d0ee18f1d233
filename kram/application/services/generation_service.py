"""
Kram pattern generation service.

Resolves the selected tags, drives the generation orchestrator and
persists a successful result as one history row plus its output in a
single transaction.

Dependencies: sqlalchemy, kram.boundary.ai, kram.boundary.db.CRUD,
    kram.core.kram_pattern
System role: Generation use case orchestration
"""

import logging
import time
import uuid
from typing import Any, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from kram.boundary.ai.client import KramAIClient
from kram.boundary.db.CRUD.history_crud import history_crud
from kram.boundary.db.CRUD.output_crud import output_crud
from kram.boundary.db.CRUD.tag_crud import tag_crud
from kram.core.exceptions import TagNotFoundError, ValidationError
from kram.core.kram_pattern.cost import estimate_processing_cost
from kram.core.kram_pattern.orchestrator import KramPatternOrchestrator
from kram.core.kram_pattern.phases import (
    Persisted,
    PersistedOutput,
    ResolvedTag,
    TagsGenerated,
    with_tags,
)
from kram.core.kram_pattern.prompt_builder import split_output_tags
from kram.models.generation import (
    GeneratedOutput,
    KramPatternRequest,
    KramPatternResponse,
    SelectedTag,
)
from kram.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


def _unique(values: Sequence[str]) -> list[str]:
    return list(dict.fromkeys(values))


class GenerationService:
    """Kram pattern generation service."""

    def __init__(self, db: AsyncSession, ai_client: KramAIClient) -> None:
        """
        Initialize generation service.

        Args:
            db: Async SQLAlchemy session
            ai_client: AI wrapper built at application start-up
        """
        self.db = db
        self.orchestrator = KramPatternOrchestrator(ai_client, self._persist)

    async def resolve_tags(self, tag_ids: Sequence[str]) -> list[ResolvedTag]:
        """
        Look up selected tags, preserving request order.

        IDs must already be validated as UUIDs.

        Args:
            tag_ids: Tag IDs from the request

        Returns:
            list[ResolvedTag]: One entry per distinct ID

        Raises:
            TagNotFoundError: If any ID has no tag
            ValidationError: If any tag has no image URL
        """
        ids = _unique([str(uuid.UUID(tag_id)) for tag_id in tag_ids])
        if not ids:
            return []

        rows = await tag_crud.get_by_ids(self.db, [uuid.UUID(tag_id) for tag_id in ids])
        by_id = {str(row.id): row for row in rows}

        missing = [tag_id for tag_id in ids if tag_id not in by_id]
        if missing:
            raise TagNotFoundError(missing)

        tags = [
            ResolvedTag(
                id=row.id,
                name=row.name,
                description=row.description,
                image_url=row.image_url or "",
            )
            for row in (by_id[tag_id] for tag_id in ids)
        ]

        without_images = [tag.name for tag in tags if not tag.image_url.strip()]
        if without_images:
            raise ValidationError(
                f"The following tags are missing image URLs: {', '.join(without_images)}",
                label="Tags missing image URLs",
            )
        return tags

    async def _persist(
        self,
        generated: TagsGenerated,
        primary_tag_id: uuid.UUID | None,
    ) -> Persisted:
        try:
            history = await history_crud.create(
                self.db,
                prompt_message=generated.validated.prompt,
                tags_id=primary_tag_id,
            )
            output = await output_crud.create(
                self.db,
                history_id=history.id,
                prompt_image_url=generated.image_url,
                description=generated.description,
                output_tags=generated.output_tags,
            )
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        return Persisted(
            generated=generated,
            history_id=history.id,
            outputs=(
                PersistedOutput(
                    id=output.id,
                    image_url=output.prompt_image_url,
                    description=output.description,
                    output_tags=output.output_tags,
                ),
            ),
            created_at=history.create_at,
        )

    async def generate(self, request: KramPatternRequest) -> tuple[KramPatternResponse, dict[str, Any]]:
        """
        Generate, describe, tag and store one Kram pattern.

        Args:
            request: Generation request

        Returns:
            tuple: Response payload and diagnostics for non-production debug output

        Raises:
            KramPatternError: If validation or any generation phase fails
            TagNotFoundError: If a selected tag does not exist
            ValidationError: If a selected tag has no image URL
        """
        start = time.perf_counter()
        log_with_context(
            logger,
            logging.INFO,
            "Received Kram pattern generation request",
            prompt_length=len(request.prompt or ""),
            tag_ids=len(request.tag_ids),
        )

        validated = self.orchestrator.validate(request)
        tags = await self.resolve_tags(request.tag_ids)
        validated = with_tags(validated, tags)

        cost_estimate = estimate_processing_cost(request)
        logger.debug("Processing cost estimate", extra=cost_estimate)

        primary_tag_id = tags[0].id if tags else None
        persisted, timings = await self.orchestrator.run(validated, primary_tag_id)

        response = KramPatternResponse(
            history_id=persisted.history_id,
            prompt_message=validated.prompt,
            selected_tags=[
                SelectedTag(id=tag.id, name=tag.name, description=tag.description)
                for tag in validated.tags
            ],
            generated_outputs=[
                GeneratedOutput(
                    id=output.id,
                    image_url=output.image_url,
                    description=output.description,
                    output_tags=output.output_tags,
                    output_tag_list=split_output_tags(output.output_tags),
                )
                for output in persisted.outputs
            ],
            created_at=persisted.created_at,
        )

        processing_time = int((time.perf_counter() - start) * 1000)
        debug = {
            "processing_time": processing_time,
            "phase_timings": timings,
            "image_generation_time": persisted.generated.described.image.generation_time_ms,
            "cost_estimate": cost_estimate,
            "selected_tags_with_images": [
                {"id": str(tag.id), "name": tag.name, "has_image_url": bool(tag.image_url)}
                for tag in validated.tags
            ],
        }
        logger.info(
            f"Kram pattern generation completed successfully in {processing_time}ms",
            extra={"history_id": str(persisted.history_id), "processing_time": processing_time},
        )
        return response, debug
