"""
Kram pattern generation orchestrator.

Runs the generation pipeline as a fixed sequence of phases:
validation, image generation, description generation, tag generation
and persistence. A failing phase raises KramPatternError tagged with that
phase and no later phase runs, so nothing is written unless every AI call
has succeeded.

Dependencies: kram.boundary.ai, kram.core.kram_pattern, kram.core.exceptions
System role: Generation use case state machine
"""

import logging
import time
import uuid
from typing import TYPE_CHECKING, Awaitable, Callable

from kram.core.exceptions import GenerationPhase, KramPatternError, error_message
from kram.core.kram_pattern.phases import (
    DescriptionGenerated,
    GenerationOptions,
    ImageGenerated,
    Persisted,
    TagsGenerated,
    Validated,
)
from kram.core.kram_pattern.validator import validate_kram_request
from kram.models.generation import KramPatternRequest

if TYPE_CHECKING:
    from kram.boundary.ai.client import KramAIClient

logger = logging.getLogger(__name__)

Persister = Callable[[TagsGenerated, uuid.UUID | None], Awaitable[Persisted]]


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def resolve_options(request: KramPatternRequest) -> GenerationOptions:
    """Apply defaults to the request's image and chat options."""
    dalle = request.dalle_options
    chat = request.chat_options
    defaults = GenerationOptions()
    return GenerationOptions(
        size=(dalle.size if dalle and dalle.size else defaults.size),
        quality=(dalle.quality if dalle and dalle.quality else defaults.quality),
        style=(dalle.style if dalle and dalle.style else defaults.style),
        chat_model=chat.model if chat else None,
        description_max_tokens=(
            chat.max_tokens if chat and chat.max_tokens else defaults.description_max_tokens
        ),
    )


def validate_request(request: KramPatternRequest) -> None:
    """
    Run the request rules.

    Raises:
        KramPatternError: VALIDATION phase, with every violation in
            ``details["errors"]``
    """
    result = validate_kram_request(
        request.prompt,
        request.tag_ids,
        request.dalle_options,
        request.chat_options,
    )
    if not result.valid:
        raise KramPatternError(
            ", ".join(result.errors),
            GenerationPhase.VALIDATION,
            details={"errors": result.errors},
        )


class KramPatternOrchestrator:
    """
    Phase state machine for one generation.

    The AI client and the persistence step are injected; the orchestrator
    holds no state between runs.
    """

    def __init__(self, ai_client: "KramAIClient", persist: Persister) -> None:
        """
        Initialize orchestrator.

        Args:
            ai_client: AI wrapper used for the image and chat phases
            persist: Coroutine writing history and output rows in one
                transaction
        """
        self.ai_client = ai_client
        self._persist = persist

    def validate(self, request: KramPatternRequest) -> Validated:
        """
        Validate the request and apply option defaults.

        The result carries no tags; callers bind looked-up tags with
        ``with_tags`` so malformed IDs never reach the database.

        Raises:
            KramPatternError: VALIDATION phase
        """
        validate_request(request)
        return Validated(
            prompt=request.prompt,
            tags=(),
            options=resolve_options(request),
        )

    async def generate_image(self, validated: Validated) -> ImageGenerated:
        options = validated.options
        try:
            result = await self.ai_client.generate_image(
                validated.prompt,
                size=options.size,
                quality=options.quality,
                style=options.style,
                tags=validated.tag_contexts,
            )
        except Exception as e:
            raise KramPatternError(
                f"Image generation failed: {error_message(e)}",
                GenerationPhase.IMAGE_GENERATION,
                original_error=e,
            ) from e
        return ImageGenerated(
            validated=validated,
            image_url=result.image_url,
            enhanced_prompt=result.enhanced_prompt,
            generation_time_ms=result.generation_time_ms,
        )

    async def generate_description(self, image: ImageGenerated) -> DescriptionGenerated:
        validated = image.validated
        try:
            description = await self.ai_client.generate_image_description(
                validated.prompt,
                image.image_url,
                validated.tag_contexts,
                model=validated.options.chat_model,
                max_tokens=validated.options.description_max_tokens,
            )
        except Exception as e:
            raise KramPatternError(
                f"Description generation failed: {error_message(e)}",
                GenerationPhase.DESCRIPTION_GENERATION,
                original_error=e,
            ) from e
        return DescriptionGenerated(image=image, description=description)

    async def generate_tags(self, described: DescriptionGenerated) -> TagsGenerated:
        validated = described.image.validated
        try:
            output_tags = await self.ai_client.generate_output_tags(
                validated.prompt,
                described.description,
                [tag.name for tag in validated.tags],
                model=validated.options.chat_model,
                max_tokens=validated.options.tags_max_tokens,
            )
        except Exception as e:
            raise KramPatternError(
                f"Tag generation failed: {error_message(e)}",
                GenerationPhase.TAG_GENERATION,
                original_error=e,
            ) from e
        return TagsGenerated(described=described, output_tags=output_tags)

    async def persist(
        self,
        generated: TagsGenerated,
        primary_tag_id: uuid.UUID | None = None,
    ) -> Persisted:
        try:
            return await self._persist(generated, primary_tag_id)
        except Exception as e:
            raise KramPatternError(
                f"Failed to save generation: {error_message(e)}",
                GenerationPhase.PERSISTENCE,
                original_error=e,
            ) from e

    async def run(
        self,
        validated: Validated,
        primary_tag_id: uuid.UUID | None = None,
    ) -> tuple[Persisted, dict[str, int]]:
        """
        Run every phase after validation.

        Args:
            validated: Result of ``validate`` bound with ``with_tags``
            primary_tag_id: Tag linked on the history row, if any

        Returns:
            tuple: Persisted result and per-phase timings in milliseconds

        Raises:
            KramPatternError: Tagged with the phase that failed
        """
        timings: dict[str, int] = {}
        phase = GenerationPhase.IMAGE_GENERATION
        start = time.perf_counter()
        phase_start = start
        try:
            image = await self.generate_image(validated)
            timings[phase.value] = _elapsed_ms(phase_start)

            phase, phase_start = GenerationPhase.DESCRIPTION_GENERATION, time.perf_counter()
            described = await self.generate_description(image)
            timings[phase.value] = _elapsed_ms(phase_start)

            phase, phase_start = GenerationPhase.TAG_GENERATION, time.perf_counter()
            generated = await self.generate_tags(described)
            timings[phase.value] = _elapsed_ms(phase_start)

            phase, phase_start = GenerationPhase.PERSISTENCE, time.perf_counter()
            persisted = await self.persist(generated, primary_tag_id)
            timings[phase.value] = _elapsed_ms(phase_start)
        except KramPatternError as e:
            logger.error(
                "Kram pattern generation failed",
                extra={
                    "phase": e.phase.value,
                    "code": e.code,
                    "elapsed_ms": _elapsed_ms(start),
                    "error": e.message,
                },
            )
            raise

        timings["total"] = _elapsed_ms(start)
        logger.info(
            "Kram pattern generation completed",
            extra={"history_id": str(persisted.history_id), **timings},
        )
        return persisted, timings
