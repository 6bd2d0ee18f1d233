"""
Batch image generation with bounded concurrency.

Issues up to ``max_concurrent`` image calls at once and pauses between
batches to keep upstream load within rate limits. Per-prompt failures are
reported in the results instead of being raised.

Dependencies: asyncio, kram.boundary.ai.client
System role: Bulk generation helper for the AI boundary
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Sequence

from kram.boundary.ai.client import KramAIClient, ImageResult
from kram.boundary.ai.retry import SleepFn
from kram.core.exceptions import error_message
from kram.core.kram_pattern.prompt_builder import TagContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchImageRequest:
    """One prompt in a batch, with its image options."""

    prompt: str
    size: str = "1024x1024"
    quality: str = "standard"
    style: str = "natural"
    tags: Sequence[TagContext] = field(default_factory=tuple)


@dataclass(frozen=True)
class BatchImageResult:
    """Outcome for one prompt in a batch."""

    prompt: str
    success: bool
    result: ImageResult | None = None
    error: str | None = None


async def _generate_one(client: KramAIClient, request: BatchImageRequest) -> BatchImageResult:
    try:
        result = await client.generate_image(
            request.prompt,
            size=request.size,
            quality=request.quality,
            style=request.style,
            tags=request.tags,
        )
    except Exception as exc:
        logger.warning(
            "Batch item failed",
            extra={"prompt": request.prompt[:100], "error": error_message(exc)},
        )
        return BatchImageResult(prompt=request.prompt, success=False, error=error_message(exc))
    return BatchImageResult(prompt=request.prompt, success=True, result=result)


async def generate_image_batch(
    client: KramAIClient,
    requests: Sequence[BatchImageRequest],
    max_concurrent: int = 2,
    delay_between_batches: float = 3.0,
    sleep: SleepFn = asyncio.sleep,
) -> list[BatchImageResult]:
    """
    Generate images for many prompts, ``max_concurrent`` at a time.

    Args:
        client: AI client
        requests: Prompts with options, processed in order
        max_concurrent: Calls issued together in one batch
        delay_between_batches: Seconds to wait between batches (not after the last)
        sleep: Awaitable sleep used between batches

    Returns:
        list[BatchImageResult]: One result per request, in input order
    """
    if max_concurrent < 1:
        raise ValueError("max_concurrent must be at least 1")

    logger.info(f"Starting batch image generation: {len(requests)} prompts")
    results: list[BatchImageResult] = []

    for start in range(0, len(requests), max_concurrent):
        batch = requests[start:start + max_concurrent]
        results.extend(
            await asyncio.gather(*(_generate_one(client, request) for request in batch))
        )

        if start + max_concurrent < len(requests):
            logger.debug(
                f"Batch completed, waiting {delay_between_batches}s before next batch"
            )
            await sleep(delay_between_batches)

    success_count = sum(1 for item in results if item.success)
    logger.info(
        f"Batch image generation completed: {success_count} successful, "
        f"{len(results) - success_count} failed"
    )
    return results
