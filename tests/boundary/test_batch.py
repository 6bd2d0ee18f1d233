"""
Test suite for batch image generation.

System role: Verification of bounded-concurrency bulk generation
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from kram.boundary.ai.batch import BatchImageRequest, generate_image_batch
from kram.boundary.ai.client import KramAIClient
from kram.core.exceptions import AIServiceError


@pytest.fixture
def client() -> AsyncMock:
    client = AsyncMock(spec=KramAIClient)

    async def _generate(prompt, **kwargs):
        if prompt == "fail":
            raise AIServiceError("upstream down")
        return MagicMock(image_url=f"https://images.example.com/{prompt}.png")

    client.generate_image.side_effect = _generate
    return client


class TestGenerateImageBatch:
    """Test suite for generate_image_batch()."""

    async def test_results_keep_input_order(self, client, no_sleep) -> None:
        # Arrange
        requests = [BatchImageRequest(prompt=p) for p in ("a", "fail", "c", "d", "e")]

        # Act
        results = await generate_image_batch(client, requests, max_concurrent=2, sleep=no_sleep)

        # Assert
        assert [r.prompt for r in results] == ["a", "fail", "c", "d", "e"]
        assert [r.success for r in results] == [True, False, True, True, True]
        assert results[1].error == "upstream down"
        assert results[0].result.image_url == "https://images.example.com/a.png"

    async def test_sleeps_between_batches_only(self, client, no_sleep) -> None:
        requests = [BatchImageRequest(prompt=p) for p in ("a", "b", "c", "d", "e")]

        await generate_image_batch(
            client, requests, max_concurrent=2, delay_between_batches=3.0, sleep=no_sleep
        )

        # three batches, two pauses
        assert [call.args[0] for call in no_sleep.await_args_list] == [3.0, 3.0]

    async def test_single_batch_never_sleeps(self, client, no_sleep) -> None:
        await generate_image_batch(client, [BatchImageRequest(prompt="a")], sleep=no_sleep)

        no_sleep.assert_not_awaited()

    async def test_options_are_forwarded(self, client, no_sleep) -> None:
        await generate_image_batch(
            client,
            [BatchImageRequest(prompt="a", size="1024x1792", quality="hd", style="vivid")],
            sleep=no_sleep,
        )

        kwargs = client.generate_image.await_args.kwargs
        assert (kwargs["size"], kwargs["quality"], kwargs["style"]) == ("1024x1792", "hd", "vivid")

    async def test_rejects_zero_concurrency(self, client) -> None:
        with pytest.raises(ValueError):
            await generate_image_batch(client, [], max_concurrent=0)
