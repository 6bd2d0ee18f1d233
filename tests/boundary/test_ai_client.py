"""
Test suite for KramAIClient.

Uses a mocked AsyncOpenAI to verify request shapes, local prompt checks,
empty-response handling and SDK error conversion.

System role: Verification of the external AI adapter
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from kram.boundary.ai.client import ChatMessage, KramAIClient, create_ai_client
from kram.boundary.ai.retry import RetryConfig
from kram.configs.openai import OpenAISettings
from kram.core.exceptions import AIClientNotConfiguredError, AIErrorKind, AIServiceError
from kram.core.kram_pattern.prompt_builder import TagContext
from kram.core.kram_pattern.prompts import DEFAULT_OUTPUT_TAGS, SYSTEM_PROMPTS


def _image_response(url: str | None = "https://images.example.com/out.png"):
    return SimpleNamespace(data=[SimpleNamespace(url=url, revised_prompt="revised")])


def _chat_response(content: str | None):
    return SimpleNamespace(
        choices=[
            SimpleNamespace(
                message=SimpleNamespace(content=content, refusal=None),
                finish_reason="stop",
            )
        ],
        usage=None,
    )


@pytest.fixture
def openai_client() -> MagicMock:
    client = MagicMock()
    client.images.generate = AsyncMock(return_value=_image_response())
    client.chat.completions.create = AsyncMock(return_value=_chat_response("คำตอบ"))
    return client


@pytest.fixture
def ai_client(openai_client, no_sleep) -> KramAIClient:
    return KramAIClient(
        openai_client,
        retry_config=RetryConfig(max_retries=3, base_delay=1.0, max_delay=8.0),
        sleep=no_sleep,
    )


class TestGenerateImage:
    """Test suite for KramAIClient.generate_image()."""

    async def test_sends_enhanced_prompt_with_options(self, ai_client, openai_client) -> None:
        # Act
        result = await ai_client.generate_image(
            "with lotus",
            size="1792x1024",
            quality="hd",
            style="vivid",
            tags=[TagContext("Diamond", "d")],
        )

        # Assert
        kwargs = openai_client.images.generate.await_args.kwargs
        assert kwargs["model"] == "dall-e-3"
        assert kwargs["size"] == "1792x1024"
        assert kwargs["quality"] == "hd"
        assert kwargs["n"] == 1
        assert "The embroidery pattern with lotus" in kwargs["prompt"]
        assert "- Diamond: d" in kwargs["prompt"]
        assert result.image_url == "https://images.example.com/out.png"
        assert result.original_prompt == "with lotus"
        assert result.revised_prompt == "revised"

    async def test_blocked_prompt_never_calls_upstream(self, ai_client, openai_client) -> None:
        with pytest.raises(AIServiceError) as exc_info:
            await ai_client.generate_image("nude figure")

        assert exc_info.value.kind is AIErrorKind.CONTENT_POLICY
        openai_client.images.generate.assert_not_awaited()

    async def test_overlong_prompt_is_invalid_request(self, ai_client) -> None:
        with pytest.raises(AIServiceError) as exc_info:
            await ai_client.generate_image("x" * 1001)

        assert exc_info.value.kind is AIErrorKind.INVALID_REQUEST

    async def test_missing_url_is_empty_response(self, ai_client, openai_client) -> None:
        openai_client.images.generate.return_value = _image_response(url=None)

        with pytest.raises(AIServiceError) as exc_info:
            await ai_client.generate_image("stars")

        assert exc_info.value.kind is AIErrorKind.EMPTY_RESPONSE

    async def test_sdk_content_policy_error_is_not_retried(
        self, ai_client, openai_client, no_sleep
    ) -> None:
        # Arrange
        request = httpx.Request("POST", "https://api.openai.com/v1/images/generations")
        openai_client.images.generate.side_effect = openai.BadRequestError(
            "rejected",
            response=httpx.Response(400, request=request),
            body={"code": "content_policy_violation"},
        )

        # Act
        with pytest.raises(AIServiceError) as exc_info:
            await ai_client.generate_image("stars")

        # Assert
        assert exc_info.value.kind is AIErrorKind.CONTENT_POLICY
        assert openai_client.images.generate.await_count == 1
        no_sleep.assert_not_awaited()

    async def test_sdk_timeout_is_retried_then_raised(
        self, ai_client, openai_client, no_sleep
    ) -> None:
        request = httpx.Request("POST", "https://api.openai.com/v1/images/generations")
        openai_client.images.generate.side_effect = openai.APITimeoutError(request=request)

        with pytest.raises(AIServiceError) as exc_info:
            await ai_client.generate_image("stars")

        assert exc_info.value.kind is AIErrorKind.TIMEOUT
        assert openai_client.images.generate.await_count == 4
        assert no_sleep.await_count == 3


class TestChat:
    """Test suite for KramAIClient.chat() and the specialised chat calls."""

    async def test_messages_are_ordered_system_history_current(
        self, ai_client, openai_client
    ) -> None:
        await ai_client.chat(
            ChatMessage("user", "now"),
            system_prompt="sys",
            history=[ChatMessage("user", "before"), ChatMessage("assistant", "reply")],
        )

        messages = openai_client.chat.completions.create.await_args.kwargs["messages"]
        assert [m["content"] for m in messages] == ["sys", "before", "reply", "now"]

    async def test_empty_content_is_empty_response(self, ai_client, openai_client) -> None:
        openai_client.chat.completions.create.return_value = _chat_response(None)

        with pytest.raises(AIServiceError) as exc_info:
            await ai_client.chat(ChatMessage("user", "hi"))

        assert exc_info.value.kind is AIErrorKind.EMPTY_RESPONSE

    async def test_invalid_message_is_rejected_locally(self, ai_client, openai_client) -> None:
        with pytest.raises(AIServiceError):
            await ai_client.chat(ChatMessage("user", "   "))

        openai_client.chat.completions.create.assert_not_awaited()

    async def test_description_uses_description_system_prompt(
        self, ai_client, openai_client
    ) -> None:
        result = await ai_client.generate_image_description(
            "stars", "https://x/y.png", model="gpt-4", max_tokens=300
        )

        kwargs = openai_client.chat.completions.create.await_args.kwargs
        assert result == "คำตอบ"
        assert kwargs["messages"][0]["content"] == SYSTEM_PROMPTS["IMAGE_DESCRIPTION"]
        assert kwargs["model"] == "gpt-4"
        assert kwargs["max_tokens"] == 300
        assert kwargs["temperature"] == 0.7

    async def test_output_tags_are_cleaned(self, ai_client, openai_client) -> None:
        openai_client.chat.completions.create.return_value = _chat_response('"คราม, ผ้า,"')

        result = await ai_client.generate_output_tags("p", "d", ["Diamond"], max_tokens=100)

        kwargs = openai_client.chat.completions.create.await_args.kwargs
        assert result == "คราม, ผ้า"
        assert kwargs["model"] == "gpt-4-turbo"
        assert kwargs["temperature"] == 0.5

    async def test_output_tags_fall_back_to_default(self, ai_client, openai_client) -> None:
        openai_client.chat.completions.create.return_value = _chat_response("42")

        assert await ai_client.generate_output_tags("p", "d") == DEFAULT_OUTPUT_TAGS


class TestCreateAIClient:
    """Test suite for create_ai_client()."""

    def test_missing_key_raises(self) -> None:
        with pytest.raises(AIClientNotConfiguredError):
            create_ai_client(OpenAISettings(api_key=None))

    def test_builds_client_from_settings(self) -> None:
        client = create_ai_client(
            OpenAISettings(api_key="sk-test", chat_model="gpt-4", max_retries=2)
        )

        assert client.chat_model == "gpt-4"
        assert client.image_model == "dall-e-3"
