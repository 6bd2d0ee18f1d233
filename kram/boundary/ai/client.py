"""
OpenAI client wrapper for Kram pattern generation.

Provides image generation, chat completion and the two specialised chat
calls (image description, output tags). Every upstream call runs under
the shared retry policy and fails with a classified AIServiceError.

Dependencies: openai, kram.boundary.ai, kram.core.kram_pattern
System role: External AI service adapter
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Sequence

from openai import AsyncOpenAI, OpenAIError

from kram.boundary.ai.errors import classify_openai_error
from kram.boundary.ai.retry import DEFAULT_RETRY_CONFIG, RetryConfig, SleepFn, call_with_retry
from kram.configs.openai import OpenAISettings
from kram.core.exceptions import AIClientNotConfiguredError, AIErrorKind, AIServiceError
from kram.core.kram_pattern.prompt_builder import (
    TagContext,
    build_description_prompt,
    build_enhanced_prompt,
    build_output_tags_prompt,
    clean_output_tags,
)
from kram.core.kram_pattern.prompts import SYSTEM_PROMPTS
from kram.core.kram_pattern.validator import (
    validate_chat_message,
    validate_image_prompt,
    violates_content_policy,
)

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_SIZE = "1024x1024"
DEFAULT_IMAGE_QUALITY = "standard"
DEFAULT_IMAGE_STYLE = "natural"


@dataclass(frozen=True)
class ChatMessage:
    """Single chat message."""

    role: str
    content: str

    def as_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class ImageResult:
    """Result of one image generation call."""

    image_url: str
    original_prompt: str
    enhanced_prompt: str
    generation_time_ms: int
    revised_prompt: str | None = None


@dataclass(frozen=True)
class ChatResult:
    """Result of one chat completion call."""

    content: str
    finish_reason: str | None
    response_time_ms: int
    refusal: str | None = None
    usage: dict[str, Any] = field(default_factory=dict)


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


class KramAIClient:
    """
    Async OpenAI wrapper used by the generation pipeline.

    Built once at application start-up and injected where needed.
    """

    def __init__(
        self,
        client: AsyncOpenAI,
        image_model: str = "dall-e-3",
        chat_model: str = "gpt-4-turbo",
        retry_config: RetryConfig = DEFAULT_RETRY_CONFIG,
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        """
        Initialize the wrapper.

        Args:
            client: Configured AsyncOpenAI client
            image_model: Image generation model
            chat_model: Default chat completion model
            retry_config: Retry policy for each upstream call
            sleep: Awaitable sleep used between retries
        """
        self._client = client
        self.image_model = image_model
        self.chat_model = chat_model
        self._retry_config = retry_config
        self._sleep = sleep

    async def _call(self, operation_name: str, factory) -> Any:
        async def attempt():
            try:
                return await factory()
            except OpenAIError as exc:
                raise classify_openai_error(exc) from exc

        return await call_with_retry(
            attempt,
            self._retry_config,
            operation_name=operation_name,
            sleep=self._sleep,
        )

    async def generate_image(
        self,
        prompt: str,
        *,
        size: str = DEFAULT_IMAGE_SIZE,
        quality: str = DEFAULT_IMAGE_QUALITY,
        style: str = DEFAULT_IMAGE_STYLE,
        tags: Sequence[TagContext] = (),
    ) -> ImageResult:
        """
        Generate one Kram pattern image.

        Args:
            prompt: User prompt
            size: Image size
            quality: standard or hd
            style: vivid or natural
            tags: Style context from selected tags

        Returns:
            ImageResult: Image URL with the prompts that produced it

        Raises:
            AIServiceError: Prompt rejected locally or upstream call failed
        """
        start = time.perf_counter()

        validation = validate_image_prompt(prompt)
        if not validation.valid:
            kind = (
                AIErrorKind.CONTENT_POLICY
                if violates_content_policy(prompt)
                else AIErrorKind.INVALID_REQUEST
            )
            raise AIServiceError(f"Invalid prompt: {validation.errors[0]}", kind=kind)

        enhanced_prompt = build_enhanced_prompt(prompt, tags, style)
        logger.debug(
            "Starting image generation",
            extra={
                "model": self.image_model,
                "size": size,
                "quality": quality,
                "style": style,
                "tags_count": len(tags),
            },
        )

        response = await self._call(
            "generate_image",
            lambda: self._client.images.generate(
                model=self.image_model,
                prompt=enhanced_prompt,
                size=size,
                quality=quality,
                style=style,
                n=1,
                response_format="url",
            ),
        )

        image_data = response.data[0] if response.data else None
        if image_data is None or not image_data.url:
            raise AIServiceError(
                "No image URL returned from DALL-E API",
                kind=AIErrorKind.EMPTY_RESPONSE,
            )

        result = ImageResult(
            image_url=image_data.url,
            original_prompt=prompt,
            enhanced_prompt=enhanced_prompt,
            generation_time_ms=_elapsed_ms(start),
            revised_prompt=getattr(image_data, "revised_prompt", None),
        )
        logger.info(
            "Image generation completed",
            extra={"generation_time_ms": result.generation_time_ms},
        )
        return result

    async def chat(
        self,
        message: ChatMessage,
        *,
        system_prompt: str = SYSTEM_PROMPTS["GENERAL_ASSISTANT"],
        history: Sequence[ChatMessage] = (),
        model: str | None = None,
        max_tokens: int = 1000,
        temperature: float = 0.7,
    ) -> ChatResult:
        """
        Run one chat completion.

        Args:
            message: Current user message
            system_prompt: System instruction placed first
            history: Earlier messages placed between system and current
            model: Chat model (defaults to the configured model)
            max_tokens: Completion token budget
            temperature: Sampling temperature

        Returns:
            ChatResult: Assistant reply with usage and timing

        Raises:
            AIServiceError: Message rejected locally or upstream call failed
        """
        start = time.perf_counter()
        model = model or self.chat_model

        validation = validate_chat_message(message.role, message.content)
        if not validation.valid:
            raise AIServiceError(
                f"Invalid message: {validation.errors[0]}",
                kind=AIErrorKind.INVALID_REQUEST,
            )

        messages = [
            {"role": "system", "content": system_prompt},
            *(item.as_dict() for item in history),
            message.as_dict(),
        ]

        completion = await self._call(
            "chat_completion",
            lambda: self._client.chat.completions.create(
                model=model,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature,
            ),
        )

        choice = completion.choices[0] if completion.choices else None
        if choice is None or not choice.message.content:
            raise AIServiceError(
                "No content returned from ChatGPT API",
                kind=AIErrorKind.EMPTY_RESPONSE,
            )

        usage = completion.usage.model_dump() if completion.usage is not None else {}
        result = ChatResult(
            content=choice.message.content,
            finish_reason=choice.finish_reason,
            response_time_ms=_elapsed_ms(start),
            refusal=getattr(choice.message, "refusal", None),
            usage=usage,
        )
        logger.debug(
            "Chat completion successful",
            extra={
                "model": model,
                "response_length": len(result.content),
                "response_time_ms": result.response_time_ms,
                "finish_reason": result.finish_reason,
            },
        )
        return result

    async def generate_image_description(
        self,
        original_prompt: str,
        image_url: str,
        tags: Sequence[TagContext] = (),
        *,
        model: str | None = None,
        max_tokens: int = 500,
    ) -> str:
        """Ask the chat model for a short Thai gallery description."""
        logger.debug("Generating image description", extra={"image_url": image_url})
        result = await self.chat(
            ChatMessage(role="user", content=build_description_prompt(original_prompt, tags)),
            system_prompt=SYSTEM_PROMPTS["IMAGE_DESCRIPTION"],
            model=model,
            max_tokens=max_tokens,
            temperature=0.7,
        )
        return result.content

    async def generate_output_tags(
        self,
        original_prompt: str,
        description: str,
        existing_tag_names: Sequence[str] = (),
        *,
        model: str | None = None,
        max_tokens: int = 200,
    ) -> str:
        """Ask the chat model for comma-separated tags and clean the answer."""
        result = await self.chat(
            ChatMessage(
                role="user",
                content=build_output_tags_prompt(original_prompt, description, existing_tag_names),
            ),
            system_prompt=SYSTEM_PROMPTS["TAG_GENERATION"],
            model=model,
            max_tokens=max_tokens,
            temperature=0.5,
        )
        return clean_output_tags(result.content)


def create_ai_client(settings: OpenAISettings) -> KramAIClient:
    """
    Build the AI client from settings.

    Args:
        settings: OpenAI settings

    Returns:
        KramAIClient: Ready-to-use wrapper

    Raises:
        AIClientNotConfiguredError: If no API key is configured
    """
    if not settings.api_key:
        raise AIClientNotConfiguredError()

    openai_client = AsyncOpenAI(
        api_key=settings.api_key,
        timeout=settings.timeout,
        # retries are owned by call_with_retry
        max_retries=0,
    )
    return KramAIClient(
        openai_client,
        image_model=settings.image_model,
        chat_model=settings.chat_model,
        retry_config=RetryConfig(
            max_retries=settings.max_retries,
            base_delay=settings.base_delay,
            max_delay=settings.max_delay,
        ),
    )
