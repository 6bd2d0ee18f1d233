"""
External AI boundary: OpenAI wrapper, error classification, retry policy.

Exports:
  - KramAIClient, create_ai_client: Image and chat calls
  - ImageResult, ChatResult, ChatMessage: Call results and inputs
  - RetryConfig, call_with_retry: Shared retry policy
  - classify_openai_error: SDK exception → AIServiceError
  - generate_image_batch: Bounded-concurrency batch helper

Dependencies: openai, tenacity
System role: Adapter for the image-generation and chat-completion APIs
"""

from kram.boundary.ai.batch import BatchImageRequest, BatchImageResult, generate_image_batch
from kram.boundary.ai.client import (
    ChatMessage,
    ChatResult,
    ImageResult,
    KramAIClient,
    create_ai_client,
)
from kram.boundary.ai.errors import classify_openai_error
from kram.boundary.ai.retry import DEFAULT_RETRY_CONFIG, RetryConfig, call_with_retry

__all__ = [
    "BatchImageRequest",
    "BatchImageResult",
    "ChatMessage",
    "ChatResult",
    "DEFAULT_RETRY_CONFIG",
    "ImageResult",
    "KramAIClient",
    "RetryConfig",
    "call_with_retry",
    "classify_openai_error",
    "create_ai_client",
    "generate_image_batch",
]
