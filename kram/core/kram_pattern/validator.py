"""
Kram pattern request validation.

Pure rule checks for generation requests. Every violation is collected
so a client sees all problems at once.

Dependencies: re, kram.models.generation
System role: Input validation ahead of any database or AI call
"""

import re
from dataclasses import dataclass, field
from typing import Sequence

from kram.models.generation import ChatOptions, DalleOptions

MAX_PROMPT_LENGTH = 900
MAX_IMAGE_PROMPT_LENGTH = 1000
MAX_CHAT_MESSAGE_LENGTH = 8000
MAX_TAGS = 10
MIN_MAX_TOKENS = 50
MAX_MAX_TOKENS = 2000

IMAGE_SIZES = ("1024x1024", "1792x1024", "1024x1792")
IMAGE_QUALITIES = ("standard", "hd")
IMAGE_STYLES = ("vivid", "natural")
CHAT_MODELS = ("gpt-4", "gpt-4-turbo", "gpt-3.5-turbo")
CHAT_ROLES = ("system", "user", "assistant")

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

CONTENT_POLICY_PATTERNS = (
    re.compile(r"\b(nude|naked|nsfw)\b", re.IGNORECASE),
    re.compile(r"\b(violence|gore|blood)\b", re.IGNORECASE),
    re.compile(r"\b(hate|racist|nazi)\b", re.IGNORECASE),
)


@dataclass
class ValidationResult:
    """Outcome of a validation pass."""

    valid: bool
    errors: list[str] = field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: list[str]) -> "ValidationResult":
        return cls(valid=not errors, errors=errors)


def is_valid_uuid(value: str) -> bool:
    """Check a string against the canonical UUID (versions 1-5) shape."""
    return isinstance(value, str) and UUID_PATTERN.match(value) is not None


def find_invalid_uuids(values: Sequence[str]) -> list[str]:
    """Return the entries of ``values`` that are not well-formed UUIDs."""
    return [value for value in values if not is_valid_uuid(value)]


def violates_content_policy(prompt: str) -> bool:
    """True when the prompt matches a blocked content pattern."""
    return any(pattern.search(prompt) for pattern in CONTENT_POLICY_PATTERNS)


def validate_kram_request(
    prompt: str | None,
    tag_ids: Sequence[str] | None = None,
    dalle_options: DalleOptions | None = None,
    chat_options: ChatOptions | None = None,
) -> ValidationResult:
    """
    Validate a Kram pattern generation request.

    Args:
        prompt: User prompt
        tag_ids: Referenced tag IDs (optional)
        dalle_options: Image generation options (optional)
        chat_options: Chat completion options (optional)

    Returns:
        ValidationResult: valid flag plus every violation found
    """
    errors: list[str] = []

    if not prompt or not prompt.strip():
        errors.append("Prompt cannot be empty")
    elif len(prompt) > MAX_PROMPT_LENGTH:
        errors.append(f"Prompt too long (max {MAX_PROMPT_LENGTH} characters)")

    if tag_ids:
        if len(tag_ids) > MAX_TAGS:
            errors.append(f"Too many tags (max {MAX_TAGS} allowed)")
        if find_invalid_uuids(tag_ids):
            errors.append("Invalid tag ID format")

    if dalle_options is not None:
        if dalle_options.size is not None and dalle_options.size not in IMAGE_SIZES:
            errors.append("Invalid image size")
        if dalle_options.quality is not None and dalle_options.quality not in IMAGE_QUALITIES:
            errors.append("Invalid image quality")
        if dalle_options.style is not None and dalle_options.style not in IMAGE_STYLES:
            errors.append("Invalid image style")

    if chat_options is not None:
        if chat_options.model is not None and chat_options.model not in CHAT_MODELS:
            errors.append("Invalid chat model")
        max_tokens = chat_options.max_tokens
        if max_tokens is not None and not MIN_MAX_TOKENS <= max_tokens <= MAX_MAX_TOKENS:
            errors.append(
                f"Invalid max_tokens (must be between {MIN_MAX_TOKENS} and {MAX_MAX_TOKENS})"
            )

    return ValidationResult.from_errors(errors)


def validate_image_prompt(prompt: str | None) -> ValidationResult:
    """
    Validate a prompt before it is sent to the image model.

    Checks emptiness, the image model's length limit, and a small
    blocklist of terms that the upstream content policy rejects.
    """
    if not prompt or not prompt.strip():
        return ValidationResult.from_errors(["Prompt cannot be empty"])

    if len(prompt) > MAX_IMAGE_PROMPT_LENGTH:
        return ValidationResult.from_errors(
            [f"Prompt too long. DALL-E prompts should be under {MAX_IMAGE_PROMPT_LENGTH} characters"]
        )

    if violates_content_policy(prompt):
        return ValidationResult.from_errors(["Prompt may violate content policy"])

    return ValidationResult(valid=True)


def validate_chat_message(role: str, content: str | None) -> ValidationResult:
    """Validate a single chat message before it is sent upstream."""
    if not content or not content.strip():
        return ValidationResult.from_errors(["Message content cannot be empty"])

    if len(content) > MAX_CHAT_MESSAGE_LENGTH:
        return ValidationResult.from_errors(
            [f"Message content too long (max {MAX_CHAT_MESSAGE_LENGTH} characters)"]
        )

    if role not in CHAT_ROLES:
        return ValidationResult.from_errors(["Invalid message role"])

    return ValidationResult(valid=True)
