"""
Test suite for Kram request validation.

Tests prompt, tag ID and option rules, error accumulation, and the image
prompt and chat message checks used by the AI wrapper.

System role: Verification of input rules ahead of database and AI calls
"""

import uuid

from kram.core.kram_pattern.validator import (
    is_valid_uuid,
    validate_chat_message,
    validate_image_prompt,
    validate_kram_request,
    violates_content_policy,
)
from kram.models.generation import ChatOptions, DalleOptions


class TestValidateKramRequest:
    """Test suite for validate_kram_request()."""

    def test_valid_minimal_request_passes(self) -> None:
        result = validate_kram_request("ลายดอกไม้")

        assert result.valid is True
        assert result.errors == []

    def test_empty_prompt_rejected(self) -> None:
        result = validate_kram_request("   ")

        assert result.valid is False
        assert result.errors == ["Prompt cannot be empty"]

    def test_prompt_of_900_chars_accepted(self) -> None:
        assert validate_kram_request("a" * 900).valid is True

    def test_prompt_over_900_chars_rejected(self) -> None:
        result = validate_kram_request("a" * 901)

        assert result.valid is False
        assert "Prompt too long (max 900 characters)" in result.errors

    def test_too_many_tags_rejected(self) -> None:
        tag_ids = [str(uuid.uuid4()) for _ in range(11)]

        result = validate_kram_request("pattern", tag_ids)

        assert "Too many tags (max 10 allowed)" in result.errors

    def test_malformed_tag_id_rejected(self) -> None:
        result = validate_kram_request("pattern", ["not-a-uuid"])

        assert result.errors == ["Invalid tag ID format"]

    def test_invalid_options_rejected(self) -> None:
        result = validate_kram_request(
            "pattern",
            dalle_options=DalleOptions(size="512x512", quality="ultra", style="retro"),
            chat_options=ChatOptions(model="gpt-2", max_tokens=10),
        )

        assert result.errors == [
            "Invalid image size",
            "Invalid image quality",
            "Invalid image style",
            "Invalid chat model",
            "Invalid max_tokens (must be between 50 and 2000)",
        ]

    def test_all_violations_are_accumulated(self) -> None:
        # Arrange
        tag_ids = ["bad"] * 11

        # Act
        result = validate_kram_request("", tag_ids, DalleOptions(size="1x1"))

        # Assert
        assert result.errors == [
            "Prompt cannot be empty",
            "Too many tags (max 10 allowed)",
            "Invalid tag ID format",
            "Invalid image size",
        ]

    def test_max_tokens_bounds_are_inclusive(self) -> None:
        assert validate_kram_request("p", chat_options=ChatOptions(max_tokens=50)).valid
        assert validate_kram_request("p", chat_options=ChatOptions(max_tokens=2000)).valid
        assert not validate_kram_request("p", chat_options=ChatOptions(max_tokens=2001)).valid


class TestIsValidUuid:
    """Test suite for is_valid_uuid()."""

    def test_accepts_uppercase_v4(self) -> None:
        assert is_valid_uuid(str(uuid.uuid4()).upper())

    def test_rejects_version_zero_and_garbage(self) -> None:
        assert not is_valid_uuid("00000000-0000-0000-0000-000000000000")
        assert not is_valid_uuid("1234")


class TestImagePromptAndChatMessage:
    """Test suite for validate_image_prompt() and validate_chat_message()."""

    def test_image_prompt_over_1000_rejected(self) -> None:
        result = validate_image_prompt("x" * 1001)

        assert not result.valid
        assert "under 1000 characters" in result.errors[0]

    def test_blocklisted_prompt_flagged(self) -> None:
        assert violates_content_policy("a NSFW pattern")
        assert validate_image_prompt("gore and stars").errors == ["Prompt may violate content policy"]

    def test_word_boundary_blocklist(self) -> None:
        assert not violates_content_policy("bloodline of weavers")

    def test_chat_message_role_checked(self) -> None:
        assert validate_chat_message("user", "hello").valid
        assert validate_chat_message("robot", "hello").errors == ["Invalid message role"]

    def test_chat_message_length_checked(self) -> None:
        assert not validate_chat_message("user", "x" * 8001).valid
