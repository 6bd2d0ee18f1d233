"""
Kram pattern prompt assembly.

Deterministic string building for the image prompt and the two chat
prompts, plus clean-up of the model's comma-separated tag answer.

Dependencies: re, kram.core.kram_pattern.prompts
System role: Prompt construction for the generation pipeline
"""

import re
from dataclasses import dataclass
from typing import Sequence

from kram.core.kram_pattern.prompts import (
    DEFAULT_OUTPUT_TAGS,
    DEFAULT_STYLE,
    DESCRIPTION_PROMPT_TEMPLATE,
    DESCRIPTION_TAG_CONTEXT_HEADER,
    EXISTING_TAGS_HEADER,
    KRAM_PROMPT_TEMPLATE,
    OUTPUT_TAGS_PROMPT_TEMPLATE,
    STYLE_GUIDANCE,
    TAG_CONTEXT_HEADER,
)

# Thai block, ASCII letters, whitespace and commas survive tag clean-up
_DISALLOWED_TAG_CHARS = re.compile(r"[^\u0E00-\u0E7Fa-zA-Z\s,]")
_WHITESPACE_RUN = re.compile(r"\s+")
_EMPTY_TAG = re.compile(r",\s*,")
_EDGE_COMMAS = re.compile(r"^\s*,|,\s*$")
_KRAM_PLACEHOLDER = re.compile(r"\{(user_prompt|tag_context|style_guidance)\}")


@dataclass(frozen=True)
class TagContext:
    """Name and description of a tag used as style context."""

    name: str
    description: str


def get_style_guidance(style: str | None) -> str:
    """Return guidance text for ``style``, falling back to the vivid brief."""
    return STYLE_GUIDANCE.get(style or DEFAULT_STYLE, STYLE_GUIDANCE[DEFAULT_STYLE])


def build_tag_context(tags: Sequence[TagContext]) -> str:
    if not tags:
        return ""
    lines = "\n".join(
        f"- {tag.name}: {tag.description} (adapted for geometric handwoven textile patterns)"
        for tag in tags
    )
    return f"\n{TAG_CONTEXT_HEADER}\n{lines}\n"


def build_enhanced_prompt(
    user_prompt: str,
    tags: Sequence[TagContext] = (),
    style: str | None = DEFAULT_STYLE,
) -> str:
    """
    Build the image prompt from the fixed Kram brief.

    Args:
        user_prompt: Prompt as typed by the user
        tags: Selected tags used as style inspiration
        style: Image style flag (vivid or natural)

    Returns:
        str: Template with user prompt, tag context and style guidance filled in
    """
    values = {
        "user_prompt": user_prompt,
        "tag_context": build_tag_context(tags),
        "style_guidance": get_style_guidance(style),
    }
    # one pass, so braces inside the substituted values stay literal
    return _KRAM_PLACEHOLDER.sub(lambda match: values[match.group(1)], KRAM_PROMPT_TEMPLATE)


def build_description_prompt(original_prompt: str, tags: Sequence[TagContext] = ()) -> str:
    """Build the chat prompt asking for a gallery description of the image."""
    tag_context = ""
    if tags:
        lines = "\n".join(f"- {tag.name}: {tag.description}" for tag in tags)
        tag_context = f"\n\n{DESCRIPTION_TAG_CONTEXT_HEADER}\n{lines}"
    return DESCRIPTION_PROMPT_TEMPLATE.format(
        original_prompt=original_prompt,
        tag_context=tag_context,
    )


def build_output_tags_prompt(
    original_prompt: str,
    description: str,
    existing_tag_names: Sequence[str] = (),
) -> str:
    """Build the chat prompt asking for 4-6 comma-separated tags."""
    existing = ", ".join(existing_tag_names)
    existing_tags_context = f"\n\n{EXISTING_TAGS_HEADER} {existing}" if existing else ""
    return OUTPUT_TAGS_PROMPT_TEMPLATE.format(
        original_prompt=original_prompt,
        description=description,
        existing_tags_context=existing_tags_context,
    )


def clean_output_tags(raw: str | None) -> str:
    """
    Normalize the model's tag answer into a comma-separated string.

    Falls back to the default tag string when less than three characters
    remain after clean-up.
    """
    cleaned = _DISALLOWED_TAG_CHARS.sub("", raw or "")
    cleaned = _WHITESPACE_RUN.sub(" ", cleaned)
    cleaned = _EMPTY_TAG.sub(",", cleaned)
    cleaned = _EDGE_COMMAS.sub("", cleaned).strip()

    if len(cleaned) < 3:
        return DEFAULT_OUTPUT_TAGS
    return cleaned


def split_output_tags(output_tags: str) -> list[str]:
    """Split a stored ``output_tags`` string into individual tags."""
    return [tag.strip() for tag in output_tags.split(",") if tag.strip()]
