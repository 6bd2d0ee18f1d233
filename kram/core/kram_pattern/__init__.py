"""
Kram pattern generation core.

Exports:
  - validate_kram_request, is_valid_uuid: Request rules
  - build_enhanced_prompt, clean_output_tags: Prompt assembly
  - KramPatternOrchestrator: Phase state machine
  - estimate_processing_cost: Cost diagnostics

Dependencies: kram.boundary.ai, kram.models
System role: Generation domain logic
"""

from kram.core.kram_pattern.cost import estimate_processing_cost
from kram.core.kram_pattern.orchestrator import KramPatternOrchestrator, resolve_options, validate_request
from kram.core.kram_pattern.phases import (
    DescriptionGenerated,
    GenerationOptions,
    ImageGenerated,
    Persisted,
    PersistedOutput,
    ResolvedTag,
    TagsGenerated,
    Validated,
    with_tags,
)
from kram.core.kram_pattern.prompt_builder import (
    TagContext,
    build_description_prompt,
    build_enhanced_prompt,
    build_output_tags_prompt,
    clean_output_tags,
    split_output_tags,
)
from kram.core.kram_pattern.validator import (
    ValidationResult,
    is_valid_uuid,
    validate_chat_message,
    validate_image_prompt,
    validate_kram_request,
)

__all__ = [
    "estimate_processing_cost",
    "KramPatternOrchestrator",
    "resolve_options",
    "validate_request",
    "DescriptionGenerated",
    "GenerationOptions",
    "ImageGenerated",
    "Persisted",
    "PersistedOutput",
    "ResolvedTag",
    "TagsGenerated",
    "Validated",
    "with_tags",
    "TagContext",
    "build_description_prompt",
    "build_enhanced_prompt",
    "build_output_tags_prompt",
    "clean_output_tags",
    "split_output_tags",
    "ValidationResult",
    "is_valid_uuid",
    "validate_chat_message",
    "validate_image_prompt",
    "validate_kram_request",
]
