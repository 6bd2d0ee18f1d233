"""
Exception hierarchy for the Kram Pattern application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from enum import Enum
from typing import Any


class KramException(Exception):
    """Base exception for all Kram Pattern application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(KramException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        errors: list[str] | None = None,
        field: str | None = None,
        details: dict[str, Any] | None = None,
        label: str = "Invalid request parameters",
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            errors: Every rule violation that was found
            field: Field name that failed validation
            details: Additional context
            label: Short error label returned to API clients
        """
        details = details or {}
        if field:
            details["field"] = field
        self.errors = list(errors or [])
        self.label = label
        super().__init__(message, details)


class TagNotFoundError(KramException):
    """Raised when one or more referenced tags do not exist."""

    def __init__(self, missing_ids: list[str], details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["missing_ids"] = missing_ids
        self.missing_ids = missing_ids
        super().__init__(
            f"The following tag IDs were not found: {', '.join(missing_ids)}",
            details,
        )


class TagAlreadyExistsError(KramException):
    """Raised when a tag name collides case-insensitively with an existing tag."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'A tag with the name "{name}" already exists', {"name": name})


class GalleryItemNotFoundError(KramException):
    """Raised when a gallery (history) record cannot be found."""

    def __init__(self, item_id: str) -> None:
        self.item_id = item_id
        super().__init__(f"No gallery item found with ID: {item_id}", {"item_id": item_id})


class DatabaseUnavailableError(KramException):
    """Raised when the database stays unreachable after the retry budget."""

    def __init__(self, message: str, attempts: int, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["attempts"] = attempts
        self.attempts = attempts
        super().__init__(message, details)


class AIErrorKind(str, Enum):
    """Structured classification of an external AI failure."""

    CONTENT_POLICY = "content_policy"
    INVALID_REQUEST = "invalid_request"
    CONTEXT_LENGTH = "context_length"
    RATE_LIMIT = "rate_limit"
    QUOTA = "quota"
    AUTHENTICATION = "authentication"
    CONNECTION = "connection"
    TIMEOUT = "timeout"
    EMPTY_RESPONSE = "empty_response"
    UPSTREAM = "upstream"

    @property
    def retryable(self) -> bool:
        """Whether a failure of this kind may succeed on a later attempt."""
        return self not in _NON_RETRYABLE_KINDS


_NON_RETRYABLE_KINDS = frozenset(
    {
        AIErrorKind.CONTENT_POLICY,
        AIErrorKind.INVALID_REQUEST,
        AIErrorKind.CONTEXT_LENGTH,
    }
)


class AIServiceError(KramException):
    """Raised by the AI client wrapper for any failed upstream call."""

    def __init__(
        self,
        message: str,
        kind: AIErrorKind = AIErrorKind.UPSTREAM,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize AI service error.

        Args:
            message: Human-readable error message
            kind: Structured failure classification
            status_code: Upstream HTTP status, when one was received
            details: Additional context
        """
        details = details or {}
        details["kind"] = kind.value
        if status_code is not None:
            details["status_code"] = status_code
        self.kind = kind
        self.status_code = status_code
        super().__init__(message, details)

    @property
    def retryable(self) -> bool:
        return self.kind.retryable


class AIClientNotConfiguredError(KramException):
    """Raised when a generation is requested but no AI client was set up."""

    def __init__(self) -> None:
        super().__init__("AI service not available: OpenAI client is not configured")


class GenerationPhase(str, Enum):
    """Step of the Kram pattern generation pipeline."""

    VALIDATION = "validation"
    IMAGE_GENERATION = "image_generation"
    DESCRIPTION_GENERATION = "description_generation"
    TAG_GENERATION = "tag_generation"
    PERSISTENCE = "persistence"


_PHASE_CODES = {
    GenerationPhase.VALIDATION: "VALIDATION_ERROR",
    GenerationPhase.IMAGE_GENERATION: "IMAGE_GENERATION_ERROR",
    GenerationPhase.DESCRIPTION_GENERATION: "DESCRIPTION_GENERATION_ERROR",
    GenerationPhase.TAG_GENERATION: "TAG_GENERATION_ERROR",
    GenerationPhase.PERSISTENCE: "PERSISTENCE_ERROR",
}


class KramPatternError(KramException):
    """Raised when a generation phase fails; later phases never run."""

    def __init__(
        self,
        message: str,
        phase: GenerationPhase,
        original_error: Exception | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize phase-tagged generation error.

        Args:
            message: Error message
            phase: Pipeline phase that failed
            original_error: Underlying exception, if any
            details: Additional context
        """
        details = details or {}
        details["phase"] = phase.value
        self.phase = phase
        self.code = _PHASE_CODES[phase]
        self.original_error = original_error
        super().__init__(message, details)

    @property
    def ai_error_kind(self) -> AIErrorKind | None:
        """Kind of the underlying AI failure, if the phase failed upstream."""
        if isinstance(self.original_error, AIServiceError):
            return self.original_error.kind
        return None


def error_message(exc: BaseException) -> str:
    """Client-facing text of an exception, without the ``details`` suffix."""
    if isinstance(exc, KramException):
        return exc.message
    return str(exc)
