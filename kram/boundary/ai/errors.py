"""
OpenAI error classification.

Turns SDK exceptions into AIServiceError with a structured kind, using
exception types and the error ``code`` from the response body. Callers
branch on ``AIServiceError.kind`` and never inspect messages.

Dependencies: openai, kram.core.exceptions
System role: Upstream failure classification for the AI boundary
"""

import openai

from kram.core.exceptions import AIErrorKind, AIServiceError

FRIENDLY_MESSAGES = {
    AIErrorKind.CONTENT_POLICY: (
        "Image prompt violates OpenAI content policy. Please modify your prompt and try again."
    ),
    AIErrorKind.RATE_LIMIT: "Rate limit exceeded. Please wait a moment before trying again.",
    AIErrorKind.QUOTA: "API quota exceeded. Please check your OpenAI account usage.",
    AIErrorKind.INVALID_REQUEST: "Invalid request. Please check your input parameters.",
    AIErrorKind.CONTEXT_LENGTH: (
        "Context length exceeded. Please reduce the length of your message or history."
    ),
}

_CODE_KINDS = {
    "content_policy_violation": AIErrorKind.CONTENT_POLICY,
    "context_length_exceeded": AIErrorKind.CONTEXT_LENGTH,
    "insufficient_quota": AIErrorKind.QUOTA,
    "quota_exceeded": AIErrorKind.QUOTA,
    "rate_limit_exceeded": AIErrorKind.RATE_LIMIT,
}


def _kind_for_status_error(exc: openai.APIStatusError) -> AIErrorKind:
    kind = _CODE_KINDS.get(exc.code or "")
    if kind is not None:
        return kind
    if isinstance(exc, openai.RateLimitError):
        return AIErrorKind.RATE_LIMIT
    if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return AIErrorKind.AUTHENTICATION
    if isinstance(
        exc,
        (openai.BadRequestError, openai.UnprocessableEntityError, openai.NotFoundError),
    ):
        return AIErrorKind.INVALID_REQUEST
    return AIErrorKind.UPSTREAM


def classify_openai_error(exc: BaseException) -> AIServiceError:
    """
    Build an AIServiceError for any exception raised by an OpenAI call.

    Args:
        exc: Exception raised by the SDK (or already classified)

    Returns:
        AIServiceError: Classified error; ``exc`` itself if already classified
    """
    if isinstance(exc, AIServiceError):
        return exc

    status_code = None
    if isinstance(exc, openai.APITimeoutError):
        kind = AIErrorKind.TIMEOUT
    elif isinstance(exc, openai.APIConnectionError):
        kind = AIErrorKind.CONNECTION
    elif isinstance(exc, openai.APIStatusError):
        kind = _kind_for_status_error(exc)
        status_code = exc.status_code
    else:
        kind = AIErrorKind.UPSTREAM

    message = FRIENDLY_MESSAGES.get(kind, str(exc) or type(exc).__name__)
    return AIServiceError(
        message,
        kind=kind,
        status_code=status_code,
        details={"upstream_error": type(exc).__name__},
    )
