"""
Kram error handling utilities.

Maps domain exceptions to HTTP status codes and error envelopes, and
provides a decorator for consistent error handling across Kram endpoints.

Dependencies: fastapi, kram.core.exceptions
System role: Error translation for the Kram HTTP API
"""

import functools
import logging
import traceback
from typing import Any, Callable, TypeVar

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from kram.core.exceptions import (
    AIClientNotConfiguredError,
    AIErrorKind,
    DatabaseUnavailableError,
    GalleryItemNotFoundError,
    GenerationPhase,
    KramException,
    KramPatternError,
    TagAlreadyExistsError,
    TagNotFoundError,
    ValidationError,
)
from kram.observability.log_utils import log_exception_with_context

from .kram_responses import error_response

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

_CLIENT_ERROR_KINDS = {
    AIErrorKind.CONTENT_POLICY,
    AIErrorKind.INVALID_REQUEST,
    AIErrorKind.CONTEXT_LENGTH,
}
_THROTTLE_KINDS = {AIErrorKind.RATE_LIMIT, AIErrorKind.QUOTA}


def kram_pattern_status(exc: KramPatternError) -> int:
    """Status code for a phase-tagged generation failure."""
    if exc.phase is GenerationPhase.VALIDATION:
        return status.HTTP_400_BAD_REQUEST
    if exc.phase is GenerationPhase.PERSISTENCE:
        return status.HTTP_500_INTERNAL_SERVER_ERROR

    kind = exc.ai_error_kind
    if kind in _CLIENT_ERROR_KINDS:
        return status.HTTP_400_BAD_REQUEST
    if kind in _THROTTLE_KINDS:
        return status.HTTP_429_TOO_MANY_REQUESTS
    return status.HTTP_502_BAD_GATEWAY


def map_exception(exc: KramException) -> tuple[int, str]:
    """
    Map a domain exception to ``(status_code, error_label)``.

    Args:
        exc: Domain exception

    Returns:
        tuple: HTTP status and short label for the envelope ``error`` field
    """
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST, exc.label
    if isinstance(exc, TagNotFoundError):
        return status.HTTP_404_NOT_FOUND, "Tags not found"
    if isinstance(exc, GalleryItemNotFoundError):
        return status.HTTP_404_NOT_FOUND, "Gallery item not found"
    if isinstance(exc, TagAlreadyExistsError):
        return status.HTTP_409_CONFLICT, "Tag already exists"
    if isinstance(exc, KramPatternError):
        if exc.phase is GenerationPhase.VALIDATION:
            return status.HTTP_400_BAD_REQUEST, "Invalid request parameters"
        return kram_pattern_status(exc), f"{exc.phase.value} failed"
    if isinstance(exc, DatabaseUnavailableError):
        return status.HTTP_503_SERVICE_UNAVAILABLE, "Database unavailable"
    if isinstance(exc, AIClientNotConfiguredError):
        return status.HTTP_503_SERVICE_UNAVAILABLE, "AI service not available"
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"


def _debug_info(exc: BaseException) -> dict[str, Any]:
    info: dict[str, Any] = {
        "error_type": type(exc).__name__,
        "stack": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
    }
    if isinstance(exc, KramException) and exc.details:
        info["details"] = exc.details
    return info


def domain_error_response(exc: KramException) -> JSONResponse:
    """Log a domain exception and convert it to an error envelope."""
    status_code, label = map_exception(exc)
    log = logger.error if status_code >= 500 else logger.warning
    log(
        label,
        extra={
            "status_code": status_code,
            "error_type": type(exc).__name__,
            "error": exc.message,
        },
    )
    return error_response(status_code, label, exc.message, debug=_debug_info(exc))


def handle_kram_errors(default_error: str) -> Callable[[F], F]:
    """
    Decorator factory turning exceptions raised by a Kram endpoint into
    error envelopes.

    This centralizes:
    - Logging of errors with context
    - Mapping domain exceptions to HTTP status codes
    - Uniform ``{success: false, error, message}`` bodies

    Args:
        default_error: Label used for unexpected failures
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except KramException as e:
                return domain_error_response(e)

            except Exception as e:
                log_exception_with_context(
                    logger,
                    "Unexpected failure in Kram operation",
                    e,
                    endpoint=func.__name__,
                )
                return error_response(
                    status.HTTP_500_INTERNAL_SERVER_ERROR,
                    default_error,
                    str(e) or "Unknown error occurred",
                    debug=_debug_info(e),
                )

        return wrapper  # type: ignore

    return decorator


async def kram_exception_handler(request: Request, exc: KramException) -> JSONResponse:
    """App-level handler for domain errors raised outside route bodies (e.g. dependencies)."""
    return domain_error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies and parameters with the envelope and status 400."""
    logger.warning("Malformed request", extra={"path": request.url.path, "error": str(exc.errors())})
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Invalid request body",
        "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
            for err in exc.errors()
        ),
    )
