"""
Kram response mapping utilities.

Builds the ``{success, data, error, message, debug}`` envelope used by
every Kram endpoint. ``debug`` is dropped in production.

Dependencies: fastapi, kram.configs, kram.models.common
System role: Kram response transformation
"""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from kram.configs import get_settings
from kram.models.common import ApiResponse


def debug_enabled() -> bool:
    """True outside production."""
    return not get_settings().is_production


def envelope_response(
    status_code: int,
    *,
    success: bool,
    data: Any = None,
    error: str | None = None,
    message: str | None = None,
    debug: dict[str, Any] | None = None,
) -> JSONResponse:
    """
    Wrap a payload in the API envelope.

    Args:
        status_code: HTTP status
        success: Whether the request succeeded
        data: Payload (pydantic models or plain values)
        error: Short error label
        message: Human-readable message
        debug: Diagnostics, kept only outside production

    Returns:
        JSONResponse: Envelope with unset top-level fields omitted
    """
    body = ApiResponse[Any](
        success=success,
        data=jsonable_encoder(data),
        error=error,
        message=message,
        debug=jsonable_encoder(debug) if debug and debug_enabled() else None,
    )
    content = {key: value for key, value in body.model_dump().items() if value is not None}
    return JSONResponse(status_code=status_code, content=content)


def success_response(
    data: Any,
    message: str,
    status_code: int = 200,
    debug: dict[str, Any] | None = None,
) -> JSONResponse:
    return envelope_response(status_code, success=True, data=data, message=message, debug=debug)


def error_response(
    status_code: int,
    error: str,
    message: str,
    debug: dict[str, Any] | None = None,
) -> JSONResponse:
    return envelope_response(status_code, success=False, error=error, message=message, debug=debug)
