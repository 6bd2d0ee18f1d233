"""
Common response models and utilities.

Generic response envelope shared by every endpoint.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Any, Generic, TypeVar
from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """
    Response envelope for all Kram endpoints.

    ``debug`` is only filled outside production and may carry timings,
    cost estimates and stack traces.
    """

    success: bool
    data: T | None = None
    error: str | None = Field(default=None, description="Short error label")
    message: str | None = Field(default=None, description="Human-readable message")
    debug: dict[str, Any] | None = Field(default=None, description="Non-production diagnostics")
