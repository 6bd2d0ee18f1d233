"""
Observability module.

Provides logging configuration, correlation ID tracking and request
logging middleware.
"""

from kram.observability.correlation import get_correlation_id, set_correlation_id
from kram.observability.logger import configure_logging, get_logger
from kram.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

__all__ = [
    "configure_logging",
    "get_logger",
    "get_correlation_id",
    "set_correlation_id",
    "CorrelationMiddleware",
    "RequestLoggingMiddleware",
]
