"""
Bounded exponential-backoff retry for external AI calls.

Wraps tenacity so every upstream call shares the same policy: up to
``max_retries`` retries, delay doubling from ``base_delay`` and capped at
``max_delay``. Content-policy and invalid-request failures are never retried.

Dependencies: tenacity, kram.core.exceptions
System role: Retry policy for the AI boundary
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from kram.core.exceptions import AIServiceError

logger = logging.getLogger(__name__)

T = TypeVar("T")

SleepFn = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class RetryConfig:
    """Retry policy for one external call."""

    max_retries: int = 3
    base_delay: float = 1.0
    max_delay: float = 8.0


DEFAULT_RETRY_CONFIG = RetryConfig()


def is_retryable(exc: BaseException) -> bool:
    """Classified errors carry their own verdict; anything else is retried."""
    if isinstance(exc, AIServiceError):
        return exc.retryable
    return True


def _log_before_sleep(operation_name: str, config: RetryConfig) -> Callable[[RetryCallState], None]:
    def log(retry_state: RetryCallState) -> None:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        delay = retry_state.next_action.sleep if retry_state.next_action else None
        logger.warning(
            f"{__name__}:{operation_name} - Retry {retry_state.attempt_number}/{config.max_retries}"
            f" after {delay}s",
            extra={
                "operation": operation_name,
                "attempt": retry_state.attempt_number,
                "delay_seconds": delay,
                "error": str(exc) if exc else None,
            },
        )

    return log


async def call_with_retry(
    operation: Callable[[], Awaitable[T]],
    config: RetryConfig = DEFAULT_RETRY_CONFIG,
    *,
    operation_name: str = "ai_call",
    sleep: SleepFn = asyncio.sleep,
) -> T:
    """
    Run ``operation`` under the retry policy.

    Args:
        operation: Zero-argument coroutine factory, called once per attempt
        config: Retry policy
        operation_name: Label used in retry log lines
        sleep: Awaitable sleep used between attempts

    Returns:
        The operation's result

    Raises:
        Exception: The last error once retries are exhausted, or the first
            non-retryable error
    """
    retrying = AsyncRetrying(
        retry=retry_if_exception(is_retryable),
        stop=stop_after_attempt(config.max_retries + 1),
        wait=wait_exponential(multiplier=config.base_delay, max=config.max_delay),
        before_sleep=_log_before_sleep(operation_name, config),
        sleep=sleep,
        reraise=True,
    )
    return await retrying(operation)
