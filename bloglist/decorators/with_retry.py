"""Exponential backoff for coroutines that fail transiently."""

from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from bloglist.monitoring import get_logger

logger = get_logger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


def _log_retry(retry_state: RetryCallState) -> None:
    outcome = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Retrying call",
        function=getattr(retry_state.fn, "__name__", "unknown"),
        attempt=retry_state.attempt_number,
        delay=round(retry_state.next_action.sleep, 2) if retry_state.next_action else 0,
        error=str(outcome),
    )


def with_retry(
    exec_retry: type[Exception] | tuple[type[Exception], ...],
    max_retries: int = 3,
    base_delay: float = 0.1,
    max_delay: float = 2.0,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Retry an async function on ``exec_retry`` with tenacity.

    Args:
        exec_retry: Exception type(s) worth another attempt; anything else
            propagates immediately.
        max_retries: Total attempts, the first one included.
        base_delay: First wait in seconds, doubled on every retry.
        max_delay: Upper bound for a single wait.

    The last exception is re-raised once the attempts run out.
    """
    return retry(
        stop=stop_after_attempt(max_retries),
        wait=wait_exponential(multiplier=base_delay, min=base_delay, max=max_delay),
        retry=retry_if_exception_type(exec_retry),
        before_sleep=_log_retry,
        reraise=True,
    )
