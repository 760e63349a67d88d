"""
Retry decorator for coroutines that cross the network.

Only transport failures (refused connections, timeouts) are retried. Errors
raised from a response the server did send, and any other exception,
propagate on the first attempt.
"""

from collections.abc import Awaitable, Callable
from logging import getLogger
from typing import Any, ParamSpec, TypeVar

from httpx import ConnectError, TimeoutException
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from bloglist.configs import RetryConfig, file_logger

logger = file_logger(getLogger(__name__))

P = ParamSpec("P")
T = TypeVar("T")
TRANSIENT_ERRORS: tuple[type[Exception], ...] = (
    ConnectError,
    TimeoutException,
    ConnectionError,
    TimeoutError,
)


def _target(retry_state: RetryCallState) -> str:
    return getattr(retry_state.fn, "__qualname__", "unknown")


def _log_retry(config: RetryConfig) -> Callable[[RetryCallState], None]:
    def log(retry_state: RetryCallState) -> None:
        exception = retry_state.outcome.exception() if retry_state.outcome else None
        delay = retry_state.next_action.sleep if retry_state.next_action else 0
        logger.warning(
            "%s failed with %s (attempt %d of %d), retrying in %.2fs",
            _target(retry_state),
            type(exception).__name__,
            retry_state.attempt_number,
            config.attempts,
            delay,
        )

    return log


def _give_up(retry_state: RetryCallState) -> Any:
    logger.error(
        "%s gave up after %d attempts",
        _target(retry_state),
        retry_state.attempt_number,
    )
    # Re-raises the exception of the final attempt
    return retry_state.outcome.result() if retry_state.outcome else None


def with_retry(
    config: RetryConfig | None = None,
    errors: tuple[type[Exception], ...] = TRANSIENT_ERRORS,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Retry an async function with exponential backoff on transient errors.

    Args:
        config: Attempts and backoff bounds; read from `CLIENT_RETRY_*`
            environment variables when omitted.
        errors: Exception types that count as transient.

    Returns:
        Decorator applying the retry policy. Once attempts are exhausted the
        last exception is raised unchanged.

    Example:
        >>> @with_retry(RetryConfig(attempts=5))
        ... async def fetch() -> bytes: ...
    """
    config = config or RetryConfig()
    return retry(
        stop=stop_after_attempt(config.attempts),
        wait=wait_exponential(
            multiplier=config.base_delay,
            min=config.base_delay,
            max=config.max_delay,
        ),
        retry=retry_if_exception_type(errors),
        before_sleep=_log_retry(config),
        retry_error_callback=_give_up,
    )
