"""Retry with exponential backoff for provider quota errors."""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar


logger = logging.getLogger("scripture_api.retry")

T = TypeVar("T")

DEFAULT_RETRIES = 3
DEFAULT_DELAY_MS = 2000

QUOTA_MARKERS = ("429", "quota", "RESOURCE_EXHAUSTED")
_STATUS_ATTRIBUTES = ("status", "code", "status_code")


def _error_message(error: BaseException) -> str:
    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return f"{message} {error}"
    return str(error)


def is_quota_error(error: BaseException) -> bool:
    """
    Return True when an upstream error signals rate limiting or exhausted quota.

    Matches any of: the text ``429``, ``quota`` or ``RESOURCE_EXHAUSTED`` in the
    message, or a structured ``status``/``code``/``status_code`` equal to 429.
    """
    message = _error_message(error)
    if any(marker in message for marker in QUOTA_MARKERS):
        return True

    for attr in _STATUS_ATTRIBUTES:
        value = getattr(error, attr, None)
        if isinstance(value, bool):
            continue
        try:
            if value is not None and int(value) == 429:
                return True
        except (TypeError, ValueError):
            continue
    return False


async def retry_with_backoff(
    fn: Callable[[], Awaitable[T]],
    retries: int = DEFAULT_RETRIES,
    delay_ms: int = DEFAULT_DELAY_MS,
    sleep: Optional[Callable[[float], Awaitable[Any]]] = None,
) -> T:
    """
    Run ``fn`` and retry it while it fails with quota errors.

    Attempts are sequential. Before retry ``k`` (1-based) the call waits
    ``delay_ms * 2 ** (k - 1)`` milliseconds, so at most ``retries + 1``
    attempts are made. Any other error, or a quota error once the budget is
    spent, is re-raised unchanged.

    Args:
        fn: Zero-argument coroutine factory; called once per attempt
        retries: Retry budget after the first attempt
        delay_ms: Delay before the first retry
        sleep: Awaitable sleep taking seconds (``asyncio.sleep`` by default)

    Returns:
        Whatever ``fn`` returns on the first successful attempt
    """
    sleep = sleep or asyncio.sleep
    remaining = retries
    delay = delay_ms

    while True:
        try:
            return await fn()
        except Exception as e:
            if not is_quota_error(e) or remaining <= 0:
                raise
            logger.warning("Rate limit hit. Retrying in %dms... (%d retries left)", delay, remaining)
            await sleep(delay / 1000)
            remaining -= 1
            delay *= 2
