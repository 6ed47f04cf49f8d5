"""
Helpers for retrying requests that fail because of rate limits.

    response = await send_with_retry(lambda: resend.api_keys.list())

Only :class:`RateLimitError` triggers a retry; every other outcome is
returned or raised unchanged.
"""

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, TypeVar

from .errors import RateLimitError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class RetryOptions:
    """Configuration options for retrying requests."""

    # Wait used when the server sends no reset header.
    duration_ms: int = 1000
    # Half-open range, added on top of the wait.
    jitter_range_ms: tuple[int, int] = (0, 30)
    max_retries: int = 3

    def sleep_ms(self, ratelimit_reset: Optional[int]) -> int:
        """Milliseconds to wait before the next attempt, jitter included."""
        wait = self.duration_ms
        if ratelimit_reset is not None:
            wait = max(ratelimit_reset * 1000, self.duration_ms)

        start, stop = self.jitter_range_ms
        jitter = random.randrange(start, stop) if stop > start else 0
        return wait + jitter


async def send_with_retry_opts(
    f: Callable[[], Awaitable[T]],
    opts: RetryOptions,
) -> T:
    """
    Await ``f()``; if it raises :class:`RateLimitError`, sleep and call it again.

    ``f`` is called at most ``opts.max_retries + 1`` times, strictly one after
    the other. The last rate-limit error is re-raised once retries run out.

    Args:
        f: Zero-argument callable returning a fresh awaitable on every call
        opts: Retry configuration

    Returns:
        Whatever ``f()`` returns on its first non-rate-limited call
    """
    retries_left = opts.max_retries
    while True:
        try:
            return await f()
        except RateLimitError as err:
            if retries_left <= 0:
                raise

            sleep_ms = opts.sleep_ms(err.ratelimit_reset)
            logger.warning(
                "resend: rate limited, retrying in %d ms (%d retries left)",
                sleep_ms,
                retries_left,
            )
            await asyncio.sleep(sleep_ms / 1000)
            retries_left -= 1


async def send_with_retry(f: Callable[[], Awaitable[T]]) -> T:
    """Same as :func:`send_with_retry_opts` with the default :class:`RetryOptions`."""
    return await send_with_retry_opts(f, RetryOptions())
