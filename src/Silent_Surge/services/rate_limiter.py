"""Async rate limiter with a token bucket and a concurrency cap.

Gates the universe quote fetch so a batch of fifty symbols does not hit
Yahoo Finance all at once. There is no retry here: a request that fails is
simply skipped and the next scan cycle is the retry.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

YFINANCE_REQUESTS_PER_SECOND: float = 10.0
YFINANCE_MAX_CONCURRENT: int = 10


class RateLimiter:
    """Async rate limiter combining concurrency control and token bucket.

    Usage::

        limiter = RateLimiter(max_concurrent=10, requests_per_second=10.0)

        async with limiter.slot():
            quote = await fetch_quote(symbol)
    """

    def __init__(
        self,
        max_concurrent: int = YFINANCE_MAX_CONCURRENT,
        requests_per_second: float = YFINANCE_REQUESTS_PER_SECOND,
    ) -> None:
        if requests_per_second <= 0:
            raise ValueError(f"requests_per_second must be positive, got {requests_per_second}")
        self._semaphore = asyncio.Semaphore(max_concurrent)
        self._requests_per_second = requests_per_second

        # Token bucket state
        self._token_interval = 1.0 / requests_per_second
        self._tokens = float(max_concurrent)
        self._max_tokens = float(max_concurrent)
        self._last_refill_time = time.monotonic()
        self._bucket_lock = asyncio.Lock()

        logger.debug(
            "RateLimiter initialized: max_concurrent=%d, rate=%.1f req/s",
            max_concurrent,
            requests_per_second,
        )

    async def acquire(self) -> None:
        """Block until both concurrency and rate limits allow a request."""
        await self._semaphore.acquire()
        await self._wait_for_token()

    def release(self) -> None:
        """Release a concurrency slot back to the semaphore."""
        self._semaphore.release()

    @asynccontextmanager
    async def slot(self) -> AsyncIterator[None]:
        """Hold one rate-limited slot for the duration of the block."""
        await self.acquire()
        try:
            yield
        finally:
            self.release()

    # ------------------------------------------------------------------
    # Token bucket internals
    # ------------------------------------------------------------------

    async def _wait_for_token(self) -> None:
        """Wait until a token is available in the bucket."""
        while True:
            async with self._bucket_lock:
                self._refill_tokens()
                if self._tokens >= 1.0:
                    self._tokens -= 1.0
                    return

            await asyncio.sleep(self._token_interval)

    def _refill_tokens(self) -> None:
        """Add tokens based on elapsed time since the last refill."""
        now = time.monotonic()
        elapsed = now - self._last_refill_time
        new_tokens = elapsed * self._requests_per_second
        self._tokens = min(self._max_tokens, self._tokens + new_tokens)
        self._last_refill_time = now
