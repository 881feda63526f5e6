"""Universe quotes and benchmark move, backed by yfinance.

All yfinance calls are synchronous and wrapped in ``asyncio.to_thread()`` to
avoid blocking the event loop. The universe is quoted in bounded batches;
within a batch, symbols are fetched concurrently through the rate limiter.
A symbol whose quote fails is skipped. If every quote in the universe fails
the fetch raises, which the screening pipeline reports as a failed cycle.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Any, Final

import yfinance as yf  # type: ignore[import-untyped]

from Silent_Surge.models.market_data import Mover
from Silent_Surge.models.signals import SignalResult
from Silent_Surge.services._helpers import EXTERNAL_CALL_TIMEOUT_SECONDS, safe_float, safe_int
from Silent_Surge.services.rate_limiter import RateLimiter
from Silent_Surge.services.universe import NIFTY_50_SYMBOL, NIFTY_200_SYMBOLS
from Silent_Surge.utils.exceptions import DataSourceUnavailableError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

YFINANCE_SOURCE: Final[str] = "yfinance"
DEFAULT_BATCH_SIZE: Final[int] = 50

QuoteInfo = dict[str, Any]


class MarketDataService:
    """Async quote service for the tracked universe and its benchmark.

    Usage::

        service = MarketDataService(rate_limiter=RateLimiter())
        movers = await service.fetch_movers(min_change_percent=4.0)
        benchmark = await service.fetch_benchmark_change()
    """

    def __init__(
        self,
        rate_limiter: RateLimiter,
        *,
        symbols: Sequence[str] = NIFTY_200_SYMBOLS,
        benchmark_symbol: str = NIFTY_50_SYMBOL,
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> None:
        self._rate_limiter = rate_limiter
        self._symbols = list(symbols)
        self._benchmark_symbol = benchmark_symbol
        self._batch_size = max(1, batch_size)

    @property
    def symbols(self) -> list[str]:
        return list(self._symbols)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def fetch_movers(self, min_change_percent: float) -> list[Mover]:
        """Return universe stocks up at least *min_change_percent*, biggest first.

        Raises:
            DataSourceUnavailableError: If no quote in the universe could be
                fetched at all.
        """
        movers: list[Mover] = []
        quoted = 0

        for start in range(0, len(self._symbols), self._batch_size):
            batch = self._symbols[start : start + self._batch_size]
            infos = await asyncio.gather(*(self._fetch_quote_info(sym) for sym in batch))

            for symbol, info in zip(batch, infos, strict=True):
                if info is None:
                    continue
                quoted += 1
                mover = quote_to_mover(symbol, info)
                if mover.change_percent >= min_change_percent:
                    movers.append(mover)

        if self._symbols and quoted == 0:
            raise DataSourceUnavailableError(
                f"No quotes returned for {len(self._symbols)} universe symbols",
                ticker="*",
                source=YFINANCE_SOURCE,
            )

        movers.sort(key=lambda m: m.change_percent, reverse=True)
        logger.info(
            "Quoted %d/%d symbols, %d movers >= %.2f%%",
            quoted,
            len(self._symbols),
            len(movers),
            min_change_percent,
        )
        return movers

    async def fetch_benchmark_change(self) -> SignalResult[float]:
        """Return the benchmark index change %. Never raises.

        Callers read it with ``value_or(0.0)``.
        """
        info = await self._fetch_quote_info(self._benchmark_symbol)
        if info is None:
            logger.warning("Benchmark %s unavailable, using 0", self._benchmark_symbol)
            return SignalResult.unavailable(source=YFINANCE_SOURCE, detail=self._benchmark_symbol)
        return SignalResult.ok(
            safe_float(info.get("regularMarketChangePercent")),
            source=YFINANCE_SOURCE,
        )

    # ------------------------------------------------------------------
    # Raw yfinance calls (sync, wrapped in asyncio.to_thread)
    # ------------------------------------------------------------------

    async def _fetch_quote_info(self, symbol: str) -> QuoteInfo | None:
        """Fetch the raw quote dict for *symbol*, or None on any failure."""

        def _sync_fetch() -> QuoteInfo:
            info: QuoteInfo = yf.Ticker(symbol).info
            return info

        try:
            async with self._rate_limiter.slot():
                info = await asyncio.wait_for(
                    asyncio.to_thread(_sync_fetch),
                    timeout=EXTERNAL_CALL_TIMEOUT_SECONDS,
                )
        except Exception as exc:  # noqa: BLE001
            # yfinance raises inconsistent exception types
            logger.warning("Quote fetch failed for %s: %s", symbol, exc)
            return None

        if not info or info.get("regularMarketPrice") is None:
            logger.debug("No quote data for %s", symbol)
            return None
        return info


def quote_to_mover(symbol: str, info: QuoteInfo) -> Mover:
    """Build a Mover from a yfinance quote dict; missing numbers become 0."""
    return Mover(
        symbol=str(info.get("symbol") or symbol),
        name=str(info.get("shortName") or info.get("longName") or symbol),
        price=safe_float(info.get("regularMarketPrice")),
        change=safe_float(info.get("regularMarketChange")),
        change_percent=safe_float(info.get("regularMarketChangePercent")),
        volume=safe_int(info.get("regularMarketVolume")),
        market_cap=safe_float(info.get("marketCap")),
    )
