"""Pivot level adapter backed by yfinance daily candles.

Fetches about a week of daily bars so at least one completed session is
present, takes the second-to-last bar as the prior session (the last one is
today's partial candle) and computes pivot levels against the live price.
"""

from __future__ import annotations

import asyncio
import datetime
import logging
from typing import Final

import pandas as pd
import yfinance as yf  # type: ignore[import-untyped]

from Silent_Surge.analysis.pivots import NEAR_R2_THRESHOLD_PERCENT, compute_pivot_levels
from Silent_Surge.models.market_data import DailyBar, PivotLevels
from Silent_Surge.models.signals import SignalResult
from Silent_Surge.services._helpers import EXTERNAL_CALL_TIMEOUT_SECONDS, safe_float, safe_int
from Silent_Surge.utils.exceptions import InsufficientDataError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

YFINANCE_SOURCE: Final[str] = "yfinance"
HISTORY_LOOKBACK_DAYS: Final[int] = 7
MIN_DAILY_BARS: Final[int] = 2


class PivotService:
    """Compute R2 proximity for a symbol from its prior session.

    Usage::

        pivots = PivotService()
        result = await pivots.fetch_signal("RELIANCE.NS", current_price=2950.0)
        levels = result.value  # PivotLevels or None
    """

    def __init__(self, near_threshold: float = NEAR_R2_THRESHOLD_PERCENT) -> None:
        self._near_threshold = near_threshold

    async def fetch_signal(self, symbol: str, current_price: float) -> SignalResult[PivotLevels]:
        """Return pivot levels for *symbol* at *current_price*. Never raises."""
        try:
            bars = await self.fetch_daily_bars(symbol)
            prev_bar = previous_session(bars, symbol)
            levels = compute_pivot_levels(prev_bar, current_price, self._near_threshold)
        except Exception as exc:  # noqa: BLE001
            # yfinance raises inconsistent exception types
            logger.warning("Pivot computation failed for %s: %s", symbol, exc)
            return SignalResult.unavailable(source=YFINANCE_SOURCE, detail=str(exc))

        logger.debug(
            "Pivots for %s: R2=%.2f proximity=%.2f%% near=%s",
            symbol,
            levels.r2,
            levels.r2_proximity,
            levels.near_r2,
        )
        return SignalResult.ok(levels, source=YFINANCE_SOURCE)

    async def fetch_daily_bars(self, symbol: str) -> list[DailyBar]:
        """Fetch recent daily candles for *symbol*, oldest first."""
        end = datetime.date.today() + datetime.timedelta(days=1)
        start = end - datetime.timedelta(days=HISTORY_LOOKBACK_DAYS + 1)

        def _sync_fetch() -> pd.DataFrame:
            df: pd.DataFrame = yf.Ticker(symbol).history(
                start=start.isoformat(),
                end=end.isoformat(),
                interval="1d",
            )
            return df

        df = await asyncio.wait_for(
            asyncio.to_thread(_sync_fetch),
            timeout=EXTERNAL_CALL_TIMEOUT_SECONDS,
        )
        return _dataframe_to_bars(df)


def previous_session(bars: list[DailyBar], symbol: str = "") -> DailyBar:
    """Return the last completed session: the second-to-last bar.

    Raises:
        InsufficientDataError: If fewer than two bars are available.
    """
    if len(bars) < MIN_DAILY_BARS:
        raise InsufficientDataError(
            f"Only {len(bars)} daily bars for {symbol}",
            ticker=symbol,
            source=YFINANCE_SOURCE,
        )
    return bars[-2]


def _dataframe_to_bars(df: pd.DataFrame | None) -> list[DailyBar]:
    """Convert a yfinance history frame to DailyBar models.

    Rows with a missing high, low or close come through as zeros and are
    rejected later by the pivot arithmetic.
    """
    if df is None or df.empty:
        return []

    bars: list[DailyBar] = []
    for idx, row in df.iterrows():
        bar_date: datetime.date = (
            idx.date() if isinstance(idx, pd.Timestamp) else pd.Timestamp(str(idx)).date()
        )
        bars.append(
            DailyBar(
                date=bar_date,
                open=safe_float(row.get("Open")),
                high=safe_float(row.get("High")),
                low=safe_float(row.get("Low")),
                close=safe_float(row.get("Close")),
                volume=safe_int(row.get("Volume")),
            )
        )
    return bars
