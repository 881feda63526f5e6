"""Classic daily pivot levels and R2 proximity.

Pure arithmetic over the prior completed session's high, low and close.
"""

import logging

from Silent_Surge.models.market_data import DailyBar, PivotLevels
from Silent_Surge.utils.rounding import round2

logger = logging.getLogger(__name__)

# --- Thresholds ---
NEAR_R2_THRESHOLD_PERCENT: float = 1.0


def compute_pivot_levels(
    prev_bar: DailyBar,
    current_price: float,
    near_threshold: float = NEAR_R2_THRESHOLD_PERCENT,
) -> PivotLevels:
    """Compute pivot, R1, R2 and how close *current_price* sits to R2.

    Args:
        prev_bar: The last completed daily bar.
        current_price: Latest traded price.
        near_threshold: Maximum R2 proximity (in percent) that counts as near.

    Returns:
        PivotLevels with prices rounded to two decimals. ``near_r2`` is
        decided on the unrounded proximity.

    Raises:
        ValueError: If the bar is not positive or its high is below its low.
    """
    high, low, close = prev_bar.high, prev_bar.low, prev_bar.close
    if high <= 0 or low <= 0 or close <= 0:
        raise ValueError(f"Incomplete OHLC for {prev_bar.date}: H={high} L={low} C={close}")
    if high < low:
        raise ValueError(f"Inverted bar for {prev_bar.date}: H={high} < L={low}")

    pivot = (high + low + close) / 3
    r1 = 2 * pivot - low
    r2 = pivot + (high - low)
    r2_proximity = abs(current_price - r2) / r2 * 100

    return PivotLevels(
        prev_high=round2(high),
        prev_low=round2(low),
        prev_close=round2(close),
        pivot=round2(pivot),
        r1=round2(r1),
        r2=round2(r2),
        r2_proximity=round2(r2_proximity),
        near_r2=r2_proximity <= near_threshold,
    )
