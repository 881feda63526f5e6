"""The four screening criteria for a silent surge.

A pure function of a stock's metrics; the thresholds come from
``CriteriaThresholds`` so they can be tuned through configuration.
"""

import logging

from Silent_Surge.analysis.scoring import sector_outperformance
from Silent_Surge.analysis.thresholds import CriteriaThresholds
from Silent_Surge.models.scan import CriteriaResult

logger = logging.getLogger(__name__)


def evaluate(
    *,
    delivery_percent: float,
    near_r2: bool,
    change_percent: float,
    benchmark_change_percent: float,
    total_mentions: int,
    thresholds: CriteriaThresholds | None = None,
) -> CriteriaResult:
    """Evaluate delivery, R2, sector and mention criteria.

    Args:
        delivery_percent: Delivery percentage, negative when unavailable.
            Unavailable delivery never passes.
        near_r2: Whether the price is within the R2 proximity threshold.
        change_percent: The stock's session change in percent.
        benchmark_change_percent: The benchmark index change in percent.
        total_mentions: Mentions across all platforms.
        thresholds: Criteria thresholds; defaults when omitted.

    Returns:
        A CriteriaResult with one flag per criterion.
    """
    limits = thresholds if thresholds is not None else CriteriaThresholds()

    outperformance = sector_outperformance(change_percent, benchmark_change_percent)
    result = CriteriaResult(
        passes_delivery=0 <= delivery_percent < limits.max_delivery_percent,
        passes_r2=near_r2,
        passes_sector=outperformance >= limits.min_sector_outperformance,
        passes_mentions=total_mentions <= limits.max_mentions,
    )

    logger.debug(
        "Criteria: delivery=%s r2=%s sector=%s mentions=%s (%d/4)",
        result.passes_delivery,
        result.passes_r2,
        result.passes_sector,
        result.passes_mentions,
        result.passed_count,
    )
    return result
