"""Reduce the four criteria flags to an alert/watch/filtered status."""

from Silent_Surge.analysis.thresholds import DEFAULT_WATCH_MIN_CRITERIA
from Silent_Surge.models.enums import StockStatus
from Silent_Surge.models.scan import CriteriaResult


def classify(
    criteria: CriteriaResult,
    watch_min_criteria: int = DEFAULT_WATCH_MIN_CRITERIA,
) -> StockStatus:
    """ALERT when all four pass, WATCH when at least *watch_min_criteria* pass.

    Recomputed every cycle; there is no memory of earlier statuses.
    """
    if criteria.all_passed:
        return StockStatus.ALERT
    if criteria.passed_count >= watch_min_criteria:
        return StockStatus.WATCH
    return StockStatus.FILTERED
