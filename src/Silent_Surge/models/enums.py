"""StrEnum types for the screening domain.

Values are lowercase strings and are what the JSON report carries.
Use enum members in business logic, never raw strings.
"""

from enum import StrEnum


class Platform(StrEnum):
    """Social platform a mention was found on."""

    TWITTER = "twitter"
    REDDIT = "reddit"
    TELEGRAM = "telegram"


class StockStatus(StrEnum):
    """Classification of a screened stock for one scan cycle."""

    ALERT = "alert"
    WATCH = "watch"
    FILTERED = "filtered"

    @property
    def priority(self) -> int:
        """Sort rank for reports: alert first, filtered last."""
        return _STATUS_PRIORITY[self]


_STATUS_PRIORITY: dict[StockStatus, int] = {
    StockStatus.ALERT: 0,
    StockStatus.WATCH: 1,
    StockStatus.FILTERED: 2,
}


class SignalState(StrEnum):
    """Outcome tag of a signal adapter call."""

    OK = "ok"
    EMPTY = "empty"
    UNAVAILABLE = "unavailable"
