"""Process-lifetime record of tickers that already triggered an alert."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class AlertSession:
    """Set of tickers alerted during this process.

    The host creates one instance and hands it to every scan cycle, so a
    ticker is messaged at most once however many cycles flag it. Entries
    are never removed; a new process starts a new session.
    """

    def __init__(self) -> None:
        self._alerted: set[str] = set()

    def contains(self, ticker: str) -> bool:
        return ticker in self._alerted

    def mark(self, ticker: str) -> None:
        """Record that *ticker* was alerted."""
        self._alerted.add(ticker)
        logger.debug("Alert session marked %s (%d total)", ticker, len(self._alerted))

    def snapshot(self) -> frozenset[str]:
        """Return an immutable copy of the alerted tickers."""
        return frozenset(self._alerted)

    def __contains__(self, ticker: object) -> bool:
        return ticker in self._alerted

    def __len__(self) -> int:
        return len(self._alerted)

    def __bool__(self) -> bool:
        # An empty session is still a session.
        return True
