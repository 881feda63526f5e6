"""Send at most one alert per ticker per session."""

from __future__ import annotations

import logging
from typing import Protocol

from Silent_Surge.models.scan import EnrichedStock
from Silent_Surge.screening.session import AlertSession

logger = logging.getLogger(__name__)


class AlertNotifier(Protocol):
    """Anything that can deliver an alert and report whether it went out."""

    async def send(
        self,
        ticker: str,
        change_percent: float,
        delivery_percent: float,
        r2_proximity: float,
    ) -> bool: ...

    async def aclose(self) -> None: ...


class AlertDispatcher:
    """Deduplicating front end to the alert notifier.

    Usage::

        dispatcher = AlertDispatcher(notifier, AlertSession())
        sent = await dispatcher.maybe_dispatch(stock)
    """

    def __init__(self, notifier: AlertNotifier, session: AlertSession) -> None:
        self._notifier = notifier
        self._session = session

    @property
    def session(self) -> AlertSession:
        return self._session

    async def aclose(self) -> None:
        """Close the notifier's transport."""
        await self._notifier.aclose()

    async def maybe_dispatch(self, stock: EnrichedStock) -> bool:
        """Alert on *stock* unless its ticker was already alerted.

        The ticker is recorded only after a successful send, so a failed
        send is tried again on the next cycle that flags the stock.

        Returns:
            True if a message was sent now.
        """
        ticker = stock.ticker
        if self._session.contains(ticker):
            logger.debug("Alert for %s already sent this session", ticker)
            return False

        sent = await self._notifier.send(
            ticker,
            stock.change_percent,
            stock.delivery_percent,
            stock.r2_proximity,
        )
        if not sent:
            logger.info("Alert for %s not delivered", ticker)
            return False

        self._session.mark(ticker)
        return True
