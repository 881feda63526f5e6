"""NSE delivery percentage adapter.

Delivery % = delivered quantity / traded quantity * 100 for the current
session, read from NSE's equity trade-info endpoint. A low value means the
volume is mostly intraday speculation. NSE rejects requests without the
cookies its home page sets, so the client visits it once before the first
API call and again after a 401/403.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Final

import httpx

from Silent_Surge.models.signals import SignalResult
from Silent_Surge.services._helpers import build_http_client, safe_float
from Silent_Surge.services.cache import TTL_DELIVERY, TTLCache
from Silent_Surge.utils.exceptions import (
    DataFetchError,
    DataSourceUnavailableError,
    InsufficientDataError,
)
from Silent_Surge.utils.rounding import round2

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

NSE_SOURCE: Final[str] = "nse"
NSE_HOME_URL: Final[str] = "https://www.nseindia.com"
NSE_TRADE_INFO_URL: Final[str] = "https://www.nseindia.com/api/quote-equity"
NSE_HEADERS: Final[dict[str, str]] = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
    ),
    "Accept": "application/json, text/plain, */*",
    "Accept-Language": "en-US,en;q=0.9",
    "Referer": "https://www.nseindia.com/",
}
_AUTH_FAILURE_STATUSES: Final[frozenset[int]] = frozenset({401, 403})


class DeliveryService:
    """Fetch the delivery percentage for an NSE ticker.

    Successful values are cached for three minutes per ticker; failures are
    not cached so the next scan asks again.

    Usage::

        delivery = DeliveryService()
        result = await delivery.fetch_signal("RELIANCE")
        pct = result.value_or(DELIVERY_UNAVAILABLE)
    """

    def __init__(
        self,
        *,
        cache: TTLCache[float] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._cache: TTLCache[float] = (
            cache if cache is not None else TTLCache("delivery", ttl_seconds=TTL_DELIVERY)
        )
        self._client = build_http_client(headers=dict(NSE_HEADERS), transport=transport)
        self._session_ready = False
        self._session_lock = asyncio.Lock()

    async def aclose(self) -> None:
        """Close the owned httpx client."""
        await self._client.aclose()

    async def fetch_signal(self, ticker: str) -> SignalResult[float]:
        """Return the delivery percentage for *ticker*. Never raises."""
        cached = self._cache.get(ticker)
        if cached is not None:
            return SignalResult.ok(cached, source=NSE_SOURCE)

        try:
            pct = await self._fetch_delivery_percent(ticker)
        except (DataFetchError, httpx.HTTPError, ValueError) as exc:
            logger.warning("Delivery lookup failed for %s: %s", ticker, exc)
            return SignalResult.unavailable(source=NSE_SOURCE, detail=str(exc))

        self._cache.set(ticker, pct)
        return SignalResult.ok(pct, source=NSE_SOURCE)

    async def _fetch_delivery_percent(self, ticker: str) -> float:
        await self._ensure_session()
        response = await self._request_trade_info(ticker)

        if response.status_code in _AUTH_FAILURE_STATUSES:
            logger.debug("NSE rejected session for %s, refreshing cookies", ticker)
            self._session_ready = False
            await self._ensure_session()
            response = await self._request_trade_info(ticker)

        if response.status_code != 200:  # noqa: PLR2004
            raise DataSourceUnavailableError(
                f"NSE returned HTTP {response.status_code}",
                ticker=ticker,
                source=NSE_SOURCE,
                http_status=response.status_code,
            )

        payload = response.json()
        dp = payload.get("securityWiseDP") if isinstance(payload, dict) else None
        if not isinstance(dp, dict):
            raise InsufficientDataError(
                f"No securityWiseDP for {ticker}", ticker=ticker, source=NSE_SOURCE
            )

        return delivery_percent(dp.get("deliveryQuantity"), dp.get("quantityTraded"), ticker)

    async def _request_trade_info(self, ticker: str) -> httpx.Response:
        return await self._client.get(
            NSE_TRADE_INFO_URL,
            params={"symbol": ticker, "section": "trade_info"},
        )

    async def _ensure_session(self) -> None:
        """Load the NSE home page once so the client holds its cookies."""
        if self._session_ready:
            return
        async with self._session_lock:
            if self._session_ready:
                return
            await self._client.get(NSE_HOME_URL)
            self._session_ready = True


def delivery_percent(delivery_qty: object, traded_qty: object, ticker: str = "") -> float:
    """Delivered share of traded quantity, in percent, rounded to 2 decimals.

    Quantities may be numbers or comma-grouped strings.

    Raises:
        InsufficientDataError: If nothing was traded.
    """
    delivered = safe_float(delivery_qty)
    traded = safe_float(traded_qty)
    if traded <= 0:
        raise InsufficientDataError(
            f"Zero traded quantity for {ticker}", ticker=ticker, source=NSE_SOURCE
        )
    return round2(delivered / traded * 100)
