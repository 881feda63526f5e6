"""WhatsApp alert notifier over the Twilio Messages REST API.

Posts a form-encoded message with HTTP basic auth through httpx; no Twilio
SDK is needed. Missing credentials disable the notifier: ``send()`` then
returns False without making a request.
"""

from __future__ import annotations

import logging
from typing import Final

import httpx

from Silent_Surge.services._helpers import build_http_client
from Silent_Surge.utils.exceptions import NotificationError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

TWILIO_SOURCE: Final[str] = "twilio"
TWILIO_MESSAGES_URL: Final[str] = (
    "https://api.twilio.com/2010-04-01/Accounts/{account_sid}/Messages.json"
)


def compose_alert_message(
    ticker: str,
    change_percent: float,
    delivery_percent: float,
    r2_proximity: float,
) -> str:
    """Build the alert body for a stock that passed every criterion."""
    return "\n".join(
        [
            f"🚨 SilentSurge Alert: {ticker} up +{change_percent:.2f}% at R2 resistance "
            "with zero news and low delivery.",
            "",
            "📊 Details:",
            f"• Change: +{change_percent:.2f}%",
            f"• Delivery %: {delivery_percent:.1f}% (speculative)",
            f"• R2 Proximity: {r2_proximity:.2f}%",
            "• Social Mentions: 0",
            "",
            "⚡ Mean-reversion short candidate identified by SilentSurge.",
        ]
    )


class WhatsAppNotifier:
    """Send screener alerts to one WhatsApp number via Twilio.

    Usage::

        notifier = WhatsAppNotifier(
            account_sid="AC...",
            auth_token="...",
            from_number="whatsapp:+14155238886",
            to_number="whatsapp:+919876543210",
        )
        sent = await notifier.send("IDEA", 6.5, 18.2, 0.4)
        await notifier.aclose()
    """

    def __init__(
        self,
        account_sid: str | None = None,
        auth_token: str | None = None,
        from_number: str | None = None,
        to_number: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._account_sid = account_sid
        self._auth_token = auth_token
        self._from_number = from_number
        self._to_number = to_number
        self._client = build_http_client(transport=transport)

        logger.info(
            "WhatsAppNotifier initialized: twilio=%s",
            "configured" if self.is_configured else "not configured",
        )

    @property
    def is_configured(self) -> bool:
        return all((self._account_sid, self._auth_token, self._from_number, self._to_number))

    async def aclose(self) -> None:
        """Close the owned httpx client."""
        await self._client.aclose()

    async def send(
        self,
        ticker: str,
        change_percent: float,
        delivery_percent: float,
        r2_proximity: float,
    ) -> bool:
        """Send one alert. Returns True only when Twilio accepted the message."""
        if not self.is_configured:
            logger.debug("WhatsApp not configured, skipping alert for %s", ticker)
            return False

        body = compose_alert_message(ticker, change_percent, delivery_percent, r2_proximity)
        try:
            await self._post_message(ticker, body)
        except (NotificationError, httpx.HTTPError) as exc:
            logger.warning("WhatsApp send failed for %s: %s", ticker, exc)
            return False

        logger.info("WhatsApp alert sent for %s", ticker)
        return True

    async def _post_message(self, ticker: str, body: str) -> None:
        response = await self._client.post(
            TWILIO_MESSAGES_URL.format(account_sid=self._account_sid),
            data={"From": self._from_number, "To": self._to_number, "Body": body},
            auth=(self._account_sid or "", self._auth_token or ""),
        )
        if not response.is_success:
            raise NotificationError(
                f"Twilio returned HTTP {response.status_code}: {response.text[:200]}",
                ticker=ticker,
                source=TWILIO_SOURCE,
                http_status=response.status_code,
            )
