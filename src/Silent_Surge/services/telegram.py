"""Telegram mention adapter.

Reads recent channel posts and messages visible to a bot through the Bot
API ``getUpdates`` call and matches tickers against message text. The update
feed is the same for every ticker, so it is cached for two minutes. Without
a bot token the adapter is inert and always returns an empty result.
"""

from __future__ import annotations

import asyncio
import datetime
import json
import logging
import re
from typing import Any, Final

import httpx

from Silent_Surge.models.enums import Platform
from Silent_Surge.models.signals import Mention, SignalResult
from Silent_Surge.services._helpers import build_http_client, safe_float, ticker_pattern
from Silent_Surge.services.cache import TTL_COMMUNITY_POSTS, TTLCache
from Silent_Surge.utils.exceptions import DataFetchError, DataSourceUnavailableError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

TELEGRAM_SOURCE: Final[str] = "telegram"
TELEGRAM_API_BASE: Final[str] = "https://api.telegram.org"
TELEGRAM_UPDATE_LIMIT: Final[int] = 100
TELEGRAM_ALLOWED_UPDATES: Final[list[str]] = ["channel_post", "message"]

_UPDATES_CACHE_KEY: Final[str] = "updates"
_PRIVATE_CHANNEL_PREFIX: Final[re.Pattern[str]] = re.compile(r"^-100")

# One ``channel_post`` or ``message`` object from an update.
TelegramMessage = dict[str, Any]


class TelegramMentionService:
    """Find recent Telegram messages mentioning a ticker.

    Usage::

        telegram = TelegramMentionService(bot_token="123:abc")
        result = await telegram.fetch_signal("INFY")
        await telegram.aclose()
    """

    def __init__(
        self,
        bot_token: str | None = None,
        *,
        cache: TTLCache[list[TelegramMessage]] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._bot_token = bot_token
        self._cache: TTLCache[list[TelegramMessage]] = (
            cache if cache is not None else TTLCache("telegram", ttl_seconds=TTL_COMMUNITY_POSTS)
        )
        self._refresh_lock = asyncio.Lock()
        self._client = build_http_client(transport=transport)

        logger.info(
            "TelegramMentionService initialized: bot_token=%s",
            "configured" if bot_token else "not configured",
        )

    @property
    def is_configured(self) -> bool:
        return bool(self._bot_token)

    async def aclose(self) -> None:
        """Close the owned httpx client."""
        await self._client.aclose()

    async def fetch_signal(self, ticker: str) -> SignalResult[list[Mention]]:
        """Return Telegram messages mentioning *ticker*. Never raises."""
        if not self.is_configured:
            return SignalResult.empty(source=TELEGRAM_SOURCE, detail="not configured")

        try:
            messages = await self._fetch_messages()
        except (DataFetchError, httpx.HTTPError, ValueError) as exc:
            # The token is part of the URL; keep it out of the log line.
            logger.warning("Telegram fetch failed: %s", type(exc).__name__)
            return SignalResult.unavailable(source=TELEGRAM_SOURCE, detail=type(exc).__name__)

        pattern = ticker_pattern(ticker)
        mentions = [
            _message_to_mention(msg) for msg in messages if pattern.search(str(msg.get("text")))
        ]

        logger.debug("Telegram: %d mentions for %s", len(mentions), ticker)
        if not mentions:
            return SignalResult.empty(source=TELEGRAM_SOURCE)
        return SignalResult.ok(mentions, source=TELEGRAM_SOURCE)

    async def _fetch_messages(self) -> list[TelegramMessage]:
        cached = self._cache.get(_UPDATES_CACHE_KEY)
        if cached is not None:
            return cached

        async with self._refresh_lock:
            cached = self._cache.get(_UPDATES_CACHE_KEY)
            if cached is not None:
                return cached
            messages = await self._get_updates()
            self._cache.set(_UPDATES_CACHE_KEY, messages)
            return messages

    async def _get_updates(self) -> list[TelegramMessage]:
        url = f"{TELEGRAM_API_BASE}/bot{self._bot_token}/getUpdates"
        response = await self._client.get(
            url,
            params={
                "limit": str(TELEGRAM_UPDATE_LIMIT),
                "allowed_updates": json.dumps(TELEGRAM_ALLOWED_UPDATES),
            },
        )
        if response.status_code != 200:  # noqa: PLR2004
            raise DataSourceUnavailableError(
                f"Telegram returned HTTP {response.status_code}",
                ticker="*",
                source=TELEGRAM_SOURCE,
                http_status=response.status_code,
            )

        payload = response.json()
        if not isinstance(payload, dict) or not payload.get("ok"):
            raise DataSourceUnavailableError(
                "Telegram getUpdates was not ok", ticker="*", source=TELEGRAM_SOURCE
            )

        messages: list[TelegramMessage] = []
        for update in payload.get("result") or []:
            if not isinstance(update, dict):
                continue
            msg = update.get("channel_post") or update.get("message")
            if isinstance(msg, dict) and msg.get("text"):
                messages.append(msg)

        logger.info("Fetched %d Telegram messages", len(messages))
        return messages


def message_url(msg: TelegramMessage) -> str:
    """Link to a message: public ``t.me/<username>/<id>`` or private ``t.me/c/<id>/<id>``."""
    chat = msg.get("chat") or {}
    message_id = msg.get("message_id")
    if chat.get("username"):
        return f"https://t.me/{chat['username']}/{message_id}"
    if chat.get("id"):
        channel_id = _PRIVATE_CHANNEL_PREFIX.sub("", str(chat["id"]))
        return f"https://t.me/c/{channel_id}/{message_id}"
    return ""


def _message_to_mention(msg: TelegramMessage) -> Mention:
    chat = msg.get("chat") or {}
    sender = msg.get("from") or {}
    if sender.get("username"):
        author: str | None = f"@{sender['username']}"
    else:
        author = sender.get("first_name") or chat.get("title")

    sent_at = safe_float(msg.get("date"))
    return Mention(
        platform=Platform.TELEGRAM,
        title=str(msg.get("text") or ""),
        url=message_url(msg),
        author=author,
        timestamp=(
            datetime.datetime.fromtimestamp(sent_at, tz=datetime.UTC) if sent_at > 0 else None
        ),
    )
