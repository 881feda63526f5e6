"""Twitter (X) mention adapter.

Searches recent tweets for ``$TICKER`` or ``#TICKER`` through the v2
recent-search endpoint, optionally restricted to a list of trusted finance
accounts. Without a bearer token the adapter is inert and always returns an
empty result.
"""

from __future__ import annotations

import datetime
import logging
from typing import Final

import httpx

from Silent_Surge.models.enums import Platform
from Silent_Surge.models.signals import Mention, SignalResult
from Silent_Surge.services._helpers import build_http_client
from Silent_Surge.utils.exceptions import (
    DataFetchError,
    DataSourceUnavailableError,
    RateLimitExceededError,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

TWITTER_SOURCE: Final[str] = "twitter"
TWITTER_SEARCH_URL: Final[str] = "https://api.twitter.com/2/tweets/search/recent"
TWITTER_MAX_RESULTS: Final[int] = 10
TWEET_URL_TEMPLATE: Final[str] = "https://x.com/i/status/{tweet_id}"


class TwitterMentionService:
    """Find recent tweets mentioning a ticker.

    Usage::

        twitter = TwitterMentionService(bearer_token="...", trusted_user_ids=["123"])
        result = await twitter.fetch_signal("RELIANCE")
        mentions = result.value_or([])
        await twitter.aclose()
    """

    def __init__(
        self,
        bearer_token: str | None = None,
        trusted_user_ids: tuple[str, ...] | list[str] = (),
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._bearer_token = bearer_token
        self._trusted_user_ids = tuple(uid for uid in trusted_user_ids if uid)
        self._client = build_http_client(transport=transport)

        logger.info(
            "TwitterMentionService initialized: token=%s, trusted_accounts=%d",
            "configured" if bearer_token else "not configured",
            len(self._trusted_user_ids),
        )

    @property
    def is_configured(self) -> bool:
        return bool(self._bearer_token)

    async def aclose(self) -> None:
        """Close the owned httpx client."""
        await self._client.aclose()

    async def fetch_signal(self, ticker: str) -> SignalResult[list[Mention]]:
        """Return recent tweets mentioning *ticker*. Never raises."""
        if not self.is_configured:
            return SignalResult.empty(source=TWITTER_SOURCE, detail="not configured")

        try:
            mentions = await self._search(ticker)
        except (DataFetchError, httpx.HTTPError, ValueError) as exc:
            logger.warning("Twitter search failed for %s: %s", ticker, exc)
            return SignalResult.unavailable(source=TWITTER_SOURCE, detail=str(exc))

        if not mentions:
            return SignalResult.empty(source=TWITTER_SOURCE)
        return SignalResult.ok(mentions, source=TWITTER_SOURCE)

    def build_query(self, ticker: str) -> str:
        """Build the search query: cashtag or hashtag, no retweets, English."""
        query = f"(${ticker} OR #{ticker})"
        if self._trusted_user_ids:
            accounts = " OR ".join(f"from:{uid}" for uid in self._trusted_user_ids)
            query += f" ({accounts})"
        return f"{query} -is:retweet lang:en"

    async def _search(self, ticker: str) -> list[Mention]:
        params: dict[str, str] = {
            "query": self.build_query(ticker),
            "max_results": str(TWITTER_MAX_RESULTS),
            "tweet.fields": "created_at,author_id,text",
        }
        response = await self._client.get(
            TWITTER_SEARCH_URL,
            params=params,
            headers={"Authorization": f"Bearer {self._bearer_token}"},
        )

        if response.status_code == 429:  # noqa: PLR2004
            raise RateLimitExceededError(
                "Twitter rate limit hit",
                ticker=ticker,
                source=TWITTER_SOURCE,
                http_status=429,
            )
        if response.status_code != 200:  # noqa: PLR2004
            raise DataSourceUnavailableError(
                f"Twitter returned HTTP {response.status_code}",
                ticker=ticker,
                source=TWITTER_SOURCE,
                http_status=response.status_code,
            )

        payload = response.json()
        if not isinstance(payload, dict):
            raise DataSourceUnavailableError(
                "Malformed Twitter payload", ticker=ticker, source=TWITTER_SOURCE
            )
        tweets = payload.get("data") or []

        mentions: list[Mention] = []
        for tweet in tweets:
            if not isinstance(tweet, dict):
                continue
            tweet_id = tweet.get("id")
            if not tweet_id:
                continue
            mentions.append(
                Mention(
                    platform=Platform.TWITTER,
                    title=tweet.get("text") or "",
                    url=TWEET_URL_TEMPLATE.format(tweet_id=tweet_id),
                    author=tweet.get("author_id"),
                    timestamp=_parse_timestamp(tweet.get("created_at")),
                )
            )

        logger.debug("Twitter: %d mentions for %s", len(mentions), ticker)
        return mentions


def _parse_timestamp(raw: object) -> datetime.datetime | None:
    if not isinstance(raw, str) or not raw:
        return None
    try:
        return datetime.datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return None
