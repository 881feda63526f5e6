"""Reddit mention adapter.

Pulls the newest posts of one subreddit (r/IndianStreetBets by default) and
matches tickers against each post's title and body. The listing is shared
by every ticker in a scan, so it is fetched once and cached for two minutes.
"""

from __future__ import annotations

import asyncio
import datetime
import logging
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

REDDIT_SOURCE: Final[str] = "reddit"
REDDIT_LISTING_URL: Final[str] = "https://www.reddit.com/r/{subreddit}/new.json"
REDDIT_LISTING_LIMIT: Final[int] = 100
REDDIT_BASE_URL: Final[str] = "https://www.reddit.com"
DEFAULT_USER_AGENT: Final[str] = "SilentSurge/1.0 (stock screener)"
DEFAULT_SUBREDDIT: Final[str] = "IndianStreetBets"

_LISTING_CACHE_KEY: Final[str] = "listing"

# A listing post is the raw ``data`` dict of one child.
RedditPost = dict[str, Any]


class RedditMentionService:
    """Find recent subreddit posts mentioning a ticker.

    Usage::

        reddit = RedditMentionService(user_agent="SilentSurge/1.0")
        result = await reddit.fetch_signal("TCS")
        await reddit.aclose()
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        subreddit: str = DEFAULT_SUBREDDIT,
        *,
        cache: TTLCache[list[RedditPost]] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._subreddit = subreddit
        self._cache: TTLCache[list[RedditPost]] = (
            cache if cache is not None else TTLCache("reddit", ttl_seconds=TTL_COMMUNITY_POSTS)
        )
        # Every ticker in a scan reads the same listing; fetch it once.
        self._refresh_lock = asyncio.Lock()
        self._client = build_http_client(
            headers={"User-Agent": user_agent},
            transport=transport,
        )

        logger.info("RedditMentionService initialized: r/%s", subreddit)

    async def aclose(self) -> None:
        """Close the owned httpx client."""
        await self._client.aclose()

    async def fetch_signal(self, ticker: str) -> SignalResult[list[Mention]]:
        """Return subreddit posts mentioning *ticker*. Never raises."""
        try:
            posts = await self._fetch_posts()
        except (DataFetchError, httpx.HTTPError, ValueError) as exc:
            logger.warning("Reddit fetch failed: %s", exc)
            return SignalResult.unavailable(source=REDDIT_SOURCE, detail=str(exc))

        pattern = ticker_pattern(ticker)
        mentions: list[Mention] = []
        for post in posts:
            title = str(post.get("title") or "")
            text = f"{title} {post.get('selftext') or ''}"
            if not pattern.search(text):
                continue
            mentions.append(_post_to_mention(post, title))

        logger.debug("Reddit: %d mentions for %s", len(mentions), ticker)
        if not mentions:
            return SignalResult.empty(source=REDDIT_SOURCE)
        return SignalResult.ok(mentions, source=REDDIT_SOURCE)

    async def _fetch_posts(self) -> list[RedditPost]:
        """Return the cached listing, refreshing it once the TTL has passed."""
        cached = self._cache.get(_LISTING_CACHE_KEY)
        if cached is not None:
            return cached

        async with self._refresh_lock:
            cached = self._cache.get(_LISTING_CACHE_KEY)
            if cached is not None:
                return cached
            return await self._refresh_posts()

    async def _refresh_posts(self) -> list[RedditPost]:
        response = await self._client.get(
            REDDIT_LISTING_URL.format(subreddit=self._subreddit),
            params={"limit": str(REDDIT_LISTING_LIMIT)},
        )
        if response.status_code != 200:  # noqa: PLR2004
            raise DataSourceUnavailableError(
                f"Reddit returned HTTP {response.status_code}",
                ticker="*",
                source=REDDIT_SOURCE,
                http_status=response.status_code,
            )

        payload = response.json()
        if not isinstance(payload, dict):
            raise DataSourceUnavailableError(
                "Malformed Reddit listing", ticker="*", source=REDDIT_SOURCE
            )
        listing = payload.get("data")
        children = listing.get("children") if isinstance(listing, dict) else None
        if not isinstance(children, list):
            raise DataSourceUnavailableError(
                "Reddit listing has no children", ticker="*", source=REDDIT_SOURCE
            )
        posts: list[RedditPost] = [
            child["data"]
            for child in children
            if isinstance(child, dict) and isinstance(child.get("data"), dict)
        ]

        self._cache.set(_LISTING_CACHE_KEY, posts)
        logger.info("Fetched %d posts from r/%s", len(posts), self._subreddit)
        return posts


def _post_to_mention(post: RedditPost, title: str) -> Mention:
    author = post.get("author")
    created = safe_float(post.get("created_utc"))
    timestamp = datetime.datetime.fromtimestamp(created, tz=datetime.UTC) if created > 0 else None
    return Mention(
        platform=Platform.REDDIT,
        title=title,
        url=f"{REDDIT_BASE_URL}{post.get('permalink') or ''}",
        author=f"u/{author}" if author else None,
        timestamp=timestamp,
    )
