"""Environment-driven screener configuration.

Every tunable (criteria thresholds, universe, credentials, timeouts) is read
from environment variables once per process and validated into frozen
pydantic models. Missing credentials are not an error: the adapter or
notifier that needs them simply reports an empty result.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from Silent_Surge.analysis.thresholds import (
    DEFAULT_MAX_DELIVERY_PERCENT,
    DEFAULT_MAX_MENTIONS,
    DEFAULT_MAX_R2_PROXIMITY,
    DEFAULT_MIN_PUMP_PERCENT,
    DEFAULT_MIN_SECTOR_OUTPERFORMANCE,
    DEFAULT_WATCH_MIN_CRITERIA,
    CriteriaThresholds,
)
from Silent_Surge.services.universe import NIFTY_50_SYMBOL, NIFTY_200_SYMBOLS

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_SCAN_TIMEOUT_SECONDS: Final[float] = 60.0
DEFAULT_QUOTE_BATCH_SIZE: Final[int] = 50
DEFAULT_ENRICH_CONCURRENCY: Final[int] = 10
DEFAULT_REDDIT_USER_AGENT: Final[str] = "SilentSurge/1.0 (stock screener)"
DEFAULT_REDDIT_SUBREDDIT: Final[str] = "IndianStreetBets"

# Sample .env files ship these; treat them as unset.
_PLACEHOLDER_PREFIX: Final[str] = "your_"

__all__ = [
    "DEFAULT_ENRICH_CONCURRENCY",
    "DEFAULT_MAX_DELIVERY_PERCENT",
    "DEFAULT_MAX_MENTIONS",
    "DEFAULT_MAX_R2_PROXIMITY",
    "DEFAULT_MIN_PUMP_PERCENT",
    "DEFAULT_MIN_SECTOR_OUTPERFORMANCE",
    "DEFAULT_QUOTE_BATCH_SIZE",
    "DEFAULT_SCAN_TIMEOUT_SECONDS",
    "DEFAULT_WATCH_MIN_CRITERIA",
    "CriteriaThresholds",
    "RedditSettings",
    "ScreenerSettings",
    "TwilioCredentials",
    "TwitterCredentials",
    "load_settings",
]


class TwitterCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    bearer_token: str | None = None
    trusted_user_ids: tuple[str, ...] = ()


class RedditSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_agent: str = DEFAULT_REDDIT_USER_AGENT
    subreddit: str = DEFAULT_REDDIT_SUBREDDIT


class TwilioCredentials(BaseModel):
    """Twilio WhatsApp channel. All four values are needed to send."""

    model_config = ConfigDict(frozen=True)

    account_sid: str | None = None
    auth_token: str | None = None
    from_number: str | None = None
    to_number: str | None = None

    @property
    def is_configured(self) -> bool:
        return all((self.account_sid, self.auth_token, self.from_number, self.to_number))


class ScreenerSettings(BaseModel):
    """Effective configuration for one screener process."""

    model_config = ConfigDict(frozen=True)

    thresholds: CriteriaThresholds = Field(default_factory=CriteriaThresholds)
    universe: tuple[str, ...] = tuple(NIFTY_200_SYMBOLS)
    benchmark_symbol: str = NIFTY_50_SYMBOL
    twitter: TwitterCredentials = Field(default_factory=TwitterCredentials)
    reddit: RedditSettings = Field(default_factory=RedditSettings)
    telegram_bot_token: str | None = None
    twilio: TwilioCredentials = Field(default_factory=TwilioCredentials)
    scan_timeout_seconds: float = Field(default=DEFAULT_SCAN_TIMEOUT_SECONDS, gt=0)
    quote_batch_size: int = Field(default=DEFAULT_QUOTE_BATCH_SIZE, gt=0)
    enrich_concurrency: int = Field(default=DEFAULT_ENRICH_CONCURRENCY, gt=0)

    def masked(self) -> dict[str, object]:  # dict-ok: display only
        """Return a flat view of the settings with credentials hidden."""
        secret = "configured"
        missing = "not configured"
        return {
            **self.thresholds.model_dump(),
            "universe_size": len(self.universe),
            "benchmark_symbol": self.benchmark_symbol,
            "twitter": secret if self.twitter.bearer_token else missing,
            "twitter_trusted_ids": len(self.twitter.trusted_user_ids),
            "reddit_subreddit": self.reddit.subreddit,
            "telegram": secret if self.telegram_bot_token else missing,
            "whatsapp": secret if self.twilio.is_configured else missing,
            "scan_timeout_seconds": self.scan_timeout_seconds,
            "quote_batch_size": self.quote_batch_size,
            "enrich_concurrency": self.enrich_concurrency,
        }


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def load_settings(env: Mapping[str, str] | None = None) -> ScreenerSettings:
    """Build settings from *env* (defaults to ``os.environ``).

    Unparseable or out-of-range numeric values fall back to their defaults
    with a warning.
    """
    source = os.environ if env is None else env

    thresholds = CriteriaThresholds(
        min_pump_percent=_float(source, "MIN_PUMP_PERCENT", DEFAULT_MIN_PUMP_PERCENT),
        max_delivery_percent=_float(source, "MAX_DELIVERY_PERCENT", DEFAULT_MAX_DELIVERY_PERCENT),
        max_r2_proximity=_float(source, "MAX_R2_PROXIMITY", DEFAULT_MAX_R2_PROXIMITY),
        min_sector_outperformance=_float(
            source, "MIN_SECTOR_OUTPERFORMANCE", DEFAULT_MIN_SECTOR_OUTPERFORMANCE
        ),
        max_mentions=_int(source, "MAX_MENTIONS", DEFAULT_MAX_MENTIONS, minimum=0),
        watch_min_criteria=_int(
            source, "WATCH_MIN_CRITERIA", DEFAULT_WATCH_MIN_CRITERIA, minimum=0, maximum=4
        ),
    )

    universe = _csv(source.get("UNIVERSE_SYMBOLS", ""))
    trusted_ids = _csv(source.get("TWITTER_TRUSTED_USER_IDS", ""))

    settings = ScreenerSettings(
        thresholds=thresholds,
        universe=tuple(universe) if universe else tuple(NIFTY_200_SYMBOLS),
        benchmark_symbol=source.get("BENCHMARK_SYMBOL", "").strip() or NIFTY_50_SYMBOL,
        twitter=TwitterCredentials(
            bearer_token=_secret(source, "TWITTER_BEARER_TOKEN"),
            trusted_user_ids=tuple(trusted_ids),
        ),
        reddit=RedditSettings(
            user_agent=source.get("REDDIT_USER_AGENT", "").strip() or DEFAULT_REDDIT_USER_AGENT,
            subreddit=source.get("REDDIT_SUBREDDIT", "").strip() or DEFAULT_REDDIT_SUBREDDIT,
        ),
        telegram_bot_token=_secret(source, "TELEGRAM_BOT_TOKEN"),
        twilio=TwilioCredentials(
            account_sid=_secret(source, "TWILIO_ACCOUNT_SID"),
            auth_token=_secret(source, "TWILIO_AUTH_TOKEN"),
            from_number=_secret(source, "TWILIO_WHATSAPP_FROM"),
            to_number=_secret(source, "WHATSAPP_TO"),
        ),
        scan_timeout_seconds=_float(
            source, "SCAN_TIMEOUT_SECONDS", DEFAULT_SCAN_TIMEOUT_SECONDS, positive=True
        ),
        quote_batch_size=_int(source, "QUOTE_BATCH_SIZE", DEFAULT_QUOTE_BATCH_SIZE, minimum=1),
        enrich_concurrency=_int(
            source, "ENRICH_CONCURRENCY", DEFAULT_ENRICH_CONCURRENCY, minimum=1
        ),
    )

    logger.debug(
        "Settings loaded: universe=%d symbols, thresholds=%s",
        len(settings.universe),
        settings.thresholds.model_dump(),
    )
    return settings


def _secret(source: Mapping[str, str], key: str) -> str | None:
    """Return a credential, or None when it is missing or a placeholder."""
    value = source.get(key, "").strip()
    if not value or value.startswith(_PLACEHOLDER_PREFIX):
        return None
    return value


def _csv(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def _float(
    source: Mapping[str, str], key: str, default: float, *, positive: bool = False
) -> float:
    raw = source.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using default %s", key, raw, default)
        return default
    if positive and not value > 0:
        logger.warning("%s=%r must be positive, using default %s", key, raw, default)
        return default
    return value


def _int(
    source: Mapping[str, str],
    key: str,
    default: int,
    *,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int:
    raw = source.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using default %s", key, raw, default)
        return default
    if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
        logger.warning("%s=%r out of range, using default %s", key, raw, default)
        return default
    return value
