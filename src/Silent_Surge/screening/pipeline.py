"""Screening pipeline: one scan cycle from universe quotes to a ScanReport.

Phases:
    1. Fetch the universe movers and the benchmark change concurrently.
    2. For every mover, concurrently query the five signal adapters
       (Twitter, Reddit, Telegram, delivery, pivots). At most
       ``enrich_concurrency`` movers are enriched at once.
    3. Aggregate mentions, derive scores, evaluate the criteria and
       classify; alerts go through the deduplicating dispatcher.
    4. Sort alerts first, then by silence score, and build the report.

Adapters never raise, so one failing source degrades only its own field.
Only a failure to quote the universe at all fails the whole cycle, and that
is reported through ``ScanReport.error`` rather than an exception.
"""

from __future__ import annotations

import asyncio
import datetime
import logging
import time
from types import TracebackType

from Silent_Surge.analysis import classify, evaluate, sector_outperformance, silence_score
from Silent_Surge.config import ScreenerSettings
from Silent_Surge.models.enums import StockStatus
from Silent_Surge.models.market_data import Mover
from Silent_Surge.models.scan import (
    DELIVERY_UNAVAILABLE,
    R2_PROXIMITY_UNAVAILABLE,
    EnrichedStock,
    ScanReport,
)
from Silent_Surge.models.signals import Mention
from Silent_Surge.screening.dispatcher import AlertDispatcher
from Silent_Surge.screening.session import AlertSession
from Silent_Surge.services import (
    DeliveryService,
    MarketDataService,
    PivotService,
    RateLimiter,
    RedditMentionService,
    TelegramMentionService,
    TwitterMentionService,
    WhatsAppNotifier,
)

logger = logging.getLogger(__name__)


class ScreeningPipeline:
    """Run scan cycles over injected services.

    Usage::

        session = AlertSession()
        async with ScreeningPipeline.from_settings(settings, session) as pipeline:
            report = await pipeline.run_with_timeout()
    """

    def __init__(
        self,
        *,
        settings: ScreenerSettings,
        market: MarketDataService,
        twitter: TwitterMentionService,
        reddit: RedditMentionService,
        telegram: TelegramMentionService,
        delivery: DeliveryService,
        pivots: PivotService,
        dispatcher: AlertDispatcher,
    ) -> None:
        self._settings = settings
        self._market = market
        self._twitter = twitter
        self._reddit = reddit
        self._telegram = telegram
        self._delivery = delivery
        self._pivots = pivots
        self._dispatcher = dispatcher

    @classmethod
    def from_settings(
        cls,
        settings: ScreenerSettings,
        session: AlertSession | None = None,
    ) -> ScreeningPipeline:
        """Build a pipeline with live services configured from *settings*.

        Pass the same *session* to every pipeline in a process so alerts
        stay deduplicated across cycles.
        """
        notifier = WhatsAppNotifier(
            account_sid=settings.twilio.account_sid,
            auth_token=settings.twilio.auth_token,
            from_number=settings.twilio.from_number,
            to_number=settings.twilio.to_number,
        )
        return cls(
            settings=settings,
            market=MarketDataService(
                RateLimiter(),
                symbols=settings.universe,
                benchmark_symbol=settings.benchmark_symbol,
                batch_size=settings.quote_batch_size,
            ),
            twitter=TwitterMentionService(
                settings.twitter.bearer_token,
                settings.twitter.trusted_user_ids,
            ),
            reddit=RedditMentionService(
                settings.reddit.user_agent,
                settings.reddit.subreddit,
            ),
            telegram=TelegramMentionService(settings.telegram_bot_token),
            delivery=DeliveryService(),
            pivots=PivotService(near_threshold=settings.thresholds.max_r2_proximity),
            dispatcher=AlertDispatcher(
                notifier, session if session is not None else AlertSession()
            ),
        )

    async def __aenter__(self) -> ScreeningPipeline:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close every HTTP client owned by the services."""
        await asyncio.gather(
            self._twitter.aclose(),
            self._reddit.aclose(),
            self._telegram.aclose(),
            self._delivery.aclose(),
            self._dispatcher.aclose(),
        )

    # ------------------------------------------------------------------
    # Cycle
    # ------------------------------------------------------------------

    async def run_with_timeout(self, timeout_seconds: float | None = None) -> ScanReport:
        """Run one cycle bounded by *timeout_seconds* (settings default).

        A cycle that overruns is abandoned and reported as an error.
        """
        timeout = timeout_seconds
        if timeout is None:
            timeout = self._settings.scan_timeout_seconds
        try:
            return await asyncio.wait_for(self.run(), timeout=timeout)
        except TimeoutError:
            message = f"Scan timed out after {timeout:g}s"
            logger.error(message)
            return ScanReport.failed(message)

    async def run(self) -> ScanReport:
        """Run one full scan cycle. Never raises."""
        started = time.monotonic()
        try:
            report = await self._scan()
        except Exception as exc:  # noqa: BLE001
            logger.error("Scan cycle failed: %s", exc, exc_info=True)
            return ScanReport.failed(str(exc) or type(exc).__name__)

        by_status = {status: 0 for status in StockStatus}
        for stock in report.stocks:
            by_status[stock.status] += 1
        logger.info(
            "Scan complete: %d movers (%d alert, %d watch, %d filtered), "
            "%d alerts sent, benchmark %+.2f%%, %.1fs",
            report.total_scanned,
            by_status[StockStatus.ALERT],
            by_status[StockStatus.WATCH],
            by_status[StockStatus.FILTERED],
            report.alerts_sent,
            report.benchmark_change_percent,
            time.monotonic() - started,
        )
        return report

    async def _scan(self) -> ScanReport:
        thresholds = self._settings.thresholds
        movers, benchmark_result = await asyncio.gather(
            self._market.fetch_movers(thresholds.min_pump_percent),
            self._market.fetch_benchmark_change(),
        )
        benchmark = benchmark_result.value_or(0.0)

        if not movers:
            logger.info("No movers above %.2f%%", thresholds.min_pump_percent)
            return ScanReport(
                stocks=[],
                scanned_at=datetime.datetime.now(datetime.UTC),
                total_scanned=0,
                alerts_sent=0,
                benchmark_change_percent=benchmark,
            )

        semaphore = asyncio.Semaphore(self._settings.enrich_concurrency)
        stocks = await asyncio.gather(
            *(self._enrich_limited(mover, benchmark, semaphore) for mover in movers)
        )
        ordered = sort_stocks(list(stocks))

        return ScanReport(
            stocks=ordered,
            scanned_at=datetime.datetime.now(datetime.UTC),
            total_scanned=len(movers),
            alerts_sent=sum(1 for stock in ordered if stock.alert_sent),
            benchmark_change_percent=benchmark,
        )

    async def _enrich_limited(
        self, mover: Mover, benchmark_change_percent: float, semaphore: asyncio.Semaphore
    ) -> EnrichedStock:
        async with semaphore:
            return await self._enrich(mover, benchmark_change_percent)

    async def _enrich(self, mover: Mover, benchmark_change_percent: float) -> EnrichedStock:
        """Gather every signal for one mover and classify it."""
        ticker = mover.ticker
        twitter, reddit, telegram, delivery, pivots = await asyncio.gather(
            self._twitter.fetch_signal(ticker),
            self._reddit.fetch_signal(ticker),
            self._telegram.fetch_signal(ticker),
            self._delivery.fetch_signal(ticker),
            self._pivots.fetch_signal(mover.symbol, mover.price),
        )

        twitter_mentions: list[Mention] = twitter.value_or([])
        reddit_mentions: list[Mention] = reddit.value_or([])
        telegram_mentions: list[Mention] = telegram.value_or([])
        total_mentions = len(twitter_mentions) + len(reddit_mentions) + len(telegram_mentions)

        delivery_percent = delivery.value_or(DELIVERY_UNAVAILABLE)
        levels = pivots.value if pivots.is_ok else None
        near_r2 = levels.near_r2 if levels is not None else False

        thresholds = self._settings.thresholds
        criteria = evaluate(
            delivery_percent=delivery_percent,
            near_r2=near_r2,
            change_percent=mover.change_percent,
            benchmark_change_percent=benchmark_change_percent,
            total_mentions=total_mentions,
            thresholds=thresholds,
        )
        status = classify(criteria, thresholds.watch_min_criteria)

        stock = EnrichedStock(
            **mover.model_dump(exclude={"ticker"}),
            twitter_mentions=len(twitter_mentions),
            reddit_mentions=len(reddit_mentions),
            telegram_mentions=len(telegram_mentions),
            total_mentions=total_mentions,
            silence_score=silence_score(mover.change_percent, total_mentions),
            mentions=[*twitter_mentions, *reddit_mentions, *telegram_mentions],
            delivery_percent=delivery_percent,
            pivot_r2=levels.r2 if levels is not None else 0.0,
            r2_proximity=levels.r2_proximity if levels is not None else R2_PROXIMITY_UNAVAILABLE,
            near_r2=near_r2,
            sector_outperformance=sector_outperformance(
                mover.change_percent, benchmark_change_percent
            ),
            status=status,
        )

        if status == StockStatus.ALERT and await self._dispatcher.maybe_dispatch(stock):
            stock = stock.model_copy(update={"alert_sent": True})
        return stock


def sort_stocks(stocks: list[EnrichedStock]) -> list[EnrichedStock]:
    """Alerts first, then watch, then filtered; quietest surge first within each."""
    return sorted(stocks, key=lambda s: (s.status.priority, -s.silence_score))
