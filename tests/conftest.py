"""Shared test fixtures for the SilentSurge test suite.

Provides realistic sample instances of the core models so tests don't
need to inline large construction blocks.
"""

import datetime

import pytest

from Silent_Surge.models import (
    DailyBar,
    EnrichedStock,
    Mention,
    Mover,
    Platform,
    ScanReport,
    StockStatus,
)


@pytest.fixture()
def sample_mover() -> Mover:
    """An NSE gainer up 6.5% on the session."""
    return Mover(
        symbol="IDEA.NS",
        name="Vodafone Idea Ltd",
        price=121.0,
        change=7.39,
        change_percent=6.5,
        volume=412_000_000,
        market_cap=8.4e11,
    )


@pytest.fixture()
def sample_prev_bar() -> DailyBar:
    """Prior session with H=110, L=90, C=100: pivot 100, R1 110, R2 120."""
    return DailyBar(
        date=datetime.date(2025, 3, 13),
        open=95.0,
        high=110.0,
        low=90.0,
        close=100.0,
        volume=1_250_000,
    )


@pytest.fixture()
def sample_mention() -> Mention:
    """A Reddit post mentioning IDEA."""
    return Mention(
        platform=Platform.REDDIT,
        title="$IDEA breaking out again?",
        url="https://www.reddit.com/r/IndianStreetBets/comments/abc123/idea/",
        author="u/trader42",
        timestamp=datetime.datetime(2025, 3, 14, 9, 45, tzinfo=datetime.UTC),
    )


@pytest.fixture()
def sample_alert_stock() -> EnrichedStock:
    """A stock that passes all four criteria."""
    return EnrichedStock(
        symbol="IDEA.NS",
        name="Vodafone Idea Ltd",
        price=121.0,
        change=7.39,
        change_percent=6.5,
        volume=412_000_000,
        total_mentions=0,
        silence_score=6.5,
        delivery_percent=18.2,
        pivot_r2=120.0,
        r2_proximity=0.83,
        near_r2=True,
        sector_outperformance=5.7,
        status=StockStatus.ALERT,
    )


@pytest.fixture()
def sample_scan_report(sample_alert_stock: EnrichedStock) -> ScanReport:
    """A completed report with a single alert."""
    return ScanReport(
        stocks=[sample_alert_stock.model_copy(update={"alert_sent": True})],
        scanned_at=datetime.datetime(2025, 3, 14, 10, 0, tzinfo=datetime.UTC),
        total_scanned=1,
        alerts_sent=1,
        benchmark_change_percent=0.8,
    )
