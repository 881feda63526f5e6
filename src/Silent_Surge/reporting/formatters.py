"""Shared formatting utilities for terminal reports.

All functions accept typed models or plain numbers from
``Silent_Surge.models`` and return display strings; none of them print.
"""

from __future__ import annotations

import logging

from Silent_Surge.models.enums import StockStatus
from Silent_Surge.models.scan import EnrichedStock

logger = logging.getLogger(__name__)

NOT_AVAILABLE: str = "N/A"

# --- Status colors ---
STATUS_COLORS: dict[StockStatus, str] = {
    StockStatus.ALERT: "bold red",
    StockStatus.WATCH: "yellow",
    StockStatus.FILTERED: "dim",
}


def format_signed_percent(value: float) -> str:
    """``4.5`` -> ``"+4.50%"``, ``-0.3`` -> ``"-0.30%"``."""
    return f"{value:+.2f}%"


def format_delivery(stock: EnrichedStock) -> str:
    """Delivery percentage with one decimal, or N/A when it could not be fetched."""
    if not stock.delivery_available:
        return NOT_AVAILABLE
    return f"{stock.delivery_percent:.1f}%"


def format_r2_proximity(stock: EnrichedStock) -> str:
    """Distance from R2, flagged with ``*`` when within the near threshold."""
    if stock.r2_proximity < 0:
        return NOT_AVAILABLE
    marker = " *" if stock.near_r2 else ""
    return f"{stock.r2_proximity:.2f}%{marker}"


def format_mention_counts(stock: EnrichedStock) -> str:
    """Compact per-platform breakdown: ``"3 (X:1 R:2 T:0)"``."""
    return (
        f"{stock.total_mentions} "
        f"(X:{stock.twitter_mentions} R:{stock.reddit_mentions} T:{stock.telegram_mentions})"
    )


def status_label(status: StockStatus) -> str:
    """Status wrapped in its rich color markup."""
    color = STATUS_COLORS[status]
    return f"[{color}]{status.value.upper()}[/{color}]"
