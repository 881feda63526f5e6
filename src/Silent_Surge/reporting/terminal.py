"""Rich-based terminal output for scan reports, the universe, and settings.

Uses ``rich.console.Console`` for all output. Color scheme:
red = alert, yellow = watch, dim = filtered.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from Silent_Surge.models.scan import ScanReport
from Silent_Surge.reporting.formatters import (
    format_delivery,
    format_mention_counts,
    format_r2_proximity,
    format_signed_percent,
    status_label,
)

logger = logging.getLogger(__name__)

# Shared console instance for terminal output
console = Console()

COLOR_HEADER: str = "bold cyan"
COLOR_MUTED: str = "dim"

MAX_MENTIONS_SHOWN: int = 5


def render_scan_report(report: ScanReport, verbose: bool = False) -> None:
    """Render one scan cycle as a summary panel and a results table.

    Args:
        report: The cycle's report, stocks assumed pre-sorted.
        verbose: If True, also list the mentions found for each stock.
    """
    if report.error is not None:
        console.print(Panel(escape(report.error), title="Scan failed", style="red"))
        return

    timestamp = report.scanned_at.strftime("%Y-%m-%d %H:%M:%S UTC")
    console.print(
        Panel(
            f"Scanned: {timestamp}\n"
            f"Movers: {report.total_scanned}  |  "
            f"Benchmark: {format_signed_percent(report.benchmark_change_percent)}  |  "
            f"Alerts sent: {report.alerts_sent}",
            title="SilentSurge Scan",
            style=COLOR_HEADER,
        )
    )

    if not report.stocks:
        console.print(f"[{COLOR_MUTED}]No stocks met the pump threshold.[/{COLOR_MUTED}]")
        return

    table = Table(show_lines=False)
    table.add_column("Status")
    table.add_column("Ticker", style="bold")
    table.add_column("Price", justify="right")
    table.add_column("Change", justify="right")
    table.add_column("Mentions", justify="right")
    table.add_column("Silence", justify="right")
    table.add_column("Delivery", justify="right")
    table.add_column("R2 Prox.", justify="right")
    table.add_column("vs Index", justify="right")
    table.add_column("Alert", justify="center")

    for stock in report.stocks:
        table.add_row(
            status_label(stock.status),
            stock.ticker,
            f"{stock.price:,.2f}",
            format_signed_percent(stock.change_percent),
            format_mention_counts(stock),
            f"{stock.silence_score:.2f}",
            format_delivery(stock),
            format_r2_proximity(stock),
            format_signed_percent(stock.sector_outperformance),
            "sent" if stock.alert_sent else "",
        )

    console.print(table)

    if verbose:
        _render_mentions(report)


def _render_mentions(report: ScanReport) -> None:
    """List the first few mentions behind each stock's count."""
    for stock in report.stocks:
        if not stock.mentions:
            continue
        console.print(f"\n[bold]{stock.ticker}[/bold] mentions:")
        for mention in stock.mentions[:MAX_MENTIONS_SHOWN]:
            author = f" {mention.author}" if mention.author else ""
            label = escape(f"[{mention.platform.value}]{author}: {mention.title}")
            console.print(f"  {label}")
            if mention.url:
                console.print(f"    [{COLOR_MUTED}]{escape(mention.url)}[/{COLOR_MUTED}]")
        hidden = len(stock.mentions) - MAX_MENTIONS_SHOWN
        if hidden > 0:
            console.print(f"  [{COLOR_MUTED}]... and {hidden} more[/{COLOR_MUTED}]")


def render_universe(symbols: Sequence[str], benchmark_symbol: str) -> None:
    """Print the tracked symbols in a compact multi-column table."""
    console.print(
        f"[bold]{len(symbols)} symbols[/bold] "
        f"[{COLOR_MUTED}](benchmark {benchmark_symbol})[/{COLOR_MUTED}]"
    )
    columns = 6
    table = Table(show_header=False, box=None, padding=(0, 2))
    for _ in range(columns):
        table.add_column()
    for start in range(0, len(symbols), columns):
        row = list(symbols[start : start + columns])
        row.extend([""] * (columns - len(row)))
        table.add_row(*row)
    console.print(table)


def render_settings(settings: Mapping[str, object]) -> None:
    """Print an already-masked settings mapping as a two-column table."""
    table = Table(title="Effective Settings", show_header=False)
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    for key, value in settings.items():
        table.add_row(key, str(value))
    console.print(table)
