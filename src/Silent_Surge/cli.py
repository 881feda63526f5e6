"""CLI entry point for SilentSurge, the NSE silent-surge screener.

Provides the ``silent-surge`` command with subcommands for a single scan,
a repeating watch loop, and inspecting the universe and settings.

This is the ONLY module that writes to stdout directly. All other modules
use ``logging`` or the ``reporting`` renderers. Async internals are bridged
to typer's synchronous interface via ``asyncio.run()``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated

import typer
from rich.console import Console

from Silent_Surge.config import ScreenerSettings, load_settings
from Silent_Surge.logging_config import configure_logging
from Silent_Surge.models.scan import ScanReport
from Silent_Surge.reporting.terminal import render_scan_report, render_settings, render_universe
from Silent_Surge.screening import AlertSession, ScreeningPipeline

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Typer app
# ---------------------------------------------------------------------------

app = typer.Typer(
    name="silent-surge",
    help="Screen NSE movers for surges that social media has not noticed",
)

# Rich console for formatted output
console = Console()

DEFAULT_WATCH_INTERVAL_SECONDS: int = 60


# ---------------------------------------------------------------------------
# scan command
# ---------------------------------------------------------------------------


@app.command()
def scan(
    json_output: Annotated[
        bool, typer.Option("--json", help="Print the scan report as JSON")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Suppress info logging")] = False,
) -> None:
    """Run one scan cycle over the universe and print the results."""
    configure_logging(verbose=verbose, quiet=quiet)
    settings = load_settings()

    report = asyncio.run(_scan_async(settings))
    _emit_report(report, json_output=json_output, verbose=verbose)

    if report.error is not None:
        raise typer.Exit(code=1)


async def _scan_async(settings: ScreenerSettings) -> ScanReport:
    async with ScreeningPipeline.from_settings(settings) as pipeline:
        return await pipeline.run_with_timeout()


# ---------------------------------------------------------------------------
# watch command
# ---------------------------------------------------------------------------


@app.command()
def watch(
    interval: Annotated[
        int, typer.Option(min=1, help="Seconds to wait between scan cycles")
    ] = DEFAULT_WATCH_INTERVAL_SECONDS,
    cycles: Annotated[
        int | None, typer.Option(min=1, help="Stop after this many cycles (default: forever)")
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Print each scan report as JSON")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Suppress info logging")] = False,
) -> None:
    """Scan repeatedly, alerting on each ticker at most once per run."""
    configure_logging(verbose=verbose, quiet=quiet)
    settings = load_settings()

    try:
        completed = asyncio.run(
            _watch_async(
                settings,
                interval=interval,
                cycles=cycles,
                json_output=json_output,
                verbose=verbose,
            )
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]Watch stopped.[/yellow]")
        return

    logger.info("Watch finished after %d cycles", completed)


async def _watch_async(
    settings: ScreenerSettings,
    *,
    interval: int,
    cycles: int | None,
    json_output: bool,
    verbose: bool,
) -> int:
    """Run scan cycles until *cycles* is reached. Returns the cycle count."""
    session = AlertSession()
    completed = 0

    async with ScreeningPipeline.from_settings(settings, session) as pipeline:
        while cycles is None or completed < cycles:
            report = await pipeline.run_with_timeout()
            completed += 1
            _emit_report(report, json_output=json_output, verbose=verbose)
            logger.info(
                "Cycle %d done, %d tickers alerted this session", completed, len(session)
            )

            if cycles is not None and completed >= cycles:
                break
            await asyncio.sleep(interval)

    return completed


# ---------------------------------------------------------------------------
# universe / config commands
# ---------------------------------------------------------------------------


@app.command()
def universe() -> None:
    """List the symbols the screener quotes each cycle."""
    settings = load_settings()
    render_universe(settings.universe, settings.benchmark_symbol)


@app.command("config")
def show_config() -> None:
    """Show the effective settings with credentials masked."""
    settings = load_settings()
    render_settings(settings.masked())


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _emit_report(report: ScanReport, *, json_output: bool, verbose: bool) -> None:
    if json_output:
        typer.echo(report.to_json())
    else:
        render_scan_report(report, verbose=verbose)
