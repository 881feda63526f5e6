"""Tests for Rich-based terminal output rendering.

Validates that render_scan_report, render_universe and render_settings
produce the expected content. Uses a captured Rich Console to inspect
output.
"""

from __future__ import annotations

import datetime
import re
from io import StringIO
from unittest.mock import patch

from rich.console import Console

from Silent_Surge.models import EnrichedStock, Mention, Platform, ScanReport
from Silent_Surge.reporting.terminal import (
    render_scan_report,
    render_settings,
    render_universe,
)

# Regex to strip ANSI escape codes from Rich output
_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def _strip_ansi(text: str) -> str:
    return _ANSI_ESCAPE.sub("", text)


def _make_captured_console() -> Console:
    """Create a Console that captures output to a StringIO buffer."""
    return Console(file=StringIO(), force_terminal=True, width=160)


def _output(console: Console) -> str:
    return _strip_ansi(console.file.getvalue())  # type: ignore[attr-defined]


class TestRenderScanReport:
    def test_summary_and_row(self, sample_scan_report: ScanReport) -> None:
        captured = _make_captured_console()
        with patch("Silent_Surge.reporting.terminal.console", captured):
            render_scan_report(sample_scan_report)
        output = _output(captured)

        assert "SilentSurge Scan" in output
        assert "2025-03-14 10:00:00 UTC" in output
        assert "Benchmark: +0.80%" in output
        assert "Alerts sent: 1" in output
        assert "IDEA" in output
        assert "ALERT" in output
        assert "+6.50%" in output
        assert "18.2%" in output
        assert "sent" in output

    def test_error_panel(self) -> None:
        captured = _make_captured_console()
        with patch("Silent_Surge.reporting.terminal.console", captured):
            render_scan_report(ScanReport.failed("Scan timed out after 120s"))
        output = _output(captured)

        assert "Scan failed" in output
        assert "Scan timed out after 120s" in output
        assert "Status" not in output

    def test_error_with_brackets_not_treated_as_markup(self) -> None:
        captured = _make_captured_console()
        with patch("Silent_Surge.reporting.terminal.console", captured):
            render_scan_report(ScanReport.failed("upstream said [bold]no[/bold]"))

        assert "[bold]no[/bold]" in _output(captured)

    def test_empty_report(self) -> None:
        report = ScanReport(scanned_at=datetime.datetime(2025, 3, 14, 10, 0, tzinfo=datetime.UTC))
        captured = _make_captured_console()
        with patch("Silent_Surge.reporting.terminal.console", captured):
            render_scan_report(report)

        assert "No stocks met the pump threshold." in _output(captured)

    def test_verbose_lists_mentions(
        self, sample_alert_stock: EnrichedStock, sample_mention: Mention
    ) -> None:
        tweets = [
            Mention(platform=Platform.TWITTER, title=f"tweet {i}", url=f"https://x.com/i/{i}")
            for i in range(6)
        ]
        stock = sample_alert_stock.model_copy(update={"mentions": [sample_mention, *tweets]})
        report = ScanReport(
            stocks=[stock],
            scanned_at=datetime.datetime(2025, 3, 14, 10, 0, tzinfo=datetime.UTC),
            total_scanned=1,
        )
        captured = _make_captured_console()
        with patch("Silent_Surge.reporting.terminal.console", captured):
            render_scan_report(report, verbose=True)
        output = _output(captured)

        assert "IDEA mentions:" in output
        assert "[reddit] u/trader42: $IDEA breaking out again?" in output
        assert "... and 2 more" in output

    def test_not_verbose_hides_mentions(
        self, sample_alert_stock: EnrichedStock, sample_mention: Mention
    ) -> None:
        stock = sample_alert_stock.model_copy(update={"mentions": [sample_mention]})
        report = ScanReport(
            stocks=[stock],
            scanned_at=datetime.datetime(2025, 3, 14, 10, 0, tzinfo=datetime.UTC),
        )
        captured = _make_captured_console()
        with patch("Silent_Surge.reporting.terminal.console", captured):
            render_scan_report(report)

        assert "mentions:" not in _output(captured)


class TestRenderUniverse:
    def test_lists_symbols_and_count(self) -> None:
        captured = _make_captured_console()
        with patch("Silent_Surge.reporting.terminal.console", captured):
            render_universe(["RELIANCE.NS", "TCS.NS", "IDEA.NS"], "^NSEI")
        output = _output(captured)

        assert "3 symbols" in output
        assert "^NSEI" in output
        assert "RELIANCE.NS" in output
        assert "IDEA.NS" in output


class TestRenderSettings:
    def test_rows_printed(self) -> None:
        captured = _make_captured_console()
        with patch("Silent_Surge.reporting.terminal.console", captured):
            render_settings({"min_pump_percent": 4.0, "twilio_auth_token": "****"})
        output = _output(captured)

        assert "Effective Settings" in output
        assert "min_pump_percent" in output
        assert "****" in output
