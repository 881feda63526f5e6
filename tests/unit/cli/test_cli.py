"""Tests for the CLI entry point (typer app).

Validates that typer subcommands are registered, that scan and watch
emit reports and exit codes correctly, and that the universe and config
commands render. The screening pipeline is always mocked.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from Silent_Surge.cli import _watch_async, app
from Silent_Surge.config import ScreenerSettings
from Silent_Surge.models import ScanReport
from Silent_Surge.screening import AlertSession

runner = CliRunner()


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Commands reconfigure the root logger; restore it between tests."""
    root = logging.getLogger()
    original_level = root.level
    original_handlers = root.handlers[:]
    yield
    root.setLevel(original_level)
    root.handlers = original_handlers


class FakePipeline:
    """Async context manager standing in for ScreeningPipeline."""

    def __init__(self, reports: list[ScanReport]) -> None:
        self._reports = list(reports)
        self.runs = 0
        self.closed = False

    async def __aenter__(self) -> FakePipeline:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.closed = True

    async def run_with_timeout(self) -> ScanReport:
        self.runs += 1
        return self._reports[min(self.runs, len(self._reports)) - 1]


# ---------------------------------------------------------------------------
# Command registration
# ---------------------------------------------------------------------------


class TestCommandRegistration:
    @pytest.mark.parametrize("command", ["scan", "watch", "universe", "config"])
    def test_command_help(self, command: str) -> None:
        result = runner.invoke(app, [command, "--help"])
        assert result.exit_code == 0

    def test_root_help_lists_commands(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("scan", "watch", "universe", "config"):
            assert command in result.output


# ---------------------------------------------------------------------------
# scan
# ---------------------------------------------------------------------------


class TestScanCommand:
    def test_json_output(self, sample_scan_report: ScanReport) -> None:
        with patch(
            "Silent_Surge.cli._scan_async",
            new_callable=AsyncMock,
            return_value=sample_scan_report,
        ):
            result = runner.invoke(app, ["scan", "--json", "--quiet"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["alertsSent"] == 1
        assert payload["niftyChangePercent"] == pytest.approx(0.8)
        assert payload["stocks"][0]["ticker"] == "IDEA"
        assert "error" not in payload

    def test_table_output(self, sample_scan_report: ScanReport) -> None:
        with patch(
            "Silent_Surge.cli._scan_async",
            new_callable=AsyncMock,
            return_value=sample_scan_report,
        ):
            result = runner.invoke(app, ["scan", "--quiet"])

        assert result.exit_code == 0
        assert "IDEA" in result.stdout

    def test_failed_cycle_exits_nonzero(self) -> None:
        with patch(
            "Silent_Surge.cli._scan_async",
            new_callable=AsyncMock,
            return_value=ScanReport.failed("Scan timed out after 120s"),
        ):
            result = runner.invoke(app, ["scan", "--json", "--quiet"])

        assert result.exit_code == 1
        assert json.loads(result.stdout)["error"] == "Scan timed out after 120s"

    def test_pipeline_built_from_settings(self, sample_scan_report: ScanReport) -> None:
        fake = FakePipeline([sample_scan_report])
        with patch(
            "Silent_Surge.cli.ScreeningPipeline.from_settings", return_value=fake
        ) as from_settings:
            result = runner.invoke(app, ["scan", "--json", "--quiet"])

        assert result.exit_code == 0
        assert isinstance(from_settings.call_args.args[0], ScreenerSettings)
        assert fake.runs == 1
        assert fake.closed is True


# ---------------------------------------------------------------------------
# watch
# ---------------------------------------------------------------------------


class TestWatch:
    @pytest.mark.asyncio()
    async def test_runs_cycles_with_one_session(self, sample_scan_report: ScanReport) -> None:
        fake = FakePipeline([sample_scan_report])
        with (
            patch(
                "Silent_Surge.cli.ScreeningPipeline.from_settings", return_value=fake
            ) as from_settings,
            patch("Silent_Surge.cli.asyncio.sleep", new_callable=AsyncMock) as mock_sleep,
            patch("Silent_Surge.cli._emit_report") as mock_emit,
        ):
            completed = await _watch_async(
                ScreenerSettings(),
                interval=5,
                cycles=3,
                json_output=True,
                verbose=False,
            )

        assert completed == 3
        assert fake.runs == 3
        assert fake.closed is True
        assert mock_emit.call_count == 3
        assert mock_sleep.await_count == 2
        mock_sleep.assert_awaited_with(5)

        from_settings.assert_called_once()
        assert isinstance(from_settings.call_args.args[1], AlertSession)

    def test_command_json(self, sample_scan_report: ScanReport) -> None:
        fake = FakePipeline([sample_scan_report])
        with patch("Silent_Surge.cli.ScreeningPipeline.from_settings", return_value=fake):
            result = runner.invoke(app, ["watch", "--cycles", "1", "--json", "--quiet"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["totalScanned"] == 1

    def test_rejects_zero_interval(self) -> None:
        result = runner.invoke(app, ["watch", "--interval", "0"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# universe / config
# ---------------------------------------------------------------------------


class TestUniverseCommand:
    def test_lists_configured_universe(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UNIVERSE_SYMBOLS", "IDEA.NS,SUZLON.NS")
        result = runner.invoke(app, ["universe"])

        assert result.exit_code == 0
        assert "2 symbols" in result.stdout
        assert "SUZLON.NS" in result.stdout


class TestConfigCommand:
    def test_masks_credentials(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TWITTER_BEARER_TOKEN", "AAAA-very-secret")
        result = runner.invoke(app, ["config"])

        assert result.exit_code == 0
        assert "AAAA-very-secret" not in result.stdout
        assert "configured" in result.stdout
        assert "min_pump_percent" in result.stdout
