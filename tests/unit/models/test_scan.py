"""Tests for CriteriaResult, EnrichedStock and ScanReport.

Covers:
- Criteria flag counting
- Delivery availability and sentinel defaults
- ScanReport JSON document shape (camelCase, niftyChangePercent, error)
- The failed-cycle report
"""

from __future__ import annotations

import json

import pytest

from Silent_Surge.models import (
    DELIVERY_UNAVAILABLE,
    R2_PROXIMITY_UNAVAILABLE,
    CriteriaResult,
    EnrichedStock,
    ScanReport,
    StockStatus,
)


class TestCriteriaResult:
    def test_counts_passed_flags(self) -> None:
        result = CriteriaResult(
            passes_delivery=True, passes_r2=False, passes_sector=True, passes_mentions=False
        )
        assert result.passed_count == 2
        assert not result.all_passed

    def test_all_passed(self) -> None:
        result = CriteriaResult(
            passes_delivery=True, passes_r2=True, passes_sector=True, passes_mentions=True
        )
        assert result.passed_count == 4
        assert result.all_passed


class TestEnrichedStock:
    def test_defaults_use_unavailable_sentinels(self) -> None:
        stock = EnrichedStock(
            symbol="TCS.NS", name="TCS", price=4000.0, change=200.0, change_percent=5.0
        )
        assert stock.delivery_percent == DELIVERY_UNAVAILABLE
        assert stock.r2_proximity == R2_PROXIMITY_UNAVAILABLE
        assert not stock.delivery_available
        assert stock.status == StockStatus.FILTERED
        assert stock.alert_sent is False

    def test_delivery_available(self, sample_alert_stock: EnrichedStock) -> None:
        assert sample_alert_stock.delivery_available

    def test_inherits_ticker(self, sample_alert_stock: EnrichedStock) -> None:
        assert sample_alert_stock.ticker == "IDEA"


class TestScanReport:
    def test_json_document_shape(self, sample_scan_report: ScanReport) -> None:
        doc = json.loads(sample_scan_report.to_json())

        assert set(doc) == {
            "stocks",
            "scannedAt",
            "totalScanned",
            "alertsSent",
            "niftyChangePercent",
        }
        assert doc["niftyChangePercent"] == pytest.approx(0.8)
        stock = doc["stocks"][0]
        assert stock["ticker"] == "IDEA"
        assert stock["status"] == "alert"
        assert stock["alertSent"] is True
        assert stock["silenceScore"] == pytest.approx(6.5)
        assert stock["deliveryPercent"] == pytest.approx(18.2)
        assert stock["nearR2"] is True

    def test_failed_report(self) -> None:
        report = ScanReport.failed("Quote source down")

        assert report.error == "Quote source down"
        assert report.stocks == []
        assert report.total_scanned == 0
        assert report.alerts_sent == 0
        assert report.benchmark_change_percent == 0.0

        doc = json.loads(report.to_json())
        assert doc["error"] == "Quote source down"

    def test_populate_by_field_name(self) -> None:
        report = ScanReport.model_validate(
            {"scannedAt": "2025-03-14T10:00:00Z", "niftyChangePercent": -0.4}
        )
        assert report.benchmark_change_percent == pytest.approx(-0.4)
