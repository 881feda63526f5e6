"""Tests for evaluate(): the four screening criteria and their boundaries."""

from __future__ import annotations

from typing import Any

import pytest

from Silent_Surge.analysis import CriteriaThresholds, evaluate
from Silent_Surge.models import CriteriaResult


def _evaluate(**overrides: Any) -> CriteriaResult:
    params: dict[str, Any] = {
        "delivery_percent": 18.0,
        "near_r2": True,
        "change_percent": 6.5,
        "benchmark_change_percent": 0.8,
        "total_mentions": 0,
    }
    params.update(overrides)
    return evaluate(**params)


class TestDeliveryCriterion:
    @pytest.mark.parametrize(
        ("delivery", "expected"),
        [(0.0, True), (29.99, True), (30.0, False), (55.0, False), (-1.0, False)],
    )
    def test_boundaries(self, delivery: float, expected: bool) -> None:
        assert _evaluate(delivery_percent=delivery).passes_delivery is expected


class TestR2Criterion:
    def test_follows_near_flag(self) -> None:
        assert _evaluate(near_r2=True).passes_r2 is True
        assert _evaluate(near_r2=False).passes_r2 is False


class TestSectorCriterion:
    def test_exactly_two_points_passes(self) -> None:
        assert _evaluate(change_percent=4.0, benchmark_change_percent=2.0).passes_sector

    def test_just_below_two_points_fails(self) -> None:
        assert not _evaluate(change_percent=4.0, benchmark_change_percent=2.01).passes_sector

    def test_uses_rounded_outperformance(self) -> None:
        # 4.3 - 2.3 is 1.9999999999999996 before rounding
        assert _evaluate(change_percent=4.3, benchmark_change_percent=2.3).passes_sector


class TestMentionsCriterion:
    def test_zero_mentions_passes(self) -> None:
        assert _evaluate(total_mentions=0).passes_mentions

    def test_any_mention_fails(self) -> None:
        assert not _evaluate(total_mentions=1).passes_mentions


class TestThresholds:
    def test_custom_thresholds(self) -> None:
        thresholds = CriteriaThresholds(
            max_delivery_percent=50.0, min_sector_outperformance=1.0, max_mentions=2
        )
        result = _evaluate(
            delivery_percent=45.0,
            change_percent=4.0,
            benchmark_change_percent=3.0,
            total_mentions=2,
            thresholds=thresholds,
        )
        assert result.all_passed

    def test_all_pass_with_defaults(self) -> None:
        assert _evaluate().all_passed
