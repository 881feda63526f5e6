"""Tests for Mover, DailyBar, PivotLevels and ticker_from_symbol.

Covers:
- Exchange suffix stripping
- Mover computed ticker and camelCase serialization
- Frozen models reject mutation
"""

from __future__ import annotations

import pydantic
import pytest

from Silent_Surge.models import DailyBar, Mover, PivotLevels
from Silent_Surge.models.market_data import ticker_from_symbol


class TestTickerFromSymbol:
    @pytest.mark.parametrize(
        ("symbol", "expected"),
        [
            ("RELIANCE.NS", "RELIANCE"),
            ("TATAMOTORS.BO", "TATAMOTORS"),
            ("M&M.NS", "M&M"),
            ("INFY", "INFY"),
            ("  TCS.NS ", "TCS"),
        ],
    )
    def test_strips_exchange_suffix(self, symbol: str, expected: str) -> None:
        assert ticker_from_symbol(symbol) == expected

    def test_only_trailing_suffix_is_removed(self) -> None:
        assert ticker_from_symbol("NSLNISP.NS") == "NSLNISP"


class TestMover:
    def test_ticker_is_computed(self, sample_mover: Mover) -> None:
        assert sample_mover.ticker == "IDEA"

    def test_serializes_camel_case(self, sample_mover: Mover) -> None:
        data = sample_mover.model_dump(by_alias=True)
        assert data["changePercent"] == pytest.approx(6.5)
        assert data["marketCap"] == pytest.approx(8.4e11)
        assert data["ticker"] == "IDEA"

    def test_accepts_aliases(self) -> None:
        mover = Mover.model_validate(
            {"symbol": "TCS.NS", "name": "TCS", "price": 4000.0, "change": 160.0,
             "changePercent": 4.17}
        )
        assert mover.change_percent == pytest.approx(4.17)
        assert mover.volume == 0

    def test_frozen(self, sample_mover: Mover) -> None:
        with pytest.raises(pydantic.ValidationError):
            sample_mover.price = 1.0  # type: ignore[misc]


class TestDailyBar:
    def test_fields(self, sample_prev_bar: DailyBar) -> None:
        assert sample_prev_bar.high == pytest.approx(110.0)
        assert sample_prev_bar.low == pytest.approx(90.0)
        assert sample_prev_bar.close == pytest.approx(100.0)


class TestPivotLevels:
    def test_camel_case_dump(self) -> None:
        levels = PivotLevels(
            prev_high=110.0,
            prev_low=90.0,
            prev_close=100.0,
            pivot=100.0,
            r1=110.0,
            r2=120.0,
            r2_proximity=0.83,
            near_r2=True,
        )
        data = levels.model_dump(by_alias=True)
        assert data["r2Proximity"] == pytest.approx(0.83)
        assert data["nearR2"] is True
