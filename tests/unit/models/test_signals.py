"""Tests for Mention and the tagged SignalResult."""

from __future__ import annotations

import pytest

from Silent_Surge.models import Mention, Platform, SignalResult, SignalState
from Silent_Surge.models.signals import MAX_MENTION_TITLE_LENGTH


class TestMention:
    def test_long_title_is_truncated(self) -> None:
        mention = Mention(platform=Platform.TELEGRAM, title="x" * 500, url="https://t.me/a/1")
        assert len(mention.title) == MAX_MENTION_TITLE_LENGTH

    def test_optional_fields_default_to_none(self) -> None:
        mention = Mention(platform=Platform.TWITTER, title="hi", url="https://x.com/i/status/1")
        assert mention.author is None
        assert mention.timestamp is None


class TestSignalResult:
    def test_ok_carries_value(self) -> None:
        result: SignalResult[float] = SignalResult.ok(22.5, source="nse")
        assert result.state == SignalState.OK
        assert result.is_ok
        assert result.value_or(-1.0) == pytest.approx(22.5)

    def test_empty_falls_back_to_default(self) -> None:
        result: SignalResult[list[Mention]] = SignalResult.empty(source="reddit")
        assert result.state == SignalState.EMPTY
        assert not result.is_ok
        assert result.value_or([]) == []

    def test_unavailable_keeps_detail(self) -> None:
        result: SignalResult[float] = SignalResult.unavailable(source="nse", detail="HTTP 503")
        assert result.state == SignalState.UNAVAILABLE
        assert result.detail == "HTTP 503"
        assert result.value_or(-1.0) == pytest.approx(-1.0)

    def test_ok_with_falsy_value_is_returned(self) -> None:
        result: SignalResult[float] = SignalResult.ok(0.0, source="yfinance")
        assert result.value_or(99.0) == pytest.approx(0.0)
