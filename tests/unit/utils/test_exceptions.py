"""Tests for custom exception hierarchy.

Covers:
- Inheritance: all exceptions are subclasses of DataFetchError -> Exception
- Attributes: ticker, source, http_status accessible
- Each exception can be caught by its own type and by parent type
- http_status defaults to None when not provided
"""

import pytest

from Silent_Surge.utils.exceptions import (
    DataFetchError,
    DataSourceUnavailableError,
    InsufficientDataError,
    NotificationError,
    RateLimitExceededError,
)

SUBCLASSES = [
    DataSourceUnavailableError,
    InsufficientDataError,
    RateLimitExceededError,
    NotificationError,
]


class TestDataFetchErrorBase:
    def test_is_subclass_of_exception(self) -> None:
        assert issubclass(DataFetchError, Exception)

    def test_attributes_accessible(self) -> None:
        exc = DataFetchError(
            "NSE API returned 503",
            ticker="IDEA",
            source="nse",
            http_status=503,
        )
        assert exc.ticker == "IDEA"
        assert exc.source == "nse"
        assert exc.http_status == 503
        assert str(exc) == "NSE API returned 503"

    def test_http_status_defaults_to_none(self) -> None:
        exc = DataFetchError("Quote failed", ticker="SBIN", source="yfinance")
        assert exc.http_status is None


class TestSubclasses:
    @pytest.mark.parametrize("exc_type", SUBCLASSES)
    def test_caught_as_base(self, exc_type: type[DataFetchError]) -> None:
        with pytest.raises(DataFetchError):
            raise exc_type("failure", ticker="IDEA", source="test")

    @pytest.mark.parametrize("exc_type", SUBCLASSES)
    def test_caught_as_own_type(self, exc_type: type[DataFetchError]) -> None:
        with pytest.raises(exc_type, match="failure"):
            raise exc_type("failure", ticker="IDEA", source="test")

    def test_notification_error_not_a_data_source_error(self) -> None:
        assert not issubclass(NotificationError, DataSourceUnavailableError)
