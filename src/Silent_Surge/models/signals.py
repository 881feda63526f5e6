"""Signal models: social mentions and the tagged adapter result type."""

from __future__ import annotations

import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator

from Silent_Surge.models.enums import Platform, SignalState

T = TypeVar("T")

MAX_MENTION_TITLE_LENGTH: int = 200


class Mention(BaseModel):
    """One social-media post referencing a ticker, linking to the original."""

    model_config = ConfigDict(frozen=True)

    platform: Platform
    title: str
    url: str
    author: str | None = None
    timestamp: datetime.datetime | None = None

    @field_validator("title")
    @classmethod
    def truncate_title(cls, value: str) -> str:
        """Keep titles short enough for a table cell or a message line."""
        return value[:MAX_MENTION_TITLE_LENGTH]


class SignalResult(BaseModel, Generic[T]):
    """Result of one signal adapter call.

    Adapters never raise. They return ``ok`` with data, ``empty`` when the
    source answered with nothing (or is not configured), or ``unavailable``
    when the source failed. Callers read the data through ``value_or`` so
    the neutral default is chosen at the call site, not by convention.
    """

    model_config = ConfigDict(frozen=True)

    state: SignalState
    source: str
    value: T | None = None
    detail: str = ""

    @classmethod
    def ok(cls, value: T, *, source: str) -> SignalResult[T]:
        return cls(state=SignalState.OK, source=source, value=value)

    @classmethod
    def empty(cls, *, source: str, detail: str = "") -> SignalResult[T]:
        return cls(state=SignalState.EMPTY, source=source, detail=detail)

    @classmethod
    def unavailable(cls, *, source: str, detail: str = "") -> SignalResult[T]:
        return cls(state=SignalState.UNAVAILABLE, source=source, detail=detail)

    @property
    def is_ok(self) -> bool:
        return self.state == SignalState.OK

    def value_or(self, default: T) -> T:
        """Return the carried value, or *default* for empty/unavailable results."""
        if self.state == SignalState.OK and self.value is not None:
            return self.value
        return default
