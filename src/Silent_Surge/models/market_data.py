"""Market data models: universe movers, daily bars, and pivot levels.

Prices and percentages are plain floats, matching what the quote source
returns and what the JSON report carries.
"""

import datetime
import re

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel

_EXCHANGE_SUFFIX = re.compile(r"\.(NS|BO)$")


def ticker_from_symbol(symbol: str) -> str:
    """Strip the exchange suffix: ``"RELIANCE.NS"`` -> ``"RELIANCE"``."""
    return _EXCHANGE_SUFFIX.sub("", symbol.strip())


class Mover(BaseModel):
    """A universe equity that moved in the current session.

    Frozen because a mover is a snapshot of one scan cycle's quote.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    symbol: str
    name: str
    price: float
    change: float
    change_percent: float
    volume: int = 0
    market_cap: float = 0.0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ticker(self) -> str:
        """Bare exchange ticker: ``RELIANCE.NS`` -> ``RELIANCE``."""
        return ticker_from_symbol(self.symbol)


class DailyBar(BaseModel):
    """A single completed (or partial) daily candle."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    open: float
    high: float
    low: float
    close: float
    volume: int = 0


class PivotLevels(BaseModel):
    """Classic daily pivot levels from the prior completed session.

    ``r2_proximity`` is the absolute distance of the current price from R2
    as a percentage of R2; ``near_r2`` is set when it is within threshold.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    prev_high: float
    prev_low: float
    prev_close: float
    pivot: float
    r1: float
    r2: float
    r2_proximity: float
    near_r2: bool
