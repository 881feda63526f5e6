"""Scan models: per-stock criteria, enriched stocks, and the scan report.

JSON output uses camelCase field names (``model_dump(by_alias=True)``),
which is the document shape dashboard consumers read.
"""

import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from Silent_Surge.models.enums import StockStatus
from Silent_Surge.models.market_data import Mover
from Silent_Surge.models.signals import Mention

DELIVERY_UNAVAILABLE: float = -1.0
R2_PROXIMITY_UNAVAILABLE: float = -1.0


class CriteriaResult(BaseModel):
    """Pass/fail outcome of the four screening criteria for one stock."""

    model_config = ConfigDict(frozen=True)

    passes_delivery: bool
    passes_r2: bool
    passes_sector: bool
    passes_mentions: bool

    @property
    def flags(self) -> tuple[bool, bool, bool, bool]:
        return (self.passes_delivery, self.passes_r2, self.passes_sector, self.passes_mentions)

    @property
    def passed_count(self) -> int:
        """Number of criteria that passed (0-4)."""
        return sum(self.flags)

    @property
    def all_passed(self) -> bool:
        return all(self.flags)


class EnrichedStock(Mover):
    """A mover with its aggregated signals and final classification.

    Frozen; a new instance is built every scan cycle.
    """

    twitter_mentions: int = 0
    reddit_mentions: int = 0
    telegram_mentions: int = 0
    total_mentions: int = 0
    silence_score: float = 0.0
    mentions: list[Mention] = Field(default_factory=list)
    delivery_percent: float = DELIVERY_UNAVAILABLE
    pivot_r2: float = 0.0
    r2_proximity: float = R2_PROXIMITY_UNAVAILABLE
    near_r2: bool = False
    sector_outperformance: float = 0.0
    status: StockStatus = StockStatus.FILTERED
    alert_sent: bool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def delivery_available(self) -> bool:
        return self.delivery_percent >= 0


class ScanReport(BaseModel):
    """Full result of one scan cycle.

    A whole-cycle failure is expressed through ``error`` with an empty
    stock list and zero counts, never through an exception.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    stocks: list[EnrichedStock] = Field(default_factory=list)
    scanned_at: datetime.datetime
    total_scanned: int = 0
    alerts_sent: int = 0
    benchmark_change_percent: float = Field(default=0.0, alias="niftyChangePercent")
    error: str | None = None

    @classmethod
    def failed(cls, message: str) -> "ScanReport":
        """Build the report returned when a whole cycle fails."""
        return cls(
            stocks=[],
            scanned_at=datetime.datetime.now(datetime.UTC),
            total_scanned=0,
            alerts_sent=0,
            benchmark_change_percent=0.0,
            error=message,
        )

    def to_json(self, *, indent: int | None = 2) -> str:
        """Serialize with camelCase keys, omitting ``error`` when unset."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
