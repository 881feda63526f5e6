"""Business thresholds for the four screening criteria.

Defaults are the published SilentSurge rules; ``config.load_settings`` lets
each one be overridden from the environment.
"""

from typing import Final

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MIN_PUMP_PERCENT: Final[float] = 4.0
DEFAULT_MAX_DELIVERY_PERCENT: Final[float] = 30.0
DEFAULT_MAX_R2_PROXIMITY: Final[float] = 1.0
DEFAULT_MIN_SECTOR_OUTPERFORMANCE: Final[float] = 2.0
DEFAULT_MAX_MENTIONS: Final[int] = 0
DEFAULT_WATCH_MIN_CRITERIA: Final[int] = 2


class CriteriaThresholds(BaseModel):
    """Pump filter, the four criteria limits, and the watch cut-off."""

    model_config = ConfigDict(frozen=True)

    min_pump_percent: float = DEFAULT_MIN_PUMP_PERCENT
    max_delivery_percent: float = DEFAULT_MAX_DELIVERY_PERCENT
    max_r2_proximity: float = DEFAULT_MAX_R2_PROXIMITY
    min_sector_outperformance: float = DEFAULT_MIN_SECTOR_OUTPERFORMANCE
    max_mentions: int = Field(default=DEFAULT_MAX_MENTIONS, ge=0)
    watch_min_criteria: int = Field(default=DEFAULT_WATCH_MIN_CRITERIA, ge=0, le=4)
