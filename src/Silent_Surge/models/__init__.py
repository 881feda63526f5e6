"""Pydantic v2 models, enums, and type definitions.

Re-exports all public models so consumers can import directly:
    from Silent_Surge.models import Mover, EnrichedStock, ScanReport
"""

from Silent_Surge.models.enums import Platform, SignalState, StockStatus
from Silent_Surge.models.market_data import DailyBar, Mover, PivotLevels
from Silent_Surge.models.scan import (
    DELIVERY_UNAVAILABLE,
    R2_PROXIMITY_UNAVAILABLE,
    CriteriaResult,
    EnrichedStock,
    ScanReport,
)
from Silent_Surge.models.signals import Mention, SignalResult

__all__ = [
    # Enums
    "Platform",
    "SignalState",
    "StockStatus",
    # Market data
    "DailyBar",
    "Mover",
    "PivotLevels",
    # Signals
    "Mention",
    "SignalResult",
    # Scan
    "DELIVERY_UNAVAILABLE",
    "R2_PROXIMITY_UNAVAILABLE",
    "CriteriaResult",
    "EnrichedStock",
    "ScanReport",
]
