"""Scan orchestration and alert dispatch.

Re-exports the public screening classes so consumers can import directly:
    from Silent_Surge.screening import ScreeningPipeline, AlertSession
"""

from Silent_Surge.screening.dispatcher import AlertDispatcher, AlertNotifier
from Silent_Surge.screening.pipeline import ScreeningPipeline, sort_stocks
from Silent_Surge.screening.session import AlertSession

__all__ = [
    "AlertDispatcher",
    "AlertNotifier",
    "AlertSession",
    "ScreeningPipeline",
    "sort_stocks",
]
