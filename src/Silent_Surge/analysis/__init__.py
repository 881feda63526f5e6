"""Screening arithmetic: pivots, derived scores, criteria and classification.

Re-exports all public functions so consumers can import directly:
    from Silent_Surge.analysis import evaluate, classify
"""

from Silent_Surge.analysis.classifier import classify
from Silent_Surge.analysis.criteria import evaluate
from Silent_Surge.analysis.pivots import NEAR_R2_THRESHOLD_PERCENT, compute_pivot_levels
from Silent_Surge.analysis.scoring import sector_outperformance, silence_score
from Silent_Surge.analysis.thresholds import CriteriaThresholds

__all__ = [
    # Pivots
    "NEAR_R2_THRESHOLD_PERCENT",
    "compute_pivot_levels",
    # Scoring
    "sector_outperformance",
    "silence_score",
    # Criteria
    "CriteriaThresholds",
    "classify",
    "evaluate",
]
