"""Numeric rounding shared by models, adapters and analysis."""

import math


def round2(value: float) -> float:
    """Round to two decimals with halves rounded up (``0.8333`` -> ``0.83``)."""
    return math.floor(value * 100 + 0.5) / 100
