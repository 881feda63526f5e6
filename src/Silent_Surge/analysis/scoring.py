"""Derived per-stock metrics: silence score and sector outperformance."""

from Silent_Surge.utils.rounding import round2


def silence_score(change_percent: float, total_mentions: int) -> float:
    """Score a move by how quiet social media is about it.

    ``round2(change_percent / (1 + total_mentions))``: larger pumps score
    higher and every extra mention pulls the score down. The denominator
    is at least 1, so the score is always defined.

    Raises:
        ValueError: If *total_mentions* is negative.
    """
    if total_mentions < 0:
        raise ValueError(f"total_mentions must be non-negative, got {total_mentions}")
    return round2(change_percent / (1 + total_mentions))


def sector_outperformance(change_percent: float, benchmark_change_percent: float) -> float:
    """Percentage-point lead of the stock over the benchmark index."""
    return round2(change_percent - benchmark_change_percent)
