"""Numeric helpers shared by the analyzers."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +infinity (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def growth_pct(latest: int, prev: int) -> int:
    """Year-over-year growth in percent; 100 when starting from zero, 0 when both are zero."""
    if prev > 0:
        return round_half_up((latest - prev) / prev * 100)
    return 100 if latest > 0 else 0
