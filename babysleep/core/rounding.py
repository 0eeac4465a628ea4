"""
Rounding helpers.

Python's built-in :func:`round` rounds halves to even.  Durations and
averages are rounded half away from zero instead, so that 44.5 minutes
reads as 45.
"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def round_to_tenth(value: float) -> float:
    """Round to one decimal place, halves away from zero."""
    return round_half_up(value * 10) / 10
