"""Numeric helpers shared by the scorers."""
from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity.

    Python's round() uses banker's rounding (round(70.5) == 70); score
    rounding always takes .5 upward instead.
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_score(value: float) -> int:
    """Round half-up and clamp to the [0, 100] score range."""
    return int(clamp(round_half_up(value), 0, 100))
