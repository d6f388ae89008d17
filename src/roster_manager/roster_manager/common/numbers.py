from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round like JavaScript's Math.round (halves go up), not banker's rounding."""
    return int(math.floor(value + 0.5))


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def percentage(part: int, whole: int) -> int:
    """Integer percentage in [0, 100]; 0 when ``whole`` is not positive."""
    if whole <= 0:
        return 0
    return clamp(round_half_up(part / whole * 100), 0, 100)
