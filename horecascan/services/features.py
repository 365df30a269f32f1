# horecascan/services/features.py

import math
from typing import Optional


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """
    Round .5 away from zero for positive values (2.5 -> 3).
    Python's round() is banker's rounding (2.5 -> 2), which shifts band edges.
    """
    return int(math.floor(value + 0.5))


def normalize_rating(rating: Optional[float], max_rating: float = 10) -> float:
    """1-10 style rating -> 0-100. Missing rating is the neutral midpoint."""
    if rating is None:
        return 50.0
    return clamp(rating / max_rating * 100, 0, 100)
