"""Shared constants and random-number helpers."""

import random
import sys

INFINITY = sys.float_info.max
PI = 3.1415926535897932385


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * PI / 180.0


def random_double() -> float:
    """Return a random real in [0, 1)."""
    return random.random()


def random_double_range(min_value: float, max_value: float) -> float:
    """Return a random real in [min_value, max_value)."""
    if not min_value < max_value:
        raise ValueError("cannot sample an empty range")
    value = min_value + (max_value - min_value) * random.random()
    # Rounding can land exactly on the upper bound; keep the range half-open.
    return value if value < max_value else min_value