import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going towards positive infinity."""
    return int(math.floor(value + 0.5))


def in_bounds(value: float, lower: float, upper: float) -> bool:
    """Check ``value`` against bounds given in either order."""
    return min(lower, upper) <= value <= max(lower, upper)
