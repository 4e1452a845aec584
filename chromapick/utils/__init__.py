from .num_utils import round_half_up, in_bounds
from .signal import Signal

__all__ = [
    "round_half_up",
    "in_bounds",
    "Signal",
]
