from __future__ import annotations
from typing import Tuple
import numpy as np
from ..utils.num_utils import round_half_up
from .to_hsv import unit_hue, np_rgb_to_hsv


def rgb_to_hwb(r: int, g: int, b: int) -> Tuple[int, int, int]:
    """RGB bytes to HWB (hue 0-360, whiteness/blackness 0-100)."""
    r2, g2, b2 = r / 255.0, g / 255.0, b / 255.0
    return (
        round_half_up(unit_hue(r2, g2, b2) * 360),
        round_half_up(min(r2, g2, b2) * 100),
        round_half_up((1 - max(r2, g2, b2)) * 100),
    )


def np_rgb_to_hwb(rgb: np.ndarray) -> np.ndarray:
    """Vectorized :func:`rgb_to_hwb` over an ``(..., 3)`` array."""
    rgb = np.asarray(rgb, dtype=np.float64)
    hue = np_rgb_to_hsv(rgb)[..., 0]
    unit = rgb / 255.0
    white = np.floor(unit.min(axis=-1) * 100 + 0.5)
    black = np.floor((1 - unit.max(axis=-1)) * 100 + 0.5)
    return np.stack([hue, white.astype(np.int64), black.astype(np.int64)], axis=-1)
