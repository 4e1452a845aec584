from __future__ import annotations
from typing import Tuple
import numpy as np
from ..utils.num_utils import round_half_up
from .to_hsv import unit_hue


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Unrounded HSL of a unit RGB color: hue in degrees, s and l in ``[0, 1]``."""
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c
    l = (max_c + min_c) / 2.0
    s = 0.0
    if delta != 0:
        s = delta / (2.0 - max_c - min_c) if l > 0.5 else delta / (max_c + min_c)
    return unit_hue(r, g, b) * 360, s, l


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[int, int, int]:
    """RGB bytes to HSL (hue 0-360, s/l 0-100)."""
    h, s, l = unit_rgb_to_hsl(r / 255.0, g / 255.0, b / 255.0)
    return round_half_up(h), round_half_up(s * 100), round_half_up(l * 100)


def hsv_to_hsl(h: int, s: int, v: int) -> Tuple[int, int, int]:
    """HSV to HSL without going through RGB, hue is copied unchanged."""
    s2 = s / 100.0
    v2 = v / 100.0
    l = (2.0 - s2) * v2 / 2.0
    if l == 0.0 or l == 1.0:
        hsl_s = 0.0
    elif l < 0.5:
        hsl_s = s2 * v2 / (l * 2.0)
    else:
        hsl_s = s2 * v2 / (2.0 - l * 2.0)
    return h, round_half_up(hsl_s * 100.0), round_half_up(l * 100.0)


def np_rgb_to_hsl(rgb: np.ndarray) -> np.ndarray:
    """Vectorized :func:`rgb_to_hsl` over an ``(..., 3)`` array."""
    rgb = np.asarray(rgb, dtype=np.float64) / 255.0
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    max_c = rgb.max(axis=-1)
    min_c = rgb.min(axis=-1)
    delta = max_c - min_c
    l = (max_c + min_c) / 2.0

    chromatic = delta != 0
    safe_delta = np.where(chromatic, delta, 1.0)
    denominator = np.where(l > 0.5, 2.0 - max_c - min_c, max_c + min_c)
    s = np.where(chromatic, delta / np.where(denominator == 0, 1.0, denominator), 0.0)
    h = np.select(
        [max_c == r, max_c == g],
        [(g - b) / safe_delta + np.where(g < b, 6.0, 0.0), (b - r) / safe_delta + 2.0],
        default=(r - g) / safe_delta + 4.0,
    ) / 6.0
    h = np.where(chromatic, h, 0.0)

    hsl = np.stack([h * 360, s * 100, l * 100], axis=-1)
    return np.floor(hsl + 0.5).astype(np.int64)
