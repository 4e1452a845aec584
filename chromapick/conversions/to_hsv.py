from __future__ import annotations
from typing import Tuple
import numpy as np
from ..utils.num_utils import round_half_up


def unit_hue(r: float, g: float, b: float) -> float:
    """Hue in ``[0, 1]`` of a unit RGB color, 0 for achromatic colors."""
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c
    if delta == 0:
        return 0.0

    if max_c == r:
        h = (g - b) / delta + (6.0 if g < b else 0.0)
    elif max_c == g:
        h = (b - r) / delta + 2.0
    else:
        h = (r - g) / delta + 4.0
    return h / 6.0


def rgb_to_hue(r: int, g: int, b: int) -> int:
    """Hue (0-360) of an RGB byte triple."""
    return round_half_up(unit_hue(r / 255.0, g / 255.0, b / 255.0) * 360)


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Unrounded HSV of a unit RGB color: hue in degrees, saturation and value
    in ``[0, 1]``.
    """
    max_c = max(r, g, b)
    delta = max_c - min(r, g, b)
    s = 0.0 if max_c == 0 else delta / max_c
    return unit_hue(r, g, b) * 360, s, max_c


def rgb_to_hsv(r: int, g: int, b: int) -> Tuple[int, int, int]:
    """RGB bytes to HSV (hue 0-360, s/v 0-100)."""
    h, s, v = unit_rgb_to_hsv(r / 255.0, g / 255.0, b / 255.0)
    return round_half_up(h), round_half_up(s * 100), round_half_up(v * 100)


def hsl_to_hsv(h: int, s: int, l: int, fallback_s: int = 0) -> Tuple[int, int, int]:
    """
    HSL to HSV without going through RGB, so hue is preserved exactly.

    Black (``l == 0``) carries no saturation information, ``fallback_s`` is
    returned as the HSV saturation in that case.
    """
    s2 = s / 100.0
    l2 = l / 100.0
    t = s2 * (l2 if l2 < 0.5 else 1 - l2)
    v = l2 + t
    hsv_s = 2.0 * t / v if l2 > 0.0 else fallback_s / 100.0
    return h, round_half_up(hsv_s * 100), round_half_up(v * 100)


def np_rgb_to_hsv(rgb: np.ndarray) -> np.ndarray:
    """Vectorized :func:`rgb_to_hsv` over an ``(..., 3)`` array."""
    rgb = np.asarray(rgb, dtype=np.float64) / 255.0
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    max_c = rgb.max(axis=-1)
    min_c = rgb.min(axis=-1)
    delta = max_c - min_c

    safe_delta = np.where(delta == 0, 1.0, delta)
    h = np.select(
        [max_c == r, max_c == g],
        [(g - b) / safe_delta + np.where(g < b, 6.0, 0.0), (b - r) / safe_delta + 2.0],
        default=(r - g) / safe_delta + 4.0,
    ) / 6.0
    h = np.where(delta == 0, 0.0, h)
    s = np.where(max_c == 0, 0.0, delta / np.where(max_c == 0, 1.0, max_c))

    hsv = np.stack([h * 360, s * 100, max_c * 100], axis=-1)
    return np.floor(hsv + 0.5).astype(np.int64)
