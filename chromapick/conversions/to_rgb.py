from __future__ import annotations
from typing import Tuple
import numpy as np
from ..utils.num_utils import round_half_up


def _unit_to_byte(r: float, g: float, b: float) -> Tuple[int, int, int]:
    return round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255)


def _np_unit_to_byte(arr: np.ndarray) -> np.ndarray:
    return np.floor(arr * 255 + 0.5).astype(np.int64)


def hue_to_rgb(p: float, q: float, t: float) -> float:
    """Single channel of the HSL -> RGB conversion."""
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def hsv_to_unit_rgb(h: int, s: int, v: int) -> Tuple[float, float, float]:
    h2 = h / 360.0
    s2 = s / 100.0
    v2 = v / 100.0
    if s2 == 0.0:
        return v2, v2, v2

    i = int(h2 * 6)
    f = h2 * 6 - i
    p = v2 * (1 - s2)
    q = v2 * (1 - f * s2)
    t = v2 * (1 - (1 - f) * s2)
    i %= 6
    if i == 0:
        return v2, t, p
    if i == 1:
        return q, v2, p
    if i == 2:
        return p, v2, t
    if i == 3:
        return p, q, v2
    if i == 4:
        return t, p, v2
    return v2, p, q


def hsl_to_unit_rgb(h: int, s: int, l: int) -> Tuple[float, float, float]:
    h2 = h / 360.0
    s2 = s / 100.0
    l2 = l / 100.0
    if s2 == 0.0:
        # achromatic
        return l2, l2, l2

    q = l2 * (1 + s2) if l2 < 0.5 else l2 + s2 - l2 * s2
    p = 2 * l2 - q
    return (
        hue_to_rgb(p, q, h2 + 1.0 / 3.0),
        hue_to_rgb(p, q, h2),
        hue_to_rgb(p, q, h2 - 1.0 / 3.0),
    )


def hsv_to_rgb(h: int, s: int, v: int) -> Tuple[int, int, int]:
    """HSV (hue 0-360, s/v 0-100) to RGB bytes."""
    return _unit_to_byte(*hsv_to_unit_rgb(h, s, v))


def hsl_to_rgb(h: int, s: int, l: int) -> Tuple[int, int, int]:
    """HSL (hue 0-360, s/l 0-100) to RGB bytes."""
    return _unit_to_byte(*hsl_to_unit_rgb(h, s, l))


def hwb_to_rgb(h: int, w: int, b: int) -> Tuple[int, int, int]:
    """
    HWB to RGB bytes.

    The pure hue is taken from HSL(h, 100, 50) quantized to bytes, then mixed
    with white and black. When ``w + b`` exceeds 100 both are scaled down so
    that they sum to 100.
    """
    base_r, base_g, base_b = hsl_to_rgb(h, 100, 50)
    w2 = w / 100.0
    b2 = b / 100.0
    total = w2 + b2
    if total > 1:
        w2 /= total
        b2 /= total

    scale = 1 - w2 - b2
    return _unit_to_byte(
        base_r / 255.0 * scale + w2,
        base_g / 255.0 * scale + w2,
        base_b / 255.0 * scale + w2,
    )


def cmyk_to_rgb(c: int, m: int, y: int, k: int) -> Tuple[int, int, int]:
    """CMYK (all channels 0-100) to RGB bytes."""
    c2, m2, y2, k2 = c / 100.0, m / 100.0, y / 100.0, k / 100.0
    return _unit_to_byte(
        1 - min(1.0, c2 * (1 - k2) + k2),
        1 - min(1.0, m2 * (1 - k2) + k2),
        1 - min(1.0, y2 * (1 - k2) + k2),
    )


def np_hsv_to_rgb(hsv: np.ndarray) -> np.ndarray:
    """Vectorized :func:`hsv_to_rgb` over an ``(..., 3)`` array."""
    hsv = np.asarray(hsv, dtype=np.float64)
    h = hsv[..., 0] / 360.0
    s = hsv[..., 1] / 100.0
    v = hsv[..., 2] / 100.0

    i = np.floor(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)
    i = i.astype(np.int64) % 6

    conditions = [i == 0, i == 1, i == 2, i == 3, i == 4, i == 5]
    r = np.select(conditions, [v, q, p, p, t, v])
    g = np.select(conditions, [t, v, v, q, p, p])
    b = np.select(conditions, [p, p, t, v, v, q])

    grey = s == 0
    r = np.where(grey, v, r)
    g = np.where(grey, v, g)
    b = np.where(grey, v, b)
    return _np_unit_to_byte(np.stack([r, g, b], axis=-1))


def _np_hue_to_rgb(p: np.ndarray, q: np.ndarray, t: np.ndarray) -> np.ndarray:
    t = np.where(t < 0.0, t + 1.0, t)
    t = np.where(t > 1.0, t - 1.0, t)
    return np.select(
        [t < 1.0 / 6.0, t < 1.0 / 2.0, t < 2.0 / 3.0],
        [p + (q - p) * 6.0 * t, q, p + (q - p) * (2.0 / 3.0 - t) * 6.0],
        default=p,
    )


def np_hsl_to_rgb(hsl: np.ndarray) -> np.ndarray:
    """Vectorized :func:`hsl_to_rgb` over an ``(..., 3)`` array."""
    hsl = np.asarray(hsl, dtype=np.float64)
    h = hsl[..., 0] / 360.0
    s = hsl[..., 1] / 100.0
    l = hsl[..., 2] / 100.0

    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q
    r = _np_hue_to_rgb(p, q, h + 1.0 / 3.0)
    g = _np_hue_to_rgb(p, q, h)
    b = _np_hue_to_rgb(p, q, h - 1.0 / 3.0)

    grey = s == 0
    r = np.where(grey, l, r)
    g = np.where(grey, l, g)
    b = np.where(grey, l, b)
    return _np_unit_to_byte(np.stack([r, g, b], axis=-1))


def np_hwb_to_rgb(hwb: np.ndarray) -> np.ndarray:
    """Vectorized :func:`hwb_to_rgb` over an ``(..., 3)`` array."""
    hwb = np.asarray(hwb, dtype=np.float64)
    pure = np.stack([hwb[..., 0], np.full(hwb.shape[:-1], 100.0), np.full(hwb.shape[:-1], 50.0)], axis=-1)
    base = np_hsl_to_rgb(pure) / 255.0

    w = hwb[..., 1] / 100.0
    b = hwb[..., 2] / 100.0
    total = w + b
    over = total > 1
    w = np.where(over, w / np.where(over, total, 1.0), w)
    b = np.where(over, b / np.where(over, total, 1.0), b)

    scale = (1 - w - b)[..., np.newaxis]
    return _np_unit_to_byte(base * scale + w[..., np.newaxis])


def np_cmyk_to_rgb(cmyk: np.ndarray) -> np.ndarray:
    """Vectorized :func:`cmyk_to_rgb` over an ``(..., 4)`` array."""
    unit = np.asarray(cmyk, dtype=np.float64) / 100.0
    cmy = unit[..., :3]
    k = unit[..., 3:4]
    return _np_unit_to_byte(1 - np.minimum(1.0, cmy * (1 - k) + k))
