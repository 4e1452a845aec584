from __future__ import annotations
from typing import Tuple
import numpy as np
from ..utils.num_utils import round_half_up


def rgb_to_cmyk(r: int, g: int, b: int) -> Tuple[int, int, int, int]:
    """RGB bytes to CMYK (all channels 0-100). Pure black has ``c = m = y = 0``."""
    r2, g2, b2 = r / 255.0, g / 255.0, b / 255.0
    k = min(1 - r2, 1 - g2, 1 - b2)
    c = m = y = 0.0
    if k != 1.0:
        c = (1 - r2 - k) / (1 - k)
        m = (1 - g2 - k) / (1 - k)
        y = (1 - b2 - k) / (1 - k)
    return (
        round_half_up(c * 100),
        round_half_up(m * 100),
        round_half_up(y * 100),
        round_half_up(k * 100),
    )


def np_rgb_to_cmyk(rgb: np.ndarray) -> np.ndarray:
    """Vectorized :func:`rgb_to_cmyk` over an ``(..., 3)`` array, shape ``(..., 4)``."""
    unit = np.asarray(rgb, dtype=np.float64) / 255.0
    k = (1 - unit).min(axis=-1)
    black = k == 1.0
    divisor = np.where(black, 1.0, 1 - k)[..., np.newaxis]
    cmy = np.where(black[..., np.newaxis], 0.0, (1 - unit - k[..., np.newaxis]) / divisor)
    cmyk = np.concatenate([cmy, k[..., np.newaxis]], axis=-1)
    return np.floor(cmyk * 100 + 0.5).astype(np.int64)
