from __future__ import annotations
from typing import Callable, Dict, Sequence, Tuple, Union
import numpy as np

from ..types.color_types import ColorModel
from .to_rgb import (
    hsv_to_rgb, hsl_to_rgb, hwb_to_rgb, cmyk_to_rgb,
    np_hsv_to_rgb, np_hsl_to_rgb, np_hwb_to_rgb, np_cmyk_to_rgb,
)
from .to_hsv import rgb_to_hsv, hsl_to_hsv, np_rgb_to_hsv
from .to_hsl import rgb_to_hsl, hsv_to_hsl, np_rgb_to_hsl
from .to_hwb import rgb_to_hwb, np_rgb_to_hwb
from .to_cmyk import rgb_to_cmyk, np_rgb_to_cmyk
from .hexadecimal import rgba_to_hex, parse_hex

ModelLike = Union[str, ColorModel]
ColorInput = Union[Sequence[int], str]

TO_RGB: Dict[ColorModel, Callable[..., Tuple[int, int, int]]] = {
    ColorModel.HSV: hsv_to_rgb,
    ColorModel.HSL: hsl_to_rgb,
    ColorModel.HWB: hwb_to_rgb,
    ColorModel.CMYK: cmyk_to_rgb,
}

FROM_RGB: Dict[ColorModel, Callable[..., Tuple[int, ...]]] = {
    ColorModel.HSV: rgb_to_hsv,
    ColorModel.HSL: rgb_to_hsl,
    ColorModel.HWB: rgb_to_hwb,
    ColorModel.CMYK: rgb_to_cmyk,
}

# HSV <-> HSL skip RGB so that hue survives unchanged
CONVERT_DIRECT: Dict[Tuple[ColorModel, ColorModel], Callable[..., Tuple[int, int, int]]] = {
    (ColorModel.HSV, ColorModel.HSL): hsv_to_hsl,
    (ColorModel.HSL, ColorModel.HSV): hsl_to_hsv,
}

NP_TO_RGB: Dict[ColorModel, Callable[[np.ndarray], np.ndarray]] = {
    ColorModel.HSV: np_hsv_to_rgb,
    ColorModel.HSL: np_hsl_to_rgb,
    ColorModel.HWB: np_hwb_to_rgb,
    ColorModel.CMYK: np_cmyk_to_rgb,
}

NP_FROM_RGB: Dict[ColorModel, Callable[[np.ndarray], np.ndarray]] = {
    ColorModel.HSV: np_rgb_to_hsv,
    ColorModel.HSL: np_rgb_to_hsl,
    ColorModel.HWB: np_rgb_to_hwb,
    ColorModel.CMYK: np_rgb_to_cmyk,
}


def _to_rgba(color: ColorInput, model: ColorModel) -> Tuple[Tuple[int, int, int], Union[int, None]]:
    if model == ColorModel.HEX:
        r, g, b, a = parse_hex(str(color))
        return (r, g, b), a
    values = tuple(color)
    if model == ColorModel.RGBA:
        alpha = values[3] if len(values) > 3 else None
        return (values[0], values[1], values[2]), alpha
    return TO_RGB[model](*values), None


def convert(color: ColorInput, from_model: ModelLike, to_model: ModelLike) -> ColorInput:
    """
    Convert one color between two models.

    Channel values are ints in the ranges the models declare (hue 0-360,
    percentages 0-100, bytes 0-255), hex colors are strings. Alpha is carried
    between RGBA and HEX and dropped elsewhere.

    Example::

        >>> convert((83, 140, 181), "rgb", "hsv")
        (205, 54, 71)
        >>> convert((205, 54, 71), "hsv", "hex")
        '#538CB5'
    """
    source = ColorModel.from_name(from_model)
    target = ColorModel.from_name(to_model)

    if source == target:
        return color if isinstance(color, str) else tuple(color)

    direct = CONVERT_DIRECT.get((source, target))
    if direct is not None:
        return direct(*color)

    rgb, alpha = _to_rgba(color, source)
    if target == ColorModel.RGBA:
        return rgb if alpha is None else (*rgb, alpha)
    if target == ColorModel.HEX:
        return rgba_to_hex(*rgb, a=alpha)
    return FROM_RGB[target](*rgb)


def np_convert(color: np.ndarray, from_model: ModelLike, to_model: ModelLike) -> np.ndarray:
    """Vectorized :func:`convert` for ``(..., channels)`` arrays. HEX is not supported."""
    source = ColorModel.from_name(from_model)
    target = ColorModel.from_name(to_model)
    if ColorModel.HEX in (source, target):
        raise ValueError("np_convert does not handle hex strings")

    arr = np.asarray(color)
    if source == target:
        return arr.copy()

    if source == ColorModel.RGBA:
        rgb = arr[..., :3]
    else:
        rgb = NP_TO_RGB[source](arr)
    if target == ColorModel.RGBA:
        return np.asarray(rgb, dtype=np.int64)
    return NP_FROM_RGB[target](rgb)
