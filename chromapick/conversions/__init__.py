"""
Chromapick Color Conversions
============================

Pure conversion functions between the six models kept in sync by
:class:`~chromapick.converter.ColorConverter`. Scalar functions take and
return integer channels and round half up at every step. The ``np_``
variants do the same over ``(..., channels)`` arrays.

Channel ranges
--------------
    RGB(A)   0-255 per channel
    HSV/HSL  hue 0-360, saturation/value/lightness 0-100
    HWB      hue 0-360, whiteness/blackness 0-100
    CMYK     0-100 per channel

Conversion Functions
--------------------
    rgb_to_hsv, rgb_to_hsl, rgb_to_hwb, rgb_to_cmyk, rgb_to_hue
    unit_rgb_to_hsv, unit_rgb_to_hsl    unrounded, for exact round trips
    hsv_to_rgb, hsl_to_rgb, hwb_to_rgb, cmyk_to_rgb
    hsv_to_hsl, hsl_to_hsv          direct, hue preserved
    np_* variants of the above for batch processing

Hex and packed ints
-------------------
    rgba_to_hex / parse_hex         ``#RRGGBB[AA]``, alpha last
    rgba_to_color / color_to_rgba   ``0xAARRGGBB``, alpha first
    parse_color                     ``#RRGGBB``, ``#AARRGGBB`` or a color name

High-Level API
--------------
    convert(color, from_model, to_model)
    np_convert(color, from_model, to_model)
"""
from .to_rgb import (
    hue_to_rgb,
    hsv_to_rgb,
    hsl_to_rgb,
    hwb_to_rgb,
    cmyk_to_rgb,
    np_hsv_to_rgb,
    np_hsl_to_rgb,
    np_hwb_to_rgb,
    np_cmyk_to_rgb,
)
from .to_hsv import unit_hue, unit_rgb_to_hsv, rgb_to_hsv, rgb_to_hue, hsl_to_hsv, np_rgb_to_hsv
from .to_hsl import unit_rgb_to_hsl, rgb_to_hsl, hsv_to_hsl, np_rgb_to_hsl
from .to_hwb import rgb_to_hwb, np_rgb_to_hwb
from .to_cmyk import rgb_to_cmyk, np_rgb_to_cmyk
from .hexadecimal import rgba_to_hex, parse_hex, is_hex, strip_hex
from .packed import (
    rgba_to_color,
    rgb_to_color,
    hsva_to_color,
    hsla_to_color,
    hwba_to_color,
    cmyka_to_color,
    color_to_rgba,
    hex_to_color,
    parse_color,
    normalize_color,
    to_signed,
    alpha,
    red,
    green,
    blue,
    COLOR_NAMES,
)
from .wrapper import convert, np_convert

__all__ = [
    # To RGB
    "hue_to_rgb",
    "hsv_to_rgb",
    "hsl_to_rgb",
    "hwb_to_rgb",
    "cmyk_to_rgb",
    "np_hsv_to_rgb",
    "np_hsl_to_rgb",
    "np_hwb_to_rgb",
    "np_cmyk_to_rgb",

    # From RGB
    "unit_hue",
    "unit_rgb_to_hsv",
    "unit_rgb_to_hsl",
    "rgb_to_hsv",
    "rgb_to_hue",
    "rgb_to_hsl",
    "rgb_to_hwb",
    "rgb_to_cmyk",
    "np_rgb_to_hsv",
    "np_rgb_to_hsl",
    "np_rgb_to_hwb",
    "np_rgb_to_cmyk",

    # HSV <-> HSL
    "hsv_to_hsl",
    "hsl_to_hsv",

    # Hex
    "rgba_to_hex",
    "parse_hex",
    "is_hex",
    "strip_hex",

    # Packed ints
    "rgba_to_color",
    "rgb_to_color",
    "hsva_to_color",
    "hsla_to_color",
    "hwba_to_color",
    "cmyka_to_color",
    "color_to_rgba",
    "hex_to_color",
    "parse_color",
    "normalize_color",
    "to_signed",
    "alpha",
    "red",
    "green",
    "blue",
    "COLOR_NAMES",

    # Dispatch
    "convert",
    "np_convert",
]
