"""
Packed 32 bit ARGB color ints (``0xAARRGGBB``).

Packed values are handled as unsigned ints. Signed 32 bit values, as produced
by platforms with signed ints, are accepted and normalised with
``& 0xFFFFFFFF``; :func:`to_signed` gives the signed view back.
"""
from __future__ import annotations
from typing import Dict, Tuple
from ..exceptions import MalformedHexError, PackedColorError
from .hexadecimal import strip_hex
from .to_rgb import hsv_to_rgb, hsl_to_rgb, hwb_to_rgb, cmyk_to_rgb

MASK_32 = 0xFFFFFFFF

BLACK = 0xFF000000
DKGRAY = 0xFF444444
GRAY = 0xFF888888
LTGRAY = 0xFFCCCCCC
WHITE = 0xFFFFFFFF
RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF
YELLOW = 0xFFFFFF00
CYAN = 0xFF00FFFF
MAGENTA = 0xFFFF00FF
AQUA = 0xFF00FFFF
FUCHSIA = 0xFFFF00FF
LIME = 0xFF00FF00
MAROON = 0xFF800000
NAVY = 0xFF000080
OLIVE = 0xFF808000
PURPLE = 0xFF800080
SILVER = 0xFFC0C0C0
TEAL = 0xFF008080
TRANSPARENT = 0x00000000

COLOR_NAMES: Dict[str, int] = {
    "black": BLACK,
    "darkgray": DKGRAY,
    "gray": GRAY,
    "lightgray": LTGRAY,
    "white": WHITE,
    "red": RED,
    "green": GREEN,
    "blue": BLUE,
    "yellow": YELLOW,
    "cyan": CYAN,
    "magenta": MAGENTA,
    "aqua": AQUA,
    "fuchsia": FUCHSIA,
    "darkgrey": DKGRAY,
    "grey": GRAY,
    "lightgrey": LTGRAY,
    "lime": LIME,
    "maroon": MAROON,
    "navy": NAVY,
    "olive": OLIVE,
    "purple": PURPLE,
    "silver": SILVER,
    "teal": TEAL,
}


def normalize_color(color: int) -> int:
    """Unsigned view of a packed color, accepting signed 32 bit input."""
    if not -(1 << 31) <= color <= MASK_32:
        raise PackedColorError(color)
    return color & MASK_32


def to_signed(color: int) -> int:
    color = normalize_color(color)
    return color - (1 << 32) if color & 0x80000000 else color


def alpha(color: int) -> int:
    return (normalize_color(color) >> 24) & 0xFF


def red(color: int) -> int:
    return (normalize_color(color) >> 16) & 0xFF


def green(color: int) -> int:
    return (normalize_color(color) >> 8) & 0xFF


def blue(color: int) -> int:
    return normalize_color(color) & 0xFF


def color_to_rgba(color: int) -> Tuple[int, int, int, int]:
    color = normalize_color(color)
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF, (color >> 24) & 0xFF


def rgba_to_color(r: int, g: int, b: int, a: int = 255) -> int:
    return ((a & 0xFF) << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def rgb_to_color(r: int, g: int, b: int) -> int:
    return rgba_to_color(r, g, b)


def hsva_to_color(h: int, s: int, v: int, a: int = 255) -> int:
    return rgba_to_color(*hsv_to_rgb(h, s, v), a)


def hsla_to_color(h: int, s: int, l: int, a: int = 255) -> int:
    return rgba_to_color(*hsl_to_rgb(h, s, l), a)


def hwba_to_color(h: int, w: int, b: int, a: int = 255) -> int:
    return rgba_to_color(*hwb_to_rgb(h, w, b), a)


def cmyka_to_color(c: int, m: int, y: int, k: int, a: int = 255) -> int:
    return rgba_to_color(*cmyk_to_rgb(c, m, y, k), a)


def parse_color(text: str) -> int:
    """
    Parse ``#RRGGBB``, ``#AARRGGBB`` or a basic color name into a packed int.

    Note the alpha-first layout of ``#AARRGGBB``, as used by packed ints. Use
    :func:`~chromapick.conversions.hexadecimal.parse_hex` for alpha-last
    strings.
    """
    text = text.strip()
    if text.startswith("#"):
        digits = text[1:]
        if strip_hex(digits) != digits or len(digits) not in (6, 8):
            raise MalformedHexError(text, "Unknown color")
        color = int(digits, 16)
        if len(digits) == 6:
            color |= 0xFF000000
        return color

    try:
        return COLOR_NAMES[text.lower()]
    except KeyError:
        raise ValueError(f"Unknown color: {text!r}") from None


hex_to_color = parse_color
