"""
Color model records.

One parametrized record type, :class:`ColorModelBase`, declares its channels
(name, bounds, default suffix) as class data; the six concrete models only
differ in that declaration:

    RGBA  r, g, b, a      0-255
    HSV   h, s, v         hue 0-360, percentages 0-100
    HSL   h, s, l
    HWB   h, w, b         b is blackness
    CMYK  c, m, y, k      0-100
    HEX   r, g, b, a      rendered as ``#RRGGBB`` / ``#RRGGBBAA``

Records are owned and mutated by a ColorConverter; everything else reads
them through ``values``, the channel properties and ``to_string``.
"""
from .channel import Channel
from .color_base import ColorModelBase, build_registry
from .rgba import RGBA
from .hsv import HSV
from .hsl import HSL
from .hwb import HWB
from .cmyk import CMYK
from .hex import HEX

model_classes = build_registry(RGBA, HSV, HSL, HWB, CMYK, HEX)

__all__ = [
    "Channel",
    "ColorModelBase",
    "RGBA",
    "HSV",
    "HSL",
    "HWB",
    "CMYK",
    "HEX",
    "model_classes",
    "build_registry",
]
