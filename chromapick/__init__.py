"""
Chromapick
==========

Keeps several color-selection surfaces (sliders, planes, a disc) and numeric
text fields showing the same color in different models, and in sync while
any one of them is edited.

Building blocks
---------------
Range
    Pointer position <-> channel value mapping with clamping.
ColorConverter
    Six color models (RGBA, HSV, HSL, HWB, CMYK, HEX) re-derived from any
    single change.
Updater
    Dispatcher deciding which attached windows and fields refresh after an
    edit, and how.

Example
-------
>>> from chromapick import ColorConverter
>>> converter = ColorConverter(r=83, g=140, b=181, a=31)
>>> converter.hsv.values
(205, 54, 71)
>>> converter.hex.to_string(with_alpha=True)
'#538CB51F'
"""
from .exceptions import (
    ChromapickError,
    OutOfRangeChannelError,
    MalformedHexError,
    ArityMismatchError,
    PackedColorError,
    UnknownModelError,
)
from .types import ColorModel, WindowKind, FieldKind
from .range import Range
from .colors import Channel, ColorModelBase, RGBA, HSV, HSL, HWB, CMYK, HEX
from .conversions import convert, np_convert, parse_color, rgba_to_color, rgba_to_hex
from .converter import ColorConverter, ConversionResult, UsedModels, ReentrancyGuard
from .sync import (
    Action,
    COMPATIBILITY,
    action_for,
    ColorHolder,
    TextField,
    FieldState,
    ColorWindow,
    HueSlider,
    AlphaSlider,
    ValueSlider,
    SaturationValuePlane,
    SaturationLightnessPlane,
    HueSaturationDisc,
    Updater,
    UpdateListener,
)

__version__ = "1.0.0"

__all__ = [
    # Errors
    "ChromapickError",
    "OutOfRangeChannelError",
    "MalformedHexError",
    "ArityMismatchError",
    "PackedColorError",
    "UnknownModelError",

    # Types
    "ColorModel",
    "WindowKind",
    "FieldKind",

    # Range
    "Range",

    # Color models
    "Channel",
    "ColorModelBase",
    "RGBA",
    "HSV",
    "HSL",
    "HWB",
    "CMYK",
    "HEX",

    # Conversions
    "convert",
    "np_convert",
    "parse_color",
    "rgba_to_color",
    "rgba_to_hex",

    # Converter
    "ColorConverter",
    "ConversionResult",
    "UsedModels",
    "ReentrancyGuard",

    # Synchronization
    "Action",
    "COMPATIBILITY",
    "action_for",
    "ColorHolder",
    "TextField",
    "FieldState",
    "ColorWindow",
    "HueSlider",
    "AlphaSlider",
    "ValueSlider",
    "SaturationValuePlane",
    "SaturationLightnessPlane",
    "HueSaturationDisc",
    "Updater",
    "UpdateListener",
]
