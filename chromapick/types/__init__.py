from .color_types import (
    ColorModel,
    ChannelValue,
    ChannelVector,
    HUE_MAX,
    PERCENT_MAX,
    BYTE_MAX,
)
from .kinds import WindowKind, FieldKind

__all__ = [
    "ColorModel",
    "ChannelValue",
    "ChannelVector",
    "HUE_MAX",
    "PERCENT_MAX",
    "BYTE_MAX",
    "WindowKind",
    "FieldKind",
]
