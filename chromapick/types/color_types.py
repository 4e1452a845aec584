from __future__ import annotations
from enum import Enum
from typing import Tuple, Union

from ..exceptions import UnknownModelError

ChannelValue = int
ChannelVector = Tuple[ChannelValue, ...]


class ColorModel(str, Enum):
    RGBA = "rgba"
    HSV = "hsv"
    HSL = "hsl"
    HWB = "hwb"
    CMYK = "cmyk"
    HEX = "hex"

    @classmethod
    def from_name(cls, name: Union[str, "ColorModel"]) -> "ColorModel":
        """Look up a model by tag, accepting ``"rgb"`` as an alias of RGBA."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        if key == "rgb":
            return cls.RGBA
        try:
            return cls(key)
        except ValueError:
            raise UnknownModelError(f"Unknown color model: {name!r}") from None


HUE_MAX = 360
PERCENT_MAX = 100
BYTE_MAX = 255
