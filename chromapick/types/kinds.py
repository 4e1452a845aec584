from __future__ import annotations
from enum import Enum
from typing import Optional
import warnings


class WindowKind(str, Enum):
    """Channel subset edited by an interactive color surface."""
    HUE = "hue"
    ALPHA = "alpha"
    VALUE = "value"
    SV_PLANE = "saturation_value"
    SL_PLANE = "saturation_lightness"
    HS_DISC = "hue_saturation"


class FieldKind(str, Enum):
    """Channel subset edited by a numeric text field."""
    RGB = "rgb"
    RGBA = "rgba"
    RGBA_R = "rgba_r"
    RGBA_G = "rgba_g"
    RGBA_B = "rgba_b"
    RGBA_A = "rgba_a"
    HSV = "hsv"
    HSV_H = "hsv_h"
    HSV_S = "hsv_s"
    HSV_V = "hsv_v"
    HSL = "hsl"
    HSL_H = "hsl_h"
    HSL_S = "hsl_s"
    HSL_L = "hsl_l"
    HWB = "hwb"
    HWB_H = "hwb_h"
    HWB_W = "hwb_w"
    HWB_B = "hwb_b"
    CMYK = "cmyk"
    CMYK_C = "cmyk_c"
    CMYK_M = "cmyk_m"
    CMYK_Y = "cmyk_y"
    CMYK_K = "cmyk_k"
    HEX = "hex"
    HEXA = "hexa"

    @classmethod
    def from_tag(cls, tag: str, strict: bool = True) -> Optional["FieldKind"]:
        """
        Parse a field tag such as ``"hsv_h"`` or ``"RGB"``.

        With ``strict=False`` an unknown tag only warns and returns None.
        """
        key = tag.strip().lower()
        try:
            return cls(key)
        except ValueError:
            if strict:
                raise ValueError(f"Unknown text field tag: {tag!r}") from None
            warnings.warn(f"Unknown text field tag {tag!r} ignored")
            return None
