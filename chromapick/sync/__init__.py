from .compat import Action, COMPATIBILITY, WINDOW_CHANNELS, action_for
from .holder import ColorHolder
from .fields import TextField, FieldState, FieldSpec, FIELD_SPECS, format_field, parse_field
from .windows import (
    ColorWindow,
    Slider,
    HueSlider,
    AlphaSlider,
    ValueSlider,
    Rectangular,
    SaturationValuePlane,
    SaturationLightnessPlane,
    HueSaturationDisc,
    HORIZONTAL,
    VERTICAL,
)
from .updater import Updater, UpdateListener

__all__ = [
    "Action",
    "COMPATIBILITY",
    "WINDOW_CHANNELS",
    "action_for",
    "ColorHolder",
    "TextField",
    "FieldState",
    "FieldSpec",
    "FIELD_SPECS",
    "format_field",
    "parse_field",
    "ColorWindow",
    "Slider",
    "HueSlider",
    "AlphaSlider",
    "ValueSlider",
    "Rectangular",
    "SaturationValuePlane",
    "SaturationLightnessPlane",
    "HueSaturationDisc",
    "HORIZONTAL",
    "VERTICAL",
    "Updater",
    "UpdateListener",
]
