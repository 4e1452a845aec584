from __future__ import annotations
from typing import ClassVar, Tuple
from ..types.color_types import ColorModel
from .channel import Channel, hue, percent
from .color_base import ColorModelBase


class HWB(ColorModelBase):
    """Hue, whiteness and blackness. ``b`` is blackness, not blue."""
    __slots__ = ()
    model: ClassVar[ColorModel] = ColorModel.HWB
    channels: ClassVar[Tuple[Channel, ...]] = (hue(), percent("w"), percent("b", "%"))
