from __future__ import annotations
from typing import ClassVar, Tuple
from ..types.color_types import ColorModel
from .channel import Channel, hue, percent
from .color_base import ColorModelBase


class HSV(ColorModelBase):
    __slots__ = ()
    model: ClassVar[ColorModel] = ColorModel.HSV
    channels: ClassVar[Tuple[Channel, ...]] = (hue(), percent("s"), percent("v", "%"))
