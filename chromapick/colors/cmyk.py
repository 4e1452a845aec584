from __future__ import annotations
from typing import ClassVar, Tuple
from ..types.color_types import ColorModel
from .channel import Channel, percent
from .color_base import ColorModelBase


class CMYK(ColorModelBase):
    __slots__ = ()
    model: ClassVar[ColorModel] = ColorModel.CMYK
    channels: ClassVar[Tuple[Channel, ...]] = (
        percent("c"),
        percent("m"),
        percent("y"),
        percent("k", "%"),
    )
