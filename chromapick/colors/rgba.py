from __future__ import annotations
from typing import ClassVar, Tuple
from ..types.color_types import ColorModel
from ..conversions.packed import rgba_to_color
from .channel import Channel, byte
from .color_base import ColorModelBase


class RGBA(ColorModelBase):
    __slots__ = ()
    model: ClassVar[ColorModel] = ColorModel.RGBA
    channels: ClassVar[Tuple[Channel, ...]] = (
        byte("r"),
        byte("g"),
        byte("b"),
        byte("a", ""),
    )

    def __init__(self, values=None, owner=None) -> None:
        super().__init__(values, owner)
        if values is None:
            # opaque black
            self._values = (0, 0, 0, 255)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self._values[0], self._values[1], self._values[2]

    def to_color_int(self) -> int:
        """Packed ``0xAARRGGBB`` int."""
        return rgba_to_color(*self._values)

    def to_string(self, with_suffix: bool = True, include_alpha: bool = True) -> str:
        """``"83, 140, 181, 31"``; the last suffix is dropped together with alpha."""
        if include_alpha:
            return super().to_string(with_suffix)
        return self._format(self.rgb, self._suffixes[:2] + [""], with_suffix)
