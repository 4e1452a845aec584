from __future__ import annotations
from typing import ClassVar, Tuple
from ..types.color_types import ColorModel
from ..conversions.hexadecimal import rgba_to_hex, is_hex
from ..conversions.packed import rgba_to_color
from .channel import Channel, byte
from .color_base import ColorModelBase


class HEX(ColorModelBase):
    """
    Hex string view of an RGBA color.

    The record keeps the four bytes it renders so that both ``#RRGGBB`` and
    ``#RRGGBBAA`` can be produced without reparsing.
    """
    __slots__ = ("upper",)
    model: ClassVar[ColorModel] = ColorModel.HEX
    channels: ClassVar[Tuple[Channel, ...]] = (
        byte("r", ""),
        byte("g", ""),
        byte("b", ""),
        byte("a", ""),
    )

    def __init__(self, values=None, owner=None, upper: bool = True) -> None:
        super().__init__(values, owner)
        self.upper = upper
        if values is None:
            self._values = (0, 0, 0, 255)

    @property
    def hex_string(self) -> str:
        return self.to_string()

    def to_color_int(self) -> int:
        return rgba_to_color(*self._values)

    def to_string(self, with_alpha: bool = False) -> str:  # type: ignore[override]
        """``"#538CB5"``, or ``"#538CB51F"`` with alpha appended."""
        r, g, b, a = self._values
        return rgba_to_hex(r, g, b, a if with_alpha else None, upper=self.upper)

    def __repr__(self) -> str:
        return f"HEX({self.to_string(with_alpha=True)!r})"

    @staticmethod
    def is_hex(text: str, with_alpha: bool = False) -> bool:
        return is_hex(text, with_alpha)
