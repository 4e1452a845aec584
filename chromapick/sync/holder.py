from __future__ import annotations
from typing import TYPE_CHECKING
from ..conversions.packed import TRANSPARENT, rgba_to_color, hsva_to_color

if TYPE_CHECKING:
    from ..converter.converter import ColorConverter


class ColorHolder:
    """
    Colors every renderer needs, recomputed once per cascade.

    ``base_color`` is the pure hue ``HSV(h, 100, 100)`` and ``selected_color``
    the opaque current RGB color; each has a fully transparent twin for
    gradients.
    """

    def __init__(self) -> None:
        self.base_color = TRANSPARENT
        self.base_color_transparent = TRANSPARENT
        self.selected_color = TRANSPARENT
        self.selected_color_transparent = TRANSPARENT

    def on_convert(self, converter: "ColorConverter") -> None:
        r, g, b = converter.rgba.rgb
        h = converter.hsv.h

        self.selected_color = rgba_to_color(r, g, b)
        self.selected_color_transparent = rgba_to_color(r, g, b, 0)

        self.base_color = hsva_to_color(h, 100, 100)
        self.base_color_transparent = hsva_to_color(h, 100, 100, 0)

    __call__ = on_convert

    def __repr__(self) -> str:
        return (
            f"ColorHolder(base_color={self.base_color:#010x}, "
            f"selected_color={self.selected_color:#010x})"
        )
