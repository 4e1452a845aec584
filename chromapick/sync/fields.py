"""
Numeric text fields and the parsing/formatting of their contents.

A field shows one channel (``"205"``), one whole model (``"205°, 54%, 71%"``
when idle, ``"205 54 71"`` while being edited) or a hex string. Drafts are
validated as a unit: a multi-channel draft with the wrong number of values
or one value out of range is rejected whole.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union, TYPE_CHECKING
import re

from ..colors import model_classes
from ..conversions.hexadecimal import strip_hex
from ..exceptions import ArityMismatchError, MalformedHexError
from ..types.color_types import ColorModel
from ..types.kinds import FieldKind
from ..utils.signal import Signal

if TYPE_CHECKING:
    from ..converter.converter import ColorConverter

_NOT_DIGIT_OR_SPACE = re.compile(r"[^0-9 ]+")
_NOT_DIGIT = re.compile(r"[^0-9]+")
_SPACES = re.compile(r" +")


class FieldState(Enum):
    IDLE = "idle"
    EDITING = "editing"


@dataclass(frozen=True)
class FieldSpec:
    model: ColorModel
    channels: Tuple[str, ...]

    @property
    def is_hex(self) -> bool:
        return self.model == ColorModel.HEX

    @property
    def is_single(self) -> bool:
        return len(self.channels) == 1


_F = FieldKind
_RGBA, _HSV, _HSL, _HWB, _CMYK, _HEX = (
    ColorModel.RGBA, ColorModel.HSV, ColorModel.HSL, ColorModel.HWB, ColorModel.CMYK, ColorModel.HEX,
)

FIELD_SPECS: Dict[FieldKind, FieldSpec] = {
    _F.RGB: FieldSpec(_RGBA, ("r", "g", "b")),
    _F.RGBA: FieldSpec(_RGBA, ("r", "g", "b", "a")),
    _F.RGBA_R: FieldSpec(_RGBA, ("r",)),
    _F.RGBA_G: FieldSpec(_RGBA, ("g",)),
    _F.RGBA_B: FieldSpec(_RGBA, ("b",)),
    _F.RGBA_A: FieldSpec(_RGBA, ("a",)),
    _F.HSV: FieldSpec(_HSV, ("h", "s", "v")),
    _F.HSV_H: FieldSpec(_HSV, ("h",)),
    _F.HSV_S: FieldSpec(_HSV, ("s",)),
    _F.HSV_V: FieldSpec(_HSV, ("v",)),
    _F.HSL: FieldSpec(_HSL, ("h", "s", "l")),
    _F.HSL_H: FieldSpec(_HSL, ("h",)),
    _F.HSL_S: FieldSpec(_HSL, ("s",)),
    _F.HSL_L: FieldSpec(_HSL, ("l",)),
    _F.HWB: FieldSpec(_HWB, ("h", "w", "b")),
    _F.HWB_H: FieldSpec(_HWB, ("h",)),
    _F.HWB_W: FieldSpec(_HWB, ("w",)),
    _F.HWB_B: FieldSpec(_HWB, ("b",)),
    _F.CMYK: FieldSpec(_CMYK, ("c", "m", "y", "k")),
    _F.CMYK_C: FieldSpec(_CMYK, ("c",)),
    _F.CMYK_M: FieldSpec(_CMYK, ("m",)),
    _F.CMYK_Y: FieldSpec(_CMYK, ("y",)),
    _F.CMYK_K: FieldSpec(_CMYK, ("k",)),
    _F.HEX: FieldSpec(_HEX, ("r", "g", "b")),
    _F.HEXA: FieldSpec(_HEX, ("r", "g", "b", "a")),
}

FieldInput = Union[Dict[str, int], str]


def format_field(kind: FieldKind, converter: "ColorConverter", editing: bool = False) -> str:
    """Text a field of ``kind`` shows for the converter's current color."""
    spec = FIELD_SPECS[kind]
    if spec.is_hex:
        return converter.hex.to_string(with_alpha=len(spec.channels) == 4)

    record = converter.model(spec.model)
    if spec.is_single:
        return str(record.get(spec.channels[0]))
    if editing:
        return " ".join(str(record.get(name)) for name in spec.channels)
    if kind == FieldKind.RGB:
        return converter.rgba.to_string(include_alpha=False)
    return record.to_string()


def parse_field(kind: FieldKind, text: str) -> FieldInput:
    """
    Validate a draft typed into a field of ``kind``.

    Returns a ``{channel: value}`` mapping, or a normalised ``#RRGGBB[AA]``
    string for hex fields.

    Raises:
        ArityMismatchError: wrong number of values, or an empty draft.
        OutOfRangeChannelError: a value outside its channel bounds.
        MalformedHexError: a hex draft without exactly 6 (or 8) digits.
    """
    spec = FIELD_SPECS[kind]
    if spec.is_hex:
        digits = strip_hex(text).upper()
        if len(digits) != 2 * len(spec.channels):
            raise MalformedHexError(text)
        return "#" + digits

    if spec.is_single:
        cleaned = _NOT_DIGIT.sub("", text)
        tokens = [cleaned] if cleaned else []
    else:
        cleaned = _SPACES.sub(" ", _NOT_DIGIT_OR_SPACE.sub("", text)).strip()
        tokens = cleaned.split(" ") if cleaned else []

    if len(tokens) != len(spec.channels):
        raise ArityMismatchError(len(spec.channels), len(tokens))

    record_class = model_classes[spec.model]
    return {
        name: record_class.channel(name).validate(int(token))
        for name, token in zip(spec.channels, tokens)
    }


class TextField:
    """
    Minimal text field: text plus focus and commit hooks.

    Host toolkits wrap their widgets in this interface, or drive it directly
    from their own event handlers. It emits

    * ``text_changed(field, text)`` after every :meth:`set_text`,
    * ``focused(field)`` / ``unfocused(field)`` on focus changes,
    * ``committed(field)`` when Enter is pressed.
    """

    def __init__(self, text: str = "", tag: Optional[str] = None) -> None:
        self._text = text
        self.tag = tag
        self.has_focus = False
        self.text_changed = Signal("text_changed")
        self.focused = Signal("focused")
        self.unfocused = Signal("unfocused")
        self.committed = Signal("committed")

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self.set_text(value)

    def set_text(self, text: str) -> None:
        self._text = text
        self.text_changed.emit(self, text)

    def focus(self) -> None:
        if not self.has_focus:
            self.has_focus = True
            self.focused.emit(self)

    def unfocus(self) -> None:
        if self.has_focus:
            self.has_focus = False
            self.unfocused.emit(self)

    def commit(self) -> None:
        """Enter key: commits the draft and leaves the field."""
        self.has_focus = False
        self.committed.emit(self)

    def __repr__(self) -> str:
        return f"TextField({self._text!r}, tag={self.tag!r})"
