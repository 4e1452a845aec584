"""
Hex string codec.

Hex strings carry alpha as the LAST byte (``#RRGGBBAA``), unlike packed color
ints where alpha is the first byte. Both layouts are kept as they are.
"""
from __future__ import annotations
from typing import Optional, Tuple
import re
from ..exceptions import MalformedHexError

_NON_HEX = re.compile(r"[^0-9a-fA-F]")


def strip_hex(text: str) -> str:
    """Drop every character that is not a hexadecimal digit."""
    return _NON_HEX.sub("", text)


def is_hex(text: str, with_alpha: bool = False) -> bool:
    digits = strip_hex(text)
    return len(digits) == (8 if with_alpha else 6)


def rgba_to_hex(r: int, g: int, b: int, a: Optional[int] = None, upper: bool = True) -> str:
    """``#RRGGBB``, or ``#RRGGBBAA`` when ``a`` is given."""
    if a is None:
        digits = f"{r:02x}{g:02x}{b:02x}"
    else:
        digits = f"{r:02x}{g:02x}{b:02x}{a:02x}"
    return "#" + (digits.upper() if upper else digits.lower())


def parse_hex(text: str) -> Tuple[int, int, int, Optional[int]]:
    """
    Parse ``#RRGGBB`` or ``#RRGGBBAA`` into ``(r, g, b, a)``.

    Non-hex characters are ignored. ``a`` is None for 6 digit strings.

    Raises:
        MalformedHexError: when 6 or 8 digits are not left after stripping.
    """
    digits = strip_hex(text)
    if len(digits) not in (6, 8):
        raise MalformedHexError(text)

    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    a = int(digits[6:8], 16) if len(digits) == 8 else None
    return r, g, b, a
