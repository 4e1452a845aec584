"""
Error types raised by chromapick.

Every error derives from :class:`ChromapickError` and from the builtin the
callers would naturally catch (mostly ``ValueError``), so existing
``except ValueError`` handlers keep working.
"""
from __future__ import annotations
from typing import Any, Optional


class ChromapickError(Exception):
    """Base class for every chromapick error."""


class OutOfRangeChannelError(ChromapickError, ValueError):
    """A channel value lies outside of its declared bounds."""

    def __init__(self, channel: str, value: Any, minimum: float, maximum: float) -> None:
        self.channel = channel
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"{channel}={value!r} is out of range [{minimum}, {maximum}]"
        )


class MalformedHexError(ChromapickError, ValueError):
    """A hex string does not hold 6 or 8 hexadecimal digits."""

    def __init__(self, text: str, message: Optional[str] = None) -> None:
        self.text = text
        super().__init__(message or f"Malformed hex color string: {text!r}")


class ArityMismatchError(ChromapickError, ValueError):
    """A multi-channel input does not split into the expected channel count."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} channel values, got {actual}")


class PackedColorError(ChromapickError, ValueError):
    """A packed ARGB integer does not fit into 32 bits."""

    def __init__(self, color: int) -> None:
        self.color = color
        super().__init__(f"Packed color {color!r} does not fit into 32 bits")


class UnknownModelError(ChromapickError, KeyError):
    """Unknown color model or channel name."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "Unknown color model"
