"""
Linear position <-> value mapping used by every interactive color surface.

A range is ``[lower, upper]`` where the bounds may come in either order. An
inverted range (``lower > upper``) models an axis whose value decreases as the
pointer moves forward, e.g. ``Range(100, 0)`` maps position 0 to value 100.

Example::

    >>> r = Range(0, 100)
    >>> r.set_current(400, 200)
    >>> r.current
    50.0
"""
from __future__ import annotations
from typing import Optional
from boundednumbers import clamp


class Range:
    __slots__ = ("lower", "upper", "_current")

    def __init__(self, lower: float = 0.0, upper: float = 100.0, current: Optional[float] = None) -> None:
        self.lower = float(lower)
        self.upper = float(upper)
        self._current = self.minimum
        self.current = self.minimum if current is None else current

    @property
    def minimum(self) -> float:
        return min(self.lower, self.upper)

    @property
    def maximum(self) -> float:
        return max(self.lower, self.upper)

    @property
    def current(self) -> float:
        return self._current

    @current.setter
    def current(self, value: float) -> None:
        # clamped regardless of which bound is numerically larger
        self._current = float(clamp(float(value), self.minimum, self.maximum))

    @property
    def fraction(self) -> float:
        """Distance of ``current`` from ``lower`` as a fraction of the span."""
        lower_distance = abs(self._current - self.lower)
        distance = lower_distance + abs(self._current - self.upper)
        if distance == 0:
            return 0.0
        return lower_distance / distance

    def set_current(self, total: float, position: float) -> None:
        """
        Set the value from a pointer offset ``position`` into a measured span
        ``total``. With ``Range(0, 100)`` a span of 10 and a position of 2 give 20.
        """
        if total <= 0:
            raise ValueError(f"Range span must be positive, got {total!r}")
        self.current = self.lower - (self.lower - self.upper) * (position / total)

    def get_current(self, expected_lower: float, expected_upper: float) -> float:
        """
        Re-express ``current`` proportionally inside another pair of bounds.

        ``Range(0, 100, 20).get_current(-100, 100)`` is ``-60``. A degenerate
        range (``lower == upper``) maps to ``expected_lower``.
        """
        return expected_lower - (expected_lower - expected_upper) * self.fraction

    def position(self, total: float) -> float:
        """Inverse of :meth:`set_current`: offset into ``total`` for ``current``."""
        return self.fraction * total

    def copy(self) -> "Range":
        return Range(self.lower, self.upper, self._current)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return (self.lower, self.upper, self._current) == (other.lower, other.upper, other._current)

    def __repr__(self) -> str:
        return f"Range(lower={self.lower}, upper={self.upper}, current={self._current})"

    def __str__(self) -> str:
        return f"lower: {self.lower}, upper: {self.upper}, current: {self._current}"
