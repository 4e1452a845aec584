from __future__ import annotations
from dataclasses import dataclass
from numbers import Real
from ..exceptions import OutOfRangeChannelError
from ..types.color_types import HUE_MAX, PERCENT_MAX, BYTE_MAX
from ..utils.num_utils import in_bounds


@dataclass(frozen=True)
class Channel:
    """Named integer channel with inclusive bounds and a display suffix."""
    name: str
    minimum: int
    maximum: int
    suffix: str = ""

    def contains(self, value: object) -> bool:
        if isinstance(value, bool) or not isinstance(value, Real):
            return False
        return in_bounds(value, self.minimum, self.maximum)

    def validate(self, value: object) -> int:
        """Return ``value`` as an int, or raise :class:`OutOfRangeChannelError`."""
        if not self.contains(value):
            raise OutOfRangeChannelError(self.name, value, self.minimum, self.maximum)
        return int(value)  # type: ignore[arg-type]


def hue(suffix: str = "°, ") -> Channel:
    return Channel("h", 0, HUE_MAX, suffix)


def percent(name: str, suffix: str = "%, ") -> Channel:
    return Channel(name, 0, PERCENT_MAX, suffix)


def byte(name: str, suffix: str = ", ") -> Channel:
    return Channel(name, 0, BYTE_MAX, suffix)
