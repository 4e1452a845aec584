"""
Headless color windows.

These implement the surface side of the dispatch contract without drawing
anything: a kind, one or two :class:`~chromapick.range.Range` instances,
``move_selector``, ``update`` (selector from the converter) and ``redraw``
(recompute the cached layer key a renderer would paint from). GUI
toolkits subclass them and paint from ``selector`` and ``layer``.
"""
from __future__ import annotations
import math
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Optional, Tuple, TYPE_CHECKING

from boundednumbers import clamp

from ..range import Range
from ..types.color_types import ColorModel
from ..types.kinds import WindowKind
from ..utils.num_utils import round_half_up
from ..utils.signal import Signal
from .compat import WINDOW_CHANNELS

if TYPE_CHECKING:
    from ..converter.converter import ColorConverter
    from .holder import ColorHolder

HORIZONTAL = "horizontal"
VERTICAL = "vertical"


class ColorWindow(ABC):
    kind: ClassVar[WindowKind]

    def __init__(self, width: float = 100.0, height: float = 100.0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Window size must be positive, got {width}x{height}")
        self.width = float(width)
        self.height = float(height)
        self.converter: Optional["ColorConverter"] = None
        self.holder: Optional["ColorHolder"] = None
        self.selector_x = 0.0
        self.selector_y = 0.0
        self.layer: Any = None
        self.update_count = 0
        self.redraw_count = 0
        self.selector_moved = Signal("selector_moved")
        self._create_ranges()
        self._place_selector()

    # ------------------ SUBCLASS HOOKS ------------------
    @abstractmethod
    def _create_ranges(self) -> None:
        ...

    @abstractmethod
    def ranges(self) -> Tuple[Range, ...]:
        """Ranges in the channel order of :attr:`channels`."""
        ...

    @abstractmethod
    def _place_selector(self) -> None:
        ...

    @abstractmethod
    def _set_ranges(self, x: float, y: float) -> None:
        ...

    def _layer(self) -> Any:
        return None

    # ------------------ CONTRACT ------------------
    @property
    def model(self) -> ColorModel:
        return WINDOW_CHANNELS[self.kind][0]

    @property
    def channels(self) -> Tuple[str, ...]:
        return WINDOW_CHANNELS[self.kind][1]

    @property
    def selector(self) -> Tuple[float, float]:
        return self.selector_x, self.selector_y

    def channel_values(self) -> Dict[str, int]:
        """Rounded range values keyed by the channel they edit."""
        return {name: round_half_up(r.current) for name, r in zip(self.channels, self.ranges())}

    def move_selector(self, x: float, y: float) -> None:
        """Move the selector to surface coordinates and notify the owner."""
        self._set_ranges(x, y)
        self.selector_moved.emit(self)

    def update(self) -> None:
        """Reposition the selector from the converter's current color."""
        if self.converter is None:
            return
        record = self.converter.model(self.model)
        for name, r in zip(self.channels, self.ranges()):
            r.current = record.get(name)
        self._place_selector()
        self.update_count += 1

    def redraw(self) -> None:
        """Recompute the cached layer key."""
        self.layer = self._layer()
        self.redraw_count += 1

    def resize(self, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Window size must be positive, got {width}x{height}")
        self.width = float(width)
        self.height = float(height)
        self._create_ranges()
        self.update()
        self.redraw()

    def __repr__(self) -> str:
        values = ", ".join(f"{r.current:g}" for r in self.ranges())
        return f"{self.__class__.__name__}({values})"


class Slider(ColorWindow):
    """One dimensional window, horizontal or vertical."""
    lower: ClassVar[float] = 0.0
    upper: ClassVar[float] = 100.0

    def __init__(self, width: float = 100.0, height: float = 100.0, orientation: str = HORIZONTAL) -> None:
        if orientation not in (HORIZONTAL, VERTICAL):
            raise ValueError(f"Unknown slider orientation: {orientation!r}")
        self.orientation = orientation
        super().__init__(width, height)

    @property
    def span(self) -> float:
        return self.width if self.orientation == HORIZONTAL else self.height

    def _create_ranges(self) -> None:
        self.range = Range(self.lower, self.upper)

    def ranges(self) -> Tuple[Range, ...]:
        return (self.range,)

    def _set_ranges(self, x: float, y: float) -> None:
        if self.orientation == HORIZONTAL:
            self.selector_x = float(clamp(x, 0.0, self.width))
            self.selector_y = self.height / 2
            self.range.set_current(self.width, self.selector_x)
        else:
            self.selector_x = self.width / 2
            self.selector_y = float(clamp(y, 0.0, self.height))
            self.range.set_current(self.height, self.selector_y)

    def _place_selector(self) -> None:
        position = self.range.position(self.span)
        if self.orientation == HORIZONTAL:
            self.selector_x, self.selector_y = position, self.height / 2
        else:
            self.selector_x, self.selector_y = self.width / 2, position


class HueSlider(Slider):
    kind = WindowKind.HUE
    lower = 360.0
    upper = 0.0


class AlphaSlider(Slider):
    kind = WindowKind.ALPHA
    lower = 0.0
    upper = 255.0

    def _layer(self) -> Any:
        if self.holder is None:
            return None
        return self.holder.selected_color_transparent, self.holder.selected_color


class ValueSlider(Slider):
    kind = WindowKind.VALUE
    lower = 100.0
    upper = 0.0

    def _layer(self) -> Any:
        return None if self.holder is None else self.holder.base_color


class Rectangular(ColorWindow):
    """Two dimensional window with a horizontal and a vertical range."""
    horizontal_bounds: ClassVar[Tuple[float, float]] = (0.0, 100.0)
    vertical_bounds: ClassVar[Tuple[float, float]] = (100.0, 0.0)

    def _create_ranges(self) -> None:
        self.horizontal_range = Range(*self.horizontal_bounds)
        self.vertical_range = Range(*self.vertical_bounds)

    def ranges(self) -> Tuple[Range, ...]:
        return self.horizontal_range, self.vertical_range

    def _set_ranges(self, x: float, y: float) -> None:
        self.selector_x = float(clamp(x, 0.0, self.width))
        self.selector_y = float(clamp(y, 0.0, self.height))
        self.horizontal_range.set_current(self.width, self.selector_x)
        self.vertical_range.set_current(self.height, self.selector_y)

    def _place_selector(self) -> None:
        self.selector_x = self.horizontal_range.position(self.width)
        self.selector_y = self.vertical_range.position(self.height)

    def _layer(self) -> Any:
        return None if self.holder is None else self.holder.base_color


class SaturationValuePlane(Rectangular):
    kind = WindowKind.SV_PLANE
    horizontal_bounds = (0.0, 100.0)
    vertical_bounds = (100.0, 0.0)


class SaturationLightnessPlane(Rectangular):
    kind = WindowKind.SL_PLANE
    horizontal_bounds = (100.0, 0.0)
    vertical_bounds = (100.0, 0.0)


class HueSaturationDisc(ColorWindow):
    """
    Polar window: the angle selects hue and the distance from the center
    selects saturation. Angles follow ``atan2`` in surface coordinates.
    """
    kind = WindowKind.HS_DISC

    @property
    def center(self) -> Tuple[float, float]:
        return self.width / 2, self.height / 2

    @property
    def radius(self) -> float:
        return min(self.width, self.height) / 2

    def _create_ranges(self) -> None:
        self.angle_range = Range(0.0, 360.0)
        self.distance_range = Range(0.0, 100.0)

    def ranges(self) -> Tuple[Range, ...]:
        return self.angle_range, self.distance_range

    def _set_ranges(self, x: float, y: float) -> None:
        cx, cy = self.center
        angle = math.degrees(math.atan2(y - cy, x - cx))
        if angle < 0.0:
            angle += 360.0
        distance = math.hypot(x - cx, y - cy)

        # keep the selector inside the disc
        if distance >= self.radius:
            ratio = self.radius / distance
            x = (1.0 - ratio) * cx + ratio * x
            y = (1.0 - ratio) * cy + ratio * y
            distance = self.radius

        self.selector_x, self.selector_y = x, y
        self.distance_range.set_current(self.radius, distance)
        self.angle_range.set_current(360.0, angle)

    def _place_selector(self) -> None:
        cx, cy = self.center
        distance = self.distance_range.position(self.radius)
        angle = math.radians(self.angle_range.current)
        self.selector_x = cx + distance * math.cos(angle)
        self.selector_y = cy + distance * math.sin(angle)

    def _layer(self) -> Any:
        if self.converter is None:
            return None
        # opacity of the black layer dimming the disc by value
        return 255 - int(255 * (self.converter.hsv.v / 100.0))
