"""
ColorConverter: six color models kept consistent after every mutation.

Every command (``apply_channel``, ``apply_channels``, ``apply_model``,
``apply_hex``, ``apply_color_int``) validates its input, writes the source
model and runs one cascade that re-derives the other *used* models. The
command returns a :class:`ConversionResult` snapshot of the consistent state.
Listeners fire once per cascade.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Flag
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Sequence, Tuple, Union
import logging

from ..colors import RGBA, HSV, HSL, HWB, CMYK, HEX, ColorModelBase
from ..conversions import packed, hexadecimal
from ..conversions.to_hsv import rgb_to_hue, hsl_to_hsv
from ..conversions.to_hsl import hsv_to_hsl
from ..conversions.wrapper import TO_RGB, FROM_RGB
from ..types.color_types import ColorModel, ChannelVector
from ..utils.signal import Signal
from .transaction import ReentrancyGuard

logger = logging.getLogger(__name__)

ModelLike = Union[str, ColorModel]
ConvertListener = Callable[["ColorConverter"], Any]


class UsedModels(Flag):
    NONE = 0
    RGBA = 1
    HSV = 2
    HSL = 4
    HWB = 8
    CMYK = 16
    HEX = 32
    ALL = RGBA | HSV | HSL | HWB | CMYK | HEX

    @classmethod
    def of(cls, model: ModelLike) -> "UsedModels":
        return cls[ColorModel.from_name(model).name]


# (target, derived from) in cascade order
Route = Tuple[Tuple[ColorModel, ColorModel], ...]

_M = ColorModel
DERIVATION_ROUTES: Dict[ColorModel, Route] = {
    _M.RGBA: ((_M.CMYK, _M.RGBA), (_M.HEX, _M.RGBA), (_M.HSV, _M.RGBA), (_M.HSL, _M.RGBA), (_M.HWB, _M.RGBA)),
    _M.HSV: ((_M.RGBA, _M.HSV), (_M.CMYK, _M.RGBA), (_M.HEX, _M.RGBA), (_M.HWB, _M.RGBA), (_M.HSL, _M.HSV)),
    _M.HSL: ((_M.RGBA, _M.HSL), (_M.CMYK, _M.RGBA), (_M.HEX, _M.RGBA), (_M.HWB, _M.RGBA), (_M.HSV, _M.HSL)),
    _M.HWB: ((_M.RGBA, _M.HWB), (_M.CMYK, _M.RGBA), (_M.HEX, _M.RGBA), (_M.HSV, _M.RGBA), (_M.HSL, _M.RGBA)),
    _M.CMYK: ((_M.RGBA, _M.CMYK), (_M.HEX, _M.RGBA), (_M.HSV, _M.RGBA), (_M.HSL, _M.RGBA), (_M.HWB, _M.RGBA)),
    _M.HEX: ((_M.RGBA, _M.HEX), (_M.CMYK, _M.RGBA), (_M.HSV, _M.RGBA), (_M.HSL, _M.RGBA), (_M.HWB, _M.RGBA)),
}

# alpha is not part of any colorimetric model
ALPHA_ROUTES: Dict[ColorModel, Route] = {
    _M.RGBA: ((_M.HEX, _M.RGBA),),
    _M.HEX: ((_M.RGBA, _M.HEX),),
}

# constructor keyword sets, in priority order
CONSTRUCTOR_PRIORITY: Tuple[Tuple[ColorModel, Tuple[str, ...]], ...] = (
    (_M.RGBA, ("r", "g", "b")),
    (_M.HSV, ("h", "s", "v")),
    (_M.HSL, ("h", "s", "l")),
    (_M.HWB, ("h", "w", "b")),
    (_M.CMYK, ("c", "m", "y", "k")),
)


@dataclass(frozen=True)
class ConversionResult:
    """Snapshot of every model after a command. ``source`` and ``changed`` do not take part in equality."""
    rgba: ChannelVector
    hsv: ChannelVector
    hsl: ChannelVector
    hwb: ChannelVector
    cmyk: ChannelVector
    hex: str
    source: Optional[ColorModel] = field(default=None, compare=False)
    changed: bool = field(default=False, compare=False)

    def __getitem__(self, model: ModelLike) -> Union[ChannelVector, str]:
        return getattr(self, ColorModel.from_name(model).value)

    @property
    def color_int(self) -> int:
        return packed.rgba_to_color(*self.rgba)


class ColorConverter:
    """
    Owner of the six color model records.

    Construct it from keyword channels, e.g. ``ColorConverter(r=83, g=140,
    b=181, a=31)`` or ``ColorConverter(h=205, s=54, v=71)``, or through
    :meth:`from_color_int`, :meth:`from_hex` and :meth:`from_model`. When
    several complete channel sets are passed, the first one in the order
    RGBA, HSV, HSL, HWB, CMYK is used and the others are ignored. That order
    is kept for compatibility; nothing depends on it being meaningful. ``b``
    is blue in an RGBA set and blackness in an HWB set.
    """

    rgba_to_color = staticmethod(packed.rgba_to_color)
    rgb_to_color = staticmethod(packed.rgb_to_color)
    hsva_to_color = staticmethod(packed.hsva_to_color)
    hsla_to_color = staticmethod(packed.hsla_to_color)
    hwba_to_color = staticmethod(packed.hwba_to_color)
    cmyka_to_color = staticmethod(packed.cmyka_to_color)
    hex_to_color = staticmethod(packed.hex_to_color)
    parse_color = staticmethod(packed.parse_color)
    rgba_to_hex = staticmethod(hexadecimal.rgba_to_hex)
    rgb_to_hue = staticmethod(rgb_to_hue)
    alpha = staticmethod(packed.alpha)
    red = staticmethod(packed.red)
    green = staticmethod(packed.green)
    blue = staticmethod(packed.blue)

    def __init__(
        self,
        r: Optional[int] = None,
        g: Optional[int] = None,
        b: Optional[int] = None,
        a: Optional[int] = None,
        h: Optional[int] = None,
        s: Optional[int] = None,
        v: Optional[int] = None,
        l: Optional[int] = None,
        w: Optional[int] = None,
        c: Optional[int] = None,
        m: Optional[int] = None,
        y: Optional[int] = None,
        k: Optional[int] = None,
        *,
        used_models: UsedModels = UsedModels.ALL,
        listeners: Iterable[ConvertListener] = (),
        hex_upper: bool = True,
        use_previous_alpha: bool = True,
    ) -> None:
        self._used_models = used_models
        self.use_previous_alpha = use_previous_alpha
        self._guard = ReentrancyGuard("convert")
        self.converted = Signal("converted")

        self._rgba = RGBA(owner=self)
        self._hsv = HSV(owner=self)
        self._hsl = HSL(owner=self)
        self._hwb = HWB(owner=self)
        self._cmyk = CMYK(owner=self)
        self._hex = HEX(owner=self, upper=hex_upper)
        self._records: Dict[ColorModel, ColorModelBase] = {
            ColorModel.RGBA: self._rgba,
            ColorModel.HSV: self._hsv,
            ColorModel.HSL: self._hsl,
            ColorModel.HWB: self._hwb,
            ColorModel.CMYK: self._cmyk,
            ColorModel.HEX: self._hex,
        }

        given = dict(r=r, g=g, b=b, h=h, s=s, v=v, l=l, w=w, c=c, m=m, y=y, k=k)
        source, values = self._pick_channel_set(given)
        if a is not None:
            self._rgba._assign(self._rgba.rgb + (RGBA.channel("a").validate(a),))
        if source is None:
            source, values = ColorModel.RGBA, self._rgba.values
        elif source == ColorModel.RGBA:
            values = tuple(values) + (self._rgba.a,)

        self._records[source]._assign(self._records[source].validate(values))
        self.convert(source)

        for listener in listeners:
            self.subscribe(listener)

    @staticmethod
    def _pick_channel_set(given: Mapping[str, Optional[int]]) -> Tuple[Optional[ColorModel], Tuple[int, ...]]:
        complete = [
            (model, tuple(given[name] for name in names))
            for model, names in CONSTRUCTOR_PRIORITY
            if all(given[name] is not None for name in names)
        ]
        if not complete:
            partial = [name for name, value in given.items() if value is not None]
            if partial:
                raise ValueError(f"Incomplete channel set: {', '.join(partial)}")
            return None, ()

        for model, _ in complete[1:]:
            logger.debug("Ignoring %s channels, %s takes priority", model.value, complete[0][0].value)
        return complete[0]

    # ------------------ ALTERNATE CONSTRUCTORS ------------------
    @classmethod
    def from_color_int(cls, color: int, **kwargs: Any) -> "ColorConverter":
        """From a packed ``0xAARRGGBB`` int; signed 32 bit values are accepted."""
        r, g, b, a = packed.color_to_rgba(color)
        return cls(r=r, g=g, b=b, a=a, **kwargs)

    @classmethod
    def from_hex(cls, text: str, **kwargs: Any) -> "ColorConverter":
        """From ``#RRGGBB`` or ``#RRGGBBAA``; raises MalformedHexError."""
        r, g, b, a = hexadecimal.parse_hex(text)
        listeners = kwargs.pop("listeners", ())
        converter = cls(**kwargs)
        converter._hex._assign((r, g, b, 255 if a is None else a))
        converter.convert(ColorModel.HEX)
        for listener in listeners:
            converter.subscribe(listener)
        return converter

    @classmethod
    def from_model(cls, model: ModelLike, values: Union[Sequence[int], str], a: Optional[int] = None,
                   **kwargs: Any) -> "ColorConverter":
        model = ColorModel.from_name(model)
        if model == ColorModel.HEX:
            return cls.from_hex(str(values), **kwargs)
        listeners = kwargs.pop("listeners", ())
        converter = cls(a=a, **kwargs)
        record = converter._records[model]
        values = tuple(values)
        if model == ColorModel.RGBA and len(values) == 3:
            values = values + (converter._rgba.a,)
        record._assign(record.validate(values))
        converter.convert(model)
        for listener in listeners:
            converter.subscribe(listener)
        return converter

    # ------------------ MODEL ACCESS ------------------
    @property
    def rgba(self) -> RGBA:
        return self._rgba

    @property
    def hsv(self) -> HSV:
        return self._hsv

    @property
    def hsl(self) -> HSL:
        return self._hsl

    @property
    def hwb(self) -> HWB:
        return self._hwb

    @property
    def cmyk(self) -> CMYK:
        return self._cmyk

    @property
    def hex(self) -> HEX:
        return self._hex

    def model(self, model: ModelLike) -> ColorModelBase:
        return self._records[ColorModel.from_name(model)]

    @property
    def color_int(self) -> int:
        return self._rgba.to_color_int()

    @property
    def is_converting(self) -> bool:
        return self._guard.active

    # ------------------ USED MODELS ------------------
    @property
    def used_models(self) -> UsedModels:
        return self._used_models

    @used_models.setter
    def used_models(self, value: UsedModels) -> None:
        self._used_models = value

    def set_used_models(self, *models: Union[ModelLike, UsedModels]) -> None:
        """Add models to the set kept in sync."""
        for model in models:
            if isinstance(model, UsedModels):
                self._used_models |= model
            else:
                self._used_models |= UsedModels.of(model)

    def clear_used_models(self) -> None:
        self._used_models = UsedModels.NONE

    def is_used(self, model: ModelLike) -> bool:
        model = ColorModel.from_name(model)
        # RGBA is the hub of every derivation
        return model == ColorModel.RGBA or bool(self._used_models & UsedModels.of(model))

    # ------------------ LISTENERS ------------------
    def subscribe(self, listener: ConvertListener) -> ConvertListener:
        return self.converted.connect(listener)

    def unsubscribe(self, listener: ConvertListener) -> bool:
        return self.converted.disconnect(listener)

    # ------------------ COMMANDS ------------------
    def apply_channel(self, model: ModelLike, channel: str, value: int) -> ConversionResult:
        """Write one channel of ``model`` and re-derive the other models."""
        return self.apply_channels(model, {channel: value})

    def apply_channels(self, model: ModelLike, values: Mapping[str, int]) -> ConversionResult:
        """Write several channels of one model as a single transaction."""
        model = ColorModel.from_name(model)
        record = self._records[model]
        new_values = list(record.values)
        for name, value in values.items():
            new_values[record.channel_index(name)] = record.channel(name).validate(value)
        return self._commit(model, tuple(new_values))

    def apply_model(self, model: ModelLike, values: Union[Sequence[int], str]) -> ConversionResult:
        """Replace every channel of ``model``. RGBA accepts 3 values and keeps alpha."""
        model = ColorModel.from_name(model)
        if model == ColorModel.HEX:
            return self.apply_hex(str(values))
        values = tuple(values)
        if model == ColorModel.RGBA and len(values) == 3:
            values = values + (self._rgba.a,)
        return self._commit(model, self._records[model].validate(values))

    def apply_hex(self, text: str) -> ConversionResult:
        """
        Set the color from ``#RRGGBB`` or ``#RRGGBBAA``.

        Without alpha digits the previous alpha is kept when
        ``use_previous_alpha`` is set, otherwise the color becomes opaque.
        """
        r, g, b, a = hexadecimal.parse_hex(text)
        if a is None:
            a = self._rgba.a if self.use_previous_alpha else 255
        return self._commit(ColorModel.HEX, (r, g, b, a))

    def apply_color_int(self, color: int) -> ConversionResult:
        return self._commit(ColorModel.RGBA, packed.color_to_rgba(color))

    def set_alpha(self, a: int) -> ConversionResult:
        return self.apply_channel(ColorModel.RGBA, "a", a)

    def set_suffix(self, model: ModelLike, *suffixes: str) -> None:
        self._records[ColorModel.from_name(model)].set_suffix(*suffixes)

    def _commit(self, model: ColorModel, values: ChannelVector) -> ConversionResult:
        if self._guard.active:
            raise RuntimeError("Cannot change the color while a conversion is running")
        record = self._records[model]
        previous = record.values
        if values == previous:
            logger.debug("%s unchanged at %s, skipping cascade", model.value, values)
            return self.snapshot(model, changed=False)

        alpha_only = model in ALPHA_ROUTES and values[:3] == previous[:3]
        record._assign(values)
        self.convert(model, alpha_only=alpha_only)
        return self.snapshot(model, changed=True)

    # ------------------ CASCADE ------------------
    def convert(self, source: ModelLike, alpha_only: bool = False) -> bool:
        """
        Re-derive every used model from ``source``.

        Returns False when a cascade is already running; the nested call is
        dropped. Listeners fire once at the end of the cascade, while it still
        holds the guard, so they may read the models but not change them.
        """
        source = ColorModel.from_name(source)
        with self._guard.acquire() as entered:
            if not entered:
                logger.debug("Nested conversion from %s suppressed", source.value)
                return False

            route = ALPHA_ROUTES[source] if alpha_only else DERIVATION_ROUTES[source]
            for target, origin in route:
                if self.is_used(target):
                    self._derive(target, origin)

            self.converted.emit(self)
        return True

    def _derive(self, target: ColorModel, origin: ColorModel) -> None:
        if target == ColorModel.RGBA:
            if origin == ColorModel.HEX:
                self._rgba._assign(self._hex.values)
            else:
                rgb = TO_RGB[origin](*self._records[origin].values)
                self._rgba._assign(rgb + (self._rgba.a,))
        elif target == ColorModel.HEX:
            self._hex._assign(self._rgba.values)
        elif (origin, target) == (ColorModel.HSV, ColorModel.HSL):
            self._hsl._assign(hsv_to_hsl(*self._hsv.values))
        elif (origin, target) == (ColorModel.HSL, ColorModel.HSV):
            self._hsv._assign(hsl_to_hsv(*self._hsl.values, fallback_s=self._hsv.s))
        else:
            self._records[target]._assign(FROM_RGB[target](*self._rgba.rgb))

    # ------------------ SNAPSHOT ------------------
    def snapshot(self, source: Optional[ColorModel] = None, changed: bool = False) -> ConversionResult:
        return ConversionResult(
            rgba=self._rgba.values,
            hsv=self._hsv.values,
            hsl=self._hsl.values,
            hwb=self._hwb.values,
            cmyk=self._cmyk.values,
            hex=self._hex.to_string(with_alpha=True),
            source=source,
            changed=changed,
        )

    def __repr__(self) -> str:
        return f"ColorConverter({self._hex.to_string(with_alpha=True)!r})"

    def __str__(self) -> str:
        return (
            f"RGBA({self._rgba}), HSL({self._hsl}), HSV({self._hsv}), "
            f"HWB({self._hwb}), CMYK({self._cmyk}), HEX({self._hex.to_string(with_alpha=True)})"
        )
