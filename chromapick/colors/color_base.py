from __future__ import annotations
from typing import Any, ClassVar, Dict, Iterable, Optional, Sequence, Tuple, TYPE_CHECKING
from ..exceptions import ArityMismatchError, UnknownModelError
from ..types.color_types import ColorModel, ChannelVector
from .channel import Channel

if TYPE_CHECKING:
    from ..converter.converter import ColorConverter


class ColorModelBase:
    """
    Mutable record of one color model, owned by a single ColorConverter.

    Subclasses only declare ``model`` and ``channels``; a read-only property
    is generated for every channel name. Values change only through
    :meth:`_assign`, which the owning converter calls inside its cascade.
    """
    __slots__ = ("_values", "_suffixes", "_owner")

    model: ClassVar[ColorModel]
    channels: ClassVar[Tuple[Channel, ...]] = ()
    _index: ClassVar[Dict[str, int]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._index = {ch.name: i for i, ch in enumerate(cls.channels)}
        for i, ch in enumerate(cls.channels):
            setattr(cls, ch.name, property(lambda self, i=i: self._values[i], doc=f"{ch.name} channel"))

    def __init__(self, values: Optional[Sequence[int]] = None, owner: Optional["ColorConverter"] = None) -> None:
        self._owner = owner
        self._suffixes = [ch.suffix for ch in self.channels]
        if values is None:
            self._values = tuple(ch.minimum for ch in self.channels)
        else:
            self._values = self.validate(values)

    # ------------------ CLASS HELPERS ------------------
    @classmethod
    def num_channels(cls) -> int:
        return len(cls.channels)

    @classmethod
    def channel(cls, name: str) -> Channel:
        try:
            return cls.channels[cls._index[name]]
        except KeyError:
            raise UnknownModelError(f"{cls.model.value} has no channel {name!r}") from None

    @classmethod
    def channel_index(cls, name: str) -> int:
        cls.channel(name)
        return cls._index[name]

    @classmethod
    def channel_names(cls) -> Tuple[str, ...]:
        return tuple(ch.name for ch in cls.channels)

    @classmethod
    def validate(cls, values: Sequence[Any]) -> ChannelVector:
        """Bound-check a full channel vector, returning it as a tuple of ints."""
        values = tuple(values)
        if len(values) != len(cls.channels):
            raise ArityMismatchError(len(cls.channels), len(values))
        return tuple(ch.validate(v) for ch, v in zip(cls.channels, values))

    @classmethod
    def in_range(cls, values: Sequence[Any]) -> bool:
        values = tuple(values)
        return len(values) == len(cls.channels) and all(
            ch.contains(v) for ch, v in zip(cls.channels, values)
        )

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def values(self) -> ChannelVector:
        return self._values

    @property
    def owner(self) -> Optional["ColorConverter"]:
        return self._owner

    @property
    def suffixes(self) -> Tuple[str, ...]:
        return tuple(self._suffixes)

    def get(self, name: str) -> int:
        return self._values[self.channel_index(name)]

    # ------------------ MUTATION (owner only) ------------------
    def _assign(self, values: Iterable[int]) -> bool:
        """Store already validated values, returning whether anything changed."""
        values = tuple(values)
        changed = values != self._values
        self._values = values
        return changed

    def set_suffix(self, *suffixes: str) -> None:
        """Replace the display suffixes, starting from the first channel."""
        if len(suffixes) > len(self._suffixes):
            raise ArityMismatchError(len(self._suffixes), len(suffixes))
        self._suffixes[:len(suffixes)] = suffixes

    # ------------------ FORMATTING ------------------
    def _format(self, values: Sequence[int], suffixes: Sequence[str], with_suffix: bool) -> str:
        if not with_suffix:
            return " ".join(str(v) for v in values)
        return "".join(f"{v}{s}" for v, s in zip(values, suffixes))

    def to_string(self, with_suffix: bool = True) -> str:
        """``"205°, 54%, 71%"`` with suffixes, ``"205 54 71"`` without."""
        return self._format(self._values, self._suffixes, with_suffix)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        body = ", ".join(f"{ch.name}={v}" for ch, v in zip(self.channels, self._values))
        return f"{self.__class__.__name__}({body})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorModelBase):
            return self.model == other.model and self._values == other._values
        if isinstance(other, tuple):
            return self._values == other
        return NotImplemented

    def __iter__(self):
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)


def build_registry(*classes: type) -> Dict[ColorModel, type]:
    return {cls.model: cls for cls in classes}
