"""
Updater: the dispatcher between color windows, text fields and the
ColorConverter.

Every edit goes through one dispatch: the new channel values are written
into the converter, the other windows are updated and/or redrawn according
to :data:`~chromapick.sync.compat.COMPATIBILITY`, the text fields are
rewritten and the host listeners are told once. A dispatch guard keeps the
Updater's own writes into fields from being taken for user edits.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Union
import logging

from ..converter.converter import ColorConverter, ConversionResult
from ..converter.transaction import ReentrancyGuard
from ..exceptions import ChromapickError
from ..types.color_types import ColorModel
from ..types.kinds import FieldKind
from ..utils.signal import Signal
from .compat import WINDOW_CHANNELS, action_for
from .fields import FIELD_SPECS, FieldState, TextField, format_field, parse_field
from .holder import ColorHolder
from .windows import ColorWindow

logger = logging.getLogger(__name__)


class UpdateListener:
    """Host-side listener; override the events of interest."""

    def on_color_window_update(self, window: ColorWindow) -> None:
        pass

    def on_text_field_update(self, field: TextField) -> None:
        pass


@dataclass
class _FieldSlot:
    kind: FieldKind
    state: FieldState = FieldState.IDLE
    snapshot: str = ""


class Updater:
    def __init__(
        self,
        converter: Optional[ColorConverter] = None,
        holder: Optional[ColorHolder] = None,
        windows: Iterable[ColorWindow] = (),
        fields: Union[Dict[TextField, FieldKind], Iterable[TextField]] = (),
    ) -> None:
        self.converter = converter if converter is not None else ColorConverter()
        self.holder = holder if holder is not None else ColorHolder()
        self.holder.on_convert(self.converter)
        self.converter.subscribe(self.holder.on_convert)

        self._dispatch = ReentrancyGuard("dispatch")
        self._windows: List[ColorWindow] = []
        self._fields: Dict[TextField, _FieldSlot] = {}

        self.color_window_updated = Signal("color_window_updated")
        self.text_field_updated = Signal("text_field_updated")

        self.attach_windows(*windows)
        if isinstance(fields, dict):
            for field, kind in fields.items():
                self.attach_field(field, kind)
        else:
            self.attach_fields(*fields)

    # ------------------ PROPERTIES ------------------
    @property
    def windows(self) -> Sequence[ColorWindow]:
        return tuple(self._windows)

    @property
    def fields(self) -> Sequence[TextField]:
        return tuple(self._fields)

    @property
    def is_dispatching(self) -> bool:
        return self._dispatch.active

    def field_kind(self, field: TextField) -> FieldKind:
        return self._fields[field].kind

    def field_state(self, field: TextField) -> FieldState:
        return self._fields[field].state

    # ------------------ LISTENERS ------------------
    def subscribe(self, listener: UpdateListener) -> None:
        self.color_window_updated.connect(listener.on_color_window_update)
        self.text_field_updated.connect(listener.on_text_field_update)

    def unsubscribe(self, listener: UpdateListener) -> None:
        self.color_window_updated.disconnect(listener.on_color_window_update)
        self.text_field_updated.disconnect(listener.on_text_field_update)

    # ------------------ WINDOWS ------------------
    def attach_window(self, window: ColorWindow) -> None:
        if any(w is window for w in self._windows):
            return
        window.converter = self.converter
        window.holder = self.holder
        window.selector_moved.connect(self.on_window_changed)
        window.update()
        window.redraw()
        self._windows.append(window)

    def attach_windows(self, *windows: ColorWindow) -> None:
        for window in windows:
            self.attach_window(window)

    def detach_window(self, *windows: ColorWindow) -> None:
        for window in windows:
            if window in self._windows:
                self._windows.remove(window)
                window.selector_moved.disconnect(self.on_window_changed)

    # ------------------ FIELDS ------------------
    def attach_field(self, field: TextField, kind: Union[FieldKind, str, None] = None) -> None:
        """Attach ``field``; without ``kind`` the field's tag is parsed."""
        if field in self._fields:
            return
        if kind is None:
            if field.tag is None:
                raise ValueError(f"{field!r} has neither a kind nor a tag")
            kind = FieldKind.from_tag(field.tag)
        elif isinstance(kind, str):
            kind = FieldKind.from_tag(kind)

        self._fields[field] = _FieldSlot(kind)
        field.text_changed.connect(self.on_field_text_changed)
        field.focused.connect(self.on_field_focused)
        field.unfocused.connect(self.on_field_committed)
        field.committed.connect(self.on_field_committed)
        self._show(field)

    def attach_fields(self, *fields: TextField, kind: Union[FieldKind, str, None] = None) -> None:
        for field in fields:
            self.attach_field(field, kind)

    def attach_rgb_fields(self, r: TextField, g: TextField, b: TextField, a: Optional[TextField] = None) -> None:
        self.attach_field(r, FieldKind.RGBA_R)
        self.attach_field(g, FieldKind.RGBA_G)
        self.attach_field(b, FieldKind.RGBA_B)
        if a is not None:
            self.attach_field(a, FieldKind.RGBA_A)

    def attach_hsv_fields(self, h: TextField, s: TextField, v: TextField) -> None:
        self.attach_field(h, FieldKind.HSV_H)
        self.attach_field(s, FieldKind.HSV_S)
        self.attach_field(v, FieldKind.HSV_V)

    def attach_hsl_fields(self, h: TextField, s: TextField, l: TextField) -> None:
        self.attach_field(h, FieldKind.HSL_H)
        self.attach_field(s, FieldKind.HSL_S)
        self.attach_field(l, FieldKind.HSL_L)

    def attach_hwb_fields(self, h: TextField, w: TextField, b: TextField) -> None:
        self.attach_field(h, FieldKind.HWB_H)
        self.attach_field(w, FieldKind.HWB_W)
        self.attach_field(b, FieldKind.HWB_B)

    def attach_cmyk_fields(self, c: TextField, m: TextField, y: TextField, k: TextField) -> None:
        self.attach_field(c, FieldKind.CMYK_C)
        self.attach_field(m, FieldKind.CMYK_M)
        self.attach_field(y, FieldKind.CMYK_Y)
        self.attach_field(k, FieldKind.CMYK_K)

    def detach_field(self, *fields: TextField) -> None:
        for field in fields:
            if self._fields.pop(field, None) is None:
                continue
            field.text_changed.disconnect(self.on_field_text_changed)
            field.focused.disconnect(self.on_field_focused)
            field.unfocused.disconnect(self.on_field_committed)
            field.committed.disconnect(self.on_field_committed)

    def detach_all(self) -> None:
        self.detach_window(*self._windows)
        self.detach_field(*self._fields)

    # ------------------ WINDOW DISPATCH ------------------
    def on_window_changed(self, window: ColorWindow) -> bool:
        """
        Dispatch a selector move of ``window``.

        Returns False when nothing was written: the window reports the values
        the converter already holds, or a dispatch is already running.
        """
        with self._dispatch.acquire() as entered:
            if not entered:
                logger.debug("Window %r changed during a dispatch, ignored", window)
                return False

            model, channels = WINDOW_CHANNELS[window.kind]
            values = window.channel_values()
            record = self.converter.model(model)
            if all(record.get(name) == values[name] for name in channels):
                logger.debug("Window %r reports current %s values, nothing to do", window, model.value)
                return False

            try:
                self.converter.apply_channels(model, values)
            except ChromapickError as error:
                logger.debug("Rejected values %s from %r: %s", values, window, error)
                window.update()
                return False

            for target in self._windows:
                if target is window:
                    continue
                action = action_for(window.kind, target.kind)
                if action.updates:
                    target.update()
                if action.redraws:
                    target.redraw()

            self._refresh_fields()
            self.color_window_updated.emit(window)
        return True

    # ------------------ FIELD DISPATCH ------------------
    def on_field_focused(self, field: TextField) -> None:
        """Idle -> Editing: remember the shown text and drop the suffixes."""
        slot = self._fields.get(field)
        if slot is None or slot.state is FieldState.EDITING:
            return
        slot.snapshot = field.text
        slot.state = FieldState.EDITING
        self._write(field, format_field(slot.kind, self.converter, editing=True))

    def on_field_text_changed(self, field: TextField, text: str) -> None:
        slot = self._fields.get(field)
        if slot is None or self._dispatch.active or slot.state is FieldState.EDITING:
            # own writes and drafts in progress
            return
        self.on_field_committed(field)

    def on_field_committed(self, field: TextField) -> bool:
        """
        Commit the draft of ``field``.

        A valid draft is written into the converter and fanned out; an
        invalid one restores the text shown before editing started.
        """
        slot = self._fields.get(field)
        if slot is None:
            return False

        with self._dispatch.acquire() as entered:
            if not entered:
                return False

            draft = field.text
            try:
                result = self._apply_field(slot.kind, draft)
            except ChromapickError as error:
                logger.debug("Reverting %s field from %r: %s", slot.kind.value, draft, error)
                slot.state = FieldState.IDLE
                self._write(field, slot.snapshot)
                return False

            slot.state = FieldState.IDLE
            self._show(field)
            if not result.changed:
                return False

            for window in self._windows:
                window.update()
                window.redraw()
            self._refresh_fields(exclude=field)
            self.text_field_updated.emit(field)
        return True

    def _apply_field(self, kind: FieldKind, draft: str) -> ConversionResult:
        parsed = parse_field(kind, draft)
        if isinstance(parsed, str):
            return self.converter.apply_hex(parsed)
        return self.converter.apply_channels(FIELD_SPECS[kind].model, parsed)

    # ------------------ HOST DRIVEN CHANGES ------------------
    def set_color(self, model: Union[ColorModel, str], values: Union[Sequence[int], str]) -> ConversionResult:
        """Change the color from the host and refresh every attached component."""
        result = self.converter.apply_model(model, values)
        if result.changed:
            self.refresh()
        return result

    def set_color_int(self, color: int) -> ConversionResult:
        result = self.converter.apply_color_int(color)
        if result.changed:
            self.refresh()
        return result

    def refresh(self) -> None:
        """Update and redraw every window and rewrite every idle field."""
        with self._dispatch.acquire():
            for window in self._windows:
                window.update()
                window.redraw()
            self._refresh_fields()

    # ------------------ HELPERS ------------------
    def _refresh_fields(self, exclude: Optional[TextField] = None) -> None:
        for field, slot in self._fields.items():
            if field is exclude:
                continue
            if slot.state is FieldState.EDITING:
                # the draft stays, a later revert shows the current color
                slot.snapshot = format_field(slot.kind, self.converter)
                continue
            self._show(field)

    def _show(self, field: TextField) -> None:
        slot = self._fields[field]
        text = format_field(slot.kind, self.converter)
        slot.snapshot = text
        self._write(field, text)

    def _write(self, field: TextField, text: str) -> None:
        with self._dispatch.acquire():
            field.set_text(text)

    def __repr__(self) -> str:
        return (
            f"Updater({self.converter!r}, windows={len(self._windows)}, "
            f"fields={len(self._fields)})"
        )
