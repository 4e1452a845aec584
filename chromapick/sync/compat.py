"""
Window kind compatibility table.

``COMPATIBILITY[(sender, target)]`` says what an attached window of kind
``target`` must do after a window of kind ``sender`` changed the color:

    NONE               nothing it shows depends on the change
    UPDATE             reposition the selector from the new color
    REDRAW             regenerate the cached layers, selector stays
    UPDATE_AND_REDRAW  both
"""
from __future__ import annotations
from enum import Enum
from typing import Dict, Tuple
from ..types.color_types import ColorModel
from ..types.kinds import WindowKind


class Action(Enum):
    NONE = 0
    UPDATE = 1
    REDRAW = 2
    UPDATE_AND_REDRAW = 3

    @property
    def updates(self) -> bool:
        return self in (Action.UPDATE, Action.UPDATE_AND_REDRAW)

    @property
    def redraws(self) -> bool:
        return self in (Action.REDRAW, Action.UPDATE_AND_REDRAW)


# model and channels written by each window kind, in range order
WINDOW_CHANNELS: Dict[WindowKind, Tuple[ColorModel, Tuple[str, ...]]] = {
    WindowKind.HUE: (ColorModel.HSV, ("h",)),
    WindowKind.ALPHA: (ColorModel.RGBA, ("a",)),
    WindowKind.VALUE: (ColorModel.HSV, ("v",)),
    WindowKind.SV_PLANE: (ColorModel.HSV, ("s", "v")),
    WindowKind.SL_PLANE: (ColorModel.HSL, ("s", "l")),
    WindowKind.HS_DISC: (ColorModel.HSV, ("h", "s")),
}

_K = WindowKind
_N, _U, _R, _UR = Action.NONE, Action.UPDATE, Action.REDRAW, Action.UPDATE_AND_REDRAW

_TARGETS = (_K.HUE, _K.ALPHA, _K.VALUE, _K.SV_PLANE, _K.SL_PLANE, _K.HS_DISC)
_ROWS = {
    #            HUE  ALPHA VALUE SV   SL   HS
    _K.HUE:      (_U, _R,   _R,   _R,  _R,  _U),
    _K.ALPHA:    (_N, _U,   _N,   _N,  _N,  _N),
    _K.VALUE:    (_N, _R,   _U,   _U,  _U,  _R),
    _K.SV_PLANE: (_N, _R,   _U,   _U,  _U,  _UR),
    _K.SL_PLANE: (_N, _R,   _U,   _U,  _U,  _UR),
    _K.HS_DISC:  (_U, _R,   _R,   _UR, _UR, _U),
}

COMPATIBILITY: Dict[Tuple[WindowKind, WindowKind], Action] = {
    (sender, target): action
    for sender, row in _ROWS.items()
    for target, action in zip(_TARGETS, row)
}


def action_for(sender: WindowKind, target: WindowKind) -> Action:
    return COMPATIBILITY[(WindowKind(sender), WindowKind(target))]
