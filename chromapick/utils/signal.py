from __future__ import annotations
from typing import Any, Callable, List

Callback = Callable[..., Any]


class Signal:
    """
    Ordered list of subscribers.

    Callbacks run in subscription order. Subscribing the same callable twice
    is a no-op, so attaching a component repeatedly never duplicates events.
    """

    __slots__ = ("name", "_callbacks")

    def __init__(self, name: str = "signal") -> None:
        self.name = name
        self._callbacks: List[Callback] = []

    def connect(self, callback: Callback) -> Callback:
        if not callable(callback):
            raise TypeError(f"{self.name}: subscriber must be callable, got {callback!r}")
        if callback not in self._callbacks:
            self._callbacks.append(callback)
        return callback

    def disconnect(self, callback: Callback) -> bool:
        try:
            self._callbacks.remove(callback)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        self._callbacks.clear()

    def emit(self, *args: Any, **kwargs: Any) -> None:
        # copy so that callbacks may unsubscribe themselves
        for callback in list(self._callbacks):
            callback(*args, **kwargs)

    def __len__(self) -> int:
        return len(self._callbacks)

    def __contains__(self, callback: object) -> bool:
        return callback in self._callbacks

    def __repr__(self) -> str:
        return f"Signal({self.name!r}, subscribers={len(self._callbacks)})"
