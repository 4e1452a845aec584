from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator


class ReentrancyGuard:
    """
    Scoped guard that breaks logical recursion within one call stack.

    ``acquire()`` yields True for the outermost caller and False for nested
    ones. The outermost scope releases the guard on every exit path,
    including exceptions. It is not a thread lock.

    Example::

        with guard.acquire() as entered:
            if not entered:
                return
            ...
    """
    __slots__ = ("name", "_active")

    def __init__(self, name: str = "guard") -> None:
        self.name = name
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    @contextmanager
    def acquire(self) -> Iterator[bool]:
        if self._active:
            yield False
            return
        self._active = True
        try:
            yield True
        finally:
            self._active = False

    def __repr__(self) -> str:
        return f"ReentrancyGuard({self.name!r}, active={self._active})"
