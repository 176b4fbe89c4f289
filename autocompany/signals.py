"""Button identifiers and a small synchronous signal/slot mechanism."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, List

Slot = Callable[..., Any]


class ButtonSignal(IntEnum):
    """Identifiers emitted by the menu buttons and the view-mode buttons."""

    # Left vertical menu
    SIG0 = 0
    SIG1 = 1
    SIG2 = 2
    SIG3 = 3
    SIG4 = 4
    SIG5 = 5
    SIG6 = 6
    # Top horizontal menu (view modes)
    EDIT = 7
    ONLY_VIEW = 8


class Signal:
    """A list of callables invoked, in connection order, on every emit."""

    def __init__(self) -> None:
        self._slots: List[Slot] = []

    def connect(self, slot: Slot) -> None:
        """Attach *slot*; connecting it again makes it fire twice."""
        if not callable(slot):
            raise TypeError(f"slot must be callable, got {slot!r}")
        self._slots.append(slot)

    def disconnect(self, slot: Slot) -> None:
        """Detach every connection of *slot*."""
        remaining = [s for s in self._slots if s != slot]
        if len(remaining) == len(self._slots):
            raise ValueError(f"{slot!r} is not connected")
        self._slots = remaining

    def emit(self, *args: Any) -> None:
        """Call every connected slot with *args*."""
        for slot in list(self._slots):
            slot(*args)

    def __len__(self) -> int:
        return len(self._slots)