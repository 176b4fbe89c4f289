"""Checkable menu buttons and the bar that keeps only one of them selected."""

from __future__ import annotations

from typing import List, Optional, Tuple

from .signals import ButtonSignal, Signal

ICON_SIZE = (50, 50)


class MenuButton:
    """A checkable button that reports its identifier when clicked."""

    def __init__(self, signal: ButtonSignal, icon_path: str = "") -> None:
        self.signal = signal
        self.icon_path: Optional[str] = icon_path or None
        self.icon_size: Optional[Tuple[int, int]] = ICON_SIZE if self.icon_path else None
        self.checkable = True
        self.checked = False
        self.hovered = False
        self.selected = Signal()

    @property
    def highlight(self) -> str:
        """Fill colour of the button's ellipse for its current state."""
        if self.checked:
            return "black"
        if self.hovered:
            return "lightgray"
        return "white"

    def click(self) -> None:
        """Toggle the checked state and announce the button's identifier."""
        if self.checkable:
            self.checked = not self.checked
        self.selected.emit(self.signal)


class MenuBar:
    """An ordered set of menu buttons of which at most one stays checked."""

    def __init__(self, vertical: bool = True) -> None:
        self.vertical = vertical
        self._buttons: List[MenuButton] = []
        self.selected = Signal()

    @property
    def orientation(self) -> str:
        return "vertical" if self.vertical else "horizontal"

    @property
    def buttons(self) -> Tuple[MenuButton, ...]:
        return tuple(self._buttons)

    def append_object(self, signal: ButtonSignal, icon_path: str = "") -> MenuButton:
        """Add a button for *signal* and return it."""
        button = MenuButton(signal, icon_path)
        self._buttons.append(button)
        button.selected.connect(self.handle_selection)
        return button

    def handle_selection(self, signal: ButtonSignal) -> None:
        """Uncheck every button except those for *signal*, then pass it on."""
        for button in self._buttons:
            if button.signal != signal:
                button.checked = False
        self.selected.emit(signal)