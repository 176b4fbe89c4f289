"""The top bar: current table title, filter and delete inputs, add-row action."""

from __future__ import annotations

from .signals import Signal


def format_table_name(name: str) -> str:
    """Turn ``some_table`` into the bold markdown title ``***SOME TABLE***``."""
    return "***" + " ".join(name.split("_")).upper() + "***"


class InputArea:
    """A single-line text input that reports its text when submitted."""

    def __init__(self, placeholder: str) -> None:
        self.text = placeholder
        self.text_entered = Signal()

    def submit(self, text: str) -> None:
        """Set the input's text and announce it, as pressing Enter does."""
        self.text = text
        self.text_entered.emit(text)


class TopBar:
    """Holds the table title and relays filter, delete and add-row requests."""

    def __init__(self) -> None:
        self.title = ""
        self.filter_area = InputArea("Enter filter")
        self.delete_area = InputArea("Enter delete filter")
        self.add_button_text = "Add row"

        self.filter_requested = Signal()
        self.delete_requested = Signal()
        self.add_row_requested = Signal()

        self.filter_area.text_entered.connect(self.submit_filter)
        self.delete_area.text_entered.connect(self.submit_delete)

    def set_table_name(self, name: str) -> None:
        self.title = format_table_name(name)

    def submit_filter(self, text: str) -> None:
        self.filter_requested.emit(text)

    def submit_delete(self, text: str) -> None:
        self.delete_requested.emit(text)

    def request_new_row(self) -> None:
        self.add_row_requested.emit()