"""Editable row views built from labelled text fields, and a raw table query."""

from __future__ import annotations

import sqlite3
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from .signals import ButtonSignal, Signal
from .tables import _lower_bound


class UnitTextLabel:
    """One labelled text field for a column; reports its id when edited."""

    def __init__(
        self,
        text: str,
        multiline: bool,
        label_id: int,
        column: str,
        read_only: bool,
    ) -> None:
        self.text = text
        self.multiline = multiline
        self.label_id = label_id
        self.column = column
        self.read_only = read_only
        self.caption = "&" + column + ":"
        self.text_changed = Signal()

    def set_text(self, text: str) -> None:
        """Replace the stored text without announcing it."""
        self.text = text

    def change_text(self, text: str) -> None:
        """Store edited text and announce this label's id."""
        self.text = text
        self.text_changed.emit(self.label_id)


class FieldTextLabels:
    """A row of labelled fields; reports which field of which row changed."""

    def __init__(
        self,
        labels_data: Iterable[Tuple[str, str, bool]],
        read_only: bool,
        field_id: int,
    ) -> None:
        self.read_only = read_only
        self.field_id = field_id
        self.labels: List[UnitTextLabel] = []
        self.query_changed = Signal()
        for column, text, multiline in labels_data:
            self.append_new_row(column, text, multiline)

    def field_info(self) -> List[Tuple[str, str]]:
        """Pairs of column name and current text, in field order."""
        return [(label.column, label.text) for label in self.labels]

    def append_new_row(self, column: str, text: str, multiline: bool) -> UnitTextLabel:
        """Add a field for *column* and return it."""
        label = UnitTextLabel(text, multiline, len(self.labels), column, self.read_only)
        label.text_changed.connect(self._label_changed)
        self.labels.append(label)
        return label

    def _label_changed(self, label_id: int) -> None:
        self.query_changed.emit(self.field_id, label_id)


class DBQueryViewer:
    """Loads a whole table chosen by a menu signal with a plain query."""

    def __init__(
        self,
        connection: sqlite3.Connection,
        links: Mapping[ButtonSignal, str],
    ) -> None:
        self.connection = connection
        self.links = dict(links)
        self.columns: Optional[List[str]] = None
        self.rows: List[Tuple[Any, ...]] = []

    def table_swapper(self, signal: ButtonSignal) -> List[Tuple[Any, ...]]:
        """Fetch every row of the table linked to *signal*."""
        table = _lower_bound(self.links, signal)
        cursor = self.connection.execute(
            "SELECT * FROM " + '"' + table.replace('"', '""') + '"'
        )
        self.columns = [description[0] for description in cursor.description]
        self.rows = cursor.fetchall()
        return self.rows