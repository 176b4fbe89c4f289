"""SQLite-backed table model and the viewer that drives it."""

from __future__ import annotations

import sqlite3
from typing import Any, List, Mapping, Optional, Tuple

from .signals import ButtonSignal, Signal

MODE_NOT_SELECTED_NOTICE = (
    "THE DISPLAY OPTION IS NOT SELECTED\n"
    "Hint: buttons 'View' and 'Edit' at the top"
)


def _lower_bound(links: Mapping[ButtonSignal, str], signal: ButtonSignal) -> str:
    """Value of the first key not less than *signal*, as an ordered map finds it."""
    for key in sorted(links):
        if key >= signal:
            return links[key]
    raise KeyError(f"no table is linked at or after {signal!r}")


def _quote(identifier: str) -> str:
    return '"' + identifier.replace('"', '""') + '"'


class TableModel:
    """The rows of one database table, reloaded after every change."""

    def __init__(
        self,
        connection: sqlite3.Connection,
        links: Mapping[ButtonSignal, str],
    ) -> None:
        self.connection = connection
        self.links = dict(links)
        self.current_table = ""
        self.columns: Optional[List[str]] = None
        self.rows: List[Tuple[Any, ...]] = []

    def _require_table(self) -> str:
        if not self.current_table:
            raise ValueError("no table is selected")
        return self.current_table

    def _select(self, filter_clause: str = "") -> None:
        table = self._require_table()
        query = f"SELECT * FROM {_quote(table)}"
        if filter_clause:
            query += f" WHERE {filter_clause}"
        cursor = self.connection.execute(query)
        self.columns = [description[0] for description in cursor.description]
        self.rows = cursor.fetchall()

    def _table_columns(self) -> List[str]:
        table = self._require_table()
        info = self.connection.execute(f"PRAGMA table_info({_quote(table)})").fetchall()
        if not info:
            raise sqlite3.OperationalError(f"no such table: {table}")
        return [row[1] for row in info]

    def set_model(self, signal: ButtonSignal) -> None:
        """Select the table linked to *signal* and load all of its rows."""
        self.current_table = _lower_bound(self.links, signal)
        self._select()

    def exec_filter(self, filter_clause: str) -> None:
        """Reload the current table showing only rows matching *filter_clause*."""
        self._select(filter_clause)

    def add_new_row(self) -> None:
        """Insert a row with "0" in every column, then show the whole table."""
        table = self._require_table()
        columns = self._table_columns()
        column_list = ", ".join(_quote(column) for column in columns)
        placeholders = ", ".join("?" for _ in columns)
        with self.connection:
            self.connection.execute(
                f"INSERT INTO {_quote(table)} ({column_list}) VALUES ({placeholders})",
                ["0"] * len(columns),
            )
        self.exec_filter("")

    def remove_row(self, filter_clause: str) -> None:
        """Delete every row matching *filter_clause*, then show the whole table."""
        table = self._require_table()
        query = f"DELETE FROM {_quote(table)}"
        if filter_clause:
            query += f" WHERE {filter_clause}"
        with self.connection:
            self.connection.execute(query)
        self._select()

    def column_widths(self) -> List[int]:
        """Width of each column fitted to its header and contents."""
        if self.columns is None:
            return []
        return [
            max([len(str(column))] + [len(str(row[index])) for row in self.rows])
            for index, column in enumerate(self.columns)
        ]


class DBViewer:
    """Opens the database and routes menu and top-bar requests to the model."""

    def __init__(self, db_path: str, links: Mapping[ButtonSignal, str]) -> None:
        self.connection = sqlite3.connect(db_path)
        self.model = TableModel(self.connection, links)
        self.view_mod: Optional[ButtonSignal] = None
        self.visible = True
        self.widths: List[int] = []
        self.notices: List[str] = []
        self.table_name_changed = Signal()

    def __enter__(self) -> "DBViewer":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _resize(self) -> None:
        self.widths = self.model.column_widths()

    def set_view_mod(self, mode: ButtonSignal) -> None:
        self.view_mod = mode

    def table_swapper(self, signal: ButtonSignal) -> None:
        """Show the table linked to *signal* and announce its name."""
        self.model.set_model(signal)
        self._resize()
        self.table_name_changed.emit(self.model.current_table)

    def view_mod_swapper(self, mode: ButtonSignal) -> None:
        """Show the table for EDIT, hide it for ONLY_VIEW, otherwise add a hint."""
        if mode == ButtonSignal.EDIT:
            self._resize()
            self.visible = True
        elif mode == ButtonSignal.ONLY_VIEW:
            self.visible = False
        else:
            self.notices.append(MODE_NOT_SELECTED_NOTICE)

    def exec_filter(self, filter_clause: str) -> None:
        self.model.exec_filter(filter_clause)
        self._resize()

    def add_new_row(self) -> None:
        self.model.add_new_row()
        self._resize()

    def remove_row(self, filter_clause: str) -> None:
        self.model.remove_row(filter_clause)
        self._resize()

    def close(self) -> None:
        self.connection.close()