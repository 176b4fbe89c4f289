"""The main window that wires the menu, the top bar and the table viewer."""

from __future__ import annotations

import os
import sqlite3
import sys
from typing import Any, Dict, List, Optional, Sequence, TextIO, Tuple

from .menu import MenuBar
from .signals import ButtonSignal
from .tables import DBViewer
from .topbar import TopBar

DATABASE_FILE = "test1.db"
WINDOW_SIZE = (1000, 800)
MENU_SIZE = (80, 650)
MENU_POSITION = (10, 20)
TOP_BAR_HEIGHT = 60

MENU_ICONS: Tuple[Tuple[ButtonSignal, str], ...] = (
    (ButtonSignal.SIG0, ":/ico/empl.png"),
    (ButtonSignal.SIG1, ":/ico/spec.png"),
    (ButtonSignal.SIG2, ":/ico/prjct.png"),
    (ButtonSignal.SIG3, ":/ico/prjct_stat.png"),
    (ButtonSignal.SIG4, ":/ico/depart.png"),
    (ButtonSignal.SIG5, ":/ico/depart_type.png"),
    (ButtonSignal.SIG6, ":/ico/doc.png"),
)

Geometry = Tuple[int, int, int, int]


def default_links() -> Dict[ButtonSignal, str]:
    """Map each left-menu signal to the table it shows."""
    return {
        ButtonSignal.SIG0: "employees",
        ButtonSignal.SIG1: "sepecializations",
        ButtonSignal.SIG2: "projects",
        ButtonSignal.SIG3: "project_status",
        ButtonSignal.SIG4: "department",
        ButtonSignal.SIG5: "department_type",
        ButtonSignal.SIG6: "project_document",
    }


def default_database_path(argv: Optional[Sequence[str]] = None) -> str:
    """The database file lying next to the program named by ``argv[0]``."""
    if argv is None:
        argv = sys.argv
    if argv and argv[0]:
        directory = os.path.dirname(os.path.abspath(argv[0]))
    else:
        directory = os.getcwd()
    return os.path.join(directory, DATABASE_FILE)


class MainWindow:
    """Owns the menu bar, top bar and database viewer and connects them."""

    def __init__(self, root: Any, db_path: str) -> None:
        self.parent = root
        self.background = "white"
        self.size = WINDOW_SIZE
        width, height = self.size

        self.menu_bar = MenuBar(vertical=True)
        for signal, icon in MENU_ICONS:
            self.menu_bar.append_object(signal, icon)
        self.menu_geometry: Geometry = (*MENU_POSITION, *MENU_SIZE)

        menu_width = MENU_SIZE[0]
        self.top_bar = TopBar()
        self.top_geometry: Geometry = (
            menu_width,
            MENU_POSITION[1],
            width - menu_width,
            TOP_BAR_HEIGHT,
        )

        self.links = default_links()
        self.viewer = DBViewer(db_path, self.links)
        self.viewer_geometry: Geometry = (
            menu_width,
            TOP_BAR_HEIGHT,
            width - menu_width,
            height - TOP_BAR_HEIGHT,
        )

        self.menu_bar.selected.connect(self.viewer.table_swapper)
        self.top_bar.filter_requested.connect(self.viewer.exec_filter)
        self.top_bar.delete_requested.connect(self.viewer.remove_row)
        self.top_bar.add_row_requested.connect(self.viewer.add_new_row)
        self.viewer.table_name_changed.connect(self.top_bar.set_table_name)

    def __enter__(self) -> "MainWindow":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self.viewer.close()

    def render(self) -> str:
        """Text picture of the title and the rows currently shown."""
        model = self.viewer.model
        lines: List[str] = [self.top_bar.title]
        if model.columns is not None:
            widths = self.viewer.widths or model.column_widths()
            lines.append(
                " | ".join(str(c).ljust(w) for c, w in zip(model.columns, widths))
            )
            for row in model.rows:
                lines.append(
                    " | ".join(str(v).ljust(w) for v, w in zip(row, widths))
                )
        return "\n".join(lines)


_HELP = (
    "commands: table <0-6>, filter <clause>, delete <clause>, add, show, quit"
)


def _run(window: MainWindow, commands: TextIO, out: TextIO, err: TextIO) -> None:
    for raw in commands:
        line = raw.strip()
        if not line:
            continue
        command, _, argument = line.partition(" ")
        command = command.lower()
        argument = argument.strip()
        try:
            if command in ("quit", "exit"):
                return
            if command == "table":
                buttons = window.menu_bar.buttons
                try:
                    index = int(argument)
                except ValueError:
                    raise ValueError(f"not a table number: {argument!r}") from None
                if not 0 <= index < len(buttons):
                    raise ValueError(f"table number out of range: {index}")
                buttons[index].click()
            elif command == "filter":
                window.top_bar.filter_area.submit(argument)
            elif command == "delete":
                window.top_bar.delete_area.submit(argument)
            elif command == "add":
                window.top_bar.request_new_row()
            elif command == "show":
                pass
            else:
                print(_HELP, file=err)
                continue
        except (sqlite3.Error, ValueError, KeyError) as error:
            print(f"(ERROR): {error}", file=err)
            continue
        print(window.render(), file=out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the database next to the program and serve commands from stdin."""
    if argv is None:
        argv = sys.argv
    with MainWindow(None, default_database_path(argv)) as window:
        _run(window, sys.stdin, sys.stdout, sys.stderr)
    return 0