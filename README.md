# autocompany

A small front-end for the tables of a company database kept in SQLite:
employees, specializations, projects, project statuses, departments,
department types and project documents.

A menu of seven buttons chooses the table to show. A top bar shows the name
of the current table and lets you filter its rows with an SQL `WHERE` clause,
delete the rows that match a clause, or add a new row filled with `"0"` in
every column.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running

```
autocompany
```

The database opened is `test1.db` in the directory that holds the program
being run (the directory of `sys.argv[0]`); no other path can be given on the
command line.

Commands are read from standard input, one per line:

| command            | effect                                                      |
|--------------------|-------------------------------------------------------------|
| `table <0-6>`      | click menu button 0–6 and show its table                    |
| `filter <clause>`  | show only the rows matching the `WHERE` clause              |
| `delete <clause>`  | delete the rows matching the clause (all rows if empty)     |
| `add`              | insert a row with `"0"` in every column                     |
| `show`             | print the current view again                                |
| `quit` / `exit`    | stop                                                        |

After every command the title (for example `***PROJECT STATUS***`) and the
rows on show are printed to standard output as a text table. Database errors
and bad table numbers are reported on standard error as `(ERROR): ...`; an
unknown command prints the list of commands there.

The buttons map to tables in this order: `employees`, `sepecializations`,
`projects`, `project_status`, `department`, `department_type`,
`project_document`.

## What it does not do

There is no graphical window. The menu buttons keep an icon path and a
highlight colour, and the window keeps sizes and geometries, but nothing is
drawn; the package is driven by the text commands above or from Python.
It does not create the database or its tables: they must already exist.

## Using it from Python

- `autocompany.signals` — `ButtonSignal`, the menu (`SIG0`–`SIG6`) and
  view-mode (`EDIT`, `ONLY_VIEW`) identifiers, and `Signal`, a slot list with
  `connect`, `disconnect` and `emit`.
- `autocompany.menu` — `MenuButton` and `MenuBar`; clicking a button clears
  the other buttons and emits the chosen `ButtonSignal` on `MenuBar.selected`.
- `autocompany.topbar` — `TopBar`, `InputArea` and `format_table_name`, which
  turns `project_status` into `***PROJECT STATUS***`.
- `autocompany.tables` — `TableModel` and `DBViewer`, which load a table,
  apply filters, add and remove rows and compute column widths.
  `DBViewer.view_mod_swapper` shows the table for `EDIT`, hides it for
  `ONLY_VIEW`, and otherwise records a hint in `notices`.
- `autocompany.query_ui` — `UnitTextLabel` and `FieldTextLabels` for editing
  one record field by field, and `DBQueryViewer`, which fetches every row of
  the table linked to a signal.
- `autocompany.app` — `MainWindow` (which wires the pieces together and has a
  `render` method), `default_links`, `default_database_path` and `main`.

```python
from autocompany.signals import ButtonSignal
from autocompany.app import default_links
from autocompany.tables import DBViewer

with DBViewer("company.db", default_links()) as viewer:
    viewer.table_swapper(ButtonSignal.SIG0)   # shows "employees"
    viewer.exec_filter("id > 10")
    print(viewer.model.columns, viewer.model.rows)
```