import sqlite3

import pytest

from autocompany.signals import ButtonSignal
from autocompany.tables import MODE_NOT_SELECTED_NOTICE, DBViewer, TableModel

LINKS = {ButtonSignal.SIG0: "employees", ButtonSignal.SIG2: "projects"}


def _create(path):
    connection = sqlite3.connect(path)
    with connection:
        connection.execute("CREATE TABLE employees (id INTEGER PRIMARY KEY, name TEXT)")
        connection.executemany(
            "INSERT INTO employees VALUES (?, ?)", [(1, "Ann"), (2, "Bob"), (3, "Cy")]
        )
        connection.execute("CREATE TABLE projects (id INTEGER PRIMARY KEY, title TEXT)")
        connection.execute("INSERT INTO projects VALUES (10, 'Bridge')")
    return connection


@pytest.fixture
def model(tmp_path):
    connection = _create(tmp_path / "db.sqlite")
    yield TableModel(connection, LINKS)
    connection.close()


@pytest.fixture
def viewer(tmp_path):
    path = tmp_path / "db.sqlite"
    _create(path).close()
    with DBViewer(str(path), LINKS) as opened:
        yield opened


def test_set_model_loads_rows(model):
    model.set_model(ButtonSignal.SIG0)
    assert model.current_table == "employees"
    assert model.columns == ["id", "name"]
    assert model.rows == [(1, "Ann"), (2, "Bob"), (3, "Cy")]


def test_set_model_uses_lower_bound(model):
    model.set_model(ButtonSignal.SIG1)
    assert model.current_table == "projects"
    assert model.rows == [(10, "Bridge")]


def test_set_model_past_last_key_raises(model):
    with pytest.raises(KeyError):
        model.set_model(ButtonSignal.SIG3)


def test_exec_filter_without_table_raises(model):
    with pytest.raises(ValueError):
        model.exec_filter("")


def test_exec_filter(model):
    model.set_model(ButtonSignal.SIG0)
    model.exec_filter("name = 'Bob'")
    assert model.rows == [(2, "Bob")]
    model.exec_filter("")
    assert len(model.rows) == 3


def test_add_new_row_inserts_zeros(model):
    model.set_model(ButtonSignal.SIG0)
    model.add_new_row()
    assert (0, "0") in model.rows
    assert len(model.rows) == 4


def test_add_new_row_twice_violates_key(model):
    model.set_model(ButtonSignal.SIG0)
    model.add_new_row()
    with pytest.raises(sqlite3.IntegrityError):
        model.add_new_row()
    assert len(model.rows) == 4


def test_remove_row_with_filter(model):
    model.set_model(ButtonSignal.SIG0)
    model.exec_filter("id = 2")
    model.remove_row("id = 1")
    assert model.rows == [(2, "Bob"), (3, "Cy")]


def test_remove_row_empty_filter_removes_all(model):
    model.set_model(ButtonSignal.SIG0)
    model.remove_row("")
    assert model.rows == []


def test_column_widths(model):
    assert model.column_widths() == []
    model.set_model(ButtonSignal.SIG0)
    widths = model.column_widths()
    assert len(widths) == len(model.columns)
    for index, column in enumerate(model.columns):
        assert widths[index] >= len(column)
        assert all(widths[index] >= len(str(row[index])) for row in model.rows)


def test_table_swapper_announces_name(viewer):
    names = []
    viewer.table_name_changed.connect(names.append)
    viewer.table_swapper(ButtonSignal.SIG0)
    viewer.table_swapper(ButtonSignal.SIG2)
    assert names == ["employees", "projects"]
    assert viewer.widths == viewer.model.column_widths()


def test_view_mod_swapper(viewer):
    viewer.view_mod_swapper(ButtonSignal.ONLY_VIEW)
    assert viewer.visible is False
    viewer.view_mod_swapper(ButtonSignal.EDIT)
    assert viewer.visible is True
    viewer.view_mod_swapper(ButtonSignal.SIG0)
    assert viewer.notices == [MODE_NOT_SELECTED_NOTICE]


def test_set_view_mod(viewer):
    viewer.set_view_mod(ButtonSignal.EDIT)
    assert viewer.view_mod is ButtonSignal.EDIT


def test_viewer_delegates_edits(viewer):
    viewer.table_swapper(ButtonSignal.SIG0)
    viewer.exec_filter("id > 1")
    assert [row[0] for row in viewer.model.rows] == [2, 3]
    viewer.add_new_row()
    assert len(viewer.model.rows) == 4
    viewer.remove_row("name = '0'")
    assert len(viewer.model.rows) == 3


def test_close_closes_connection(tmp_path):
    path = tmp_path / "db.sqlite"
    _create(path).close()
    viewer = DBViewer(str(path), LINKS)
    viewer.close()
    with pytest.raises(sqlite3.ProgrammingError):
        viewer.connection.execute("SELECT 1")