import pytest

from dbmc.client import (
    MAX_COMMAND_LENGTH,
    ClientModel,
    Region,
    table_view_geometry,
)


def test_default_tables_are_the_samples():
    model = ClientModel()
    assert model.tables == ["products", "users", "orders"]


def test_default_columns_and_row():
    model = ClientModel()
    assert model.columns == ["Column 1", "Column 2", "Column 3"]
    assert model.rows == [("Row 1 Col 1", "Row 1 Col 2", "Row 1 Col 3")]


def test_custom_tables():
    model = ClientModel(["alpha", "beta"])
    assert model.tables == ["alpha", "beta"]


def test_initial_title():
    assert ClientModel().title == "Database Management Client"


def test_execute_returns_command_and_remembers_it():
    model = ClientModel()
    command = "SELECT * FROM users;"
    assert model.execute(command) == command
    assert model.last_command == command


def test_execute_truncates_to_buffer():
    model = ClientModel()
    result = model.execute("x" * (MAX_COMMAND_LENGTH + 50))
    assert len(result) == MAX_COMMAND_LENGTH
    assert MAX_COMMAND_LENGTH == 1023


def test_execute_keeps_command_that_fits():
    model = ClientModel()
    command = "y" * MAX_COMMAND_LENGTH
    assert model.execute(command) == command


def test_select_table_sets_title():
    model = ClientModel()
    assert model.select_table(1) == "users"
    assert model.title == "Selected table: users"


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_select_table_out_of_range(index):
    model = ClientModel()
    with pytest.raises(IndexError):
        model.select_table(index)
    assert model.title == "Database Management Client"


def test_select_table_on_empty_list():
    with pytest.raises(IndexError):
        ClientModel([]).select_table(0)


@pytest.mark.parametrize("point", [(620, 10), (720, 40), (650, 25)])
def test_hit_execute_button(point):
    assert ClientModel().hit_test(*point) is Region.EXECUTE_BUTTON


@pytest.mark.parametrize("point", [(10, 120), (210, 620), (100, 300)])
def test_hit_tables_list(point):
    assert ClientModel().hit_test(*point) is Region.TABLES_LIST


@pytest.mark.parametrize("point", [(0, 0), (721, 25), (500, 50), (211, 300), (100, 621)])
def test_hit_nothing(point):
    assert ClientModel().hit_test(*point) is None


def test_region_rects():
    assert Region.EXECUTE_BUTTON.rect == (620, 10, 100, 30)
    assert Region.TABLES_LIST.rect == (10, 120, 200, 500)
    assert Region.SQL_INPUT.rect == (10, 10, 600, 100)
    assert Region.TABLE_VIEW.rect == (220, 120, 750, 500)
    model = ClientModel()
    for region in (Region.EXECUTE_BUTTON, Region.TABLES_LIST):
        x, y, width, height = region.rect
        assert model.hit_test(x, y) is region
        assert model.hit_test(x + width, y + height) is region


def test_table_view_geometry_origin_fixed():
    x, y, _, _ = table_view_geometry(1000, 700)
    assert (x, y) == (220, 120)


def test_table_view_geometry_tracks_window_size():
    _, _, w1, h1 = table_view_geometry(800, 600)
    _, _, w2, h2 = table_view_geometry(801, 605)
    assert w2 - w1 == 1
    assert h2 - h1 == 5