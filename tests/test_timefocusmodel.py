import pytest

from typinganalyzer.sound import PeriodType
from typinganalyzer.timefocusmodel import Role, TimeFocusModel
from typinganalyzer.typingrate import TypingRate


@pytest.fixture
def model():
    m = TimeFocusModel()
    m.insert_rows(0, 2)
    return m


def test_insert_rows(model):
    assert model.row_count() == 2
    assert len(model) == 2


def test_insert_zero_rows_succeeds():
    m = TimeFocusModel()
    assert m.insert_rows(5, 0) is True
    assert m.row_count() == 0


@pytest.mark.parametrize("row,count", [(-1, 1), (3, 1), (0, -2)])
def test_insert_rows_invalid(model, row, count):
    assert model.insert_rows(row, count) is False
    assert model.row_count() == 2


def test_set_and_get_each_role(model):
    rates = [TypingRate(wpm=40)]
    assert model.set_data(1, 5000, Role.DURATION)
    assert model.set_data(1, 4000, Role.REMAINING_TIME)
    assert model.set_data(1, True, Role.COMPLETED)
    assert model.set_data(1, PeriodType.WORK, Role.TYPE)
    assert model.set_data(1, rates, Role.RATES)
    assert model.data(1, Role.DURATION) == 5000
    assert model.data(1, Role.REMAINING_TIME) == 4000
    assert model.data(1, Role.COMPLETED) is True
    assert model.data(1, Role.TYPE) is PeriodType.WORK
    assert model.data(1, Role.RATES) == rates


def test_type_accepts_enum_value(model):
    assert model.set_data(0, PeriodType.BREAK.value, Role.TYPE)
    assert model.data(0, Role.TYPE) is PeriodType.BREAK


@pytest.mark.parametrize(
    "value,role",
    [
        ("abc", Role.DURATION),
        (-5, Role.REMAINING_TIME),
        ("yes", Role.COMPLETED),
        (99, Role.TYPE),
        ([1, 2], Role.RATES),
    ],
)
def test_set_data_rejects_bad_values(model, value, role):
    before = model.data(0, role)
    assert model.set_data(0, value, role) is False
    assert model.data(0, role) == before


def test_invalid_row(model):
    assert model.set_data(2, 1000, Role.DURATION) is False
    assert model.data(2, Role.DURATION) is None
    assert model.data(-1, Role.DURATION) is None


def test_data_changed_reports_row(model):
    rows = []
    model.data_changed.connect(rows.append)
    model.set_data(1, 10, Role.DURATION)
    assert rows == [1]


def test_remove_rows(model):
    model.set_data(1, 7000, Role.DURATION)
    assert model.remove_rows(0, 1)
    assert model.row_count() == 1
    assert model.data(0, Role.DURATION) == 7000


def test_remove_rows_out_of_range(model):
    assert model.remove_rows(1, 2) is False
    assert model.row_count() == 2


def test_clear(model):
    assert model.clear() is True
    assert model.row_count() == 0


def test_role_names():
    names = TimeFocusModel().role_names()
    assert names[Role.REMAINING_TIME] == "remainingTime"
    assert set(names) == set(Role)