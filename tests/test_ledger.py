from datetime import date

import pytest

from spendlog.db import ExpenseLedger
from spendlog.db import repository as repository_module
from spendlog.exceptions import ValidationRejected
from spendlog.models import TimeWindow


@pytest.fixture
def january_ledger(ledger):
    ledger.add(10, "Food", today=date(2024, 1, 1))
    ledger.add(20, "Food", "dinner", today=date(2024, 1, 15))
    ledger.add(5, "Rent", today=date(2024, 2, 1))
    return ledger


def test_load_view_all(january_ledger):
    view = january_ledger.load_view(TimeWindow.ALL, date(2024, 1, 20))

    assert view.window == TimeWindow.ALL
    assert view.start is None and view.end is None
    assert [e.amount for e in view.expenses] == [5, 20, 10]
    assert view.total == 35
    assert view.by_category == {"Rent": 5, "Food": 30}


def test_load_view_this_month(january_ledger):
    view = january_ledger.load_view("month", date(2024, 1, 20))

    assert (view.start, view.end) == (date(2024, 1, 1), date(2024, 1, 31))
    assert [e.amount for e in view.expenses] == [20, 10]
    assert view.total == 30
    assert view.by_category == {"Food": 30}


def test_load_view_this_week(january_ledger):
    view = january_ledger.load_view(TimeWindow.THIS_WEEK, date(2024, 1, 20))

    assert (view.start, view.end) == (date(2024, 1, 14), date(2024, 1, 20))
    assert [e.amount for e in view.expenses] == [20]
    assert view.summary.count == 1


def test_view_refreshes_after_writes(january_ledger):
    reference = date(2024, 1, 20)
    dinner = january_ledger.list_all()[1]

    january_ledger.update(dinner.id, 25, "Food", "dinner")
    assert january_ledger.load_view("month", reference).total == 35

    january_ledger.remove(dinner.id)
    view = january_ledger.load_view("month", reference)
    assert view.total == 10
    assert january_ledger.get_by_id(dinner.id) is None


def test_rejected_add_does_not_change_view(january_ledger):
    before = january_ledger.load_view()

    with pytest.raises(ValidationRejected):
        january_ledger.add("abc", "Food")

    assert january_ledger.load_view() == before


def test_reopen_keeps_data_and_reset_clears_it(january_ledger, db_path):
    reopened = ExpenseLedger(db_path)
    assert len(reopened.list_all()) == 3

    reopened.reset()
    assert reopened.list_all() == []


def test_week_start_comes_from_environment(db_path, monkeypatch):
    monkeypatch.setenv("SPENDLOG_WEEK_START", "monday")
    ledger = ExpenseLedger(db_path)
    ledger.add(1, "Food", today=date(2024, 1, 21))

    view = ledger.load_view("week", date(2024, 1, 20))
    assert (view.start, view.end) == (date(2024, 1, 15), date(2024, 1, 21))
    assert view.total == 1


def test_get_ledger_uses_configured_path(tmp_path, monkeypatch):
    db_file = tmp_path / "configured.db"
    monkeypatch.setenv("SPENDLOG_DB_PATH", str(db_file))
    monkeypatch.setattr(repository_module, "_default_ledger", None)

    ledger = repository_module.get_ledger()

    assert ledger.db_path == db_file
    assert repository_module.get_ledger() is ledger
    assert db_file.exists()


class FrozenDate(date):
    @classmethod
    def today(cls):
        return date(2024, 1, 20)


def test_load_view_resolves_today_once(january_ledger, monkeypatch):
    monkeypatch.setattr(repository_module, "date", FrozenDate)

    view = january_ledger.load_view(TimeWindow.THIS_WEEK)

    assert (view.start, view.end) == (date(2024, 1, 14), date(2024, 1, 20))
    assert [e.amount for e in view.expenses] == [20]
    assert view.total == 20
