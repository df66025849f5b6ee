from datetime import date, datetime

import pytest

from spendlog.models import Expense, TimeWindow
from spendlog.services import apply_window, month_bounds, week_bounds, window_bounds

MONDAY = 0
SUNDAY = 6


def test_week_bounds_start_on_sunday_by_default():
    # 2024-01-20 is a Saturday
    assert week_bounds(date(2024, 1, 20)) == (date(2024, 1, 14), date(2024, 1, 20))
    assert week_bounds(date(2024, 1, 14)) == (date(2024, 1, 14), date(2024, 1, 20))


def test_week_bounds_with_monday_start():
    assert week_bounds(date(2024, 1, 20), MONDAY) == (
        date(2024, 1, 15),
        date(2024, 1, 21),
    )
    assert week_bounds(date(2024, 1, 14), MONDAY) == (
        date(2024, 1, 8),
        date(2024, 1, 14),
    )


def test_week_bounds_cross_year():
    assert week_bounds(date(2025, 1, 1)) == (date(2024, 12, 29), date(2025, 1, 4))


def test_week_bounds_rejects_bad_start():
    with pytest.raises(ValueError):
        week_bounds(date(2024, 1, 1), 7)


def test_month_bounds():
    assert month_bounds(date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds(date(2023, 12, 31)) == (date(2023, 12, 1), date(2023, 12, 31))


def test_window_bounds_accepts_datetime_and_labels():
    reference = datetime(2024, 1, 20, 23, 59, 59)
    assert window_bounds("This Month", reference) == (
        date(2024, 1, 1),
        date(2024, 1, 31),
    )
    assert window_bounds(TimeWindow.ALL, reference) is None


def test_all_window_is_identity(sample_expenses):
    for reference in (date(1999, 1, 1), date(2024, 1, 20), None):
        filtered = apply_window(sample_expenses, TimeWindow.ALL, reference)
        assert filtered == sample_expenses


def test_this_month_scenario(sample_expenses):
    filtered = apply_window(sample_expenses, TimeWindow.THIS_MONTH, date(2024, 1, 20))
    assert [e.id for e in filtered] == [2, 1]


def test_this_month_excludes_future_dates(sample_expenses):
    future = Expense(
        id=4, amount=1.0, category="Food", note=None, date=date(2024, 3, 1)
    )
    records = [future] + sample_expenses

    filtered = apply_window(records, TimeWindow.THIS_MONTH, date(2024, 2, 15))
    assert [e.id for e in filtered] == [3]


def test_this_week_is_inclusive_on_both_ends():
    records = [
        Expense(id=5, amount=1.0, category="A", note=None, date=date(2024, 1, 21)),
        Expense(id=4, amount=1.0, category="A", note=None, date=date(2024, 1, 20)),
        Expense(id=3, amount=1.0, category="A", note=None, date=date(2024, 1, 17)),
        Expense(id=2, amount=1.0, category="A", note=None, date=date(2024, 1, 14)),
        Expense(id=1, amount=1.0, category="A", note=None, date=date(2024, 1, 13)),
    ]

    filtered = apply_window(records, TimeWindow.THIS_WEEK, date(2024, 1, 17), SUNDAY)
    assert [e.id for e in filtered] == [4, 3, 2]


def test_filter_preserves_input_order(sample_expenses):
    shuffled = [sample_expenses[1], sample_expenses[2], sample_expenses[0]]
    filtered = apply_window(shuffled, "month", date(2024, 1, 31))
    assert [e.id for e in filtered] == [2, 1]


def test_unknown_window_raises(sample_expenses):
    with pytest.raises(ValueError):
        apply_window(sample_expenses, "year", date(2024, 1, 1))
