from datetime import date
from decimal import Decimal

import pytest

from spendlog.db import ExpenseLedger, ExpenseRepository
from spendlog.models import Expense


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "data" / "expenses.db"


@pytest.fixture
def repo(db_path):
    return ExpenseRepository(db_path, init_schema=True)


@pytest.fixture
def ledger(db_path):
    # Sunday-start weeks regardless of the environment
    return ExpenseLedger(db_path, week_start=6)


@pytest.fixture
def sample_expenses():
    """Expenses as the store returns them: newest id first."""
    return [
        make_expense(3, "5", "Rent", date(2024, 2, 1)),
        make_expense(2, "20", "Food", date(2024, 1, 15), note="dinner"),
        make_expense(1, "10", "Food", date(2024, 1, 1)),
    ]


def make_expense(id, amount, category, on=date(2024, 1, 1), note=None):
    return Expense(
        id=id, amount=Decimal(amount), category=category, note=note, date=on
    )
