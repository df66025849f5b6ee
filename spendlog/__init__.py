"""
spendlog - Personal Expense Ledger

A local expense tracker core: records expenses in SQLite, filters them by
time window, and totals them overall and per category.
"""

from .db import ExpenseLedger, ExpenseRepository, LedgerView, get_ledger
from .exceptions import (
    ExpenseNotFound,
    LedgerError,
    StorageUnavailable,
    ValidationRejected,
)
from .models import Expense, TimeWindow
from .services import (
    AmountParser,
    ExpenseDraft,
    SpendingSummary,
    apply_window,
    summarize,
    total_spending,
    totals_by_category,
)

__version__ = "0.1.0"

__all__ = [
    "AmountParser",
    "Expense",
    "ExpenseDraft",
    "ExpenseLedger",
    "ExpenseNotFound",
    "ExpenseRepository",
    "LedgerError",
    "LedgerView",
    "SpendingSummary",
    "StorageUnavailable",
    "TimeWindow",
    "ValidationRejected",
    "apply_window",
    "get_ledger",
    "summarize",
    "total_spending",
    "totals_by_category",
]
