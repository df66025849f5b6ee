"""
Database module for the spendlog expense ledger.

Structure:
- base.py: Base repository with connection management and schema lifecycle
- expenses.py: Expense CRUD operations
- repository.py: Ledger facade combining storage, filtering and totals
"""

from .base import EXPENSES_TABLE, BaseRepository
from .expenses import ExpenseRepository
from .repository import ExpenseLedger, LedgerView, get_ledger

__all__ = [
    # Base
    "BaseRepository",
    "EXPENSES_TABLE",
    # Repositories
    "ExpenseLedger",
    "ExpenseRepository",
    "LedgerView",
    # Utilities
    "get_ledger",
]
