"""Exception types raised by the expense ledger."""

from typing import Optional


class LedgerError(Exception):
    """Base class for all ledger errors."""


class ValidationRejected(LedgerError, ValueError):
    """
    Raised when expense input fails validation.

    Nothing is written to the store when this is raised.
    """

    def __init__(self, field: str, reason: str, value: Optional[object] = None):
        self.field = field
        self.reason = reason
        self.value = value
        super().__init__(f"Invalid {field}: {reason}")


class ExpenseNotFound(LedgerError, LookupError):
    """Raised when an update targets an expense id that does not exist."""

    def __init__(self, expense_id: int):
        self.expense_id = expense_id
        super().__init__(f"Expense {expense_id} not found")


class StorageUnavailable(LedgerError):
    """Raised when the underlying SQLite database fails."""
