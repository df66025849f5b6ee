"""
Main ledger facade.

Composes the expense repository with the window filter and aggregation so a
caller can run the whole read -> filter -> aggregate pipeline in one call.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import Optional, Union

from spendlog.config import get_db_path, get_week_start
from spendlog.models import Expense, TimeWindow
from spendlog.services.aggregation import SpendingSummary, summarize
from spendlog.services.filters import apply_window, window_bounds

from .expenses import AmountInput, ExpenseRepository

logger = logging.getLogger(__name__)


@dataclass
class LedgerView:
    """Expenses visible in a window, with their totals."""

    window: TimeWindow
    start: Optional[date]
    end: Optional[date]
    expenses: list[Expense]
    summary: SpendingSummary

    @property
    def total(self) -> Decimal:
        return self.summary.total

    @property
    def by_category(self) -> dict[str, Decimal]:
        return self.summary.by_category


class ExpenseLedger:
    """
    Facade over the expense store.

    The schema is ensured once when the ledger is created; existing data is
    kept across restarts.
    """

    def __init__(
        self,
        db_path: Optional[Union[Path, str]] = None,
        week_start: Optional[int] = None,
    ):
        """
        Initialize the ledger.

        Args:
            db_path: Path to the SQLite database file. Defaults to the configured path
            week_start: First day of the week as a date.weekday() index.
                Defaults to SPENDLOG_WEEK_START (Sunday)

        Raises:
            StorageUnavailable: If the schema cannot be created
        """
        self.db_path = Path(db_path) if db_path else get_db_path()
        self.week_start = get_week_start() if week_start is None else week_start
        self.expenses = ExpenseRepository(self.db_path, init_schema=True)
        logger.info(f"ExpenseLedger initialized with db_path: {self.db_path}")

    # =========================================================================
    # Expense Operations (delegated)
    # =========================================================================

    def add(
        self,
        amount: AmountInput,
        category: Optional[str],
        note: Optional[str] = None,
        today: Optional[date] = None,
    ) -> Expense:
        """Record a new expense. See ExpenseRepository.add."""
        return self.expenses.add(amount, category, note, today=today)

    def update(
        self,
        expense_id: int,
        amount: AmountInput,
        category: Optional[str],
        note: Optional[str] = None,
    ) -> Expense:
        """Edit an expense. See ExpenseRepository.update."""
        return self.expenses.update(expense_id, amount, category, note)

    def remove(self, expense_id: int) -> bool:
        """Delete an expense. See ExpenseRepository.remove."""
        return self.expenses.remove(expense_id)

    def list_all(self) -> list[Expense]:
        """Get every expense, newest first."""
        return self.expenses.list_all()

    def get_by_id(self, expense_id: int) -> Optional[Expense]:
        """Get a single expense."""
        return self.expenses.get_by_id(expense_id)

    def reset(self):
        """Delete every expense by recreating the table."""
        self.expenses.reset_schema()

    # =========================================================================
    # Views
    # =========================================================================

    def load_view(
        self,
        window: Union[TimeWindow, str] = TimeWindow.ALL,
        reference: Union[date, datetime, None] = None,
    ) -> LedgerView:
        """
        Read all expenses, narrow them to a window, and total them.

        Args:
            window: Window to show
            reference: The "now" used to place the window (defaults to today)

        Returns:
            LedgerView with the filtered expenses and their summary
        """
        window = TimeWindow.parse(window)
        if reference is None:
            # Resolve "today" once so bounds and filtering agree
            reference = date.today()

        records = self.list_all()
        filtered = apply_window(records, window, reference, self.week_start)
        bounds = window_bounds(window, reference, self.week_start)
        start, end = bounds if bounds else (None, None)

        return LedgerView(
            window=window,
            start=start,
            end=end,
            expenses=filtered,
            summary=summarize(filtered, window),
        )


# Singleton instance
_default_ledger: Optional[ExpenseLedger] = None


def get_ledger() -> ExpenseLedger:
    """Get or create the default ledger instance."""
    global _default_ledger
    if _default_ledger is None:
        _default_ledger = ExpenseLedger()
    return _default_ledger
