"""
Expenses repository module for expense CRUD operations.

Handles all expense-related database operations including:
- Creating expenses (add)
- Reading expenses (list_all, get_by_id, count)
- Updating expenses
- Deleting expenses
"""

import logging
import numbers
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Union

from spendlog.exceptions import ExpenseNotFound, ValidationRejected
from spendlog.models import Expense
from spendlog.services.validation import ExpenseDraft

from .base import EXPENSES_TABLE, BaseRepository

logger = logging.getLogger(__name__)

AmountInput = Union[str, numbers.Real, Decimal, None]


class ExpenseRepository(BaseRepository):
    """
    Repository for managing expense records.

    Every write is validated before it reaches SQLite. Reads return
    snapshots; callers re-read after a write to refresh derived views.
    """

    def __init__(self, db_path=None, init_schema: bool = False):
        """
        Initialize the expense repository.

        Args:
            db_path: Path to the SQLite database file
            init_schema: Whether to ensure the schema
        """
        super().__init__(db_path, init_schema=init_schema)

    # =========================================================================
    # Create Operations
    # =========================================================================

    def add(
        self,
        amount: AmountInput,
        category: Optional[str],
        note: Optional[str] = None,
        today: Optional[date] = None,
    ) -> Expense:
        """
        Record a new expense dated today.

        Args:
            amount: Positive amount, as a number or the text the user typed
            category: Category name; surrounding whitespace is trimmed
            note: Optional note; blank notes are stored as NULL
            today: Date to record (defaults to the current day); a datetime
                is reduced to its date

        Returns:
            The created Expense with its ID

        Raises:
            ValidationRejected: If the amount or category is invalid
            StorageUnavailable: If the database write fails
        """
        try:
            amount_value, category_value, note_value = ExpenseDraft(
                amount, category, note
            ).validate()
        except ValidationRejected as e:
            logger.info(f"Rejected new expense: {e}")
            raise

        # Match what the REAL column will hand back on the next read
        amount_value = Decimal(str(float(amount_value)))

        expense_date = today or date.today()
        if isinstance(expense_date, datetime):
            # Only the calendar day is stored
            expense_date = expense_date.date()

        with self._get_connection() as conn:
            cursor = conn.execute(
                f"""
                INSERT INTO {EXPENSES_TABLE} (amount, category, note, date)
                VALUES (?, ?, ?, ?)
                """,
                (
                    float(amount_value),
                    category_value,
                    note_value,
                    expense_date.isoformat(),
                ),
            )
            expense = Expense(
                id=cursor.lastrowid,
                amount=amount_value,
                category=category_value,
                note=note_value,
                date=expense_date,
            )

        logger.info(
            f"Added expense {expense.id}: {expense.amount:.2f} "
            f"in {expense.category!r} on {expense.date}"
        )
        return expense

    # =========================================================================
    # Read Operations
    # =========================================================================

    def list_all(self) -> list[Expense]:
        """Get every expense, most recently created first."""
        with self._get_connection() as conn:
            cursor = conn.execute(
                f"""
                SELECT id, amount, category, note, date
                FROM {EXPENSES_TABLE}
                ORDER BY id DESC
                """
            )
            expenses = [Expense.from_row(tuple(row)) for row in cursor.fetchall()]

        logger.debug(f"Loaded {len(expenses)} expenses")
        return expenses

    def get_by_id(self, expense_id: int) -> Optional[Expense]:
        """Get an expense by its ID."""
        with self._get_connection() as conn:
            cursor = conn.execute(
                f"""
                SELECT id, amount, category, note, date
                FROM {EXPENSES_TABLE}
                WHERE id = ?
                """,
                (expense_id,),
            )
            row = cursor.fetchone()
            if row:
                return Expense.from_row(tuple(row))
            return None

    def count(self) -> int:
        """Count all stored expenses."""
        with self._get_connection() as conn:
            cursor = conn.execute(f"SELECT COUNT(*) FROM {EXPENSES_TABLE}")
            return cursor.fetchone()[0]

    # =========================================================================
    # Update Operations
    # =========================================================================

    def update(
        self,
        expense_id: int,
        amount: AmountInput,
        category: Optional[str],
        note: Optional[str] = None,
    ) -> Expense:
        """
        Edit the amount, category, and note of an existing expense.

        The expense's id and date are never changed.

        Args:
            expense_id: Expense ID to update
            amount: New amount
            category: New category
            note: New note; blank notes are stored as NULL

        Returns:
            The updated Expense

        Raises:
            ValidationRejected: If the amount or category is invalid
            ExpenseNotFound: If no expense has this ID
            StorageUnavailable: If the database write fails
        """
        try:
            amount_value, category_value, note_value = ExpenseDraft(
                amount, category, note
            ).validate()
        except ValidationRejected as e:
            logger.info(f"Rejected edit of expense {expense_id}: {e}")
            raise

        amount_value = Decimal(str(float(amount_value)))

        with self._get_connection() as conn:
            cursor = conn.execute(
                f"SELECT date FROM {EXPENSES_TABLE} WHERE id = ?", (expense_id,)
            )
            row = cursor.fetchone()

            if not row:
                logger.warning(f"Expense {expense_id} not found for update")
                raise ExpenseNotFound(expense_id)

            conn.execute(
                f"""
                UPDATE {EXPENSES_TABLE}
                SET amount = ?, category = ?, note = ?
                WHERE id = ?
                """,
                (float(amount_value), category_value, note_value, expense_id),
            )

        logger.info(
            f"Updated expense {expense_id}: amount={amount_value:.2f}, "
            f"category={category_value!r}"
        )
        return Expense(
            id=expense_id,
            amount=amount_value,
            category=category_value,
            note=note_value,
            date=date.fromisoformat(row["date"]),
        )

    # =========================================================================
    # Delete Operations
    # =========================================================================

    def remove(self, expense_id: int) -> bool:
        """
        Delete an expense permanently.

        Args:
            expense_id: Expense ID to delete

        Returns:
            True if deleted, False if no expense had this ID
        """
        with self._get_connection() as conn:
            cursor = conn.execute(
                f"DELETE FROM {EXPENSES_TABLE} WHERE id = ?", (expense_id,)
            )
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info(f"Deleted expense {expense_id}")
        else:
            logger.debug(f"Expense {expense_id} already absent, nothing deleted")
        return deleted
