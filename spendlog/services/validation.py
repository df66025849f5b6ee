"""
Validation of user-entered expense fields.

Every write to the ledger passes through ExpenseDraft.validate() first, so
invalid input is rejected before any SQL runs.
"""

import numbers
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from spendlog.config import ERROR_MESSAGES, MAX_AMOUNT
from spendlog.exceptions import ValidationRejected
from spendlog.models import normalize_note

from .amount_parser import AmountParser


@dataclass
class ExpenseDraft:
    """Unvalidated expense input as typed by the user."""

    amount: Union[str, numbers.Real, Decimal, None]
    category: Optional[str]
    note: Optional[str] = None

    def validate(self) -> tuple[Decimal, str, Optional[str]]:
        """
        Validate and normalize the draft.

        Returns:
            Tuple of (amount, category, note) ready to be stored

        Raises:
            ValidationRejected: If the amount is not a positive number or
                the category is empty
        """
        amount = AmountParser.parse(self.amount)
        if amount is None or amount <= 0:
            raise ValidationRejected(
                "amount", ERROR_MESSAGES["invalid_amount"], self.amount
            )
        if amount > MAX_AMOUNT:
            raise ValidationRejected(
                "amount", f"Amount must not exceed {MAX_AMOUNT:,.2f}.", self.amount
            )

        category = self.category.strip() if isinstance(self.category, str) else ""
        if not category:
            raise ValidationRejected(
                "category", ERROR_MESSAGES["invalid_category"], self.category
            )

        return amount, category, normalize_note(self.note)

    def is_valid(self) -> bool:
        """Check if the draft would pass validation."""
        try:
            self.validate()
        except ValidationRejected:
            return False
        return True
