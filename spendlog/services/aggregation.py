"""
Spending totals derived from a (usually filtered) list of expenses.

Totals are always recomputed from the records passed in and never stored.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable

from spendlog.models import Expense, TimeWindow


@dataclass
class SpendingSummary:
    """Totals for one window."""

    window: TimeWindow
    count: int
    total: Decimal
    by_category: dict[str, Decimal] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "window": self.window.value,
            "count": self.count,
            "total": str(self.total),
            "by_category": {k: str(v) for k, v in self.by_category.items()},
        }


def total_spending(records: Iterable[Expense]) -> Decimal:
    """Sum of all amounts; 0 for no records."""
    return sum((r.amount for r in records), Decimal(0))


def totals_by_category(records: Iterable[Expense]) -> dict[str, Decimal]:
    """
    Sum amounts per category.

    Categories are matched exactly (case-sensitive) and the result keeps the
    order in which each category was first seen.
    """
    totals: dict[str, Decimal] = {}
    for r in records:
        totals[r.category] = totals.get(r.category, Decimal(0)) + r.amount
    return totals


def summarize(
    records: Iterable[Expense], window: TimeWindow = TimeWindow.ALL
) -> SpendingSummary:
    """Build the total and per-category breakdown for records."""
    records = list(records)
    return SpendingSummary(
        window=TimeWindow.parse(window),
        count=len(records),
        total=total_spending(records),
        by_category=totals_by_category(records),
    )
