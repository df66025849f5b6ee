"""
Demo script for the spendlog ledger.

This records a handful of expenses in a throwaway database and shows how
the totals change per time window.
"""

import tempfile
from datetime import date, timedelta
from pathlib import Path

from spendlog.db import ExpenseLedger
from spendlog.exceptions import ValidationRejected
from spendlog.models import TimeWindow


def main():
    today = date.today()

    # Example expenses: (amount as typed, category, note, days ago)
    examples = [
        ("12.50", "Food", "lunch", 0),
        ("4", "Coffee", "", 1),
        ("1,200", "Rent", "October", 3),
        ("18.99", "Books", None, 10),
        ("abc", "Food", "typo", 0),
        ("7.25", "   ", "no category", 0),
        ("45", "Food", "groceries", 40),
    ]

    with tempfile.TemporaryDirectory() as tmp:
        ledger = ExpenseLedger(Path(tmp) / "demo.db")

        print("=" * 60)
        print("Expense Ledger Demo")
        print("=" * 60)

        for amount, category, note, days_ago in examples:
            try:
                expense = ledger.add(
                    amount, category, note, today=today - timedelta(days=days_ago)
                )
                print(
                    f"  Added #{expense.id}: ${expense.amount:.2f} "
                    f"{expense.category} ({expense.date})"
                )
            except ValidationRejected as e:
                print(f"  Rejected {amount!r} / {category!r}: {e.reason}")

        for window in TimeWindow:
            view = ledger.load_view(window)
            print(f"\n{window.label}: {view.summary.count} expenses")
            print("-" * 40)
            print(f"  Total: ${view.total:.2f}")
            for category, total in view.by_category.items():
                print(f"    {category}: ${total:.2f}")

        print("\n" + "=" * 60)
        print("Editing and deleting")
        print("=" * 60)

        first = ledger.list_all()[-1]
        edited = ledger.update(first.id, "15", "Food", "lunch + drink")
        print(f"\nUpdated: {edited.to_dict()}")
        ledger.remove(first.id)
        print(f"Deleted #{first.id}, {len(ledger.list_all())} expenses remain")


if __name__ == "__main__":
    main()
