from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class TimeWindow(str, Enum):
    ALL = "all"
    THIS_WEEK = "week"
    THIS_MONTH = "month"

    @property
    def label(self) -> str:
        """Human readable name of the window."""
        return _WINDOW_LABELS[self]

    @classmethod
    def parse(cls, value: Union["TimeWindow", str]) -> "TimeWindow":
        """Resolve a window from its value ("week") or label ("This Week")."""
        if isinstance(value, cls):
            return value

        key = str(value).strip().lower()
        for window in cls:
            if key in (window.value, window.label.lower()):
                return window

        raise ValueError(f"Unknown time window: {value!r}")


_WINDOW_LABELS = {
    TimeWindow.ALL: "All",
    TimeWindow.THIS_WEEK: "This Week",
    TimeWindow.THIS_MONTH: "This Month",
}


def normalize_note(note: Optional[str]) -> Optional[str]:
    """Trim a note; empty or whitespace-only notes become None."""
    if note is None:
        return None
    note = note.strip()
    return note or None


@dataclass
class Expense:
    """A single recorded expense."""

    id: int
    amount: Decimal
    category: str
    note: Optional[str]
    date: date

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "id": self.id,
            "amount": str(self.amount),
            "category": self.category,
            "note": self.note,
            "date": self.date.isoformat(),
        }

    @classmethod
    def from_row(cls, row: tuple) -> "Expense":
        """Create an Expense from a database row."""
        return cls(
            id=row[0],
            # REAL column; str() recovers the shortest decimal form
            amount=Decimal(str(row[1])),
            category=row[2],
            note=row[3],
            date=date.fromisoformat(row[4]),
        )
