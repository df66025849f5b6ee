from .expense import Expense, TimeWindow, normalize_note

__all__ = [
    "Expense",
    "TimeWindow",
    "normalize_note",
]
