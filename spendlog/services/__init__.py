from .aggregation import (
    SpendingSummary,
    summarize,
    total_spending,
    totals_by_category,
)
from .amount_parser import AmountParser
from .filters import apply_window, month_bounds, week_bounds, window_bounds
from .validation import ExpenseDraft

__all__ = [
    "AmountParser",
    "ExpenseDraft",
    "SpendingSummary",
    "apply_window",
    "month_bounds",
    "summarize",
    "total_spending",
    "totals_by_category",
    "week_bounds",
    "window_bounds",
]
