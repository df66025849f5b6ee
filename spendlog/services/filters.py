"""
Time window filtering for expense records.

Windows are computed on calendar dates. Both bounds of every window are
inclusive, and filtering never reorders its input.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Union

from spendlog.config import DEFAULT_WEEK_START, WEEKDAY_NAMES
from spendlog.models import Expense, TimeWindow

logger = logging.getLogger(__name__)

SUNDAY = WEEKDAY_NAMES.index(DEFAULT_WEEK_START)

Reference = Union[date, datetime, None]


def _to_date(reference: Reference) -> date:
    """Reduce a reference instant to its calendar day (today if None)."""
    if reference is None:
        return date.today()
    if isinstance(reference, datetime):
        return reference.date()
    return reference


def week_bounds(
    reference: Reference = None, week_start: int = SUNDAY
) -> tuple[date, date]:
    """
    Calculate the first and last day of the week containing reference.

    Args:
        reference: Date or datetime inside the week (defaults to today)
        week_start: First day of the week as a date.weekday() index

    Returns:
        Tuple of (start, end), six days apart
    """
    if not 0 <= week_start <= 6:
        raise ValueError(f"Invalid week_start: {week_start}")

    day = _to_date(reference)
    start = day - timedelta(days=(day.weekday() - week_start) % 7)
    return start, start + timedelta(days=6)


def month_bounds(reference: Reference = None) -> tuple[date, date]:
    """Calculate the first and last day of the month containing reference."""
    day = _to_date(reference)
    start = day.replace(day=1)

    if start.month == 12:
        next_month = date(start.year + 1, 1, 1)
    else:
        next_month = date(start.year, start.month + 1, 1)

    return start, next_month - timedelta(days=1)


def window_bounds(
    window: TimeWindow,
    reference: Reference = None,
    week_start: int = SUNDAY,
) -> Optional[tuple[date, date]]:
    """Get the inclusive date range for a window, or None for all time."""
    window = TimeWindow.parse(window)

    if window == TimeWindow.THIS_WEEK:
        return week_bounds(reference, week_start)
    if window == TimeWindow.THIS_MONTH:
        return month_bounds(reference)
    return None


def apply_window(
    records: Iterable[Expense],
    window: TimeWindow,
    reference: Reference = None,
    week_start: int = SUNDAY,
) -> list[Expense]:
    """
    Narrow records to those dated inside the window.

    Args:
        records: Expenses in display order
        window: Window to apply
        reference: The "now" used to place the window (defaults to today)
        week_start: First day of the week for TimeWindow.THIS_WEEK

    Returns:
        Matching expenses, in the same order as the input
    """
    records = list(records)
    bounds = window_bounds(window, reference, week_start)

    if bounds is None:
        return records

    start, end = bounds
    filtered = [r for r in records if start <= r.date <= end]

    logger.debug(
        f"Window {TimeWindow.parse(window).value} [{start} .. {end}] kept "
        f"{len(filtered)} of {len(records)} expenses"
    )
    return filtered
