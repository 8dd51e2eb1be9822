"""
Date helpers: the current-date endpoint payload and the symbolic date
keywords accepted when adding a task.
"""

from datetime import date, timedelta
from typing import Callable, Dict, Optional

from .models import DateResponse


def _next_month(today: date) -> date:
    """Same day-of-month next month, or today if that day does not exist."""
    if today.month == 12:
        year, month = today.year + 1, 1
    else:
        year, month = today.year, today.month + 1
    try:
        return today.replace(year=year, month=month)
    except ValueError:
        return today


# Keyword -> function of today's date
RELATIVE_DATES: Dict[str, Callable[[date], date]] = {
    "Today": lambda today: today,
    "Tomorrow": lambda today: today + timedelta(days=1),
    "This Week": lambda today: today + timedelta(days=7),
    "This Month": _next_month,
}


def current_date(today: Optional[date] = None) -> DateResponse:
    """Return the local calendar date as day/month/year."""
    today = today or date.today()
    return DateResponse(day=today.day, month=today.month, year=today.year)


def resolve_task_date(value: str, today: Optional[date] = None) -> str:
    """
    Resolve a symbolic task date to an ISO date string.

    Args:
        value: One of the RELATIVE_DATES keywords, or any other string
        today: Reference date (defaults to the local date)

    Returns:
        ``YYYY-MM-DD`` for a known keyword, otherwise ``value`` unchanged
    """
    resolver = RELATIVE_DATES.get(value)
    if resolver is None:
        return value
    return resolver(today or date.today()).isoformat()
