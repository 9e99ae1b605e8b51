"""Calendar arithmetic — day/month shifting and clamping into bounds."""

from __future__ import annotations

from datetime import date, timedelta


def get_current_date() -> date:
    return date.today()


def shift_days(value: date, days: int) -> date | None:
    """Return *value* moved by *days*, or None past the supported date range."""
    try:
        return value + timedelta(days=days)
    except OverflowError:
        return None


def shift_months(value: date, months: int) -> date | None:
    """Return *value* moved by *months*, keeping the day of month.

    Month overflow/underflow rolls the year (December + 1 -> January of the
    next year, January - 1 -> December of the previous one).

    Returns None when the target month has no such day (e.g. the 31st in a
    30-day month) or the year falls outside 1..9999.
    """
    total = value.year * 12 + (value.month - 1) + months
    year, month0 = divmod(total, 12)
    try:
        return value.replace(year=year, month=month0 + 1)
    except ValueError:
        return None


def clamp(value: date, min_date: date | None, max_date: date | None) -> date:
    """Force *value* into ``[min_date, max_date]``; missing bounds are open."""
    if min_date is not None:
        value = max(value, min_date)
    if max_date is not None:
        value = min(value, max_date)
    return value
