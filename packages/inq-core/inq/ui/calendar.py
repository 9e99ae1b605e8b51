"""Calendar grid helpers for backends drawing a month view."""

from __future__ import annotations

import calendar
from datetime import date

from inq.models.config import Weekday


def weekday_headers(week_start: Weekday) -> list[str]:
    """Two-letter weekday names in row order, e.g. ``["Su", "Mo", ...]``."""
    return [calendar.day_abbr[(week_start + offset) % 7][:2] for offset in range(7)]


def month_grid(year: int, month: int, week_start: Weekday) -> list[list[date]]:
    """Weeks of the month as rows of seven dates.

    The first and last rows are padded with days of the adjacent months.
    """
    return calendar.Calendar(firstweekday=int(week_start)).monthdatescalendar(year, month)


def month_title(year: int, month: int) -> str:
    return f"{calendar.month_name[month]} {year}"


def in_bounds(value: date, min_date: date | None, max_date: date | None) -> bool:
    if min_date is not None and value < min_date:
        return False
    if max_date is not None and value > max_date:
        return False
    return True
