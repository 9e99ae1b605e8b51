"""Validators for the log_calendar example."""

from __future__ import annotations

from datetime import date

from inq.models.config import Weekday
from inq.prompts.validation import max_date_validator, weekday_validator

# Logs are only rotated on weekdays
not_weekend = weekday_validator(
    [Weekday.saturday, Weekday.sunday], message="Logs are not collected on weekends"
)

not_in_future = max_date_validator(date.today(), message="Pick a day that already happened")
