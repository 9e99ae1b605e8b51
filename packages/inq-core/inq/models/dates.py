"""Date-selection models — the DateSelect definition and its output."""

from __future__ import annotations

import datetime
from datetime import date
from typing import Any, Callable, Mapping

from pydantic import BaseModel, ConfigDict, Field

from inq.models.config import DEFAULT_WEEK_START, PromptConfig, Weekday

DateFormatter = Callable[[date], str]
DateValidator = Callable[[date], Any]

DEFAULT_DATE_HELP = "arrows to move, [ ] to change months, { } to change years, enter to select"


def default_date_formatter(value: date) -> str:
    """Format as e.g. ``June 15, 2023``."""
    return f"{value:%B} {value.day}, {value.year}"


class DateInfo(BaseModel):
    """Annotation attached to a marked date."""
    model_config = ConfigDict(frozen=True)

    deletable: bool = False
    details: str = ""


class DateOutput(BaseModel):
    """Answer of a date-selection prompt."""
    model_config = ConfigDict(frozen=True)

    date: datetime.date
    to_delete: bool = False


class DateSelect(BaseModel):
    """Definition of a date-selection prompt, supplied by the caller."""
    model_config = ConfigDict(frozen=True)

    message: str
    starting_date: date = Field(default_factory=date.today)
    min_date: date | None = None
    max_date: date | None = None
    week_start: Weekday = DEFAULT_WEEK_START
    help_message: str | None = DEFAULT_DATE_HELP
    formatter: DateFormatter = default_date_formatter
    validators: list[DateValidator] = Field(default_factory=list)
    marked_dates: Mapping[date, DateInfo] | None = Field(
        None, description="Annotated dates; deletable ones can be flagged for deletion"
    )
    config: PromptConfig = Field(default_factory=PromptConfig)


class DateSelectConfig(BaseModel):
    """The subset of a DateSelect that drives navigation and rendering."""
    model_config = ConfigDict(frozen=True)

    min_date: date | None = None
    max_date: date | None = None
    week_start: Weekday = DEFAULT_WEEK_START
    vim_mode: bool = False

    @classmethod
    def from_spec(cls, spec: DateSelect) -> DateSelectConfig:
        return cls(
            min_date=spec.min_date,
            max_date=spec.max_date,
            week_start=spec.week_start,
            vim_mode=spec.config.vim_mode,
        )
