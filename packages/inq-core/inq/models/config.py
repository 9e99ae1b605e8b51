"""Prompt configuration — options shared by every prompt type, and their defaults."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

Filter = Callable[[str, str, int], bool]
Transformer = Callable[[Any], str]

DEFAULT_PAGE_SIZE = 7
DEFAULT_VIM_MODE = False
DEFAULT_KEEP_FILTER = True


def default_filter(query: str, value: str, index: int) -> bool:
    """Case-insensitive substring match of *query* in the option label."""
    return query.lower() in value.lower()


def default_transformer(answer: Any) -> str:
    return str(answer)


class Weekday(IntEnum):
    """Day a calendar row starts on. Values match the stdlib ``calendar`` module."""
    monday = 0
    tuesday = 1
    wednesday = 2
    thursday = 3
    friday = 4
    saturday = 5
    sunday = 6

    @classmethod
    def from_name(cls, name: str) -> Weekday:
        """Parse a weekday from its full or three-letter English name.

        Raises:
            ValueError: If *name* is not a weekday.
        """
        key = name.strip().lower()
        for day in cls:
            if day.name == key or day.name[:3] == key:
                return day
        raise ValueError(f"Unknown weekday: {name!r}")


DEFAULT_WEEK_START = Weekday.sunday


class PromptConfig(BaseModel):
    """Rendering/behaviour options recognised by the prompts."""
    model_config = ConfigDict(frozen=True)

    page_size: int = Field(DEFAULT_PAGE_SIZE, ge=1, description="Rows shown per page in list prompts")
    vim_mode: bool = Field(DEFAULT_VIM_MODE, description="Enable hjkl navigation")
    keep_filter: bool = Field(
        DEFAULT_KEEP_FILTER, description="Keep the list filter after a rejected submission"
    )
    filter: Filter = default_filter
    transformer: Transformer = default_transformer
