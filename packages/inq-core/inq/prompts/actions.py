"""Semantic actions and the key maps that produce them.

Key maps are pure functions ``(KeyEvent, config) -> action | None``; a
``None`` result means the key means nothing to the prompt and is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from inq.models.config import PromptConfig
from inq.models.dates import DateSelectConfig
from inq.ui.backend import KeyEvent


class PromptAction(str, Enum):
    """Actions every prompt type understands."""
    submit = "submit"
    abort = "abort"


class DateSelectAction(str, Enum):
    go_to_prev_day = "go_to_prev_day"
    go_to_next_day = "go_to_next_day"
    go_to_prev_week = "go_to_prev_week"
    go_to_next_week = "go_to_next_week"
    go_to_prev_month = "go_to_prev_month"
    go_to_next_month = "go_to_next_month"
    go_to_prev_year = "go_to_prev_year"
    go_to_next_year = "go_to_next_year"
    delete = "delete"
    confirm_delete = "confirm_delete"
    cancel_delete = "cancel_delete"


class SelectAction(str, Enum):
    move_up = "move_up"
    move_down = "move_down"
    page_up = "page_up"
    page_down = "page_down"
    move_to_start = "move_to_start"
    move_to_end = "move_to_end"
    filter_backspace = "filter_backspace"


@dataclass(frozen=True)
class FilterInput:
    """A character typed into a list prompt's filter."""
    char: str


_COMMON_KEYS = {
    "enter": PromptAction.submit,
    "esc": PromptAction.abort,
    "ctrl+c": PromptAction.abort,
}

_DATE_KEYS = {
    "left": DateSelectAction.go_to_prev_day,
    "right": DateSelectAction.go_to_next_day,
    "up": DateSelectAction.go_to_prev_week,
    "down": DateSelectAction.go_to_next_week,
    "ctrl+left": DateSelectAction.go_to_prev_month,
    "ctrl+right": DateSelectAction.go_to_next_month,
    "pageup": DateSelectAction.go_to_prev_month,
    "pagedown": DateSelectAction.go_to_next_month,
    "[": DateSelectAction.go_to_prev_month,
    "]": DateSelectAction.go_to_next_month,
    "ctrl+up": DateSelectAction.go_to_prev_year,
    "ctrl+down": DateSelectAction.go_to_next_year,
    "shift+pageup": DateSelectAction.go_to_prev_year,
    "shift+pagedown": DateSelectAction.go_to_next_year,
    "{": DateSelectAction.go_to_prev_year,
    "}": DateSelectAction.go_to_next_year,
    "delete": DateSelectAction.delete,
    "x": DateSelectAction.delete,
    "y": DateSelectAction.confirm_delete,
    "n": DateSelectAction.cancel_delete,
}

_DATE_VIM_KEYS = {
    "h": DateSelectAction.go_to_prev_day,
    "l": DateSelectAction.go_to_next_day,
    "k": DateSelectAction.go_to_prev_week,
    "j": DateSelectAction.go_to_next_week,
}

_SELECT_KEYS = {
    "up": SelectAction.move_up,
    "down": SelectAction.move_down,
    "pageup": SelectAction.page_up,
    "pagedown": SelectAction.page_down,
    "home": SelectAction.move_to_start,
    "end": SelectAction.move_to_end,
    "backspace": SelectAction.filter_backspace,
}

_SELECT_VIM_KEYS = {
    "k": SelectAction.move_up,
    "j": SelectAction.move_down,
}


def map_date_key(event: KeyEvent, config: DateSelectConfig) -> PromptAction | DateSelectAction | None:
    if event.key in _COMMON_KEYS:
        return _COMMON_KEYS[event.key]
    if config.vim_mode and event.key in _DATE_VIM_KEYS:
        return _DATE_VIM_KEYS[event.key]
    return _DATE_KEYS.get(event.key)


def map_select_key(
    event: KeyEvent, config: PromptConfig
) -> PromptAction | SelectAction | FilterInput | None:
    if event.key in _COMMON_KEYS:
        return _COMMON_KEYS[event.key]
    if config.vim_mode and event.key in _SELECT_VIM_KEYS:
        return _SELECT_VIM_KEYS[event.key]
    if event.key in _SELECT_KEYS:
        return _SELECT_KEYS[event.key]
    if event.char is not None:
        return FilterInput(event.char)
    return None
