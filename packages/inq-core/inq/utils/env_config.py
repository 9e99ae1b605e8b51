"""Prompt configuration from environment variables."""

from __future__ import annotations

import os

from inq.models.config import (
    DEFAULT_KEEP_FILTER,
    DEFAULT_PAGE_SIZE,
    DEFAULT_VIM_MODE,
    DEFAULT_WEEK_START,
    PromptConfig,
    Weekday,
)

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def get_page_size() -> int:
    """Return ``INQ_PAGE_SIZE``, or the default page size when unset.

    Raises:
        ValueError: If the value is not a positive integer.
    """
    raw = os.environ.get("INQ_PAGE_SIZE", "").strip()
    if not raw:
        return DEFAULT_PAGE_SIZE
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"INQ_PAGE_SIZE must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"INQ_PAGE_SIZE must be positive, got {value}")
    return value


def get_vim_mode() -> bool:
    return _get_bool("INQ_VIM_MODE", DEFAULT_VIM_MODE)


def get_keep_filter() -> bool:
    return _get_bool("INQ_KEEP_FILTER", DEFAULT_KEEP_FILTER)


def get_week_start() -> Weekday:
    """Return ``INQ_WEEK_START`` (e.g. ``monday`` or ``mon``), default Sunday."""
    raw = os.environ.get("INQ_WEEK_START", "").strip()
    if not raw:
        return DEFAULT_WEEK_START
    try:
        return Weekday.from_name(raw)
    except ValueError:
        raise ValueError(f"INQ_WEEK_START must be a weekday name, got {raw!r}") from None


def prompt_config_from_env() -> PromptConfig:
    return PromptConfig(
        page_size=get_page_size(),
        vim_mode=get_vim_mode(),
        keep_filter=get_keep_filter(),
    )


def _get_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got {raw!r}")
