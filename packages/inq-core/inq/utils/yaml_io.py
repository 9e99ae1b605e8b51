"""YAML I/O — marked-date indexes, prompt config files and validator modules."""

from __future__ import annotations

import importlib.util
import sys
from datetime import date, datetime
from pathlib import Path
from types import ModuleType
from typing import Any, Callable

import yaml

from inq.models.config import PromptConfig, Weekday
from inq.models.dates import DateInfo


def load_yaml(path: Path) -> Any:
    """Load a YAML file and return the parsed document."""
    with open(path) as f:
        return yaml.safe_load(f)


def load_marked_dates(path: Path) -> dict[date, DateInfo]:
    """Load a marked-date index.

    The file maps ISO dates to annotations::

        2023-06-15:
          deletable: true
          details: 3 log files

    A bare string value is shorthand for ``{details: <string>}``.

    Raises:
        ValueError: If the document is not a mapping or a key is not a date.
    """
    data = load_yaml(path) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping of dates in {path}, got {type(data).__name__}")

    marked: dict[date, DateInfo] = {}
    for key, value in data.items():
        day = _parse_date(key, path)
        if isinstance(value, str):
            value = {"details": value}
        marked[day] = DateInfo.model_validate(value or {})
    return marked


def load_prompt_config(path: Path, base: PromptConfig | None = None) -> tuple[PromptConfig, Weekday | None]:
    """Load ``page_size``/``vim_mode``/``keep_filter``/``week_start`` from a YAML file.

    Keys absent from the file keep their value from *base*. Returns the config
    and the week start, or None when the file does not set one.
    """
    data = load_yaml(path) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping in {path}, got {type(data).__name__}")

    week_start = data.pop("week_start", None)
    unknown = set(data) - {"page_size", "vim_mode", "keep_filter"}
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {', '.join(sorted(unknown))}")

    overrides = PromptConfig.model_validate(data).model_dump(include=set(data))
    config = (base or PromptConfig()).model_copy(update=overrides)
    week = Weekday.from_name(str(week_start)) if week_start is not None else None
    return config, week


def load_validator_module(path: Path) -> ModuleType:
    """Import a Python file holding validator functions."""
    spec = importlib.util.spec_from_file_location("inq_validators", path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load validators from {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules["inq_validators"] = module
    spec.loader.exec_module(module)
    return module


def get_validator(module: ModuleType, name: str) -> Callable[[Any], Any]:
    """Get a validator function by name."""
    fn = getattr(module, name, None)
    if fn is None or not callable(fn):
        raise ValueError(f"Validator '{name}' not found in {module.__file__}")
    return fn


def _parse_date(key: Any, path: Path) -> date:
    # PyYAML already turns unquoted ISO dates into date objects
    if isinstance(key, datetime):
        return key.date()
    if isinstance(key, date):
        return key
    try:
        return date.fromisoformat(str(key))
    except ValueError:
        raise ValueError(f"Invalid date key {key!r} in {path}") from None
