"""Shared test fixtures — FakeBackend for driving prompts without a terminal."""

from __future__ import annotations

from datetime import date
from typing import Any

import pytest

from inq.models.dates import DateInfo
from inq.ui.backend import KeyEvent


class FakeBackend:
    """A scripted backend for testing.

    ``keys`` are returned one by one from ``read_key()``. Every render call of
    a frame is recorded in ``frames`` as ``(method_name, *args)`` tuples;
    ``finished`` / ``canceled`` record the closing call. Set ``fail_on`` to a
    method name to make that method raise ``OSError``.
    """

    def __init__(self, keys: list[str] | None = None, fail_on: str | None = None) -> None:
        self.keys = [KeyEvent(k) for k in keys or []]
        self.fail_on = fail_on
        self.frames: list[list[tuple[Any, ...]]] = []
        self.finished: tuple[str, str] | None = None
        self.canceled: str | None = None
        self.entered = False
        self.exited = False
        self._frame: list[tuple[Any, ...]] = []

    def __enter__(self) -> FakeBackend:
        self.entered = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.exited = True

    @property
    def last_frame(self) -> list[tuple[Any, ...]]:
        return self.frames[-1]

    def calls_named(self, name: str, frame: int = -1) -> list[tuple[Any, ...]]:
        return [c for c in self.frames[frame] if c[0] == name]

    def read_key(self) -> KeyEvent:
        if not self.keys:
            raise AssertionError("FakeBackend ran out of scripted keys")
        return self.keys.pop(0)

    def frame_setup(self) -> None:
        self._frame = []

    def frame_finish(self) -> None:
        self.frames.append(self._frame)

    def finish_prompt(self, message: str, answer: str) -> None:
        self._check("finish_prompt")
        self.finished = (message, answer)

    def render_canceled_prompt(self, message: str) -> None:
        self._check("render_canceled_prompt")
        self.canceled = message

    def render_error_message(self, message: str) -> None:
        self._record("render_error_message", message)

    def render_help_message(self, message: str) -> None:
        self._record("render_help_message", message)

    def render_calendar_prompt(self, prompt: str) -> None:
        self._record("render_calendar_prompt", prompt)

    def render_calendar(self, month, year, week_start, today, selected_date, min_date, max_date, marked_dates) -> None:
        self._record(
            "render_calendar", month, year, week_start, today, selected_date, min_date, max_date, marked_dates,
        )

    def render_selection_details(self, details: str) -> None:
        self._record("render_selection_details", details)

    def render_select_prompt(self, prompt: str, filter_text: str) -> None:
        self._record("render_select_prompt", prompt, filter_text)

    def render_options(self, page, cursor_index) -> None:
        self._record("render_options", list(page), cursor_index)

    def _check(self, name: str) -> None:
        if self.fail_on == name:
            raise OSError(f"{name} failed")

    def _record(self, name: str, *args: Any) -> None:
        self._check(name)
        self._frame.append((name, *args))


@pytest.fixture
def fake_backend():
    """Return a factory building FakeBackends from key lists."""
    def make(*keys: str, fail_on: str | None = None) -> FakeBackend:
        return FakeBackend(list(keys), fail_on=fail_on)

    return make


@pytest.fixture
def marked_dates() -> dict[date, DateInfo]:
    return {
        date(2023, 6, 15): DateInfo(deletable=True, details="3 log files"),
        date(2023, 6, 16): DateInfo(deletable=False, details="retention hold"),
    }
