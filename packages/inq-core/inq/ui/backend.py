"""Render contract — what prompts draw on and where input events come from.

Backends are owned by the caller. The driver enters the backend (``with``)
for the whole session, reads one ``KeyEvent`` at a time and asks the prompt
to render between ``frame_setup()`` and ``frame_finish()``. Any method may
raise ``OSError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Mapping, Protocol, Sequence

from inq.models.config import Weekday
from inq.models.dates import DateInfo


@dataclass(frozen=True)
class KeyEvent:
    """A raw key press.

    ``key`` is either a single printable character (``"a"``, ``"["``) or a
    key name such as ``"left"``, ``"ctrl+left"``, ``"shift+pageup"``,
    ``"enter"``, ``"esc"``, ``"backspace"`` or ``"ctrl+c"``.
    """

    key: str

    @property
    def char(self) -> str | None:
        if len(self.key) == 1 and self.key.isprintable():
            return self.key
        return None


class Backend(Protocol):
    """Lifecycle and input shared by every prompt type."""

    def __enter__(self) -> Backend: ...
    def __exit__(self, exc_type, exc, tb) -> None: ...

    def read_key(self) -> KeyEvent: ...
    def frame_setup(self) -> None: ...
    def frame_finish(self) -> None: ...
    def render_error_message(self, message: str) -> None: ...
    def render_help_message(self, message: str) -> None: ...
    def finish_prompt(self, message: str, answer: str) -> None: ...
    def render_canceled_prompt(self, message: str) -> None: ...


class DateSelectBackend(Backend, Protocol):
    def render_calendar_prompt(self, prompt: str) -> None: ...

    def render_calendar(
        self,
        month: int,
        year: int,
        week_start: Weekday,
        today: date,
        selected_date: date,
        min_date: date | None,
        max_date: date | None,
        marked_dates: Mapping[date, DateInfo] | None,
    ) -> None: ...

    def render_selection_details(self, details: str) -> None: ...


class SelectBackend(Backend, Protocol):
    def render_select_prompt(self, prompt: str, filter_text: str) -> None: ...

    def render_options(self, page: Sequence[tuple[int, str]], cursor_index: int | None) -> None:
        """Draw one page of ``(option_index, label)`` rows; *cursor_index* is the
        option index of the highlighted row."""
        ...
