"""Terminal backend — rich for drawing, termios cbreak mode for reading keys.

POSIX only. Each frame is drawn into a transient ``rich.live.Live`` region;
when the prompt ends the region is cleared and a one-line summary is printed.
"""

from __future__ import annotations

import codecs
import os
import select
import sys
import termios
import tty
from datetime import date
from typing import Mapping, Sequence

from rich.console import Console, Group, RenderableType
from rich.live import Live
from rich.table import Table
from rich.text import Text

from inq.errors import NotATerminalError, RenderError
from inq.models.config import Weekday
from inq.models.dates import DateInfo
from inq.ui.backend import KeyEvent
from inq.ui.calendar import in_bounds, month_grid, month_title, weekday_headers

# Seconds to wait for the rest of an escape sequence after a lone ESC byte
ESCAPE_TIMEOUT = 0.05

ESCAPE_SEQUENCES = {
    "\x1b": "esc",
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1b[1;5A": "ctrl+up",
    "\x1b[1;5B": "ctrl+down",
    "\x1b[1;5C": "ctrl+right",
    "\x1b[1;5D": "ctrl+left",
    "\x1b[5~": "pageup",
    "\x1b[6~": "pagedown",
    "\x1b[5;2~": "shift+pageup",
    "\x1b[6;2~": "shift+pagedown",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1b[1~": "home",
    "\x1b[4~": "end",
    "\x1b[3~": "delete",
}

CONTROL_KEYS = {
    "\r": "enter",
    "\n": "enter",
    "\t": "tab",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x03": "ctrl+c",
}


def decode_key(raw: str) -> KeyEvent:
    """Turn the characters of one key press into a ``KeyEvent``."""
    if raw.startswith("\x1b"):
        return KeyEvent(ESCAPE_SEQUENCES.get(raw, raw))
    return KeyEvent(CONTROL_KEYS.get(raw, raw))


class TerminalBackend:
    """Interactive backend for a POSIX terminal."""

    def __init__(self, console: Console | None = None, input_fd: int | None = None) -> None:
        self.console = console or Console()
        self._fd = sys.stdin.fileno() if input_fd is None else input_fd
        self._saved_attrs: list | None = None
        self._live: Live | None = None
        self._frame: list[RenderableType] = []

    def __enter__(self) -> TerminalBackend:
        if not os.isatty(self._fd):
            raise NotATerminalError("Standard input is not an interactive terminal")

        try:
            self._saved_attrs = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
            # Ctrl+C arrives as a key instead of SIGINT
            attrs = termios.tcgetattr(self._fd)
            attrs[3] &= ~termios.ISIG
            termios.tcsetattr(self._fd, termios.TCSADRAIN, attrs)
        except termios.error as exc:
            self._restore_attrs()
            raise RenderError(f"Cannot switch terminal to cbreak mode: {exc}") from exc

        self._live = Live(console=self.console, auto_refresh=False, transient=True)
        self._live.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._stop_live()
        self._restore_attrs()

    # Input --------------------------------------------------------------

    def read_key(self) -> KeyEvent:
        first = os.read(self._fd, 1)
        if first == b"\x1b":
            raw = first
            while select.select([self._fd], [], [], ESCAPE_TIMEOUT)[0]:
                raw += os.read(self._fd, 32)
            return decode_key(raw.decode("utf-8", errors="replace"))

        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        text = decoder.decode(first)
        while not text:
            text = decoder.decode(os.read(self._fd, 1))
        return decode_key(text)

    # Frames -------------------------------------------------------------

    def frame_setup(self) -> None:
        self._frame = []

    def frame_finish(self) -> None:
        if self._live is not None:
            self._live.update(Group(*self._frame), refresh=True)

    def finish_prompt(self, message: str, answer: str) -> None:
        self._stop_live()
        self.console.print(Text.assemble(("? ", "bold green"), (message, "bold"), " ", (answer, "cyan")))

    def render_canceled_prompt(self, message: str) -> None:
        self._stop_live()
        self.console.print(Text.assemble(("? ", "bold green"), (message, "bold"), " ", ("<canceled>", "dim italic")))

    # Shared pieces ------------------------------------------------------

    def render_error_message(self, message: str) -> None:
        self._frame.append(Text(f"# {message}", style="bold red"))

    def render_help_message(self, message: str) -> None:
        self._frame.append(Text(f"[{message}]", style="cyan"))

    # Date selection -----------------------------------------------------

    def render_calendar_prompt(self, prompt: str) -> None:
        self._frame.append(Text.assemble(("? ", "bold green"), (prompt, "bold")))

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
    ) -> None:
        table = Table(title=month_title(year, month), box=None, show_edge=False, pad_edge=False)
        for header in weekday_headers(week_start):
            table.add_column(header, justify="right")

        for week in month_grid(year, month, week_start):
            table.add_row(*(
                self._calendar_cell(day, month, today, selected_date, min_date, max_date, marked_dates)
                for day in week
            ))
        self._frame.append(table)

    def render_selection_details(self, details: str) -> None:
        if details:
            self._frame.append(Text(details, style="italic"))

    # List selection -----------------------------------------------------

    def render_select_prompt(self, prompt: str, filter_text: str) -> None:
        self._frame.append(Text.assemble(("? ", "bold green"), (prompt, "bold"), " ", filter_text))

    def render_options(self, page: Sequence[tuple[int, str]], cursor_index: int | None) -> None:
        for index, label in page:
            if index == cursor_index:
                self._frame.append(Text(f"> {label}", style="bold cyan"))
            else:
                self._frame.append(Text(f"  {label}"))

    # Helpers ------------------------------------------------------------

    def _calendar_cell(
        self,
        day: date,
        month: int,
        today: date,
        selected_date: date,
        min_date: date | None,
        max_date: date | None,
        marked_dates: Mapping[date, DateInfo] | None,
    ) -> Text:
        info = marked_dates.get(day) if marked_dates else None
        glyph = "*" if info is not None else " "
        text = Text(f"{day.day:>2}{glyph}")

        if day.month != month or not in_bounds(day, min_date, max_date):
            text.stylize("dim")
        if info is not None:
            text.stylize("red" if info.deletable else "yellow")
        if day == today:
            text.stylize("underline")
        if day == selected_date:
            text.stylize("reverse")
        return text

    def _stop_live(self) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None

    def _restore_attrs(self) -> None:
        if self._saved_attrs is not None:
            attrs, self._saved_attrs = self._saved_attrs, None
            termios.tcsetattr(self._fd, termios.TCSADRAIN, attrs)
