"""Session contract — the capabilities the driver needs from every prompt type."""

from __future__ import annotations

from typing import Any, Callable, Protocol

from inq.models.results import ActionResult
from inq.ui.backend import KeyEvent


class Prompt(Protocol):
    """One prompt session's state machine.

    ``keymap`` turns raw key events into this prompt's actions;
    ``handle`` applies one of those actions; ``submit`` validates the
    current answer and returns it, or ``None`` when it was rejected (the
    rejection message then shows on the next ``render``).
    """

    keymap: Callable[[KeyEvent, Any], Any]

    @property
    def message(self) -> str: ...

    @property
    def config(self) -> Any: ...

    def handle(self, action: Any) -> ActionResult: ...
    def render(self, backend: Any) -> None: ...
    def submit(self) -> Any | None: ...
    def format_answer(self, answer: Any) -> str: ...
