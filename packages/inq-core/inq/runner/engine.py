"""Driver loop — read a key, map it, handle it, redraw or submit."""

from __future__ import annotations

import logging
from typing import Any, Callable

from inq.errors import RenderError
from inq.models.dates import DateSelect
from inq.models.results import ActionResult, PromptResult, PromptStatus
from inq.models.select import Select
from inq.prompts.actions import PromptAction
from inq.prompts.base import Prompt
from inq.prompts.dateselect import DateSelectPrompt
from inq.prompts.select import SelectPrompt
from inq.ui.backend import Backend, KeyEvent

logger = logging.getLogger(__name__)


def prompt_date(spec: DateSelect, backend: Backend | None = None) -> PromptResult:
    """Ask for a date. The answer is a ``DateOutput``.

    Raises:
        InvalidConfigurationError: If the bounds and starting date disagree.
    """
    return run_prompt(DateSelectPrompt(spec), backend or _default_backend())


def prompt_select(spec: Select, backend: Backend | None = None) -> PromptResult:
    """Ask for one option of a list. The answer is a ``ListOption``."""
    return run_prompt(SelectPrompt(spec), backend or _default_backend())


def run_prompt(
    prompt: Prompt,
    backend: Backend,
    keymap: Callable[[KeyEvent, Any], Any] | None = None,
) -> PromptResult:
    """Run one prompt session to completion.

    The backend is held for the whole session and released however the
    session ends.

    Raises:
        CustomValidatorError: If a validator raises.
        RenderError: If the backend fails to draw or read.
    """
    keymap = keymap or prompt.keymap

    try:
        with backend:
            return _run_loop(prompt, backend, keymap)
    except OSError as exc:
        raise RenderError(f"Terminal I/O failed: {exc}") from exc


def _run_loop(prompt: Prompt, backend: Backend, keymap: Callable[[KeyEvent, Any], Any]) -> PromptResult:
    needs_render = True

    while True:
        if needs_render:
            _render(prompt, backend)

        event = backend.read_key()
        action = keymap(event, prompt.config)
        if action is None:
            needs_render = False
            continue

        if action == PromptAction.abort:
            logger.debug("Prompt %r cancelled", prompt.message)
            backend.render_canceled_prompt(prompt.message)
            return PromptResult(status=PromptStatus.cancelled)

        result = prompt.handle(action)
        logger.debug("Key %r -> %s -> %s", event.key, action, result.value)

        if result == ActionResult.clean:
            needs_render = False
            continue
        if result == ActionResult.needs_redraw:
            needs_render = True
            continue

        answer = prompt.submit()
        if answer is None:
            logger.debug("Submission rejected")
            needs_render = True
            continue

        formatted = prompt.format_answer(answer)
        backend.finish_prompt(prompt.message, formatted)
        logger.debug("Prompt %r answered with %r", prompt.message, formatted)
        return PromptResult(status=PromptStatus.answered, answer=answer, formatted=formatted)


def _render(prompt: Prompt, backend: Backend) -> None:
    backend.frame_setup()
    prompt.render(backend)
    backend.frame_finish()


def _default_backend() -> Backend:
    from inq.ui.terminal import TerminalBackend

    return TerminalBackend()
