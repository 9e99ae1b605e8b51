"""List-selection prompt — filterable, paged single choice."""

from __future__ import annotations

from inq.errors import InvalidConfigurationError
from inq.models.config import PromptConfig
from inq.models.results import ActionResult
from inq.models.select import ListOption, Select
from inq.prompts.actions import FilterInput, PromptAction, SelectAction, map_select_key
from inq.prompts.validation import validate
from inq.ui.backend import SelectBackend

NO_MATCHES = "No options match the filter"


class SelectPrompt:
    """State of one list-selection session.

    ``cursor`` indexes the *filtered* options; it is kept on the same option
    across filter changes when that option still matches.
    """

    keymap = staticmethod(map_select_key)

    def __init__(self, spec: Select) -> None:
        if not spec.options:
            raise InvalidConfigurationError("Available options can not be empty")
        if not 0 <= spec.starting_cursor < len(spec.options):
            raise InvalidConfigurationError(
                f"Starting cursor {spec.starting_cursor} is out of range for "
                f"{len(spec.options)} options"
            )

        self._spec = spec
        self.filter_text = ""
        self.error: str | None = None
        self._filtered = list(range(len(spec.options)))
        self.cursor = spec.starting_cursor

    @property
    def message(self) -> str:
        return self._spec.message

    @property
    def config(self) -> PromptConfig:
        return self._spec.config

    @property
    def filtered_options(self) -> list[ListOption]:
        return [ListOption(index=i, value=self._spec.options[i]) for i in self._filtered]

    def handle(self, action: PromptAction | SelectAction | FilterInput) -> ActionResult:
        if action == PromptAction.submit:
            return ActionResult.submit
        if isinstance(action, FilterInput):
            return self._set_filter(self.filter_text + action.char)
        if action == SelectAction.filter_backspace:
            if not self.filter_text:
                return ActionResult.clean
            return self._set_filter(self.filter_text[:-1])

        page_size = self.config.page_size
        last = len(self._filtered) - 1
        if action == SelectAction.move_up:
            return self._move_to(self.cursor - 1 if self.cursor > 0 else last)
        if action == SelectAction.move_down:
            return self._move_to(self.cursor + 1 if self.cursor < last else 0)
        if action == SelectAction.page_up:
            return self._move_to(max(self.cursor - page_size, 0))
        if action == SelectAction.page_down:
            return self._move_to(min(self.cursor + page_size, last))
        if action == SelectAction.move_to_start:
            return self._move_to(0)
        if action == SelectAction.move_to_end:
            return self._move_to(last)
        return ActionResult.clean

    def submit(self) -> ListOption | None:
        if not self._filtered:
            self._reject(NO_MATCHES)
            return None

        index = self._filtered[self.cursor]
        answer = ListOption(index=index, value=self._spec.options[index])
        validation = validate(self._spec.validators, answer)
        if not validation.valid:
            self._reject(validation.message)
            return None
        return answer

    def format_answer(self, answer: ListOption) -> str:
        return self.config.transformer(answer)

    def render(self, backend: SelectBackend) -> None:
        if self.error is not None:
            backend.render_error_message(self.error)

        backend.render_select_prompt(self.message, self.filter_text)

        page = self.current_page()
        highlighted = self._filtered[self.cursor] if self._filtered else None
        backend.render_options([(i, self._spec.options[i]) for i in page], highlighted)

        if self._spec.help_message:
            backend.render_help_message(self._spec.help_message)

    def current_page(self) -> list[int]:
        """Option indices visible on the page containing the cursor."""
        page_size = self.config.page_size
        start = (self.cursor // page_size) * page_size
        return self._filtered[start:start + page_size]

    def _move_to(self, cursor: int) -> ActionResult:
        if not self._filtered or cursor == self.cursor:
            return ActionResult.clean
        self.cursor = cursor
        return ActionResult.needs_redraw

    def _set_filter(self, text: str) -> ActionResult:
        selected = self._filtered[self.cursor] if self._filtered else None
        self.filter_text = text
        self._filtered = [
            i for i, label in enumerate(self._spec.options)
            if self.config.filter(text, label, i)
        ]
        if selected in self._filtered:
            self.cursor = self._filtered.index(selected)
        else:
            self.cursor = 0
        return ActionResult.needs_redraw

    def _reject(self, message: str | None) -> None:
        self.error = message
        if not self.config.keep_filter and self.filter_text:
            self._set_filter("")
