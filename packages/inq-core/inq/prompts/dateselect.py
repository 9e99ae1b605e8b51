"""Date-selection prompt — calendar navigation with a delete-confirmation step."""

from __future__ import annotations

from datetime import date
from types import MappingProxyType
from typing import Mapping

from inq.errors import InvalidConfigurationError
from inq.models.dates import DateInfo, DateOutput, DateSelect, DateSelectConfig
from inq.models.results import ActionResult
from inq.prompts.actions import DateSelectAction, PromptAction, map_date_key
from inq.prompts.validation import validate
from inq.ui.backend import DateSelectBackend
from inq.utils.dates import clamp, get_current_date, shift_days, shift_months

DELETE_CONFIRMATION = "Are you sure you want to delete logs for date: {date}? [y/n]"

_DAY_SHIFTS = {
    DateSelectAction.go_to_prev_day: -1,
    DateSelectAction.go_to_next_day: 1,
    DateSelectAction.go_to_prev_week: -7,
    DateSelectAction.go_to_next_week: 7,
}

_MONTH_SHIFTS = {
    DateSelectAction.go_to_prev_month: -1,
    DateSelectAction.go_to_next_month: 1,
    DateSelectAction.go_to_prev_year: -12,
    DateSelectAction.go_to_next_year: 12,
}


class DateSelectPrompt:
    """State of one date-selection session.

    While a deletion is awaiting confirmation only ``confirm_delete`` and
    ``cancel_delete`` are honored; every other action is a no-op.
    """

    keymap = staticmethod(map_date_key)

    def __init__(self, spec: DateSelect) -> None:
        _check_bounds(spec)

        self._spec = spec
        self._config = DateSelectConfig.from_spec(spec)
        self._marked_dates: Mapping[date, DateInfo] | None = (
            MappingProxyType(spec.marked_dates) if spec.marked_dates is not None else None
        )
        self.current_date = spec.starting_date
        self.error: str | None = None
        self.deletion_requested = False
        self.to_delete = False

    @property
    def message(self) -> str:
        return self._spec.message

    @property
    def config(self) -> DateSelectConfig:
        return self._config

    def handle(self, action: PromptAction | DateSelectAction) -> ActionResult:
        if self.deletion_requested:
            return self._handle_confirmation(action)

        if action == PromptAction.submit:
            return ActionResult.submit
        if action in _DAY_SHIFTS:
            return self._update_date(shift_days(self.current_date, _DAY_SHIFTS[action]))
        if action in _MONTH_SHIFTS:
            return self._update_date(shift_months(self.current_date, _MONTH_SHIFTS[action]))
        if action == DateSelectAction.delete:
            return self._request_deletion()
        return ActionResult.clean

    def submit(self) -> DateOutput | None:
        validation = validate(self._spec.validators, self.current_date)
        if not validation.valid:
            self.error = validation.message
            self.to_delete = False
            return None
        return DateOutput(date=self.current_date, to_delete=self.to_delete)

    def format_answer(self, answer: DateOutput) -> str:
        return self._spec.formatter(answer.date)

    def render(self, backend: DateSelectBackend) -> None:
        if self.error is not None:
            backend.render_error_message(self.error)

        backend.render_calendar_prompt(self.message)
        backend.render_calendar(
            self.current_date.month,
            self.current_date.year,
            self._config.week_start,
            get_current_date(),
            self.current_date,
            self._config.min_date,
            self._config.max_date,
            self._marked_dates,
        )

        if self._spec.help_message:
            backend.render_help_message(self._spec.help_message)

        info = self._marked_dates.get(self.current_date) if self._marked_dates else None
        if info is not None:
            backend.render_selection_details(info.details)

    def _handle_confirmation(self, action: PromptAction | DateSelectAction) -> ActionResult:
        if action == DateSelectAction.confirm_delete:
            self.deletion_requested = False
            self.error = None
            self.to_delete = True
            return ActionResult.submit
        if action == DateSelectAction.cancel_delete:
            self.deletion_requested = False
            self.error = None
            return ActionResult.needs_redraw
        return ActionResult.clean

    def _request_deletion(self) -> ActionResult:
        info = self._marked_dates.get(self.current_date) if self._marked_dates else None
        if info is None or not info.deletable:
            return ActionResult.clean

        self.deletion_requested = True
        self.error = DELETE_CONFIRMATION.format(date=self.current_date.isoformat())
        return ActionResult.needs_redraw

    def _update_date(self, new_date: date | None) -> ActionResult:
        if new_date is None:
            return ActionResult.clean

        new_date = clamp(new_date, self._config.min_date, self._config.max_date)
        if new_date == self.current_date:
            return ActionResult.clean

        self.current_date = new_date
        return ActionResult.needs_redraw


def _check_bounds(spec: DateSelect) -> None:
    if spec.min_date is not None and spec.max_date is not None and spec.min_date > spec.max_date:
        raise InvalidConfigurationError("Min date can not be greater than max date")
    if spec.min_date is not None and spec.min_date > spec.starting_date:
        raise InvalidConfigurationError("Min date can not be greater than starting date")
    if spec.max_date is not None and spec.max_date < spec.starting_date:
        raise InvalidConfigurationError("Max date can not be smaller than starting date")
