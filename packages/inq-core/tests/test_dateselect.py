"""Tests for the date-selection state machine."""

import random
from datetime import date

import pytest

from inq.errors import InvalidConfigurationError
from inq.models.config import PromptConfig, Weekday
from inq.models.dates import DateInfo, DateOutput, DateSelect
from inq.models.results import ActionResult
from inq.prompts.actions import DateSelectAction, PromptAction
from inq.prompts.dateselect import DateSelectPrompt

NAVIGATION = [
    DateSelectAction.go_to_prev_day,
    DateSelectAction.go_to_next_day,
    DateSelectAction.go_to_prev_week,
    DateSelectAction.go_to_next_week,
    DateSelectAction.go_to_prev_month,
    DateSelectAction.go_to_next_month,
    DateSelectAction.go_to_prev_year,
    DateSelectAction.go_to_next_year,
]


def make_prompt(**kwargs) -> DateSelectPrompt:
    kwargs.setdefault("message", "When?")
    kwargs.setdefault("starting_date", date(2023, 6, 15))
    return DateSelectPrompt(DateSelect(**kwargs))


class TestConstruction:
    def test_starting_date_before_min(self):
        with pytest.raises(InvalidConfigurationError, match="Min date"):
            make_prompt(min_date=date(2023, 7, 1))

    def test_starting_date_after_max(self):
        with pytest.raises(InvalidConfigurationError, match="Max date"):
            make_prompt(max_date=date(2023, 6, 1))

    def test_min_greater_than_max(self):
        with pytest.raises(InvalidConfigurationError):
            make_prompt(min_date=date(2023, 12, 1), max_date=date(2023, 1, 1))

    def test_starting_date_on_bounds(self):
        p = make_prompt(min_date=date(2023, 6, 15), max_date=date(2023, 6, 15))
        assert p.current_date == date(2023, 6, 15)

    def test_defaults_to_today(self):
        p = DateSelectPrompt(DateSelect(message="When?"))
        assert p.current_date == date.today()

    def test_config_carries_vim_mode(self):
        p = make_prompt(config=PromptConfig(vim_mode=True), week_start=Weekday.monday)
        assert p.config.vim_mode is True
        assert p.config.week_start == Weekday.monday


class TestNavigation:
    @pytest.mark.parametrize("action, expected", [
        (DateSelectAction.go_to_prev_day, date(2023, 6, 14)),
        (DateSelectAction.go_to_next_day, date(2023, 6, 16)),
        (DateSelectAction.go_to_prev_week, date(2023, 6, 8)),
        (DateSelectAction.go_to_next_week, date(2023, 6, 22)),
        (DateSelectAction.go_to_prev_month, date(2023, 5, 15)),
        (DateSelectAction.go_to_next_month, date(2023, 7, 15)),
        (DateSelectAction.go_to_prev_year, date(2022, 6, 15)),
        (DateSelectAction.go_to_next_year, date(2024, 6, 15)),
    ])
    def test_unbounded_moves(self, action, expected):
        p = make_prompt()
        assert p.handle(action) == ActionResult.needs_redraw
        assert p.current_date == expected

    def test_next_year_clamps_to_max(self):
        p = make_prompt(min_date=date(2023, 1, 1), max_date=date(2023, 12, 31))
        assert p.handle(DateSelectAction.go_to_next_year) == ActionResult.needs_redraw
        assert p.current_date == date(2023, 12, 31)

    def test_prev_month_rolls_year_back(self):
        p = make_prompt(starting_date=date(2023, 1, 15))
        p.handle(DateSelectAction.go_to_prev_month)
        assert p.current_date == date(2022, 12, 15)

    def test_next_month_rolls_year_forward(self):
        p = make_prompt(starting_date=date(2023, 12, 10))
        p.handle(DateSelectAction.go_to_next_month)
        assert p.current_date == date(2024, 1, 10)

    def test_missing_day_in_target_month_is_noop(self):
        p = make_prompt(starting_date=date(2023, 5, 31))
        assert p.handle(DateSelectAction.go_to_next_month) == ActionResult.clean
        assert p.current_date == date(2023, 5, 31)

    def test_leap_day_next_year_is_noop(self):
        p = make_prompt(starting_date=date(2024, 2, 29))
        assert p.handle(DateSelectAction.go_to_next_year) == ActionResult.clean
        assert p.current_date == date(2024, 2, 29)

    def test_move_at_bound_is_clean(self):
        p = make_prompt(max_date=date(2023, 6, 15))
        assert p.handle(DateSelectAction.go_to_next_day) == ActionResult.clean
        assert p.current_date == date(2023, 6, 15)

    def test_move_past_min_clamps(self):
        p = make_prompt(min_date=date(2023, 6, 10))
        p.handle(DateSelectAction.go_to_prev_week)
        assert p.current_date == date(2023, 6, 10)

    def test_random_walks_stay_in_bounds(self):
        min_date, max_date = date(2023, 3, 1), date(2023, 9, 30)
        rng = random.Random(1234)
        for _ in range(20):
            p = make_prompt(min_date=min_date, max_date=max_date)
            for _ in range(200):
                p.handle(rng.choice(NAVIGATION))
                assert min_date <= p.current_date <= max_date

    def test_unknown_action_is_clean(self):
        p = make_prompt()
        assert p.handle(DateSelectAction.confirm_delete) == ActionResult.clean
        assert p.handle(DateSelectAction.cancel_delete) == ActionResult.clean
        assert p.current_date == date(2023, 6, 15)


class TestDeletion:
    def test_delete_without_marked_dates(self):
        p = make_prompt()
        assert p.handle(DateSelectAction.delete) == ActionResult.clean
        assert not p.deletion_requested
        assert p.error is None

    def test_delete_absent_date(self, marked_dates):
        p = make_prompt(starting_date=date(2023, 6, 14), marked_dates=marked_dates)
        assert p.handle(DateSelectAction.delete) == ActionResult.clean
        assert not p.deletion_requested
        assert p.error is None

    def test_delete_not_deletable(self, marked_dates):
        p = make_prompt(starting_date=date(2023, 6, 16), marked_dates=marked_dates)
        assert p.handle(DateSelectAction.delete) == ActionResult.clean
        assert not p.deletion_requested
        assert p.error is None

    def test_delete_request_asks_for_confirmation(self, marked_dates):
        p = make_prompt(marked_dates=marked_dates)
        assert p.handle(DateSelectAction.delete) == ActionResult.needs_redraw
        assert p.deletion_requested
        assert "2023-06-15" in p.error
        assert "[y/n]" in p.error

    def test_pending_ignores_other_actions(self, marked_dates):
        p = make_prompt(marked_dates=marked_dates)
        p.handle(DateSelectAction.delete)
        for action in NAVIGATION + [PromptAction.submit, DateSelectAction.delete]:
            assert p.handle(action) == ActionResult.clean
        assert p.current_date == date(2023, 6, 15)
        assert p.deletion_requested

    def test_cancel(self, marked_dates):
        p = make_prompt(marked_dates=marked_dates)
        p.handle(DateSelectAction.delete)
        assert p.handle(DateSelectAction.cancel_delete) == ActionResult.needs_redraw
        assert not p.deletion_requested
        assert p.error is None
        assert p.submit() == DateOutput(date=date(2023, 6, 15), to_delete=False)
        # back to normal navigation
        assert p.handle(DateSelectAction.go_to_next_day) == ActionResult.needs_redraw

    def test_confirm(self, marked_dates):
        p = make_prompt(marked_dates=marked_dates)
        p.handle(DateSelectAction.delete)
        assert p.handle(DateSelectAction.confirm_delete) == ActionResult.submit
        assert not p.deletion_requested
        assert p.error is None
        assert p.submit() == DateOutput(date=date(2023, 6, 15), to_delete=True)

    def test_marked_dates_are_not_mutated(self, marked_dates):
        before = dict(marked_dates)
        p = make_prompt(marked_dates=marked_dates)
        p.handle(DateSelectAction.delete)
        p.handle(DateSelectAction.confirm_delete)
        p.submit()
        assert marked_dates == before


class TestSubmit:
    def test_valid(self):
        p = make_prompt()
        assert p.handle(PromptAction.submit) == ActionResult.submit
        assert p.submit() == DateOutput(date=date(2023, 6, 15))

    def test_invalid_keeps_session_and_stores_message(self):
        p = make_prompt(validators=[lambda d: "nope"])
        assert p.submit() is None
        assert p.error == "nope"

    def test_invalid_drops_delete_intent(self, marked_dates):
        p = make_prompt(marked_dates=marked_dates, validators=[lambda d: d.day != 15 or "locked"])
        p.handle(DateSelectAction.delete)
        p.handle(DateSelectAction.confirm_delete)
        assert p.submit() is None
        assert p.to_delete is False

    def test_submit_twice_is_idempotent(self):
        p = make_prompt(validators=[lambda d: True])
        assert p.submit() == p.submit()

    def test_default_format(self):
        p = make_prompt()
        assert p.format_answer(DateOutput(date=date(2023, 6, 15))) == "June 15, 2023"

    def test_custom_formatter(self):
        p = make_prompt(formatter=lambda d: d.isoformat())
        assert p.format_answer(DateOutput(date=date(2023, 6, 15))) == "2023-06-15"


class TestRender:
    def test_render_order(self, fake_backend, marked_dates):
        backend = fake_backend()
        p = make_prompt(
            marked_dates=marked_dates,
            min_date=date(2023, 1, 1),
            week_start=Weekday.monday,
            help_message="help!",
        )
        p.handle(DateSelectAction.delete)

        backend.frame_setup()
        p.render(backend)
        backend.frame_finish()

        names = [c[0] for c in backend.last_frame]
        assert names == [
            "render_error_message",
            "render_calendar_prompt",
            "render_calendar",
            "render_help_message",
            "render_selection_details",
        ]
        calendar = backend.calls_named("render_calendar")[0]
        assert calendar[1:3] == (6, 2023)
        assert calendar[3] == Weekday.monday
        assert calendar[5] == date(2023, 6, 15)
        assert calendar[6:8] == (date(2023, 1, 1), None)
        assert calendar[8][date(2023, 6, 15)].details == "3 log files"
        assert backend.calls_named("render_selection_details")[0] == ("render_selection_details", "3 log files")

    def test_render_minimal(self, fake_backend):
        backend = fake_backend()
        p = make_prompt(help_message=None)

        backend.frame_setup()
        p.render(backend)
        backend.frame_finish()

        assert [c[0] for c in backend.last_frame] == ["render_calendar_prompt", "render_calendar"]

    def test_details_only_for_marked_cursor(self, fake_backend):
        backend = fake_backend()
        p = make_prompt(marked_dates={date(2023, 6, 1): DateInfo(details="x")})

        backend.frame_setup()
        p.render(backend)
        backend.frame_finish()

        assert backend.calls_named("render_selection_details") == []
