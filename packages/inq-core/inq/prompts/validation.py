"""Validation pipeline — run validators in order, stop at the first rejection."""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, Iterable

from inq.errors import CustomValidatorError
from inq.models.config import Weekday
from inq.models.results import Validation

DEFAULT_INVALID_MESSAGE = "Invalid input"


def validate(validators: Iterable[Callable[[Any], Any]], candidate: Any) -> Validation:
    """Validate *candidate* against *validators* in order.

    A validator may return a ``Validation``, a ``bool`` or a ``str`` (the
    message of a rejection). The first rejection is returned and the
    remaining validators are not called.

    Raises:
        CustomValidatorError: If a validator raises; the original exception
            is chained and kept on ``.original``.
    """
    for validator in validators:
        name = getattr(validator, "__name__", type(validator).__name__)
        try:
            outcome = validator(candidate)
        except Exception as exc:
            raise CustomValidatorError(f"Validator {name!r} failed: {exc}", original=exc) from exc

        validation = _coerce(outcome)
        if validation is None:
            raise CustomValidatorError(f"Validator {name!r} returned unsupported value: {outcome!r}")
        if not validation.valid:
            return validation

    return Validation.ok()


def _coerce(outcome: Any) -> Validation | None:
    if isinstance(outcome, Validation):
        if not outcome.valid and not outcome.message:
            return Validation.invalid(DEFAULT_INVALID_MESSAGE)
        return outcome
    if isinstance(outcome, bool):
        return Validation.ok() if outcome else Validation.invalid(DEFAULT_INVALID_MESSAGE)
    if isinstance(outcome, str):
        return Validation.invalid(outcome or DEFAULT_INVALID_MESSAGE)
    return None


def min_date_validator(min_date: date, message: str | None = None) -> Callable[[date], Validation]:
    def check(value: date) -> Validation:
        if value < min_date:
            return Validation.invalid(message or f"Date must be on or after {min_date.isoformat()}")
        return Validation.ok()

    return check


def max_date_validator(max_date: date, message: str | None = None) -> Callable[[date], Validation]:
    def check(value: date) -> Validation:
        if value > max_date:
            return Validation.invalid(message or f"Date must be on or before {max_date.isoformat()}")
        return Validation.ok()

    return check


def weekday_validator(
    rejected: Iterable[Weekday], message: str | None = None
) -> Callable[[date], Validation]:
    """Reject dates falling on any of the *rejected* weekdays."""
    days = frozenset(rejected)

    def check(value: date) -> Validation:
        day = Weekday(value.weekday())
        if day in days:
            return Validation.invalid(message or f"{day.name.capitalize()} is not allowed")
        return Validation.ok()

    return check

