"""Error taxonomy — every failure that escapes a prompt session."""

from __future__ import annotations


class InquireError(Exception):
    """Base class for errors raised out of a prompt session."""


class InvalidConfigurationError(InquireError):
    """The prompt definition is inconsistent (e.g. starting date out of bounds).

    Raised when the session is created, before anything is rendered.
    """


class CustomValidatorError(InquireError):
    """A validator raised instead of returning a validation outcome."""

    def __init__(self, message: str, original: BaseException | None = None) -> None:
        super().__init__(message)
        self.original = original


class RenderError(InquireError):
    """The backend failed to draw or to read input."""


class NotATerminalError(RenderError):
    """Input is not attached to an interactive terminal."""
