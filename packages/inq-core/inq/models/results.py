"""Result models — outcomes of handling actions, validating and running prompts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


class ActionResult(str, Enum):
    """What the driver should do after a prompt handled an action."""
    clean = "clean"
    needs_redraw = "needs_redraw"
    submit = "submit"


@dataclass(frozen=True)
class Validation:
    """Outcome of a validator: valid, or invalid with a user-facing message."""

    valid: bool
    message: str | None = None

    @classmethod
    def ok(cls) -> Validation:
        return cls(valid=True)

    @classmethod
    def invalid(cls, message: str) -> Validation:
        return cls(valid=False, message=message)


class PromptStatus(str, Enum):
    answered = "answered"
    cancelled = "cancelled"


class PromptResult(BaseModel):
    """Result of running one prompt session."""
    status: PromptStatus
    answer: Any = None
    formatted: str | None = None

    @property
    def cancelled(self) -> bool:
        return self.status == PromptStatus.cancelled
