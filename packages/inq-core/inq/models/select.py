"""List-selection models — the Select definition and its output."""

from __future__ import annotations

from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from inq.models.config import PromptConfig

DEFAULT_SELECT_HELP = "up/down to move, type to filter, enter to select"


class ListOption(BaseModel):
    """A chosen option: its position in the original list and its label."""
    model_config = ConfigDict(frozen=True)

    index: int
    value: str

    def __str__(self) -> str:
        return self.value


class Select(BaseModel):
    """Definition of a list-selection prompt."""
    model_config = ConfigDict(frozen=True)

    message: str
    options: list[str]
    starting_cursor: int = 0
    help_message: str | None = DEFAULT_SELECT_HELP
    validators: list[Callable[[ListOption], Any]] = Field(default_factory=list)
    config: PromptConfig = Field(default_factory=PromptConfig)
