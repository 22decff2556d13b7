# src/todo_cli/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

DONE_SYMBOL = "✓"
OPEN_SYMBOL = "✗"


class ListMode(StrEnum):
    """How a listing should be rendered (one line per task, or a block)."""

    SHORT = "short"
    LONG = "long"


@dataclass(slots=True)
class Task:
    name: str
    description: str = ""
    completed: bool = False

    def toggle(self) -> bool:
        self.completed = not self.completed
        return self.completed

    @property
    def symbol(self) -> str:
        return DONE_SYMBOL if self.completed else OPEN_SYMBOL
