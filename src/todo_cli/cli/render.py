# src/todo_cli/cli/render.py

from __future__ import annotations

from ..tasks.task_models import ListMode, Task
from ..tasks.task_store import TaskListing
from .theme import GREEN, RED, paint

EMPTY_LIST = "(no tasks yet)"


def _symbol(task: Task, color: bool) -> str:
    return paint(task.symbol, GREEN if task.completed else RED, enabled=color)


def feedback(index: int, task: Task, *, color: bool = False) -> str:
    """One line echoed after add/remove/toggle: `<index> - <name> - <symbol>`."""
    return f"{index} - {task.name} - {_symbol(task, color)}"


def render_listing(listing: TaskListing, *, color: bool = False) -> str:
    if not len(listing):
        return EMPTY_LIST

    if listing.mode is ListMode.SHORT:
        return "\n".join(
            f"Task : {index} - {task.name} - {_symbol(task, color)}" for index, task in listing
        )

    blocks = []
    for index, task in listing:
        blocks.append(
            f"TASK NUMBER : {index}\n"
            f"Task Name   : {task.name}\n"
            f"Description : {task.description}\n"
            f"Completed   : {_symbol(task, color)}\n"
        )
    return "\n".join(blocks).rstrip("\n")
