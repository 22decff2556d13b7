# src/todo_cli/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, ClassVar

from ..core.coerce import as_bool, as_index, as_record_list, as_str
from ..core.errors import DecodeError, InvalidTask, TaskIndexNotFound
from .task_models import ListMode, Task

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class TaskListing:
    """
    Restartable view over a store: every iteration walks the live tasks again.

    Pairs come out in ascending index order.
    """

    store: TaskStore
    mode: ListMode = ListMode.LONG

    def __iter__(self) -> Iterator[tuple[int, Task]]:
        tasks = self.store.tasks
        for index in sorted(tasks):
            yield index, tasks[index]

    def __len__(self) -> int:
        return len(self.store)


@dataclass(slots=True)
class TaskStore:
    """
    In-memory task collection keyed by a non-negative integer.

    Identifier policy:
    - add() takes the smallest non-negative integer not in use,
    - remove() frees the identifier for the next add(),
    - identifiers never shift; removing 0 does not rename the others.

    The whole collection is loaded, mutated and written back per invocation.
    """

    document_name: ClassVar[str] = "todo"

    tasks: dict[int, Task] = field(default_factory=dict)

    # ---- identifier policy ----

    def available_index(self) -> int:
        index = 0
        while index in self.tasks:
            index += 1
        return index

    def _require(self, index: int) -> Task:
        task = self.tasks.get(index)
        if task is None:
            raise TaskIndexNotFound(index)
        return task

    # ---- public API ----

    def add(self, name: str, description: str | None = None) -> int:
        if not name or not name.strip():
            raise InvalidTask("Task name cannot be empty.")

        index = self.available_index()
        self.tasks[index] = Task(name=name, description=description or "")
        logger.info("Task added index=%s name=%r", index, name)
        return index

    def get(self, index: int) -> Task:
        return self._require(index)

    def remove(self, index: int) -> Task:
        task = self._require(index)
        del self.tasks[index]
        logger.info("Task removed index=%s", index)
        return task

    def toggle(self, index: int) -> Task:
        task = self._require(index)
        task.toggle()
        logger.info("Task toggled index=%s completed=%s", index, task.completed)
        return task

    def list(self, mode: ListMode = ListMode.LONG) -> TaskListing:
        return TaskListing(store=self, mode=ListMode(mode))

    def clear(self) -> None:
        logger.info("Clearing %d task(s)", len(self.tasks))
        self.tasks.clear()

    def is_empty(self) -> bool:
        return not self.tasks

    def __len__(self) -> int:
        return len(self.tasks)

    def __contains__(self, index: object) -> bool:
        return index in self.tasks

    # ---- Document port ----

    @classmethod
    def empty(cls) -> TaskStore:
        return cls()

    def to_data(self) -> dict[str, Any]:
        return {
            "tasks": [
                {
                    "index": index,
                    "name": task.name,
                    "description": task.description,
                    "completed": task.completed,
                }
                for index, task in self.list()
            ]
        }

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> TaskStore:
        """
        Rebuild a store from a decoded document.

        Records carrying an index keep it. Records without one (foreign XML)
        are placed afterwards with the usual smallest-free rule.
        """
        if not isinstance(data, dict):
            raise DecodeError("invalid type: expected a mapping at the top level")

        records = as_record_list(data.get("tasks"), field="tasks", item="task")
        store = cls()
        unindexed: list[Task] = []

        for record in records:
            task = Task(
                name=as_str(record.get("name"), field="name"),
                description=as_str(record.get("description"), field="description", default=""),
                completed=as_bool(record.get("completed"), field="completed", default=False),
            )
            if record.get("index") is None:
                unindexed.append(task)
                continue
            index = as_index(record.get("index"))
            if index in store.tasks:
                raise DecodeError(f"duplicate task index {index}")
            store.tasks[index] = task

        for task in unindexed:
            store.tasks[store.available_index()] = task

        return store
