# src/todo_cli/tasks/task_io.py

from __future__ import annotations

import logging
from pathlib import Path

from ..storage.formats import DEFAULT_FORMAT
from ..storage.persistence import load_or_default, save
from .task_store import TaskStore

logger = logging.getLogger(__name__)


def load_tasks(path: str | Path) -> TaskStore:
    """Load the task file; a missing file is created and reads as an empty store."""
    store = load_or_default(path, DEFAULT_FORMAT, TaskStore)
    logger.debug("Loaded %d task(s) from %s", len(store), path)
    return store


def save_tasks(store: TaskStore, path: str | Path) -> None:
    save(store, DEFAULT_FORMAT, path)
    logger.debug("Saved %d task(s) to %s", len(store), path)
