# src/todo_cli/conversion.py

from __future__ import annotations

"""
Conversion between the live task file and foreign formats.

Two actions over one task file:
- export: task file (default format) -> foreign file in the requested format
- import: foreign file in the requested format -> task file (default format)

A failed import may leave the task file already truncated: there is no
rollback.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from .core.errors import ConversionError, TodoError
from .storage.formats import DEFAULT_FORMAT, Format
from .storage.persistence import load_or_default, load_strict, save
from .tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


class ConvertAction(StrEnum):
    IMPORT = "import"
    EXPORT = "export"


class ConversionPhase(StrEnum):
    IDLE = "idle"
    IN_TRANSFER = "in_transfer"
    FAILED = "failed"


@dataclass(slots=True)
class ConversionEngine:
    """
    Moves a task store between the task file and a foreign file.

    phase: idle -> in_transfer -> idle on success, failed on any error.
    A failed engine stays failed; build a new one per invocation.
    """

    data_path: Path
    default_format: Format = DEFAULT_FORMAT
    phase: ConversionPhase = ConversionPhase.IDLE

    def run(self, action: ConvertAction, fmt: Format, path: str | Path) -> TaskStore:
        action = ConvertAction(action)
        if action is ConvertAction.EXPORT:
            return self.export_to(fmt, path)
        return self.import_from(fmt, path)

    def export_to(self, fmt: Format, path: str | Path) -> TaskStore:
        self._begin(ConvertAction.EXPORT, fmt, path)
        try:
            store = load_or_default(self.data_path, self.default_format, TaskStore)
            save(store, fmt, path)
        except TodoError as exc:
            self._fail(ConvertAction.EXPORT, exc)
            raise ConversionError("Could not export to specified file.", path) from exc

        self._finish(ConvertAction.EXPORT, store, path)
        return store

    def import_from(self, fmt: Format, path: str | Path) -> TaskStore:
        self._begin(ConvertAction.IMPORT, fmt, path)
        try:
            store = load_strict(path, fmt, TaskStore)
            save(store, self.default_format, self.data_path)
        except TodoError as exc:
            self._fail(ConvertAction.IMPORT, exc)
            raise ConversionError("Could not import to specified file.", path) from exc

        self._finish(ConvertAction.IMPORT, store, path)
        return store

    # ---- phase bookkeeping ----

    def _begin(self, action: ConvertAction, fmt: Format, path: str | Path) -> None:
        if self.phase is not ConversionPhase.IDLE:
            raise RuntimeError(f"conversion engine is {self.phase.value}, expected idle")
        self.phase = ConversionPhase.IN_TRANSFER
        logger.info("%s started format=%s foreign=%s task_file=%s", action.value, fmt, path, self.data_path)

    def _finish(self, action: ConvertAction, store: TaskStore, path: str | Path) -> None:
        self.phase = ConversionPhase.IDLE
        logger.info("%s finished tasks=%d foreign=%s", action.value, len(store), path)

    def _fail(self, action: ConvertAction, exc: TodoError) -> None:
        self.phase = ConversionPhase.FAILED
        logger.debug("%s failed: %s", action.value, exc)
