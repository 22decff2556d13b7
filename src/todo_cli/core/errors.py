# src/todo_cli/core/errors.py

"""
Error taxonomy.

Every failure in the core is raised as a TodoError subclass. Nothing below the
CLI boundary terminates the process: cli/main.py is the one place that turns
an error into a stderr line and an exit status.

Exit codes follow sysexits.h:
- 65 (EX_DATAERR): malformed or unrepresentable data
- 74 (EX_IOERR): file system failures
- 78 (EX_CONFIG): invalid configuration
- 1: anything else (unknown task index, invalid task)
"""

from __future__ import annotations

from typing import ClassVar

EX_FAILURE = 1
EX_DATAERR = 65
EX_IOERR = 74
EX_CONFIG = 78


class TodoError(Exception):
    """Base class for every error the CLI knows how to report."""

    exit_code: ClassVar[int] = EX_FAILURE
    label: ClassVar[str] = "ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


# ---- tasks ----


class InvalidTask(TodoError):
    pass


class TaskIndexNotFound(TodoError):
    def __init__(self, index: int) -> None:
        super().__init__("Not found.")
        self.index = index


# ---- configuration ----


class ConfigInvalid(TodoError):
    exit_code = EX_CONFIG
    label = "CONFIG - ERROR"


# ---- storage ----


class StorageError(TodoError):
    exit_code = EX_IOERR

    def __init__(self, message: str, path: object | None = None) -> None:
        super().__init__(message)
        self.path = path


class NotFoundOnDisk(StorageError):
    pass


class PermissionDenied(StorageError):
    pass


class StorageIOError(StorageError):
    pass


class ConversionError(StorageError):
    """Import/export failure; reports with the exit code of its cause."""

    @property
    def exit_code(self) -> int:  # type: ignore[override]
        cause = self.__cause__
        if isinstance(cause, TodoError):
            return cause.exit_code
        return EX_IOERR


# ---- data format ----


class DataFormatError(TodoError):
    exit_code = EX_DATAERR


class DecodeError(DataFormatError):
    pass


class EncodeError(DataFormatError):
    pass
