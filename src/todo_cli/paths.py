# src/todo_cli/paths.py

"""
Platform default locations.

These are pure functions of the host environment (platformdirs decides per
OS), not cached state. A relative result means the host has no usable home
directory, which is reported as an I/O error.
"""

from __future__ import annotations

import logging
from pathlib import Path

import platformdirs

from .core.errors import StorageIOError

logger = logging.getLogger(__name__)

DATA_FILE_NAME = "task.list"
CONFIG_FILE_NAME = "todo.config"


def data_dir() -> Path:
    path = platformdirs.user_data_path()
    if not path.is_absolute():
        raise StorageIOError("Data directory not found.", path)
    return path


def config_dir() -> Path:
    path = platformdirs.user_config_path()
    if not path.is_absolute():
        raise StorageIOError("Config directory not found.", path)
    return path


def default_data_path() -> Path:
    return data_dir() / DATA_FILE_NAME


def default_config_path() -> Path:
    return config_dir() / CONFIG_FILE_NAME


def ensure_parent_dir(path: Path) -> None:
    """Create the parent of a default location (never used for user-chosen paths)."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StorageIOError(f"Could not create directory {str(path.parent)!r}, {exc}.", path) from exc
    logger.debug("Ensured directory %s", path.parent)
