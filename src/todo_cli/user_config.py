# src/todo_cli/user_config.py

"""
User configuration (where the task file lives).

Stored as TOML at the platform config directory. The file is only written by
save_config(); load_config() treats a missing file as "all defaults".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar

from . import paths
from .core.coerce import as_str
from .core.errors import ConfigInvalid, DecodeError, NotFoundOnDisk
from .storage.formats import DEFAULT_FORMAT
from .storage.persistence import load_strict, save

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Config:
    document_name: ClassVar[str] = "config"

    # None -> platform default task file.
    data_path: Path | None = None

    def set_data_path(self, path: str | Path | None) -> None:
        self.data_path = Path(path) if path else None

    def get_data_path(self) -> Path:
        if self.data_path is not None:
            return self.data_path
        return paths.default_data_path()

    @property
    def uses_default_data_path(self) -> bool:
        return self.data_path is None

    def validate(self) -> Config:
        """
        Check the data path invariant; returns self so calls can be chained.

        If set, the path must be absolute, must not be a directory, and its
        parent directory must exist.
        """
        path = self.data_path
        if path is None:
            return self

        if not path.is_absolute():
            raise ConfigInvalid("Data path cannot be relative.")
        if path.is_dir():
            raise ConfigInvalid("Data path cannot be a directory.")
        if not path.parent.is_dir():
            raise ConfigInvalid("Data path has no valid parent directory.")
        return self

    # ---- Document port ----

    @classmethod
    def empty(cls) -> Config:
        return cls()

    def to_data(self) -> dict[str, Any]:
        if self.data_path is None:
            return {}
        return {"data_path": str(self.data_path)}

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> Config:
        if not isinstance(data, dict):
            raise DecodeError("invalid type: expected a mapping at the top level")
        raw = data.get("data_path")
        if raw is None or raw == "":
            return cls()
        return cls(data_path=Path(as_str(raw, field="data_path")))


def load_config(path: str | Path | None = None, *, validate: bool = True) -> Config:
    """
    Load the user config; a missing file means defaults.

    validate=False lets `config data-path` repair a config whose stored path
    went stale (e.g. its directory was deleted since).
    """
    path = Path(path) if path is not None else paths.default_config_path()
    try:
        config = load_strict(path, DEFAULT_FORMAT, Config)
    except NotFoundOnDisk:
        logger.debug("No config file at %s, using defaults", path)
        config = Config()
    return config.validate() if validate else config


def save_config(config: Config, path: str | Path | None = None) -> None:
    if path is None:
        path = paths.default_config_path()
        paths.ensure_parent_dir(path)
    save(config, DEFAULT_FORMAT, path)
    logger.info("Saved config to %s (data_path=%s)", path, config.data_path)
