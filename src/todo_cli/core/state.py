# src/todo_cli/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..config import Settings
from ..user_config import Config


@dataclass
class AppState:
    """Everything one invocation needs, built once by cli/bootstrap.py."""

    settings: Settings
    config: Config
    # None -> platform default config file.
    config_path: Path | None = None

    @property
    def data_path(self) -> Path:
        return self.config.get_data_path()
