# src/todo_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes the settings loaded once per process,
- loads (and normally validates) the user config,
- creates the platform default directories only when they are about to be used.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .. import paths
from ..config import Settings, get_settings
from ..core.state import AppState
from ..user_config import load_config

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings: Settings | None = None,
    config_path: Path | None = None,
    validate_config: bool = True,
) -> AppState:
    """
    Create AppState for one invocation.

    config_path is injectable for tests; the CLI always uses the platform
    default (None).
    """
    if settings is None:
        settings = get_settings()

    config = load_config(config_path, validate=validate_config)
    logger.debug("Config loaded data_path=%s", config.data_path)
    return AppState(settings=settings, config=config, config_path=config_path)


def prepare_data_path(state: AppState) -> Path:
    """Resolve the task file; the default location gets its directory created."""
    path = state.data_path
    if state.config.uses_default_data_path:
        paths.ensure_parent_dir(path)
    return path
