# src/todo_cli/config.py

"""Application settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole process.
- Settings only tune the tool itself (logging, colour). Where task data lives
  is the user config's business (see user_config.py), never an env var.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file: Path | None

    # ---- Terminal ----
    color: bool
    force_color: bool

    @staticmethod
    def from_env() -> "Settings":
        # NO_COLOR wins over everything; FORCE_COLOR skips the TTY check.
        no_color = os.getenv("NO_COLOR") is not None
        color = _env_bool(_k("COLOR"), True) and not no_color
        force_color = _env_bool("FORCE_COLOR", False) and not no_color

        return Settings(
            app_name=_env(_k("APP_NAME"), "todo"),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
            log_file=_env_optional_path(_k("LOG_FILE")),
            color=color,
            force_color=force_color,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
