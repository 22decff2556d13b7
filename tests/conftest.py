# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_cli import paths
from todo_cli.cli.main import main
from todo_cli.config import Settings
from todo_cli.core.state import AppState
from todo_cli.tasks.task_models import Task
from todo_cli.tasks.task_store import TaskStore
from todo_cli.user_config import Config

CliResult = tuple[int, str, str]


@pytest.fixture(autouse=True)
def platform_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> SimpleNamespace:
    """
    Point the platform data/config directories into tmp_path.

    Nothing under test may touch the real home directory. The directories are
    NOT created here: creating them on demand is part of what we test.
    """
    data_dir = tmp_path / "platform" / "data"
    config_dir = tmp_path / "platform" / "config"
    monkeypatch.setattr(paths.platformdirs, "user_data_path", lambda *a, **kw: data_dir)
    monkeypatch.setattr(paths.platformdirs, "user_config_path", lambda *a, **kw: config_dir)
    return SimpleNamespace(data_dir=data_dir, config_dir=config_dir)


@pytest.fixture()
def settings() -> Settings:
    # Built directly rather than from the environment, to keep tests deterministic.
    return Settings(
        app_name="todo",
        log_level="WARNING",
        log_file=None,
        color=False,
        force_color=False,
    )


@pytest.fixture()
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "todo.config"


@pytest.fixture()
def data_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.toml"


@pytest.fixture()
def state(settings: Settings, data_path: Path, config_path: Path) -> AppState:
    return AppState(settings=settings, config=Config(data_path=data_path), config_path=config_path)


@pytest.fixture()
def sparse_store() -> TaskStore:
    """Non-contiguous identifiers {0, 2, 5}, as left behind by removals."""
    return TaskStore(
        tasks={
            0: Task(name="buy milk", description="2%"),
            2: Task(name="call mom", completed=True),
            5: Task(name="ünïcode ✓ & <tags>", description="two\nlines"),
        }
    )


@pytest.fixture()
def run_cli(
    settings: Settings, config_path: Path, capsys: pytest.CaptureFixture[str]
) -> Callable[..., CliResult]:
    """Run the CLI in-process; returns (exit_code, stdout, stderr)."""

    def _run(*argv: str) -> CliResult:
        code = main(list(argv), settings=settings, config_path=config_path)
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run
