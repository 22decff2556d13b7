# tests/test_persistence.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_cli.core.errors import DecodeError, NotFoundOnDisk
from todo_cli.storage.formats import Format
from todo_cli.storage.persistence import load_or_default, load_strict, save
from todo_cli.tasks.task_store import TaskStore


def test_load_or_default_creates_missing_file(tmp_path: Path) -> None:
    path = tmp_path / "task.list"

    first = load_or_default(path, Format.TOML, TaskStore)
    assert first.is_empty()
    assert path.is_file()
    assert path.read_text(encoding="utf-8") == ""

    # Second load sees the empty file, not a missing one.
    assert load_or_default(path, Format.TOML, TaskStore).is_empty()


def test_whitespace_only_file_is_empty(tmp_path: Path) -> None:
    path = tmp_path / "task.list"
    path.write_text("  \n\n", encoding="utf-8")
    assert load_or_default(path, Format.TOML, TaskStore).is_empty()


def test_load_strict_never_creates(tmp_path: Path) -> None:
    path = tmp_path / "import.json"
    with pytest.raises(NotFoundOnDisk):
        load_strict(path, Format.JSON, TaskStore)
    assert not path.exists()


@pytest.mark.parametrize("fmt", [Format.TOML, Format.YAML])
def test_save_then_load(tmp_path: Path, sparse_store: TaskStore, fmt: Format) -> None:
    path = tmp_path / f"tasks.{fmt.value}"
    save(sparse_store, fmt, path)
    assert load_strict(path, fmt, TaskStore) == sparse_store
    assert load_or_default(path, fmt, TaskStore) == sparse_store


def test_malformed_file_is_not_replaced(tmp_path: Path) -> None:
    path = tmp_path / "task.list"
    path.write_text("this is = = not toml", encoding="utf-8")

    with pytest.raises(DecodeError):
        load_or_default(path, Format.TOML, TaskStore)

    assert path.read_text(encoding="utf-8") == "this is = = not toml"
