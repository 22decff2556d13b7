# tests/test_conversion.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from todo_cli.conversion import ConversionEngine, ConversionPhase, ConvertAction
from todo_cli.core.errors import ConversionError, DecodeError, NotFoundOnDisk
from todo_cli.storage.formats import Format
from todo_cli.tasks.task_io import load_tasks, save_tasks
from todo_cli.tasks.task_store import TaskStore


def test_add_toggle_export_remove_scenario(data_path: Path, tmp_path: Path) -> None:
    store = load_tasks(data_path)
    index = store.add("buy milk", "2%")
    store.toggle(index)
    save_tasks(store, data_path)

    out = tmp_path / "out.json"
    ConversionEngine(data_path=data_path).export_to(Format.JSON, out)
    assert json.loads(out.read_text(encoding="utf-8")) == {
        "tasks": [{"index": 0, "name": "buy milk", "description": "2%", "completed": True}]
    }

    store = load_tasks(data_path)
    store.remove(index)
    save_tasks(store, data_path)

    assert load_tasks(data_path).is_empty()
    # The exported file is a snapshot; later edits do not touch it.
    assert "buy milk" in out.read_text(encoding="utf-8")


def test_xml_export_then_import_rebuilds_store(
    data_path: Path, tmp_path: Path, sparse_store: TaskStore
) -> None:
    save_tasks(sparse_store, data_path)
    out = tmp_path / "out.xml"

    engine = ConversionEngine(data_path=data_path)
    engine.export_to(Format.XML, out)
    save_tasks(TaskStore(), data_path)

    imported = engine.import_from(Format.XML, out)

    assert imported == sparse_store
    assert load_tasks(data_path) == sparse_store
    assert engine.phase is ConversionPhase.IDLE


def test_import_replaces_existing_tasks(data_path: Path, tmp_path: Path) -> None:
    existing = TaskStore()
    existing.add("old")
    save_tasks(existing, data_path)

    source = tmp_path / "in.yaml"
    source.write_text("tasks:\n  - index: 3\n    name: new\n", encoding="utf-8")

    ConversionEngine(data_path=data_path).import_from(Format.YAML, source)

    store = load_tasks(data_path)
    assert sorted(store.tasks) == [3]
    assert store.get(3).name == "new"


def test_malformed_import_fails_with_data_error(data_path: Path, tmp_path: Path) -> None:
    source = tmp_path / "broken.json"
    source.write_text('{"tasks": [', encoding="utf-8")
    engine = ConversionEngine(data_path=data_path)

    with pytest.raises(ConversionError) as exc_info:
        engine.import_from(Format.JSON, source)

    assert exc_info.value.message == "Could not import to specified file."
    assert isinstance(exc_info.value.__cause__, DecodeError)
    assert exc_info.value.exit_code == 65
    assert engine.phase is ConversionPhase.FAILED


def test_missing_import_file_leaves_task_file_alone(data_path: Path, tmp_path: Path) -> None:
    existing = TaskStore()
    existing.add("keep")
    save_tasks(existing, data_path)
    before = data_path.read_text(encoding="utf-8")

    with pytest.raises(ConversionError) as exc_info:
        ConversionEngine(data_path=data_path).import_from(Format.JSON, tmp_path / "nope.json")

    assert isinstance(exc_info.value.__cause__, NotFoundOnDisk)
    assert exc_info.value.exit_code == 74
    assert data_path.read_text(encoding="utf-8") == before
    assert not (tmp_path / "nope.json").exists()


def test_export_into_missing_directory(data_path: Path, tmp_path: Path) -> None:
    with pytest.raises(ConversionError, match="Could not export to specified file.") as exc_info:
        ConversionEngine(data_path=data_path).export_to(Format.JSON, tmp_path / "no" / "out.json")
    assert exc_info.value.exit_code == 74


def test_export_without_task_file_writes_empty_document(data_path: Path, tmp_path: Path) -> None:
    out = tmp_path / "out.yaml"
    store = ConversionEngine(data_path=data_path).export_to(Format.YAML, out)

    assert store.is_empty()
    assert data_path.is_file()
    assert out.read_text(encoding="utf-8") == "tasks: []\n"


def test_run_dispatches_on_action(data_path: Path, tmp_path: Path, sparse_store: TaskStore) -> None:
    save_tasks(sparse_store, data_path)
    out = tmp_path / "out.toml"

    engine = ConversionEngine(data_path=data_path)
    assert engine.run(ConvertAction.EXPORT, Format.TOML, out) == sparse_store
    assert engine.run("import", Format.TOML, out) == sparse_store
    assert engine.phase is ConversionPhase.IDLE


def test_failed_engine_cannot_be_reused(data_path: Path, tmp_path: Path) -> None:
    engine = ConversionEngine(data_path=data_path)
    with pytest.raises(ConversionError):
        engine.import_from(Format.JSON, tmp_path / "missing.json")

    with pytest.raises(RuntimeError, match="failed"):
        engine.export_to(Format.JSON, tmp_path / "out.json")
