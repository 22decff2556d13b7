# tests/test_files.py

from __future__ import annotations

import os
from pathlib import Path

import pytest

from todo_cli.core.errors import (
    DecodeError,
    EncodeError,
    NotFoundOnDisk,
    PermissionDenied,
    StorageError,
    StorageIOError,
)
from todo_cli.storage import files


def test_read_missing_file(tmp_path: Path) -> None:
    path = tmp_path / "missing.txt"
    with pytest.raises(NotFoundOnDisk) as exc_info:
        files.read(path)
    assert exc_info.value.path == path
    assert exc_info.value.exit_code == 74
    assert not path.exists()


def test_read_directory_is_an_io_error(tmp_path: Path) -> None:
    with pytest.raises(StorageIOError):
        files.read(tmp_path)


def test_write_creates_then_truncates(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    files.write(path, "a much longer first version\n")
    files.write(path, "short\n")
    assert files.read(path) == "short\n"


def test_write_does_not_create_parent_directories(tmp_path: Path) -> None:
    path = tmp_path / "nope" / "out.txt"
    with pytest.raises(StorageError):
        files.write(path, "x")
    assert not path.parent.exists()


def test_read_or_create_creates_an_empty_file_once(tmp_path: Path) -> None:
    path = tmp_path / "task.list"

    assert files.read_or_create(path) == ""
    assert path.is_file()

    path.write_text("kept", encoding="utf-8")
    assert files.read_or_create(path) == "kept"


def test_invalid_utf8_is_a_decode_error(tmp_path: Path) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes("café".encode("latin-1"))
    with pytest.raises(DecodeError, match="UTF-8"):
        files.read(path)


@pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="needs a non-root POSIX user")
def test_unreadable_file_is_permission_denied(tmp_path: Path) -> None:
    path = tmp_path / "locked.txt"
    path.write_text("secret", encoding="utf-8")
    path.chmod(0)
    try:
        with pytest.raises(PermissionDenied, match="permission denied"):
            files.read(path)
    finally:
        path.chmod(0o600)


def test_unencodable_text_leaves_existing_file_alone(tmp_path: Path) -> None:
    path = tmp_path / "task.list"
    files.write(path, "kept\n")

    with pytest.raises(EncodeError, match="UTF-8"):
        files.write(path, "bad \udcff")

    assert files.read(path) == "kept\n"
