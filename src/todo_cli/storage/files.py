# src/todo_cli/storage/files.py

"""
Raw file access.

Every OSError is translated into the storage error taxonomy:
- FileNotFoundError -> NotFoundOnDisk
- PermissionError   -> PermissionDenied
- anything else     -> StorageIOError
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import DecodeError, EncodeError, NotFoundOnDisk, PermissionDenied, StorageIOError

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def _translate(exc: OSError, path: Path, verb: str) -> Exception:
    if isinstance(exc, FileNotFoundError):
        return NotFoundOnDisk(f"Could not {verb} {str(path)!r}, file not found.", path)
    if isinstance(exc, PermissionError):
        return PermissionDenied(f"Could not {verb} {str(path)!r} file, permission denied.", path)
    reason = exc.strerror or str(exc)
    return StorageIOError(f"Could not {verb} {str(path)!r}, {reason}.", path)


def read(path: str | Path) -> str:
    path = Path(path)
    try:
        with open(path, "r", encoding=ENCODING) as f:
            content = f.read()
    except UnicodeDecodeError as exc:
        raise DecodeError(f"{str(path)!r} is not valid UTF-8 text ({exc.reason}).") from exc
    except OSError as exc:
        raise _translate(exc, path, "open") from exc

    logger.debug("Read %d chars from %s", len(content), path)
    return content


def write(path: str | Path, content: str) -> None:
    """
    Create or truncate `path` and write `content`. Parents are not created.

    The text is encoded before the file is opened, so content that cannot be
    written leaves the old file untouched.
    """
    path = Path(path)
    try:
        data = content.encode(ENCODING)
    except UnicodeEncodeError as exc:
        raise EncodeError(f"Could not write {str(path)!r}, text is not valid UTF-8 ({exc.reason}).") from exc

    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as exc:
        raise _translate(exc, path, "create") from exc

    logger.debug("Wrote %d chars to %s", len(content), path)


def read_or_create(path: str | Path) -> str:
    """Like read(), but a missing file is created empty and "" is returned."""
    path = Path(path)
    try:
        return read(path)
    except NotFoundOnDisk:
        pass

    try:
        with open(path, "x", encoding=ENCODING):
            pass
    except FileExistsError:
        # Someone else created it between the two calls.
        return read(path)
    except OSError as exc:
        raise _translate(exc, path, "create") from exc

    logger.info("Created empty file %s", path)
    return ""
