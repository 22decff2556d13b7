# src/todo_cli/storage/persistence.py

"""
Load and save typed documents.

load_or_default() is the create-on-missing path used for the task file.
load_strict() never creates anything; callers decide what a missing file
means.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TypeVar

from ..core.ports import Document
from . import files
from .formats import Format, decode, encode

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=Document)


def load_or_default(path: str | Path, fmt: Format, kind: type[D]) -> D:
    content = files.read_or_create(path)
    if not content.strip():
        logger.debug("Empty %s at %s, starting from an empty %s", fmt.value, path, kind.__name__)
        return kind.empty()
    return decode(content, fmt, kind)


def load_strict(path: str | Path, fmt: Format, kind: type[D]) -> D:
    return decode(files.read(path), fmt, kind)


def save(value: Document, fmt: Format, path: str | Path) -> None:
    files.write(path, encode(value, fmt))
    logger.debug("Saved %s to %s as %s", type(value).__name__, path, fmt.value)
