# src/todo_cli/cli/theme.py

"""Colour helpers.

- Disabled when the stream is not a TTY, unless FORCE_COLOR is set.
- NO_COLOR / TODO_COLOR=0 disable colour completely (see config.py).
"""

from __future__ import annotations

from typing import TextIO

from ..config import Settings

RESET = "0"
RED = "31"
GREEN = "32"


def enabled_for(stream: TextIO, settings: Settings) -> bool:
    if settings.force_color:
        return True
    if not settings.color:
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def paint(text: str, *codes: str, enabled: bool) -> str:
    if not enabled or not codes:
        return text
    return f"\033[{';'.join(codes)}m{text}\033[{RESET}m"
