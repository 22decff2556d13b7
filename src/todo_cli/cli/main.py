# src/todo_cli/cli/main.py

"""
CLI entrypoint.

Parses arguments, initializes logging, builds AppState, runs one command.
This is the only place where an error becomes an exit status: the core
raises TodoError subclasses and never exits on its own.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from ..config import Settings, get_settings
from ..core.errors import ConversionError, TodoError
from ..logging_setup import setup_logging
from .bootstrap import create_initial_state
from .commands import registry
from .theme import RED, enabled_for, paint

logger = logging.getLogger(__name__)


def _describe(exc: TodoError) -> str:
    cause = exc.__cause__
    if isinstance(exc, ConversionError) and cause is not None:
        return f"{exc} {cause}"
    return str(exc)


def report_error(exc: TodoError, settings: Settings) -> None:
    label = paint(exc.label, RED, enabled=enabled_for(sys.stderr, settings))
    print(f"{label} : {_describe(exc)}", file=sys.stderr)


def main(
    argv: Sequence[str] | None = None,
    *,
    settings: Settings | None = None,
    config_path: Path | None = None,
) -> int:
    if settings is None:
        settings = get_settings()

    parser = registry.build_parser(prog=settings.app_name)
    args = parser.parse_args(argv)

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING
    setup_logging(console_level=console_level, log_file=settings.log_file)

    try:
        # `config` must be able to repair a config that no longer validates.
        state = create_initial_state(
            settings=settings,
            config_path=config_path,
            validate_config=args.command != "config",
        )
        output = registry.handle(state, args)
    except TodoError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        report_error(exc, settings)
        return exc.exit_code

    if output:
        print(output)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
