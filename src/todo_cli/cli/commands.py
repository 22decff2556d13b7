# src/todo_cli/cli/commands.py

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable

from .. import __version__, paths
from ..conversion import ConversionEngine, ConvertAction
from ..core.state import AppState
from ..storage.formats import Format
from ..tasks.task_io import load_tasks, save_tasks
from ..tasks.task_models import ListMode
from ..user_config import save_config
from .bootstrap import prepare_data_path
from .render import feedback, render_listing
from .theme import enabled_for

CommandHandler = Callable[[AppState, argparse.Namespace], str | None]
ArgumentsHook = Callable[[argparse.ArgumentParser], None]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Subcommand registry: one handler + help text (+ argument hook) per command."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._arguments: dict[str, ArgumentsHook | None] = {}
        self._aliases: dict[str, list[str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        arguments: ArgumentsHook | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        self._arguments[key] = arguments
        self._aliases[key] = [a.lower() for a in aliases]
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def build_parser(self, prog: str = "todo") -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog=prog, description="A local task tracker.")
        parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
        sub = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

        for name, help_text in self._help.items():
            cmd = sub.add_parser(name, help=help_text, aliases=self._aliases[name])
            hook = self._arguments[name]
            if hook is not None:
                hook(cmd)
        return parser

    def handle(self, state: AppState, args: argparse.Namespace) -> str | None:
        """Run the handler for args.command; returns the text to print (if any)."""
        name = str(args.command).lower()
        handler = self._handlers.get(name)
        if handler is None:
            raise KeyError(f"Unknown command: {name}")
        logger.debug("Dispatching command=%s", name)
        return handler(state, args)


registry = CommandRegistry()


def _color(state: AppState) -> bool:
    return enabled_for(sys.stdout, state.settings)


# ---- task commands ----


def cmd_list(state: AppState, args: argparse.Namespace) -> str:
    store = load_tasks(prepare_data_path(state))
    mode = ListMode.SHORT if args.short else ListMode.LONG
    return render_listing(store.list(mode), color=_color(state))


def cmd_add(state: AppState, args: argparse.Namespace) -> str:
    path = prepare_data_path(state)
    store = load_tasks(path)
    index = store.add(args.name, args.description)
    save_tasks(store, path)
    return feedback(index, store.get(index), color=_color(state))


def cmd_remove(state: AppState, args: argparse.Namespace) -> str:
    path = prepare_data_path(state)
    store = load_tasks(path)
    task = store.remove(args.index)
    save_tasks(store, path)
    return feedback(args.index, task, color=_color(state))


def cmd_toggle(state: AppState, args: argparse.Namespace) -> str:
    path = prepare_data_path(state)
    store = load_tasks(path)
    task = store.toggle(args.index)
    save_tasks(store, path)
    return feedback(args.index, task, color=_color(state))


def cmd_clean(state: AppState, args: argparse.Namespace) -> str:
    path = prepare_data_path(state)
    store = load_tasks(path)
    store.clear()
    save_tasks(store, path)
    return "All tasks removed."


# ---- config ----


def cmd_config(state: AppState, args: argparse.Namespace) -> str:
    """
    config data-path /abs/file   -> store tasks in /abs/file
    config data-path             -> back to the platform default
    config show                  -> print the effective locations
    """
    if args.config_command == "data-path":
        state.config.set_data_path(args.path)
        state.config.validate()
        save_config(state.config, state.config_path)
        return f"Data path: {state.data_path}"

    config_file = state.config_path or paths.default_config_path()
    source = "default" if state.config.uses_default_data_path else "configured"
    return f"Config file : {config_file}\nData path   : {state.data_path} ({source})"


def _config_arguments(parser: argparse.ArgumentParser) -> None:
    sub = parser.add_subparsers(dest="config_command", required=True, metavar="SETTING")
    data_path = sub.add_parser(
        "data-path", help="Set the task file path; omit the path to reset to the default."
    )
    data_path.add_argument("path", nargs="?", default=None, help="Absolute path of the task file")
    sub.add_parser("show", help="Show the config file and the effective task file path.")


# ---- convert ----


def cmd_convert(state: AppState, args: argparse.Namespace) -> str:
    action = ConvertAction(args.action)
    fmt = Format.parse(args.format)
    engine = ConversionEngine(data_path=prepare_data_path(state))
    store = engine.run(action, fmt, args.path)

    if action is ConvertAction.EXPORT:
        return f"Exported {len(store)} task(s) to {args.path} as {fmt.value.upper()}."
    return f"Imported {len(store)} task(s) from {args.path} ({fmt.value.upper()})."


def _convert_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("action", choices=[a.value for a in ConvertAction], help="import or export")
    parser.add_argument("format", choices=[f.value for f in Format], type=str.lower, help="Foreign file format")
    parser.add_argument("path", help="Foreign file to read (import) or write (export)")


# ---- argument hooks ----


def _list_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-s", "--short", action="store_true", help="One line per task")


def _add_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("name", help="Name of the task")
    parser.add_argument("-d", "--description", default=None, help="Description")


def _index_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("index", type=int, help="The task number")


registry.register("list", cmd_list, help_text="List all tasks.", aliases=["ls"], arguments=_list_arguments)
registry.register("add", cmd_add, help_text="Add a new task.", arguments=_add_arguments)
registry.register("remove", cmd_remove, help_text="Remove a task.", aliases=["rm"], arguments=_index_arguments)
registry.register("toggle", cmd_toggle, help_text="Toggle a task's completed state.", arguments=_index_arguments)
registry.register("clean", cmd_clean, help_text="Remove all tasks.")
registry.register("config", cmd_config, help_text="Configure where tasks are stored.", arguments=_config_arguments)
registry.register(
    "convert",
    cmd_convert,
    help_text="Import or export tasks as TOML, JSON, YAML or XML.",
    arguments=_convert_arguments,
)
