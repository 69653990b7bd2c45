"""Command line argument parsing."""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence

from postit.config import ConfigCommand, ConfigUpdate
from postit.docs import DocTopic
from postit.task import Priority

_U32_MAX = 0xFFFFFFFF
_ID_PATTERN = re.compile(r"\+?[0-9]+")
_VERSION = "0.2.3"


def parse_ids(text: str) -> list[int]:
    """Parse a comma-separated list of task identifiers."""
    ids = []
    for part in text.split(","):
        if not _ID_PATTERN.fullmatch(part):
            raise ValueError(f"invalid task id: {part!r}")
        value = int(part)
        if value > _U32_MAX:
            raise ValueError(f"task id out of range: {part!r}")
        ids.append(value)
    return ids


def _ids_type(text: str) -> list[int]:
    try:
        return parse_ids(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _priority_type(text: str) -> Priority:
    try:
        return Priority(text)
    except ValueError:
        choices = ", ".join(p.value for p in Priority)
        raise argparse.ArgumentTypeError(
            f"invalid value {text!r} (possible values: {choices})"
        ) from None


def _bool_type(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise argparse.ArgumentTypeError(
        f"invalid value {text!r} (possible values: true, false)"
    )


def _add_persister(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-p", "--persister", default=None, help="Used to read from and save tasks to."
    )


def _add_ids(parser: argparse.ArgumentParser, *, many: bool) -> None:
    parser.add_argument(
        "ids",
        type=_ids_type,
        nargs="+" if many else None,
        help="Identifiers of tasks separated by commas.",
    )


_DOC_ALIASES = {
    DocTopic.CONFIG: ["conf"],
    DocTopic.VIEW: ["v"],
    DocTopic.ADD: ["a"],
    DocTopic.SET: ["s"],
    DocTopic.CHECK: ["c"],
    DocTopic.UNCHECK: ["uc"],
    DocTopic.DROP: ["d"],
    DocTopic.COPY: ["cp"],
    DocTopic.CLEAN: ["cl"],
    DocTopic.REMOVE: ["rm"],
    DocTopic.SAMPLE: ["sa"],
    DocTopic.PERSISTER: [],
}


def _build_config(commands) -> None:
    parser = commands.add_parser(
        "config", aliases=["conf"], help="Manages the configuration file"
    )
    parser.set_defaults(command="config")
    subs = parser.add_subparsers(dest="_config_name", required=True, metavar="COMMAND")

    subs.add_parser("env", help="Shows the value of the POSTIT_ROOT env var.").set_defaults(
        config_command=ConfigCommand.ENV
    )
    subs.add_parser("path", help="Shows the config file path.").set_defaults(
        config_command=ConfigCommand.PATH
    )
    subs.add_parser("init", help="Creates the config file.").set_defaults(
        config_command=ConfigCommand.INIT
    )
    subs.add_parser(
        "list", aliases=["ls"], help="Displays a list of the current config values."
    ).set_defaults(config_command=ConfigCommand.LIST)

    set_parser = subs.add_parser(
        "set", aliases=["s"], help="Changes the values of config properties."
    )
    set_parser.set_defaults(config_command=ConfigCommand.SET)
    set_parser.add_argument(
        "--persister", dest="set_persister", metavar="STRING", default=None,
        help="Defines where tasks are stored.",
    )
    for flag, dest, text in (
        ("--force-drop", "set_force_drop", "allows dropping tasks without them being checked."),
        ("--force-copy", "set_force_copy", "allows overwriting files if they already exist."),
        ("--drop-after-copy", "set_drop_after_copy", "drops the old file after copying."),
    ):
        set_parser.add_argument(
            flag, dest=dest, metavar="BOOL", type=_bool_type, default=None,
            help=f"If 'true', {text}",
        )

    subs.add_parser("remove", aliases=["rm"], help="Deletes the config file").set_defaults(
        config_command=ConfigCommand.REMOVE
    )


def _build_set(commands) -> None:
    parser = commands.add_parser(
        "set", aliases=["s"], help="Changes values inside of tasks"
    )
    parser.set_defaults(command="set")
    _add_persister(parser)
    subs = parser.add_subparsers(dest="_set_name", required=True, metavar="COMMAND")

    content = subs.add_parser("content", help="Changes the 'content' value.")
    content.set_defaults(set_command="content")
    _add_ids(content, many=False)
    content.add_argument("content", help="The content or description of a task.")

    priority = subs.add_parser("priority", help="Changes the 'priority' value.")
    priority.set_defaults(set_command="priority")
    _add_ids(priority, many=False)
    priority.add_argument(
        "priority", type=_priority_type,
        help="Priority of the task (none, low, med or high).",
    )


def _build_docs(commands) -> None:
    parser = commands.add_parser(
        "docs", aliases=["man"], help="Documentation and use examples"
    )
    parser.set_defaults(command="docs")
    subs = parser.add_subparsers(dest="_docs_name", required=True, metavar="COMMAND")
    for topic, aliases in _DOC_ALIASES.items():
        subs.add_parser(topic.value, aliases=aliases).set_defaults(topic=topic)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for every command."""
    parser = argparse.ArgumentParser(prog="postit", description="Task manager on your CLI.")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    commands = parser.add_subparsers(dest="_command_name", required=True, metavar="COMMAND")

    _build_config(commands)

    view = commands.add_parser("view", aliases=["v"], help="Shows a list of the current tasks")
    view.set_defaults(command="view")
    _add_persister(view)

    add = commands.add_parser("add", aliases=["a"], help="Adds a new task to the list")
    add.set_defaults(command="add")
    _add_persister(add)
    add.add_argument(
        "priority", type=_priority_type,
        help="Priority of the task (none, low, med or high).",
    )
    add.add_argument("content", help="The content or description of a task.")

    _build_set(commands)

    for name, alias, text in (
        ("check", "c", "Marks a task as checked"),
        ("uncheck", "uc", "Marks a task as unchecked"),
        ("drop", "d", "Deletes a task from the list"),
    ):
        edit = commands.add_parser(name, aliases=[alias], help=text)
        edit.set_defaults(command=name)
        _add_persister(edit)
        _add_ids(edit, many=True)

    copy = commands.add_parser("copy", aliases=["cp"], help="Copies tasks to other files or formats")
    copy.set_defaults(command="copy")
    copy.add_argument("left", help="The persister that contains the tasks.")
    copy.add_argument("right", help="Where the tasks will be copied to.")

    for name, alias, text in (
        ("clean", "cl", "Cleans tasks from a persister"),
        ("remove", "rm", "Removes a persister (file or table) completely"),
        ("sample", "sa", "Creates a sample of tasks for testing purposes"),
    ):
        sub = commands.add_parser(name, aliases=[alias], help=text)
        sub.set_defaults(command=name)
        _add_persister(sub)

    _build_docs(commands)
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments into a namespace.

    ``command`` holds the canonical command name whatever alias was used.
    Ids are flattened into one list and 'config set' values are gathered
    into ``update``.
    """
    args = build_parser().parse_args(argv)

    ids = getattr(args, "ids", None)
    if ids is not None:
        groups = ids if ids and isinstance(ids[0], list) else [ids]
        args.ids = [task_id for group in groups for task_id in group]

    if getattr(args, "config_command", None) is ConfigCommand.SET:
        args.update = ConfigUpdate(
            persister=args.set_persister,
            force_drop=args.set_force_drop,
            force_copy=args.set_force_copy,
            drop_after_copy=args.set_drop_after_copy,
        )
    elif args.command == "config":
        args.update = None

    return args