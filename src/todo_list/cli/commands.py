# src/todo_list/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..errors import TaskIndexError, UsageError
from ..tasks.task_models import Task, TaskFilter
from ..tasks.task_store import TaskStore

CommandHandler = Callable[[TaskStore, list[str]], str]

logger = logging.getLogger(__name__)

EMPTY_LIST_MESSAGE = "No todos yet. Add one with: add <title> [description]"


@dataclass(frozen=True, slots=True)
class CommandEntry:
    name: str
    handler: CommandHandler
    usage: str
    help_text: str
    aliases: tuple[str, ...] = ()


class CommandRegistry:
    """Maps command names (and aliases) from argv[1] to handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._entries: list[CommandEntry] = []

    def register(
        self,
        name: str,
        handler: CommandHandler,
        usage: str,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        entry = CommandEntry(
            name=name.lower(),
            handler=handler,
            usage=usage,
            help_text=help_text,
            aliases=tuple(a.lower() for a in aliases),
        )
        self._entries.append(entry)
        self._handlers[entry.name] = handler
        for alias in entry.aliases:
            self._handlers[alias] = handler

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._handlers

    def handle(self, store: TaskStore, argv: list[str]) -> str:
        """
        Run argv like ["done", "2"] against the store.
        Returns the text to print; raises UsageError/TodoError on failure.
        """
        if not argv:
            raise UsageError("No command given.")

        name = argv[0].lower()
        args = argv[1:]

        handler = self._handlers.get(name)
        if not handler:
            raise UsageError(f"Unknown command: {argv[0]}")

        logger.debug("Dispatching command=%s args=%r", name, args)
        return handler(store, args)

    def build_usage(self, prog: str = "todo") -> str:
        rows = [(f"{prog} {entry.usage}", entry.help_text) for entry in self._entries]
        width = max(len(left) for left, _ in rows)
        lines = ["Todo CLI (JSON-backed)", "", "Usage:"]
        for left, help_text in rows:
            lines.append(f"  {left.ljust(width)}  {help_text}")
        lines += [
            "",
            "Environment:",
            "  TODO_DB=path/to/file.json  Override the task file (default: ./todos.json)",
        ]
        return "\n".join(lines)


registry = CommandRegistry()


def parse_index(raw: str) -> int:
    """Parse a user-supplied 1-based index. Range is checked by the store."""
    try:
        index = int(raw.strip())
    except ValueError:
        raise TaskIndexError(f"Invalid index '{raw}': must be a positive number.") from None
    if index < 1:
        raise TaskIndexError(f"Invalid index '{raw}': indices start at 1.")
    return index


def format_task(index: int, task: Task) -> str:
    mark = "x" if task.completed else "  "
    return f"{index}. [{mark}] {task.title} — {task.description}"


def _require(args: list[str], count: int, command: str, what: str) -> None:
    if len(args) < count:
        raise UsageError(f"'{command}' requires {what}.")


def cmd_add(store: TaskStore, args: list[str]) -> str:
    _require(args, 1, "add", "a <title>")
    title = args[0]
    description = " ".join(args[1:])

    tasks = store.load()
    index = store.add(tasks, title, description)
    store.save(tasks)
    return f"Added todo (#{index})"


def cmd_list(store: TaskStore, args: list[str]) -> str:
    flag = args[0] if args else None
    try:
        task_filter = TaskFilter.from_flag(flag)
    except ValueError:
        logger.warning("Unknown list filter %r; showing all tasks.", flag)
        task_filter = TaskFilter.ALL

    tasks = store.load()
    if not tasks:
        return EMPTY_LIST_MESSAGE
    return "\n".join(format_task(i, t) for i, t in store.list_tasks(tasks, task_filter))


def _set_completed(store: TaskStore, args: list[str], *, value: bool, command: str) -> str:
    _require(args, 1, command, "an <index>")
    index = parse_index(args[0])

    tasks = store.load()
    task = store.set_completed(tasks, index, value)
    store.save(tasks)
    state = "done" if value else "not done"
    return f"Marked as {state} (#{index}): {task.title}"


def cmd_done(store: TaskStore, args: list[str]) -> str:
    return _set_completed(store, args, value=True, command="done")


def cmd_undone(store: TaskStore, args: list[str]) -> str:
    return _set_completed(store, args, value=False, command="undone")


def cmd_remove(store: TaskStore, args: list[str]) -> str:
    _require(args, 1, "remove", "an <index>")
    index = parse_index(args[0])

    tasks = store.load()
    removed = store.remove(tasks, index)
    store.save(tasks)
    return f"Removed (#{index}): {removed.title}"


def cmd_edit(store: TaskStore, args: list[str]) -> str:
    """
    edit <index> <title>          -> new title, description kept
    edit <index> <title> <desc..> -> new title and description
    """
    _require(args, 2, "edit", "<index> <title> [description]")
    index = parse_index(args[0])
    title = args[1]
    description = " ".join(args[2:]) if len(args) > 2 else None

    tasks = store.load()
    task = store.edit(tasks, index, title, description)
    store.save(tasks)
    return f"Updated (#{index}): {task.title}"


def cmd_help(store: TaskStore, args: list[str]) -> str:
    return registry.build_usage()


registry.register("add", cmd_add, "add <title> [description]", "Add a new todo")
registry.register("list", cmd_list, "list [--all|--pending|--done]", "List todos (default: --all)")
registry.register("done", cmd_done, "done <index>", "Mark todo as done")
registry.register("undone", cmd_undone, "undone <index>", "Mark todo as not done")
registry.register("remove", cmd_remove, "remove <index>", "Remove a todo", aliases=["rm", "del"])
registry.register("edit", cmd_edit, "edit <index> <title> [description]", "Edit a todo")
registry.register("help", cmd_help, "help", "Show this message", aliases=["-h", "--help"])
