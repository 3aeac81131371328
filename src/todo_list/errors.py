# src/todo_list/errors.py

from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """
    Base class for every failure a command can report to the user.
    The CLI catches this type, prints the message and exits non-zero.
    """

    pass


class ParseError(TodoError):
    """Raised when the backing file exists but does not hold a valid task array."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot parse {path}: {reason}")


class StorageError(TodoError):
    """Raised when the backing file cannot be read or written."""

    def __init__(self, path: Path, action: str, cause: OSError) -> None:
        self.path = path
        self.action = action
        super().__init__(f"Failed to {action} {path}: {cause.strerror or cause}")


class ValidationError(TodoError, ValueError):
    """Raised when task fields are rejected (e.g. an empty title)."""

    pass


class TaskIndexError(TodoError, IndexError):
    """Raised for an index that is non-numeric or outside [1, len(tasks)]."""

    pass


class UsageError(TodoError):
    """Unknown command or missing required argument."""

    pass
