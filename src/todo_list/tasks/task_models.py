# src/todo_list/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class TaskFilter(StrEnum):
    """Which tasks `list` shows."""

    ALL = "all"
    PENDING = "pending"
    DONE = "done"

    @classmethod
    def from_flag(cls, raw: str | None) -> TaskFilter:
        """
        Accept "--pending", "pending" or None.

        Raises ValueError for anything that is not a known filter.
        """
        if raw is None:
            return cls.ALL
        return cls(raw.strip().lower().removeprefix("--"))

    def matches(self, task: Task) -> bool:
        if self is TaskFilter.PENDING:
            return not task.completed
        if self is TaskFilter.DONE:
            return task.completed
        return True


@dataclass(slots=True)
class Task:
    title: str
    description: str = ""
    completed: bool = False

    def to_record(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
        }

    @classmethod
    def from_record(cls, raw: Any) -> Task:
        """
        Build a Task from one decoded JSON object.

        A missing description reads as "" and a missing completed flag as False.
        Raises ValueError (with a human-readable reason) on anything else.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"expected an object, got {type(raw).__name__}")

        title = raw.get("title")
        if not isinstance(title, str):
            raise ValueError("field 'title' must be a string")

        description = raw.get("description", "")
        if not isinstance(description, str):
            raise ValueError("field 'description' must be a string")

        completed = raw.get("completed", False)
        if not isinstance(completed, bool):
            raise ValueError("field 'completed' must be a boolean")

        return cls(title=title, description=description, completed=completed)
