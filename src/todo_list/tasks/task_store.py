# src/todo_list/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
import shutil
from collections.abc import Iterator
from pathlib import Path

from ..errors import ParseError, StorageError, TaskIndexError, ValidationError
from .task_models import Task, TaskFilter

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON-file task store.

    The backing file is a single JSON array of task objects and is the only
    durable state. Each command works on a transient in-memory copy:

        tasks = store.load()
        store.<mutation>(tasks, ...)
        store.save(tasks)

    Tasks have no ids: a task is addressed by its 1-based position, so
    removing a task shifts every later index down by one.

    Mutations validate their arguments before touching the list, so a failed
    call leaves both the list and the file unchanged.
    """

    def __init__(self, db_path: str | Path = "todos.json") -> None:
        self._db_path = Path(db_path)

    @property
    def path(self) -> Path:
        return self._db_path

    # ---- persistence ----

    def load(self) -> list[Task]:
        """
        Read the backing file.

        Missing or blank file -> []. Malformed content -> ParseError.
        Unreadable file -> StorageError.
        """
        path = self._db_path
        try:
            content = path.read_text("utf-8")
        except FileNotFoundError:
            logger.debug("No task file at %s; starting empty.", path)
            return []
        except UnicodeDecodeError as e:
            raise ParseError(path, "file is not valid UTF-8") from e
        except OSError as e:
            raise StorageError(path, "read", e) from e

        if not content.strip():
            logger.debug("Task file %s is blank; starting empty.", path)
            return []

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ParseError(path, f"invalid JSON at line {e.lineno} column {e.colno}") from e

        if not isinstance(data, list):
            raise ParseError(path, f"expected a JSON array, got {type(data).__name__}")

        tasks: list[Task] = []
        for pos, raw in enumerate(data, start=1):
            try:
                tasks.append(Task.from_record(raw))
            except ValueError as e:
                raise ParseError(path, f"task #{pos}: {e}") from e

        logger.debug("Loaded %d tasks from %s", len(tasks), path)
        return tasks

    def save(self, tasks: list[Task]) -> None:
        """
        Overwrite the backing file with the full list.

        Writes a sibling temp file and renames it over the target, so readers
        only ever see the old array or the new one. A symlinked path is
        followed, and an existing file keeps its permission bits.
        """
        path = self._db_path
        target = path.resolve()
        payload = json.dumps([t.to_record() for t in tasks], ensure_ascii=False, indent=2)
        tmp = target.with_name(target.name + ".tmp")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload + "\n", "utf-8")
            if target.exists():
                shutil.copymode(target, tmp)
            os.replace(tmp, target)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StorageError(path, "write", e) from e

        logger.info("Saved %d tasks to %s", len(tasks), path)

    # ---- helpers ----

    @staticmethod
    def _clean_title(title: str) -> str:
        title = (title or "").strip()
        if not title:
            raise ValidationError("Title must not be empty.")
        return title

    @staticmethod
    def _position(tasks: list[Task], index: int) -> int:
        """Map a 1-based index to a list position, or raise TaskIndexError."""
        if not 1 <= index <= len(tasks):
            if not tasks:
                raise TaskIndexError(f"Index {index} is out of range: the list is empty.")
            raise TaskIndexError(
                f"Index {index} is out of range (1-{len(tasks)}). Use 'list' to see items."
            )
        return index - 1

    # ---- operations ----

    def add(self, tasks: list[Task], title: str, description: str = "") -> int:
        """Append a pending task; returns its 1-based index."""
        task = Task(title=self._clean_title(title), description=(description or "").strip())
        tasks.append(task)
        logger.debug("Task added index=%d title=%r", len(tasks), task.title)
        return len(tasks)

    def list_tasks(
        self, tasks: list[Task], task_filter: TaskFilter = TaskFilter.ALL
    ) -> Iterator[tuple[int, Task]]:
        """
        Lazily yield (index, task) pairs that pass the filter.

        Indices are positions in the unfiltered list, so they can be fed back
        to done/undone/remove/edit. Every call starts a fresh scan.
        """
        for index, task in enumerate(tasks, start=1):
            if task_filter.matches(task):
                yield index, task

    def set_completed(self, tasks: list[Task], index: int, value: bool) -> Task:
        task = tasks[self._position(tasks, index)]
        task.completed = bool(value)
        logger.debug("Task index=%d completed=%s", index, task.completed)
        return task

    def remove(self, tasks: list[Task], index: int) -> Task:
        removed = tasks.pop(self._position(tasks, index))
        logger.debug("Task removed index=%d title=%r", index, removed.title)
        return removed

    def edit(
        self,
        tasks: list[Task],
        index: int,
        title: str,
        description: str | None = None,
    ) -> Task:
        """Replace the title and, when given, the description. `completed` is kept."""
        pos = self._position(tasks, index)
        clean_title = self._clean_title(title)

        task = tasks[pos]
        task.title = clean_title
        if description is not None:
            task.description = description.strip()
        logger.debug("Task edited index=%d title=%r", index, task.title)
        return task
