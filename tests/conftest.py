# tests/conftest.py

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_list.tasks.task_models import Task
from todo_list.tasks.task_store import TaskStore


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "todos.json"


@pytest.fixture()
def settings(db_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with cli.main.

    A SimpleNamespace instead of the real config keeps tests independent of
    the process environment and any local .env file.
    """
    return SimpleNamespace(
        db_path=db_path,
        log_level="WARNING",
        log_file=None,
        console_level=logging.WARNING,
    )


@pytest.fixture()
def store(db_path: Path) -> TaskStore:
    return TaskStore(db_path)


@pytest.fixture()
def sample_tasks() -> list[Task]:
    return [
        Task(title="Task A", description="Details", completed=False),
        Task(title="Task B", description="", completed=True),
        Task(title="Task C", description="More", completed=False),
        Task(title="Task D", description="Last", completed=True),
    ]


@pytest.fixture()
def write_db(db_path: Path):
    """Write raw records (or raw text) straight into the backing file."""

    def _write(records) -> None:
        text = records if isinstance(records, str) else json.dumps(records)
        db_path.write_text(text, "utf-8")

    return _write
