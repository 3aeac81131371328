# src/todo_list/config.py

"""Settings loaded from environment variables (+ optional .env).

One Settings object is built per process and handed to whoever needs it
(the store gets a plain path, never the environment).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_DB_PATH = Path("todos.json")
DEFAULT_LOG_LEVEL = "WARNING"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path) -> Path:
    return _env_optional_path(name) or default


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw.strip()).expanduser()


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Storage ----
    db_path: Path

    # ---- Logging ----
    log_level: str
    log_file: Path | None

    @property
    def console_level(self) -> int:
        return _level_from_name(self.log_level)

    @staticmethod
    def from_env() -> Settings:
        db_path = _env_path(_k("DB"), DEFAULT_DB_PATH)
        log_level = _env(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL).strip() or DEFAULT_LOG_LEVEL
        log_file = _env_optional_path(_k("LOG_FILE"))

        return Settings(
            db_path=db_path,
            log_level=log_level,
            log_file=log_file,
        )


def get_settings(*, use_dotenv: bool = True) -> Settings:
    """
    Build settings for this process.

    A .env found from the working directory upwards is read first; variables
    already present in the real environment take precedence over it.
    """
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True), override=False)
    return Settings.from_env()
