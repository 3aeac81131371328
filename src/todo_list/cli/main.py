# src/todo_list/cli/main.py

"""
CLI entrypoint.

One invocation = one command: settings -> logging -> store -> dispatch.
Command output goes to stdout; errors and usage go to stderr.
"""

from __future__ import annotations

import logging
import sys

from ..config import Settings, get_settings
from ..errors import TodoError, UsageError
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskStore
from .commands import registry

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def main(argv: list[str] | None = None, *, settings: Settings | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = get_settings()

    setup_logging(console_level=settings.console_level, log_file=settings.log_file)

    store = TaskStore(settings.db_path)
    logger.debug("Using task file %s", store.path)

    try:
        output = registry.handle(store, argv)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(registry.build_usage(), file=sys.stderr)
        return EXIT_USAGE
    except TodoError as e:
        logger.debug("Command failed: %s", e, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except Exception:
        logger.exception("Unexpected failure running %r", argv)
        return EXIT_ERROR

    if output:
        print(output)
    return EXIT_OK


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
