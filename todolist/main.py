from __future__ import annotations

import logging
import sys

from todolist.cli.menu import MenuLoop
from todolist.config import SETTINGS
from todolist.domain.errors import ParseError
from todolist.infra.logging import setup_logging
from todolist.services.task_store import TaskStore

logger = logging.getLogger(__name__)


def main() -> int:
    setup_logging(SETTINGS)
    logger.info("Starting with task file %s", SETTINGS.todo_file)
    try:
        store = TaskStore.load(SETTINGS.todo_file)
        MenuLoop(store, SETTINGS.todo_file).run()
    except (ParseError, OSError, UnicodeDecodeError) as exc:
        logger.exception("Aborting")
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
