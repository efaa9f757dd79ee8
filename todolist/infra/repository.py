from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from todolist.domain.entities import Task
from todolist.domain.errors import ParseError

from .codec import encode_line, from_record, parse_id, split_line

logger = logging.getLogger(__name__)


class TaskFileRepository:
    """Reads and writes the whole task file in one pass."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def read_tasks(self) -> list[Task]:
        if not self.exists():
            logger.info("Task file %s not found, starting empty", self.path)
            return []

        tasks: list[Task] = []
        seen_ids: set[int] = set()
        with open(self.path, "r", encoding="utf-8") as handle:
            for line_number, line in enumerate(handle, start=1):
                if not line.strip():
                    continue
                record = split_line(line)
                if record is None:
                    logger.warning("Skipping malformed line %s in %s", line_number, self.path)
                    continue
                task_id = parse_id(record.id)
                if task_id is None or task_id in seen_ids:
                    raise ParseError(line_number)
                task = from_record(record, task_id)
                if not task.description.strip():
                    logger.warning("Skipping line %s in %s: empty description", line_number, self.path)
                    continue
                seen_ids.add(task_id)
                tasks.append(task)

        logger.info("Loaded %s tasks from %s", len(tasks), self.path)
        return tasks

    def write_tasks(self, tasks: Iterable[Task]) -> int:
        count = 0
        with open(self.path, "w", encoding="utf-8", newline="\n") as handle:
            for task in tasks:
                handle.write(encode_line(task) + "\n")
                count += 1
        logger.info("Saved %s tasks to %s", count, self.path)
        return count
