from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from todolist.domain.entities import Task
from todolist.domain.errors import NotFoundError, ValidationError
from todolist.infra.repository import TaskFileRepository

logger = logging.getLogger(__name__)

NO_TASKS_MESSAGE = "No tasks found."


class TaskStore:
    """In-memory, insertion-ordered task collection with its id counter.

    Ids start at 1 and are never reused: ``next_id`` only moves forward, even
    when tasks are removed.
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])
        self.next_id = max((task.id for task in self._tasks), default=0) + 1

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def list_tasks(self) -> list[Task]:
        return list(self._tasks)

    def add(self, description: str) -> int:
        trimmed = description.strip()
        if not trimmed:
            raise ValidationError()
        # one task per line on disk
        if "\n" in trimmed or "\r" in trimmed:
            raise ValidationError("Task description cannot contain line breaks")

        task_id = self.next_id
        self._tasks.append(Task(id=task_id, description=trimmed))
        self.next_id += 1
        logger.debug("Added task %s", task_id)
        return task_id

    def get(self, task_id: int) -> Task:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise NotFoundError(task_id)

    def complete(self, task_id: int) -> Task:
        task = self.get(task_id)
        task.completed = True
        logger.debug("Completed task %s", task_id)
        return task

    def remove(self, task_id: int) -> Task:
        task = self.get(task_id)
        self._tasks.remove(task)
        logger.debug("Removed task %s", task_id)
        return task

    def list_lines(self) -> list[str]:
        if not self._tasks:
            return [NO_TASKS_MESSAGE]
        return [_format_line(task) for task in self._tasks]

    def save(self, path: str | Path) -> int:
        return TaskFileRepository(path).write_tasks(self._tasks)

    @classmethod
    def load(cls, path: str | Path) -> TaskStore:
        return cls(TaskFileRepository(path).read_tasks())


def _format_line(task: Task) -> str:
    return f"{task.status.marker} ID: {task.id}, {task.description}"
