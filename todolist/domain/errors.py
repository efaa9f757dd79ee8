from __future__ import annotations


class TaskError(Exception):
    """Base class for task store failures."""


class ValidationError(TaskError):
    def __init__(self, message: str = "Task description cannot be empty") -> None:
        super().__init__(message)


class NotFoundError(TaskError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with ID {task_id} not found")
        self.task_id = task_id


class ParseError(TaskError):
    """Raised when a structurally valid line of the task file carries a bad id."""

    def __init__(self, line_number: int) -> None:
        super().__init__(f"Invalid ID in line {line_number}")
        self.line_number = line_number
