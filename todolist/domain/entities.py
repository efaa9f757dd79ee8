from __future__ import annotations

from dataclasses import dataclass

from .enums import TaskStatus


@dataclass
class Task:
    id: int
    description: str
    completed: bool = False

    @property
    def status(self) -> TaskStatus:
        return TaskStatus.COMPLETED if self.completed else TaskStatus.PENDING

    def as_triple(self) -> tuple[int, str, bool]:
        return self.id, self.description, self.completed
