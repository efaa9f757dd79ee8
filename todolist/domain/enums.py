from __future__ import annotations

from enum import IntEnum, StrEnum


class TaskStatus(StrEnum):
    PENDING = "pending"
    COMPLETED = "completed"

    @property
    def marker(self) -> str:
        return "[x]" if self is TaskStatus.COMPLETED else "[ ]"


class MenuChoice(IntEnum):
    ADD = 1
    LIST = 2
    COMPLETE = 3
    REMOVE = 4
    SAVE_AND_EXIT = 5

    @property
    def label(self) -> str:
        return MENU_LABELS[self]


MENU_LABELS = {
    MenuChoice.ADD: "Add Task",
    MenuChoice.LIST: "List Tasks",
    MenuChoice.COMPLETE: "Complete Task",
    MenuChoice.REMOVE: "Remove Task",
    MenuChoice.SAVE_AND_EXIT: "Save and Exit",
}
