from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from todolist.domain.enums import MenuChoice
from todolist.domain.errors import NotFoundError, ValidationError
from todolist.services.task_store import TaskStore

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class _EndOfInput(Exception):
    pass


class MenuLoop:
    """Text menu over a TaskStore. Runs until the user saves and exits."""

    def __init__(
        self,
        store: TaskStore,
        path: str | Path,
        input_fn: InputFn | None = None,
        output_fn: OutputFn | None = None,
    ) -> None:
        self.store = store
        self.path = Path(path)
        self._input = input_fn or input
        self._print = output_fn or print

    def run(self) -> None:
        while True:
            self._print_menu()
            try:
                raw = self._prompt("Enter your choice: ")
            except _EndOfInput:
                self.save_and_exit()
                return

            number = _parse_number(raw)
            if number is None:
                self._print("Invalid input. Please enter a number.")
                continue
            try:
                choice = MenuChoice(number)
            except ValueError:
                self._print("Invalid choice. Please try again.")
                continue

            try:
                if not self.dispatch(choice):
                    return
            except _EndOfInput:
                self.save_and_exit()
                return

    def dispatch(self, choice: MenuChoice) -> bool:
        """Handle one menu choice. Returns False when the loop should stop."""
        if choice is MenuChoice.ADD:
            self.add_task()
        elif choice is MenuChoice.LIST:
            self.list_tasks()
        elif choice is MenuChoice.COMPLETE:
            self.complete_task()
        elif choice is MenuChoice.REMOVE:
            self.remove_task()
        elif choice is MenuChoice.SAVE_AND_EXIT:
            self.save_and_exit()
            return False
        return True

    def add_task(self) -> None:
        description = self._prompt("Enter task description: ")
        try:
            task_id = self.store.add(description)
        except ValidationError as exc:
            self._print(f"Error: {exc}")
            return
        self._print(f"Task added with ID: {task_id}")

    def list_tasks(self) -> None:
        for line in self.store.list_lines():
            self._print(line)

    def complete_task(self) -> None:
        task_id = self._prompt_task_id("Enter task ID to complete: ")
        if task_id is None:
            return
        try:
            self.store.complete(task_id)
        except NotFoundError as exc:
            self._print(f"Error: {exc}")
            return
        self._print(f"Task {task_id} completed")

    def remove_task(self) -> None:
        task_id = self._prompt_task_id("Enter task ID to remove: ")
        if task_id is None:
            return
        try:
            self.store.remove(task_id)
        except NotFoundError as exc:
            self._print(f"Error: {exc}")
            return
        self._print(f"Task {task_id} removed")

    def save_and_exit(self) -> None:
        self.store.save(self.path)
        self._print("Tasks saved. Goodbye!")

    def _print_menu(self) -> None:
        self._print("\nTodo List Manager")
        for choice in MenuChoice:
            self._print(f"{choice.value}. {choice.label}")

    def _prompt(self, text: str) -> str:
        try:
            return self._input(text)
        except EOFError:
            logger.info("End of input reached")
            raise _EndOfInput from None

    def _prompt_task_id(self, text: str) -> int | None:
        task_id = _parse_number(self._prompt(text))
        if task_id is None:
            self._print("Invalid task ID")
        return task_id


def _parse_number(raw: str) -> int | None:
    value = raw.strip()
    if not value.isascii() or not value.isdigit():
        return None
    return int(value)
