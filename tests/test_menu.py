from __future__ import annotations

from collections.abc import Iterable

from todolist.cli.menu import MenuLoop
from todolist.services.task_store import TaskStore


class ScriptedConsole:
    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    def print(self, text: str) -> None:
        self.lines.append(text)


def _run(store: TaskStore, path, answers: list[str]) -> ScriptedConsole:
    console = ScriptedConsole(answers)
    MenuLoop(store, path, input_fn=console.input, output_fn=console.print).run()
    return console


def test_add_list_complete_and_save(tmp_path) -> None:
    path = tmp_path / "todo_list.txt"
    store = TaskStore()

    console = _run(
        store,
        path,
        ["1", "Buy milk", "1", "milk, eggs, bread", "3", "1", "2", "5"],
    )

    assert "Task added with ID: 1" in console.lines
    assert "Task added with ID: 2" in console.lines
    assert "Task 1 completed" in console.lines
    assert "[x] ID: 1, Buy milk" in console.lines
    assert "[ ] ID: 2, milk, eggs, bread" in console.lines
    assert console.lines[-1] == "Tasks saved. Goodbye!"
    assert path.read_text(encoding="utf-8") == (
        "1,completed,Buy milk\n2,pending,milk\\, eggs\\, bread\n"
    )


def test_menu_is_printed_each_round(tmp_path) -> None:
    console = _run(TaskStore(), tmp_path / "todo.txt", ["5"])

    assert console.lines[:6] == [
        "\nTodo List Manager",
        "1. Add Task",
        "2. List Tasks",
        "3. Complete Task",
        "4. Remove Task",
        "5. Save and Exit",
    ]
    assert console.prompts == ["Enter your choice: "]


def test_invalid_choices_reprompt(tmp_path) -> None:
    console = _run(TaskStore(), tmp_path / "todo.txt", ["abc", "", "0", "9", "-1", "5"])

    assert console.lines.count("Invalid input. Please enter a number.") == 3
    assert console.lines.count("Invalid choice. Please try again.") == 2
    assert console.prompts.count("Enter your choice: ") == 6


def test_errors_are_reported_and_loop_continues(tmp_path) -> None:
    store = TaskStore()

    console = _run(
        store,
        tmp_path / "todo.txt",
        ["1", "   ", "3", "99", "4", "x", "4", "7", "2", "5"],
    )

    assert "Error: Task description cannot be empty" in console.lines
    assert "Error: Task with ID 99 not found" in console.lines
    assert "Invalid task ID" in console.lines
    assert "Error: Task with ID 7 not found" in console.lines
    assert "No tasks found." in console.lines
    assert len(store) == 0


def test_remove_task(tmp_path) -> None:
    store = TaskStore()
    store.add("Buy milk")
    store.add("Walk dog")

    console = _run(store, tmp_path / "todo.txt", ["4", "1", "5"])

    assert "Task 1 removed" in console.lines
    assert [task.id for task in store] == [2]


def test_end_of_input_saves_and_exits(tmp_path) -> None:
    path = tmp_path / "todo.txt"
    store = TaskStore()

    console = _run(store, path, ["1", "Buy milk", "1"])

    assert console.lines[-1] == "Tasks saved. Goodbye!"
    assert path.read_text(encoding="utf-8") == "1,pending,Buy milk\n"
