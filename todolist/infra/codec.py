"""Line format of the task file: ``<id>,<status>,<description>``.

Literal commas inside the description are written as ``\\,`` so that only the
first two unescaped commas separate fields.
"""
from __future__ import annotations

import re
from typing import NamedTuple

from todolist.domain.entities import Task
from todolist.domain.enums import TaskStatus

FIELD_SEPARATOR = ","
ESCAPED_SEPARATOR = "\\,"
FIELD_COUNT = 3

_SPLIT_RE = re.compile(r"(?<!\\),")
_ID_RE = re.compile(r"[0-9]+")


class TaskRecord(NamedTuple):
    id: str
    status: str
    description: str


def escape_description(value: str) -> str:
    return value.replace(FIELD_SEPARATOR, ESCAPED_SEPARATOR)


def unescape_description(value: str) -> str:
    return value.replace(ESCAPED_SEPARATOR, FIELD_SEPARATOR)


def to_record(task: Task) -> TaskRecord:
    return TaskRecord(
        id=str(task.id),
        status=task.status.value,
        description=escape_description(task.description),
    )


def encode_line(task: Task) -> str:
    return FIELD_SEPARATOR.join(to_record(task))


def split_line(line: str) -> TaskRecord | None:
    """Split a raw line into its three fields, or None when the arity is wrong."""
    parts = _SPLIT_RE.split(line.rstrip("\r\n"))
    if len(parts) != FIELD_COUNT:
        return None
    return TaskRecord(*parts)


def parse_id(raw: str) -> int | None:
    if not _ID_RE.fullmatch(raw):
        return None
    return int(raw)


def from_record(record: TaskRecord, task_id: int) -> Task:
    return Task(
        id=task_id,
        description=unescape_description(record.description),
        completed=record.status == TaskStatus.COMPLETED.value,
    )
