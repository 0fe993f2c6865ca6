# src/stacktrack/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

# Fixed capacity of the task stack (and of the undo stack).
MAX_TASKS = 100

# Width of the on-disk description buffer, terminating NUL included.
MAX_DESCRIPTION = 100

# Ranges of the on-disk integer fields.
INT32_RANGE = (-(2**31), 2**31 - 1)
INT64_RANGE = (-(2**63), 2**63 - 1)


class TaskStatus(IntEnum):
    """
    Task lifecycle status.

    Values are the on-disk status codes and must never be renumbered.
    """

    PENDING = 0
    IN_PROGRESS = 1
    COMPLETED = 2

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    TaskStatus.PENDING: "Pending",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.COMPLETED: "Completed",
}


def clip_description(text: str, limit: int = MAX_DESCRIPTION - 1) -> str:
    """Trim text so its UTF-8 encoding fits `limit` bytes without splitting a character."""
    raw = text.encode("utf-8")
    if len(raw) <= limit:
        return text
    return raw[:limit].decode("utf-8", errors="ignore")


@dataclass(frozen=True, slots=True)
class TaskRecord:
    description: str

    year: int
    month: int
    day: int

    importance: int
    status: TaskStatus

    # Epoch seconds, assigned once when the task is created.
    created_at: int = 0

    @property
    def due(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)


def check_int_range(name: str, value: int, bounds: tuple[int, int] = INT32_RANGE) -> int:
    lo, hi = bounds
    if not lo <= value <= hi:
        raise ValueError(f"{name} out of range [{lo}, {hi}]: {value}")
    return value


def check_record(task: TaskRecord) -> TaskRecord:
    """Raise ValueError if any integer field cannot be stored in the file layout."""
    for name in ("year", "month", "day", "importance"):
        check_int_range(name, getattr(task, name))
    check_int_range("created_at", task.created_at, INT64_RANGE)
    return task
