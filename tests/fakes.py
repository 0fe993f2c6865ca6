# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from stacktrack.tasks.bounded_stack import BoundedStack
from stacktrack.tasks.task_models import MAX_TASKS, TaskRecord, TaskStatus


def make_task(
    description: str = "task",
    *,
    due: tuple[int, int, int] = (2026, 1, 1),
    importance: int = 5,
    status: TaskStatus = TaskStatus.PENDING,
    created_at: int = 1_700_000_000,
) -> TaskRecord:
    year, month, day = due
    return TaskRecord(
        description=description,
        year=year,
        month=month,
        day=day,
        importance=importance,
        status=status,
        created_at=created_at,
    )


@dataclass
class FakeTaskStore:
    """
    In-memory TaskPersistence.

    - Keeps the last saved snapshot as a plain list
    - `fail_saves` simulates an unwritable target
    """

    saved: list[TaskRecord] | None = None
    fail_saves: bool = False
    save_calls: int = 0

    def save(self, tasks: Iterable[TaskRecord]) -> bool:
        self.save_calls += 1
        if self.fail_saves:
            return False
        self.saved = list(tasks)
        return True

    def load(self, *, capacity: int = MAX_TASKS) -> BoundedStack[TaskRecord] | None:
        if self.saved is None:
            return None
        return BoundedStack.from_iterable(self.saved, capacity)
