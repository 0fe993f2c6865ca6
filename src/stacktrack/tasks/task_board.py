# src/stacktrack/tasks/task_board.py

from __future__ import annotations

import dataclasses
import logging

from .bounded_stack import BoundedStack
from .errors import CapacityExceededError, TaskIndexError
from .task_models import MAX_TASKS, TaskRecord, check_record
from .task_sort import sort_by_date, sort_by_importance

logger = logging.getLogger(__name__)


class TaskBoard:
    """
    The primary task stack plus its undo history.

    Indices are bottom-relative (0 = oldest task still present).

    Undo history:
    - pop / edit_at / remove_at record the pre-mutation task
    - a full undo stack silently drops the new snapshot
    - undo() re-pushes the snapshot onto the TOP of the task stack,
      not at the index it came from
    - sorting is not recorded
    """

    def __init__(
        self,
        tasks: BoundedStack[TaskRecord] | None = None,
        *,
        capacity: int = MAX_TASKS,
    ) -> None:
        self.tasks: BoundedStack[TaskRecord] = tasks if tasks is not None else BoundedStack(capacity)
        self.undo_stack: BoundedStack[TaskRecord] = BoundedStack(self.tasks.capacity)

    # ---- queries ----

    @property
    def capacity(self) -> int:
        return self.tasks.capacity

    def size(self) -> int:
        return self.tasks.size()

    def __len__(self) -> int:
        return self.tasks.size()

    def is_empty(self) -> bool:
        return self.tasks.is_empty()

    def is_full(self) -> bool:
        return self.tasks.is_full()

    def peek(self) -> TaskRecord | None:
        return self.tasks.peek()

    def element_at(self, index: int) -> TaskRecord | None:
        return self.tasks.element_at(index)

    def undo_depth(self) -> int:
        return self.undo_stack.size()

    # ---- mutations ----

    def push(self, task: TaskRecord) -> bool:
        ok = self.tasks.push(task)
        if ok:
            logger.debug("Task pushed size=%s desc=%r", self.tasks.size(), task.description)
        return ok

    def pop(self) -> TaskRecord | None:
        task = self.tasks.pop()
        if task is not None:
            self._record_undo(task)
            logger.debug("Task popped size=%s desc=%r", self.tasks.size(), task.description)
        return task

    def edit_at(self, index: int, replacement: TaskRecord) -> TaskRecord:
        """
        Replace the task at `index`, keeping the original creation timestamp.

        Returns the record actually stored. Raises ValueError, without mutating,
        if the replacement does not fit the file layout.
        """
        self._check_index(index)
        current = self.tasks.element_at(index)
        assert current is not None
        stored = check_record(dataclasses.replace(replacement, created_at=current.created_at))
        self._record_undo(current)

        self.tasks.replace_at(index, stored)
        logger.debug("Task edited index=%s desc=%r", index, stored.description)
        return stored

    def remove_at(self, index: int) -> TaskRecord:
        """Remove and return the task at `index`; tasks above it shift down by one."""
        self._check_index(index)
        current = self.tasks.element_at(index)
        assert current is not None
        self._record_undo(current)

        removed = self.tasks.delete_at(index)
        logger.debug("Task removed index=%s size=%s", index, self.tasks.size())
        return removed

    def undo(self) -> TaskRecord | None:
        """
        Restore the most recent snapshot onto the top of the task stack.

        Returns None when there is nothing to undo. If the task stack is full
        the snapshot stays on the undo stack and CapacityExceededError is raised.
        """
        snapshot = self.undo_stack.peek()
        if snapshot is None:
            return None
        if self.tasks.is_full():
            raise CapacityExceededError(self.tasks.capacity)

        self.undo_stack.pop()
        pushed = self.tasks.push(snapshot)
        assert pushed, "push after capacity check must succeed"
        logger.debug("Undo restored desc=%r undo_depth=%s", snapshot.description, self.undo_depth())
        return snapshot

    def sort_by_date(self) -> None:
        sort_by_date(self.tasks)

    def sort_by_importance(self) -> None:
        sort_by_importance(self.tasks)

    # ---- internals ----

    def _check_index(self, index: int) -> None:
        size = self.tasks.size()
        if not 0 <= index < size:
            raise TaskIndexError(index, size)

    def _record_undo(self, task: TaskRecord) -> None:
        if not self.undo_stack.push(task):
            logger.debug("Undo stack full; snapshot not recorded desc=%r", task.description)
