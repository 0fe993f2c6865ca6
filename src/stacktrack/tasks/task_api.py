# src/stacktrack/tasks/task_api.py

from __future__ import annotations

import logging
import time

from .bounded_stack import BoundedStack
from .errors import CapacityExceededError
from .task_board import TaskBoard
from .task_models import TaskRecord, TaskStatus, check_record, clip_description

logger = logging.getLogger(__name__)


def new_task(
    *,
    description: str,
    year: int,
    month: int,
    day: int,
    importance: int,
    status: TaskStatus = TaskStatus.PENDING,
    now_ts: float | None = None,
) -> TaskRecord:
    """
    Build a TaskRecord and stamp its creation time.

    The description is trimmed to the on-disk width. Date validity is the
    caller's job (see cli.validation.is_valid_date). Integer fields that do not
    fit the file layout raise ValueError.
    """
    if not description or not description.strip():
        raise ValueError("description is required")

    created_at = int(time.time() if now_ts is None else now_ts)
    task = TaskRecord(
        description=clip_description(description.strip()),
        year=int(year),
        month=int(month),
        day=int(day),
        importance=int(importance),
        status=TaskStatus(status),
        created_at=created_at,
    )
    return check_record(task)


def add_task(board: TaskBoard, task: TaskRecord) -> TaskRecord:
    """Push a task, raising CapacityExceededError instead of returning False."""
    if not board.push(task):
        raise CapacityExceededError(board.capacity)
    logger.info("Task added desc=%r size=%s", task.description, board.size())
    return task


def search_tasks(tasks: BoundedStack[TaskRecord], keyword: str) -> list[tuple[int, TaskRecord]]:
    """
    Case-sensitive substring search over descriptions.

    Returns (bottom-relative index, task) pairs, top of the stack first.
    """
    hits = [(i, t) for i, t in enumerate(tasks) if keyword in t.description]
    hits.reverse()
    return hits


# Display numbering: ID 1 is the top of the stack.


def index_for_display_id(size: int, display_id: int) -> int:
    return size - display_id


def display_id_for_index(size: int, index: int) -> int:
    return size - index
