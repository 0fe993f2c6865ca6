# src/stacktrack/tasks/task_sort.py

"""
Whole-stack reorderings.

Both sorts drain the stack, order the extracted tasks and push them back so
that reading the stack bottom-to-top yields the sorted sequence:
- by date: (year, month, day) ascending
- by importance: descending

Neither is recorded in undo history.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .bounded_stack import BoundedStack
from .task_models import TaskRecord

logger = logging.getLogger(__name__)


def _drain(stack: BoundedStack[TaskRecord]) -> list[TaskRecord]:
    """Pop everything; returned list is bottom-to-top."""
    out: list[TaskRecord] = []
    while True:
        task = stack.pop()
        if task is None:
            break
        out.append(task)
    out.reverse()
    return out


def _reload(stack: BoundedStack[TaskRecord], ordered: list[TaskRecord]) -> None:
    for task in ordered:
        pushed = stack.push(task)
        assert pushed, "reload cannot exceed the capacity it was drained from"


def _resort(
    stack: BoundedStack[TaskRecord],
    key: Callable[[TaskRecord], Any],
    *,
    reverse: bool,
) -> None:
    size = stack.size()
    ordered = sorted(_drain(stack), key=key, reverse=reverse)
    _reload(stack, ordered)
    assert stack.size() == size


def sort_by_date(stack: BoundedStack[TaskRecord]) -> None:
    _resort(stack, lambda t: t.due, reverse=False)
    logger.debug("Sorted by due date size=%s", stack.size())


def sort_by_importance(stack: BoundedStack[TaskRecord]) -> None:
    _resort(stack, lambda t: t.importance, reverse=True)
    logger.debug("Sorted by importance size=%s", stack.size())
