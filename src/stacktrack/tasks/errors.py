# src/stacktrack/tasks/errors.py

"""
Errors raised by the task core.

Underflow is not an exception: pop/peek/element_at return None on an empty
stack. A save that cannot open its target is logged and reported as False.
"""

from __future__ import annotations


class TaskStackError(Exception):
    """Base class for recoverable task-stack errors."""


class CapacityExceededError(TaskStackError, OverflowError):
    def __init__(self, capacity: int) -> None:
        super().__init__(f"task stack is full (capacity={capacity})")
        self.capacity = capacity


class TaskIndexError(TaskStackError, IndexError):
    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"index {index} out of range (size={size})")
        self.index = index
        self.size = size


class CorruptDataError(TaskStackError, ValueError):
    """Persisted task data does not match the expected binary layout."""
