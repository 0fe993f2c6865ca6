# src/stacktrack/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

AppState depends on this Protocol rather than on TaskFileStore, so tests can
swap in an in-memory store.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.bounded_stack import BoundedStack
from ..tasks.task_models import TaskRecord


class TaskPersistence(Protocol):
    """Whole-stack snapshot storage."""

    def save(self, tasks: Iterable[TaskRecord]) -> bool: ...

    def load(self, *, capacity: int = ...) -> BoundedStack[TaskRecord] | None: ...
