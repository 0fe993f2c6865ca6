# src/stacktrack/tasks/bounded_stack.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from .errors import CapacityExceededError
from .task_models import MAX_TASKS

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BoundedStack(Generic[T]):
    """
    Fixed-capacity LIFO container.

    Positions are bottom-relative: index 0 is the oldest element still
    present, index len-1 is the top. Storage is a plain list, so the
    index-addressed helpers (replace_at / delete_at) splice in place
    instead of rotating through a scratch stack.
    """

    def __init__(self, capacity: int = MAX_TASKS) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = int(capacity)
        self._items: list[T] = []

    @classmethod
    def from_iterable(cls, items: Iterable[T], capacity: int = MAX_TASKS) -> BoundedStack[T]:
        """Build a stack from items given bottom-to-top."""
        stack: BoundedStack[T] = cls(capacity)
        for item in items:
            if not stack.push(item):
                raise CapacityExceededError(capacity)
        return stack

    # ---- queries ----

    @property
    def capacity(self) -> int:
        return self._capacity

    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def element_at(self, index: int) -> T | None:
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def __iter__(self) -> Iterator[T]:
        """Iterate bottom-to-top over a snapshot."""
        return iter(list(self._items))

    def to_list(self) -> list[T]:
        return list(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack(size={len(self._items)}, capacity={self._capacity})"

    # ---- LIFO operations ----

    def push(self, value: T) -> bool:
        if self.is_full():
            logger.debug("push rejected: stack full (capacity=%s)", self._capacity)
            return False
        self._items.append(value)
        return True

    def pop(self) -> T | None:
        if not self._items:
            return None
        return self._items.pop()

    def peek(self) -> T | None:
        if not self._items:
            return None
        return self._items[-1]

    def clear(self) -> None:
        self._items.clear()

    # ---- index-addressed helpers (callers validate the index) ----

    def replace_at(self, index: int, value: T) -> T:
        assert 0 <= index < len(self._items), f"replace_at index {index} out of range"
        old = self._items[index]
        self._items[index] = value
        return old

    def delete_at(self, index: int) -> T:
        assert 0 <= index < len(self._items), f"delete_at index {index} out of range"
        return self._items.pop(index)
