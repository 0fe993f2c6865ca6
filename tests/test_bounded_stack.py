# tests/test_bounded_stack.py

from __future__ import annotations

import pytest

from stacktrack.tasks.bounded_stack import BoundedStack
from stacktrack.tasks.errors import CapacityExceededError
from stacktrack.tasks.task_models import MAX_TASKS


def test_size_tracks_pushes_and_rejects_overflow() -> None:
    stack: BoundedStack[int] = BoundedStack()
    for k in range(1, MAX_TASKS + 1):
        assert stack.push(k) is True
        assert stack.size() == k

    assert stack.is_full()
    assert stack.push(999) is False
    assert stack.size() == MAX_TASKS
    assert stack.peek() == MAX_TASKS


def test_pop_returns_last_pushed_and_none_when_empty() -> None:
    stack: BoundedStack[str] = BoundedStack(capacity=3)
    assert stack.pop() is None
    assert stack.peek() is None

    stack.push("a")
    stack.push("b")
    assert stack.pop() == "b"
    assert stack.pop() == "a"
    assert stack.pop() is None
    assert stack.is_empty()


def test_peek_does_not_change_size() -> None:
    stack: BoundedStack[str] = BoundedStack(capacity=3)
    stack.push("x")
    assert stack.peek() == "x"
    assert stack.peek() == "x"
    assert len(stack) == 1


def test_element_at_is_bottom_relative() -> None:
    stack = BoundedStack.from_iterable(["A", "B", "C"], capacity=5)
    assert stack.element_at(0) == "A"
    assert stack.element_at(2) == "C"
    assert stack.element_at(3) is None
    assert stack.element_at(-1) is None
    assert list(stack) == ["A", "B", "C"]


def test_from_iterable_over_capacity_raises() -> None:
    with pytest.raises(CapacityExceededError):
        BoundedStack.from_iterable(range(4), capacity=3)


def test_capacity_must_be_positive() -> None:
    with pytest.raises(ValueError):
        BoundedStack(capacity=0)
