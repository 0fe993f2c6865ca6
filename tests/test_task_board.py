# tests/test_task_board.py

from __future__ import annotations

import pytest

from stacktrack.tasks.bounded_stack import BoundedStack
from stacktrack.tasks.errors import CapacityExceededError, TaskIndexError
from stacktrack.tasks.task_board import TaskBoard
from stacktrack.tasks.task_models import TaskStatus

from .fakes import make_task


def _board(*names: str, capacity: int = 100) -> TaskBoard:
    tasks = [make_task(n, created_at=1000 + i) for i, n in enumerate(names)]
    return TaskBoard(BoundedStack.from_iterable(tasks, capacity))


def _names(board: TaskBoard) -> list[str]:
    return [t.description for t in board.tasks]


def test_remove_at_middle_index_shifts_upper_tasks_down() -> None:
    board = _board("A", "B", "C")

    removed = board.remove_at(1)

    assert removed.description == "B"
    assert board.size() == 2
    assert board.element_at(0).description == "A"
    assert board.element_at(1).description == "C"
    assert board.undo_depth() == 1


def test_edit_at_keeps_creation_timestamp_and_order() -> None:
    board = _board("A", "B", "C", "D")
    original = board.element_at(1)

    replacement = make_task(
        "B2", due=(2030, 5, 6), importance=9, status=TaskStatus.COMPLETED, created_at=42
    )
    stored = board.edit_at(1, replacement)

    assert stored.created_at == original.created_at
    assert board.element_at(1) == stored
    assert stored.description == "B2"
    assert stored.status is TaskStatus.COMPLETED
    assert _names(board) == ["A", "B2", "C", "D"]
    assert board.undo_stack.peek() == original


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_out_of_range_index_does_not_mutate(index: int) -> None:
    board = _board("A", "B", "C")

    with pytest.raises(TaskIndexError):
        board.remove_at(index)
    with pytest.raises(TaskIndexError):
        board.edit_at(index, make_task("X"))

    assert _names(board) == ["A", "B", "C"]
    assert board.undo_depth() == 0


def test_undo_restores_snapshot_onto_top() -> None:
    board = _board("A", "B", "C")
    board.remove_at(0)

    restored = board.undo()

    assert restored is not None and restored.description == "A"
    # Restored on top, not at its original index.
    assert _names(board) == ["B", "C", "A"]
    assert board.undo_depth() == 0


def test_undo_after_edit_pushes_pre_edit_record() -> None:
    board = _board("A", "B")
    board.edit_at(0, make_task("A2"))

    board.undo()

    assert _names(board) == ["A2", "B", "A"]


def test_undo_with_empty_history_returns_none() -> None:
    board = _board("A")
    assert board.undo() is None
    assert _names(board) == ["A"]


def test_pop_is_recorded_for_undo() -> None:
    board = _board("A", "B")

    popped = board.pop()
    assert popped.description == "B"
    assert board.undo_depth() == 1

    board.undo()
    assert _names(board) == ["A", "B"]


def test_pop_on_empty_board_records_nothing() -> None:
    board = TaskBoard()
    assert board.pop() is None
    assert board.undo_depth() == 0


def test_undo_onto_full_stack_keeps_snapshot() -> None:
    board = _board("A", "B", capacity=2)
    board.edit_at(0, make_task("A2"))
    assert board.is_full()

    with pytest.raises(CapacityExceededError):
        board.undo()

    assert board.undo_depth() == 1
    assert _names(board) == ["A2", "B"]


def test_full_undo_stack_drops_new_snapshots() -> None:
    board = _board("A", capacity=2)
    for i in range(3):
        board.edit_at(0, make_task(f"A{i}"))

    assert board.undo_depth() == 2
    # The oldest snapshots are kept; the third edit was not recorded.
    assert [t.description for t in board.undo_stack] == ["A", "A0"]


def test_push_respects_capacity() -> None:
    board = TaskBoard(capacity=1)
    assert board.push(make_task("A")) is True
    assert board.push(make_task("B")) is False
    assert board.size() == 1


def test_edit_at_with_oversize_field_does_not_mutate() -> None:
    board = _board("A", "B")
    before = list(board.tasks)

    with pytest.raises(ValueError):
        board.edit_at(0, make_task("A2", importance=2**31))

    assert list(board.tasks) == before
    assert board.undo_depth() == 0
