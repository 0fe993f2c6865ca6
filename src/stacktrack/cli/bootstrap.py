# src/stacktrack/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the task file store and the task board into AppState,
- loads the persisted stack on start-up and saves it on shutdown.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskPersistence
from ..core.state import AppState
from ..tasks.bounded_stack import BoundedStack
from ..tasks.errors import CapacityExceededError, CorruptDataError
from ..tasks.task_board import TaskBoard
from ..tasks.task_codec import TaskFileStore
from ..tasks.task_models import MAX_TASKS, TaskRecord

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def load_tasks(store: TaskPersistence, *, capacity: int = MAX_TASKS) -> BoundedStack[TaskRecord]:
    """
    Load the persisted stack, or an empty one.

    A missing file gives an empty stack. A corrupt file is logged and also
    gives an empty stack; the file itself is left untouched until next save.
    """
    try:
        loaded = store.load(capacity=capacity)
    except (CorruptDataError, CapacityExceededError) as e:
        logger.error("Task file is corrupt, starting with an empty stack: %s", e)
        return BoundedStack(capacity)
    if loaded is None:
        return BoundedStack(capacity)
    return loaded


def create_initial_state(*, settings=None, store: TaskPersistence | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the store) injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if store is None:
        store = TaskFileStore(settings.tasks_path)

    board = TaskBoard(load_tasks(store))
    logger.info("Task board ready: %d/%d tasks", board.size(), board.capacity)
    return AppState(settings=settings, board=board, store=store)


def shutdown(state: AppState) -> None:
    """Best-effort save on exit (no exceptions should escape)."""
    if not getattr(state.settings, "autosave", True):
        logger.info("Autosave disabled; %s", "unsaved changes dropped" if state.dirty else "nothing to save")
        return
    try:
        state.save()
    except Exception:
        logger.exception("Failed to save tasks on exit.")
