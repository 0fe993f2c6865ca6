# src/stacktrack/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_board import TaskBoard
from .ports import TaskPersistence


@dataclass
class AppState:
    # Settings object (config.Settings or a test double with the same attributes).
    settings: Any

    board: TaskBoard
    store: TaskPersistence

    # Set by mutating commands, cleared by a successful save.
    dirty: bool = False

    def save(self) -> bool:
        ok = self.store.save(self.board.tasks)
        if ok:
            self.dirty = False
        return ok
