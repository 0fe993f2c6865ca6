# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from stacktrack.cli.bootstrap import create_initial_state
from stacktrack.core.state import AppState
from stacktrack.tasks.task_codec import TaskFileStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="stacktrack-test",
        log_level="DEBUG",
        console_enabled=False,
        autosave=True,
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.dat",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired exactly as in production.

    NOTE: We keep the real TaskFileStore here because its on-disk behavior
    is part of what we want to test.
    """
    return create_initial_state(settings=settings, store=TaskFileStore(settings.tasks_path))
