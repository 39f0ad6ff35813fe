# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_maker.core.state import AppState
from todo_maker.tasks.task_models import Priority, Task
from todo_maker.tasks.task_store import TaskStore

TODAY = date(2026, 10, 18)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="WARNING",
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.todo",
        export_path=tmp_path / "tasks.csv",
        seed_samples=False,
        confirm_delete=True,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return AppState(settings=settings, store=TaskStore())


@pytest.fixture()
def sample_tasks() -> list[Task]:
    """The three starter tasks, with due dates pinned to TODAY."""
    return [
        Task.create("Buy groceries", "Milk, bread, eggs", None, Priority.MEDIUM),
        Task.create("Finish project", "Push final changes to repo", "2026-10-20", Priority.HIGH),
        Task.create("Call mom", "Weekly check-in", "2026-10-19", Priority.LOW),
    ]


@pytest.fixture()
def seeded_state(state: AppState, sample_tasks: list[Task]) -> AppState:
    for t in sample_tasks:
        state.store.add(t)
    return state
