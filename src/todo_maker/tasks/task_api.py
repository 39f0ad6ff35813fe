# src/todo_maker/tasks/task_api.py

from __future__ import annotations

"""
Operations the presentation layer calls.

Each helper takes the AppState, performs one action against the task store
or a file, and raises a TodoError subclass on failure. Callers re-render from
compute_view() after every mutating call.
"""

import logging
from datetime import date, timedelta
from pathlib import Path
from typing import Any

from ..core.state import AppState
from ..storage import csv_export, task_file
from .task_models import Priority, StatusFilter, Task
from .task_view import compute_view as _compute_view

logger = logging.getLogger(__name__)


def create_task(
    state: AppState,
    *,
    title: str | None,
    description: str | None = None,
    due_date: str | date | None = None,
    priority: str | Priority | None = None,
    completed: bool = False,
) -> Task:
    task = Task.create(title, description, due_date, priority, completed=completed)
    state.store.add(task)
    logger.info("Task created id=%s", task.id)
    return task


def edit_task(state: AppState, task_id: str, **fields: Any) -> Task:
    """Update the given fields (title, description, due_date, priority, completed)."""
    return state.store.update(task_id, **fields)


def delete_task(state: AppState, task_id: str) -> None:
    state.store.remove(task_id)
    logger.info("Task deleted id=%s", task_id)


def toggle_task(state: AppState, task_id: str) -> Task:
    return state.store.toggle_completed(task_id)


def set_query(state: AppState, query: str | None) -> None:
    state.query = (query or "").strip()


def set_status_filter(state: AppState, raw: str | StatusFilter | None) -> StatusFilter:
    state.status_filter = StatusFilter.parse(raw)
    return state.status_filter


def compute_view(
    state: AppState,
    query: str | None = None,
    status_filter: str | StatusFilter | None = None,
) -> list[Task]:
    """Visible tasks in display order; omitted inputs fall back to the state's."""
    return _compute_view(
        state.store.snapshot(),
        state.query if query is None else query,
        state.status_filter if status_filter is None else status_filter,
    )


def save_all(state: AppState, path: str | Path) -> Path:
    saved = task_file.save_tasks(path, state.store.snapshot())
    state.current_path = saved
    return saved


def load_all(state: AppState, path: str | Path) -> int:
    """
    Replace the store with the tasks in `path`.

    The file is decoded and checked completely before the store is touched.
    """
    tasks = task_file.load_tasks(path)
    state.store.replace_all(tasks)
    state.current_path = Path(path).expanduser()
    state.last_view = []
    logger.info("Loaded %d tasks from %s", len(tasks), path)
    return len(tasks)


def export_csv(state: AppState, path: str | Path) -> Path:
    return csv_export.export_csv(path, state.store.snapshot())


def seed_sample_tasks(state: AppState, *, today: date | None = None) -> list[Task]:
    """Add the three starter tasks shown on a fresh start."""
    today = today or date.today()
    samples = [
        create_task(
            state,
            title="Buy groceries",
            description="Milk, bread, eggs",
            priority=Priority.MEDIUM,
        ),
        create_task(
            state,
            title="Finish project",
            description="Push final changes to repo",
            due_date=today + timedelta(days=2),
            priority=Priority.HIGH,
        ),
        create_task(
            state,
            title="Call mom",
            description="Weekly check-in",
            due_date=today + timedelta(days=1),
            priority=Priority.LOW,
        ),
    ]
    return samples
