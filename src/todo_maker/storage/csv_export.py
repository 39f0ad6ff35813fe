# src/todo_maker/storage/csv_export.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..errors import StorageError
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

CSV_HEADER = "Title,Description,DueDate,Priority,Completed"
CSV_SUFFIX = ".csv"


def _quote(text: str | None) -> str:
    return '"' + (text or "").replace('"', '""') + '"'


def task_to_row(task: Task) -> str:
    due = task.due_date.isoformat() if task.due_date else ""
    completed = "true" if task.completed else "false"
    return ",".join(
        (_quote(task.title), _quote(task.description), due, task.priority.value, completed)
    )


def render_csv(tasks: Iterable[Task]) -> str:
    """Header plus one row per task, in the order given."""
    lines = [CSV_HEADER]
    lines.extend(task_to_row(t) for t in tasks)
    return "\n".join(lines) + "\n"


def export_csv(path: str | Path, tasks: Iterable[Task]) -> Path:
    path = Path(path).expanduser()
    body = render_csv(tasks)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(body)
    except OSError as e:
        raise StorageError("export", path, e) from e
    logger.info("Exported CSV to %s", path)
    return path
