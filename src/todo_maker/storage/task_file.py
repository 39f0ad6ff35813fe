# src/todo_maker/storage/task_file.py

"""
Task file persistence.

One store per file, written as a small versioned JSON document:

    {"format": "todo-maker", "version": 1, "tasks": [{...}, ...]}

Saves go through a sibling temp file and os.replace(), so a failed write
never leaves a half-written task file in place.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from datetime import date
from pathlib import Path
from typing import Any

from ..errors import InvalidDataError, StorageError
from ..tasks.task_models import Priority, Task, parse_ymd

logger = logging.getLogger(__name__)

FILE_FORMAT = "todo-maker"
FILE_VERSION = 1
TASK_FILE_SUFFIX = ".todo"

_TASK_FIELDS = ("id", "title", "description", "due_date", "priority", "completed")


def ensure_suffix(path: str | Path, suffix: str) -> Path:
    """Append `suffix` unless the file name already ends with it (case-insensitive)."""
    p = Path(path).expanduser()
    if p.name.lower().endswith(suffix.lower()):
        return p
    return p.with_name(p.name + suffix)


# ---- encode / decode ----


def encode_task(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "due_date": task.due_date.isoformat() if task.due_date else None,
        "priority": task.priority.value,
        "completed": task.completed,
    }


def encode_tasks(tasks: Iterable[Task]) -> dict[str, Any]:
    return {
        "format": FILE_FORMAT,
        "version": FILE_VERSION,
        "tasks": [encode_task(t) for t in tasks],
    }


def decode_task(raw: Any, pos: int) -> Task:
    if not isinstance(raw, dict):
        raise InvalidDataError(f"task {pos}: expected an object")

    missing = [k for k in _TASK_FIELDS if k not in raw]
    if missing:
        raise InvalidDataError(f"task {pos}: missing fields {', '.join(missing)}")

    task_id = raw["id"]
    if not isinstance(task_id, str) or not task_id:
        raise InvalidDataError(f"task {pos}: id must be a non-empty string")

    title = raw["title"]
    if not isinstance(title, str) or not title.strip():
        raise InvalidDataError(f"task {pos}: title must be non-empty text")

    description = raw["description"]
    if description is None:
        description = ""
    if not isinstance(description, str):
        raise InvalidDataError(f"task {pos}: description must be text")

    due_raw = raw["due_date"]
    due_date: date | None = None
    if due_raw is not None:
        if not isinstance(due_raw, str):
            raise InvalidDataError(f"task {pos}: due_date must be a string or null")
        try:
            due_date = parse_ymd(due_raw)
        except ValueError:
            raise InvalidDataError(f"task {pos}: bad due_date {due_raw!r}") from None

    try:
        priority = Priority(raw["priority"])
    except ValueError:
        raise InvalidDataError(f"task {pos}: bad priority {raw['priority']!r}") from None

    completed = raw["completed"]
    if not isinstance(completed, bool):
        raise InvalidDataError(f"task {pos}: completed must be true/false")

    return Task(
        id=task_id,
        title=title,
        description=description,
        due_date=due_date,
        priority=priority,
        completed=completed,
    )


def decode_tasks(payload: Any) -> list[Task]:
    if not isinstance(payload, dict):
        raise InvalidDataError("not a task file: top level must be an object")
    if payload.get("format") != FILE_FORMAT:
        raise InvalidDataError("not a task file: unknown format marker")
    version = payload.get("version")
    if version != FILE_VERSION:
        raise InvalidDataError(f"unsupported task file version: {version!r}")

    items = payload.get("tasks")
    if not isinstance(items, list):
        raise InvalidDataError("not a task file: 'tasks' must be a list")

    return [decode_task(raw, pos) for pos, raw in enumerate(items)]


# ---- file I/O ----


def save_tasks(path: str | Path, tasks: Iterable[Task]) -> Path:
    path = Path(path).expanduser()
    payload = encode_tasks(tasks)
    tmp = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, path)
    except OSError as e:
        with contextlib.suppress(OSError):
            tmp.unlink()
        raise StorageError("save", path, e) from e
    logger.info("Saved %d tasks to %s", len(payload["tasks"]), path)
    return path


def load_tasks(path: str | Path) -> list[Task]:
    """
    Read and fully decode a task file.

    Raises StorageError for I/O problems and InvalidDataError for anything
    that is not a well-formed task list.
    """
    path = Path(path).expanduser()
    try:
        text = path.read_text("utf-8")
    except OSError as e:
        raise StorageError("load", path, e) from e
    except UnicodeDecodeError:
        raise InvalidDataError(f"{path} is not a UTF-8 text file") from None

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidDataError(f"{path} is not valid JSON: {e.msg} (line {e.lineno})") from None

    tasks = decode_tasks(payload)
    logger.info("Read %d tasks from %s", len(tasks), path)
    return tasks
