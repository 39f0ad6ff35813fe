# src/todo_maker/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date
from typing import Any

from ..errors import InvalidDataError, NotFoundError
from .task_models import (
    Priority,
    Task,
    clean_description,
    parse_due_date,
    parse_priority,
    validate_title,
)

logger = logging.getLogger(__name__)

_UNSET: Any = object()


class TaskStore:
    """
    In-memory task store.

    Holds tasks in insertion order. Display order is never stored here;
    it is recomputed by the view pipeline.

    Thread-safety:
    - none; the store is owned by the single console thread
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = []
        if tasks is not None:
            self.replace_all(tasks)
        logger.debug("TaskStore ready total=%s", len(self._tasks))

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- low-level helpers ----

    def _index_of(self, task_id: str) -> int:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        raise NotFoundError(task_id)

    @staticmethod
    def _check_task(task: Any, pos: int) -> None:
        if not isinstance(task, Task):
            raise InvalidDataError(f"item {pos}: expected a task, got {type(task).__name__}")
        if not isinstance(task.id, str) or not task.id:
            raise InvalidDataError(f"item {pos}: missing id")
        if not isinstance(task.title, str) or not task.title.strip():
            raise InvalidDataError(f"item {pos}: empty title")
        if not isinstance(task.description, str):
            raise InvalidDataError(f"item {pos}: description must be text")
        if task.due_date is not None and not isinstance(task.due_date, date):
            raise InvalidDataError(f"item {pos}: due_date must be a date")
        if not isinstance(task.priority, Priority):
            raise InvalidDataError(f"item {pos}: invalid priority {task.priority!r}")
        if not isinstance(task.completed, bool):
            raise InvalidDataError(f"item {pos}: completed must be a boolean")

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def snapshot(self) -> tuple[Task, ...]:
        """Current tasks in insertion order. Callers must not mutate them."""
        return tuple(self._tasks)

    def get(self, task_id: str) -> Task:
        return self._tasks[self._index_of(task_id)]

    def add(self, task: Task) -> Task:
        self._check_task(task, len(self._tasks))
        self._tasks.append(task)
        logger.debug("Task added id=%s priority=%s due=%s", task.id, task.priority, task.due_date)
        return task

    def update(
        self,
        task_id: str,
        *,
        title: str | None = _UNSET,
        description: str | None = _UNSET,
        due_date: str | date | None = _UNSET,
        priority: str | Priority | None = _UNSET,
        completed: bool = _UNSET,
    ) -> Task:
        """
        Apply field changes to an existing task.

        All supplied values are validated before any of them is written,
        so a rejected edit leaves the task as it was.
        """
        task = self.get(task_id)

        changes: dict[str, Any] = {}
        if title is not _UNSET:
            changes["title"] = validate_title(title)
        if description is not _UNSET:
            changes["description"] = clean_description(description)
        if due_date is not _UNSET:
            changes["due_date"] = parse_due_date(due_date)
        if priority is not _UNSET:
            changes["priority"] = parse_priority(priority)
        if completed is not _UNSET:
            changes["completed"] = bool(completed)

        for name, value in changes.items():
            setattr(task, name, value)

        if changes:
            logger.debug("Task updated id=%s fields=%s", task_id, sorted(changes))
        return task

    def remove(self, task_id: str) -> Task:
        task = self._tasks.pop(self._index_of(task_id))
        logger.debug("Task removed id=%s", task_id)
        return task

    def toggle_completed(self, task_id: str) -> Task:
        task = self.get(task_id)
        task.completed = not task.completed
        logger.debug("Task toggled id=%s completed=%s", task_id, task.completed)
        return task

    def replace_all(self, tasks: Iterable[Task]) -> None:
        """
        Replace the whole collection (used by load).

        Every element is checked first; on any failure the current
        contents are kept.
        """
        incoming = list(tasks)
        seen: set[str] = set()
        for pos, task in enumerate(incoming):
            self._check_task(task, pos)
            if task.id in seen:
                raise InvalidDataError(f"item {pos}: duplicate id {task.id}")
            seen.add(task.id)

        self._tasks = incoming
        logger.debug("TaskStore replaced total=%s", len(incoming))
