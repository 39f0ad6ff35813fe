# src/todo_maker/errors.py

from __future__ import annotations

"""
Error taxonomy.

Every error here is recoverable: the console reports it and keeps running.
"""


class TodoError(Exception):
    """Base class for all application errors."""


class ValidationError(TodoError, ValueError):
    """Bad user input (empty title, unparsable date, unknown priority)."""


class NotFoundError(TodoError, LookupError):
    """An operation referenced a task id that is not in the store."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"task not found: {task_id}")
        self.task_id = task_id


class InvalidDataError(TodoError, ValueError):
    """Loaded data does not have the expected task-list shape."""


class StorageError(TodoError):
    """File system failure during save, load or export."""

    def __init__(self, action: str, path: object, cause: OSError) -> None:
        super().__init__(f"{action} failed for {path}: {cause.strerror or cause}")
        self.action = action
        self.path = path
