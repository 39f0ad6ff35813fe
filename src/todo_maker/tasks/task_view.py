# src/todo_maker/tasks/task_view.py

from __future__ import annotations

"""
View pipeline.

Derives the displayed task order from a store snapshot plus two UI inputs:
- status filter (All / Active / Completed)
- free-text query over title and description

Order: incomplete before completed, then priority (HIGH first), then due
date ascending with undated tasks last. Priority dominates due date, so an
undated HIGH task still precedes a dated MEDIUM one. Remaining ties keep
insertion order (sorted() is stable).
"""

from collections.abc import Iterable
from datetime import date

from .task_models import StatusFilter, Task


def _sort_key(task: Task) -> tuple[bool, int, bool, date]:
    return (
        task.completed,
        task.priority.rank,
        task.due_date is None,
        task.due_date or date.max,
    )


def matches_query(task: Task, needle: str) -> bool:
    """`needle` must already be trimmed and lower-cased."""
    if not needle:
        return True
    if needle in task.title.lower():
        return True
    return bool(task.description) and needle in task.description.lower()


def compute_view(
    tasks: Iterable[Task],
    query: str | None = "",
    status_filter: StatusFilter | str | None = StatusFilter.ALL,
) -> list[Task]:
    status = StatusFilter.parse(status_filter)
    needle = (query or "").strip().lower()

    visible = [t for t in tasks if status.matches(t) and matches_query(t, needle)]
    return sorted(visible, key=_sort_key)
