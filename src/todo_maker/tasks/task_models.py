# src/todo_maker/tasks/task_models.py

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum

from ..errors import ValidationError

DATE_FORMAT_HINT = "YYYY-MM-DD"

# fromisoformat also takes 20261018 and 2026-W42-1; strptime alone takes 2026-1-5
_YMD_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class Priority(StrEnum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @property
    def rank(self) -> int:
        """Sort rank: HIGH first."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


class StatusFilter(StrEnum):
    """Completion-state narrowing applied by the view pipeline."""

    ALL = "All"
    ACTIVE = "Active"
    COMPLETED = "Completed"

    @classmethod
    def parse(cls, raw: str | StatusFilter | None) -> StatusFilter:
        if raw is None:
            return cls.ALL
        if isinstance(raw, StatusFilter):
            return raw
        key = raw.strip().lower()
        if key == "done":
            return cls.COMPLETED
        for member in cls:
            if member.value.lower() == key:
                return member
        raise ValidationError(f"invalid status filter: {raw!r} (use all/active/completed)")

    def matches(self, task: Task) -> bool:
        if self is StatusFilter.ACTIVE:
            return not task.completed
        if self is StatusFilter.COMPLETED:
            return task.completed
        return True


def new_task_id() -> str:
    return uuid.uuid4().hex


# ---- validation ----


def validate_title(raw: str | None) -> str:
    title = (raw or "").strip()
    if not title:
        raise ValidationError("empty title")
    return title


def clean_description(raw: str | None) -> str:
    return (raw or "").strip()


def parse_due_date(raw: str | date | None) -> date | None:
    """
    Accept None/"" (no date), a date object, or an ISO YYYY-MM-DD string.
    """
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    text = str(raw).strip()
    if not text:
        return None
    try:
        return parse_ymd(text)
    except ValueError:
        raise ValidationError(f"invalid date (use {DATE_FORMAT_HINT})") from None


def parse_ymd(text: str) -> date:
    """Strict zero-padded YYYY-MM-DD; raises ValueError for anything else."""
    if not _YMD_RE.fullmatch(text):
        raise ValueError(f"not a {DATE_FORMAT_HINT} date: {text!r}")
    return datetime.strptime(text, "%Y-%m-%d").date()


def parse_priority(raw: str | Priority | None) -> Priority:
    if raw is None:
        return Priority.MEDIUM
    if isinstance(raw, Priority):
        return raw
    text = str(raw).strip().upper()
    if not text:
        return Priority.MEDIUM
    try:
        return Priority(text)
    except ValueError:
        raise ValidationError(f"invalid priority: {raw!r} (use low/medium/high)") from None


@dataclass(slots=True, eq=True)
class Task:
    id: str
    title: str
    description: str = ""
    due_date: date | None = None
    priority: Priority = Priority.MEDIUM
    completed: bool = field(default=False)

    @classmethod
    def create(
        cls,
        title: str | None,
        description: str | None = None,
        due_date: str | date | None = None,
        priority: str | Priority | None = None,
        *,
        completed: bool = False,
    ) -> Task:
        """Validated constructor; assigns a fresh id."""
        return cls(
            id=new_task_id(),
            title=validate_title(title),
            description=clean_description(description),
            due_date=parse_due_date(due_date),
            priority=parse_priority(priority),
            completed=bool(completed),
        )

    def __str__(self) -> str:
        return self.title
