# tests/test_task_models.py

from __future__ import annotations

from datetime import date

import pytest

from todo_maker.errors import ValidationError
from todo_maker.tasks.task_models import (
    Priority,
    StatusFilter,
    Task,
    parse_due_date,
    parse_priority,
    validate_title,
)


def test_create_applies_defaults_and_trims() -> None:
    task = Task.create("  Write report  ", "  draft first  ")
    assert task.title == "Write report"
    assert task.description == "draft first"
    assert task.priority is Priority.MEDIUM
    assert task.due_date is None
    assert task.completed is False
    assert len(task.id) == 32


@pytest.mark.parametrize("title", ["", "   ", None, "\t\n"])
def test_create_rejects_empty_title(title) -> None:
    with pytest.raises(ValidationError, match="empty title"):
        Task.create(title)


def test_ids_are_unique() -> None:
    ids = {Task.create("t").id for _ in range(200)}
    assert len(ids) == 200


def test_parse_due_date() -> None:
    assert parse_due_date("2026-01-31") == date(2026, 1, 31)
    assert parse_due_date(" ") is None
    assert parse_due_date(None) is None
    assert parse_due_date(date(2026, 2, 1)) == date(2026, 2, 1)
    for bad in ("31/01/2026", "2026-02-30", "tomorrow", "20261018", "2026-W42-1", "2026-1-5"):
        with pytest.raises(ValidationError, match="invalid date"):
            parse_due_date(bad)


def test_parse_priority() -> None:
    assert parse_priority(None) is Priority.MEDIUM
    assert parse_priority("") is Priority.MEDIUM
    assert parse_priority("high") is Priority.HIGH
    assert parse_priority(Priority.LOW) is Priority.LOW
    with pytest.raises(ValidationError):
        parse_priority("urgent")


def test_priority_rank_puts_high_first() -> None:
    ordered = sorted(Priority, key=lambda p: p.rank)
    assert ordered == [Priority.HIGH, Priority.MEDIUM, Priority.LOW]


def test_status_filter_parse() -> None:
    assert StatusFilter.parse("ACTIVE") is StatusFilter.ACTIVE
    assert StatusFilter.parse("done") is StatusFilter.COMPLETED
    assert StatusFilter.parse(None) is StatusFilter.ALL
    with pytest.raises(ValidationError):
        StatusFilter.parse("later")


def test_validate_title_returns_stripped() -> None:
    assert validate_title(" x ") == "x"
