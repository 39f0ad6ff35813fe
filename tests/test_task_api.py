# tests/test_task_api.py

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from todo_maker.errors import InvalidDataError, NotFoundError, ValidationError
from todo_maker.tasks import task_api
from todo_maker.tasks.task_models import Priority, StatusFilter


def _titles(tasks) -> list[str]:
    return [t.title for t in tasks]


def test_create_rejects_blank_title_without_adding(state) -> None:
    with pytest.raises(ValidationError):
        task_api.create_task(state, title="  ")
    assert state.store.count_tasks() == 0


def test_seeded_scenarios(state) -> None:
    task_api.seed_sample_tasks(state, today=date(2026, 10, 18))

    assert _titles(task_api.compute_view(state, "", "All")) == [
        "Finish project",
        "Buy groceries",
        "Call mom",
    ]

    groceries = state.store.snapshot()[0]
    task_api.toggle_task(state, groceries.id)
    assert _titles(task_api.compute_view(state, "", "Active")) == ["Finish project", "Call mom"]
    assert _titles(task_api.compute_view(state, "mom", "All")) == ["Call mom"]


def test_compute_view_uses_state_inputs(seeded_state) -> None:
    task_api.set_query(seeded_state, "  PROJECT ")
    assert seeded_state.query == "PROJECT"
    assert _titles(task_api.compute_view(seeded_state)) == ["Finish project"]

    task_api.set_query(seeded_state, "")
    assert task_api.set_status_filter(seeded_state, "completed") is StatusFilter.COMPLETED
    assert task_api.compute_view(seeded_state) == []


def test_edit_and_delete(seeded_state) -> None:
    task = seeded_state.store.snapshot()[2]
    task_api.edit_task(seeded_state, task.id, priority="high", due_date="")
    assert task.priority is Priority.HIGH
    assert task.due_date is None

    task_api.delete_task(seeded_state, task.id)
    with pytest.raises(NotFoundError):
        task_api.delete_task(seeded_state, task.id)
    with pytest.raises(NotFoundError):
        task_api.toggle_task(seeded_state, task.id)


def test_save_load_round_trip(seeded_state) -> None:
    path = seeded_state.settings.data_dir / "round.todo"
    before = [(t.id, t.title, t.description, t.due_date, t.priority, t.completed)
              for t in seeded_state.store.snapshot()]

    task_api.save_all(seeded_state, path)
    assert seeded_state.current_path == path

    task_api.create_task(seeded_state, title="added after save")
    assert task_api.load_all(seeded_state, path) == 3

    after = [(t.id, t.title, t.description, t.due_date, t.priority, t.completed)
             for t in seeded_state.store.snapshot()]
    assert after == before


def test_failed_load_leaves_store_untouched(seeded_state, tmp_path: Path) -> None:
    bad = tmp_path / "bad.todo"
    bad.write_text('{"format": "todo-maker", "version": 1, "tasks": [{"id": "x"}]}', "utf-8")
    before = seeded_state.store.snapshot()

    with pytest.raises(InvalidDataError):
        task_api.load_all(seeded_state, bad)
    assert seeded_state.store.snapshot() == before
    assert seeded_state.current_path is None


def test_export_ignores_view(seeded_state, tmp_path: Path) -> None:
    task_api.set_query(seeded_state, "mom")
    path = task_api.export_csv(seeded_state, tmp_path / "all.csv")
    lines = path.read_text("utf-8").splitlines()
    assert len(lines) == 4
    assert lines[1].startswith('"Buy groceries"')


def test_seed_uses_relative_due_dates(state) -> None:
    task_api.seed_sample_tasks(state, today=date(2026, 1, 30))
    dues = [t.due_date for t in state.store.snapshot()]
    assert dues == [None, date(2026, 2, 1), date(2026, 1, 31)]
