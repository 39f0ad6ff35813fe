# tests/test_csv_export.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_maker.errors import StorageError
from todo_maker.storage.csv_export import CSV_HEADER, export_csv, render_csv
from todo_maker.tasks.task_models import Task


def test_three_tasks_give_four_lines(tmp_path: Path, sample_tasks) -> None:
    path = export_csv(tmp_path / "out.csv", sample_tasks)
    lines = path.read_text("utf-8").splitlines()
    assert len(lines) == 4
    assert lines[0] == CSV_HEADER


def test_rows_follow_insertion_order_and_format(sample_tasks) -> None:
    sample_tasks[1].completed = True
    lines = render_csv(sample_tasks).splitlines()
    assert lines[1] == '"Buy groceries","Milk, bread, eggs",,MEDIUM,false'
    assert lines[2] == '"Finish project","Push final changes to repo",2026-10-20,HIGH,true'
    assert lines[3] == '"Call mom","Weekly check-in",2026-10-19,LOW,false'


def test_quotes_are_doubled() -> None:
    task = Task.create('Read "Dune"', 'say "hi"')
    row = render_csv([task]).splitlines()[1]
    assert row.startswith('"Read ""Dune""","say ""hi"""')


def test_empty_description_is_quoted_empty() -> None:
    row = render_csv([Task.create("x")]).splitlines()[1]
    assert row == '"x","",,MEDIUM,false'


def test_empty_store_exports_header_only() -> None:
    assert render_csv([]) == CSV_HEADER + "\n"


def test_unwritable_path_raises_storage_error(tmp_path: Path) -> None:
    with pytest.raises(StorageError):
        export_csv(tmp_path, [])
