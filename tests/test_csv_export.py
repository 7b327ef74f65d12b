# tests/test_csv_export.py

from __future__ import annotations

from datetime import date
from pathlib import Path

from todopanel.domain.shared import Ok
from todopanel.domain.task import Category, Priority, Status, Task
from todopanel.infrastructure.export import CSV_HEADER, export_csv, format_row, tasks_to_csv


def _task(**kwargs) -> Task:
    fields = {
        "title": "Fix bug",
        "description": "Crash on load",
        "due_date": date(2024, 1, 10),
        "created_date": date(2024, 1, 2),
        "priority": Priority.HIGH,
        "category": Category.PROGRAMMING,
        "status": Status.IN_PROGRESS,
        "estimated_hours": 4,
        "actual_hours": 1,
    }
    fields.update(kwargs)
    return Task(**fields)


def test_header() -> None:
    assert CSV_HEADER == (
        "Title,Description,Priority,Category,Status,Due Date,Created Date,"
        "Estimated Hours,Actual Hours"
    )


def test_row_format() -> None:
    assert format_row(_task()) == (
        '"Fix bug","Crash on load",High,Programming,InProgress,2024-01-10,2024-01-02,4,1'
    )


def test_quotes_and_commas_in_text_are_escaped() -> None:
    row = format_row(_task(title='Say "hi", twice', description=""))
    assert row.startswith('"Say ""hi"", twice",""')


def test_every_line_ends_with_newline_in_board_order() -> None:
    text = tasks_to_csv([_task(title="b", priority=Priority.LOW), _task(title="a")])
    lines = text.split("\n")
    assert lines[0] == CSV_HEADER
    assert lines[1].startswith('"b"')
    assert lines[2].startswith('"a"')
    assert lines[3] == ""


def test_export_writes_file_and_creates_folders(tmp_path: Path) -> None:
    target = tmp_path / "Exports" / "todo_export.csv"

    result = export_csv([_task()], target)

    assert isinstance(result, Ok)
    assert target.read_text(encoding="utf-8").startswith(CSV_HEADER + "\n")
