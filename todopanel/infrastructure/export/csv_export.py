"""CSV export of the task list.

The format is fixed::

    Title,Description,Priority,Category,Status,Due Date,Created Date,Estimated Hours,Actual Hours
    "Fix bug","Crash on load",High,Programming,InProgress,2024-01-10,2024-01-02,3,1

Title and description are always quoted, with embedded quotes doubled.
Enumerations are written by name, dates as ``yyyy-MM-dd``, and every line
(including the last) ends with ``\\n``.
"""

from collections.abc import Iterable
from pathlib import Path

from todopanel.domain.shared import Err, Ok, Result
from todopanel.domain.task import Task

CSV_HEADER = (
    "Title,Description,Priority,Category,Status,"
    "Due Date,Created Date,Estimated Hours,Actual Hours"
)
DATE_FORMAT = "%Y-%m-%d"
DEFAULT_EXPORT_FILENAME = "todo_export.csv"


def _quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def format_row(task: Task) -> str:
    """Format one task as a CSV row (without line terminator)."""
    return ",".join(
        [
            _quote(task.title),
            _quote(task.description),
            task.priority.value,
            task.category.value,
            task.status.value,
            task.due_date.strftime(DATE_FORMAT),
            task.created_date.strftime(DATE_FORMAT),
            str(task.estimated_hours),
            str(task.actual_hours),
        ]
    )


def tasks_to_csv(tasks: Iterable[Task]) -> str:
    """Render tasks, in the given order, as CSV text."""
    lines = [CSV_HEADER, *(format_row(task) for task in tasks)]
    return "".join(f"{line}\n" for line in lines)


def export_csv(tasks: Iterable[Task], path: Path) -> Result[Path, str]:
    """Write tasks to a CSV file.

    Args:
        tasks: Tasks to export, usually the whole board in board order.
        path: Destination file; parent directories are created.

    Returns:
        Ok(Path) with the written file, or Err(str) if writing failed.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(tasks_to_csv(tasks))
        return Ok(path)
    except PermissionError:
        return Err(f"Permission denied writing {path}")
    except OSError as e:
        return Err(f"Error writing {path}: {e}")
