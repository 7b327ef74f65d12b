"""Rendering helpers for tasks, members and statistics."""

from collections.abc import Sequence
from datetime import date

import typer
from rich import box
from rich.table import Table
from rich.text import Text

from todopanel.domain.board import Board
from todopanel.domain.member import TeamMember
from todopanel.domain.settings import (
    PRIORITY_DESCRIPTIONS,
    STATUS_DESCRIPTIONS,
    STATUS_SYMBOLS,
    TodoSettings,
    category_color,
    priority_color,
    status_color,
)
from todopanel.domain.task import (
    Task,
    TaskStats,
    is_due_soon,
    is_overdue,
    subtask_progress,
)
from todopanel.interfaces.cli.common import print_separator, short_id

OVERDUE_STYLE = "bold red"
DUE_SOON_STYLE = "bold yellow"


def member_initials(board: Board, member_ids: Sequence[str]) -> str:
    initials = []
    for member_id in member_ids:
        member = board.get_member(member_id)
        if member is not None:
            initials.append(member.initials)
    return " ".join(initials)


def due_text(task: Task, today: date, settings: TodoSettings | None) -> Text:
    label = task.due_date.isoformat()
    if is_overdue(task, today):
        return Text(f"{label} !", style=OVERDUE_STYLE)
    if is_due_soon(task, today, settings):
        return Text(label, style=DUE_SOON_STYLE)
    return Text(label)


def build_task_table(
    tasks: Sequence[Task],
    board: Board,
    today: date,
    settings: TodoSettings | None = None,
) -> Table:
    """Build the task list table, one row per task in the given order."""
    table = Table(box=box.SIMPLE, header_style="bold")
    table.add_column("ID", no_wrap=True)
    table.add_column("", no_wrap=True)
    table.add_column("Title", min_width=12)
    table.add_column("Priority", no_wrap=True)
    table.add_column("Category", no_wrap=True)
    table.add_column("Due", no_wrap=True)
    table.add_column("Sub", no_wrap=True)
    table.add_column("Team", no_wrap=True)

    for task in tasks:
        done, total = subtask_progress(task)
        table.add_row(
            short_id(task.id),
            Text(STATUS_SYMBOLS.get(task.status, "○"), style=status_color(task.status, settings)),
            Text(task.title or "<untitled>"),
            Text(task.priority.value, style=priority_color(task.priority, settings)),
            Text(task.category.value, style=category_color(task.category, settings)),
            due_text(task, today, settings),
            f"{done}/{total}" if total else "",
            Text(member_initials(board, task.assigned_members)),
        )
    return table


def format_stats(stats: TaskStats) -> str:
    return (
        f"Total: {stats.total}  Completed: {stats.completed}  "
        f"In Progress: {stats.in_progress}  Overdue: {stats.overdue}  "
        f"({stats.progress_percent}% done)"
    )


def print_task_details(task: Task, board: Board, today: date, settings: TodoSettings | None) -> None:
    """Print every field of a task, including sub-tasks and asset links."""
    print_separator()
    typer.echo(f"{task.title or '<untitled>'}")
    print_separator()
    typer.echo(f"ID:          {task.id}")
    typer.echo(f"Status:      {task.status.value} - {STATUS_DESCRIPTIONS[task.status]}")
    typer.echo(f"Priority:    {task.priority.value} - {PRIORITY_DESCRIPTIONS[task.priority]}")
    typer.echo(f"Category:    {task.category.value}")

    due = task.due_date.isoformat()
    if is_overdue(task, today):
        due += " (OVERDUE)"
    elif is_due_soon(task, today, settings):
        due += " (due soon)"
    typer.echo(f"Due:         {due}")
    typer.echo(f"Created:     {task.created_date.isoformat()}")
    typer.echo(f"Hours:       {task.actual_hours} actual / {task.estimated_hours} estimated")

    names = board.member_names(task.assigned_members)
    typer.echo(f"Assigned:    {', '.join(names) if names else '-'}")

    if task.description:
        typer.echo(f"\n{task.description}")

    if task.sub_tasks:
        done, total = subtask_progress(task)
        typer.echo(f"\nSubtasks ({done}/{total}):")
        for position, sub_task in enumerate(task.sub_tasks, start=1):
            mark = "[x]" if sub_task.is_completed else "[ ]"
            line = f"  {position}. {mark} {sub_task.title}  ({short_id(sub_task.id)})"
            assignees = board.member_names(sub_task.assigned_to)
            if assignees:
                line += f"  -> {', '.join(assignees)}"
            typer.echo(line)
            for asset_id in sub_task.asset_guids:
                typer.echo(f"       asset: {asset_id}")

    if task.referenced_asset_guids:
        typer.echo("\nAssets:")
        for asset_id in task.referenced_asset_guids:
            typer.echo(f"  - {asset_id}")
    print_separator()


def build_member_table(members: Sequence[TeamMember], board: Board) -> Table:
    """Build the team roster table with open assignment counts."""
    table = Table(box=box.SIMPLE, header_style="bold")
    table.add_column("ID", no_wrap=True)
    table.add_column("", no_wrap=True)
    table.add_column("Name")
    table.add_column("Role")
    table.add_column("Tasks", no_wrap=True)
    table.add_column("Active", no_wrap=True)

    for member in members:
        assigned = sum(1 for t in board.tasks if member.id in t.assigned_members)
        table.add_row(
            short_id(member.id),
            Text(member.initials, style=f"bold {member.color}"),
            Text(member.name),
            Text(member.role),
            str(assigned),
            "yes" if member.is_active else "no",
        )
    return table
