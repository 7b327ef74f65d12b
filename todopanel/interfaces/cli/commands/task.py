"""Task CLI commands.

Commands for the task lifecycle: adding, listing, editing, status changes,
duplication, deletion, statistics and CSV export.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from todopanel.domain.shared import Err
from todopanel.domain.task import (
    ALL_MEMBERS,
    Category,
    Priority,
    Status,
    TaskDraft,
    TaskEdit,
    TaskFilter,
    extensions_for,
)
from todopanel.infrastructure.export import DEFAULT_EXPORT_FILENAME, export_csv
from todopanel.interfaces.cli.common import (
    console,
    fail,
    open_workspace,
    print_info,
    print_success,
    report_save,
    resolve_member,
    resolve_task,
    short_id,
    unwrap,
)
from todopanel.interfaces.cli.formatting import (
    build_task_table,
    format_stats,
    print_task_details,
)

app = typer.Typer(help="Task commands")

DATE_FORMATS = ["%Y-%m-%d"]


# =============================================================================
# Creating and Viewing
# =============================================================================


@app.command("add")
def add(
    title: str = typer.Argument("", help="Task title (named after the first asset if omitted)"),
    description: str = typer.Option("", "--description", "-d", help="Task description"),
    due: Optional[datetime] = typer.Option(
        None, "--due", formats=DATE_FORMATS, help="Due date (YYYY-MM-DD)"
    ),
    priority: Optional[Priority] = typer.Option(
        None, "--priority", "-p", case_sensitive=False, help="Priority"
    ),
    category: Optional[Category] = typer.Option(
        None, "--category", "-c", case_sensitive=False, help="Category"
    ),
    status: Optional[Status] = typer.Option(
        None, "--status", "-s", case_sensitive=False, help="Initial status"
    ),
    estimate: Optional[int] = typer.Option(
        None, "--estimate", "-e", min=0, help="Estimated hours"
    ),
    assets: Optional[list[str]] = typer.Option(
        None, "--asset", "-a", help="Link an asset (repeatable); infers the category"
    ),
) -> None:
    """Add a new task. Unset fields come from the settings defaults."""
    workspace = open_workspace()
    draft = TaskDraft(
        title=title,
        description=description,
        due_date=due,
        priority=priority,
        category=category,
        status=status,
        estimated_hours=estimate,
    )
    if assets:
        task = unwrap(workspace.add_task_from_assets(assets, draft))
    else:
        task = unwrap(workspace.add_task(draft))
    print_success(f"Added task {short_id(task.id)}: {task.title} (due {task.due_date})")
    report_save(workspace)


@app.command("list")
def list_tasks(
    search: str = typer.Option("", "--search", "-q", help="Text in title or description"),
    priority: Priority = typer.Option(
        Priority.ALL, "--priority", "-p", case_sensitive=False, help="Filter by priority"
    ),
    category: Category = typer.Option(
        Category.ALL, "--category", "-c", case_sensitive=False, help="Filter by category"
    ),
    status: Status = typer.Option(
        Status.ALL, "--status", "-s", case_sensitive=False, help="Filter by status"
    ),
    hide_completed: bool = typer.Option(
        False, "--hide-completed", help="Hide completed tasks"
    ),
    member: Optional[str] = typer.Option(
        None, "--member", "-m", help="Only tasks assigned to this member (name or id)"
    ),
    asset_type: Optional[str] = typer.Option(
        None,
        "--asset-type",
        "-t",
        help="Only tasks linking this asset type (scripts, scenes, prefabs, textures or an extension)",
    ),
) -> None:
    """List tasks, most urgent first, followed by statistics."""
    workspace = open_workspace()
    member_id = resolve_member(workspace, member, active_only=True).id if member else ALL_MEMBERS
    extensions = extensions_for(asset_type) if asset_type is not None else ()
    if asset_type is not None and not extensions:
        fail(f"Unknown asset type: {asset_type!r}")
    criteria = TaskFilter(
        text_search=search,
        priority=priority,
        category=category,
        status=status,
        show_completed=not hide_completed,
        assigned_member_id=member_id,
        asset_extensions=list(extensions),
    )

    tasks = workspace.query(criteria)
    if not tasks:
        print_info("No tasks match.")
    else:
        console.print(
            build_task_table(tasks, workspace.board, workspace.today(), workspace.settings)
        )
    typer.echo(format_stats(workspace.stats(criteria)))


@app.command("show")
def show(task_ref: str = typer.Argument(..., help="Task id or id prefix")) -> None:
    """Show every detail of a task."""
    workspace = open_workspace()
    task = resolve_task(workspace, task_ref)
    print_task_details(task, workspace.board, workspace.today(), workspace.settings)


@app.command("stats")
def stats() -> None:
    """Show task counts for the whole board."""
    workspace = open_workspace()
    typer.echo(format_stats(workspace.stats()))


# =============================================================================
# Editing
# =============================================================================


@app.command("edit")
def edit(
    task_ref: str = typer.Argument(..., help="Task id or id prefix"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title"),
    description: Optional[str] = typer.Option(
        None, "--description", "-d", help="New description"
    ),
    due: Optional[datetime] = typer.Option(
        None, "--due", formats=DATE_FORMATS, help="New due date (YYYY-MM-DD)"
    ),
    priority: Optional[Priority] = typer.Option(
        None, "--priority", "-p", case_sensitive=False, help="New priority"
    ),
    category: Optional[Category] = typer.Option(
        None, "--category", "-c", case_sensitive=False, help="New category"
    ),
    status: Optional[Status] = typer.Option(
        None, "--status", "-s", case_sensitive=False, help="New status"
    ),
    estimate: Optional[int] = typer.Option(
        None, "--estimate", "-e", min=0, help="Estimated hours"
    ),
    actual: Optional[int] = typer.Option(None, "--actual", "-a", min=0, help="Actual hours"),
) -> None:
    """Change fields of a task. Fields not given keep their value."""
    workspace = open_workspace()
    task = resolve_task(workspace, task_ref)

    changes = {
        "title": title,
        "description": description,
        "due_date": due,
        "priority": priority,
        "category": category,
        "status": status,
        "estimated_hours": estimate,
        "actual_hours": actual,
    }
    changes = {k: v for k, v in changes.items() if v is not None}
    if not changes:
        print_info("Nothing to change.")
        return

    edit_data = TaskEdit.from_task(task).model_dump()
    edit_data.update(changes)
    updated = unwrap(workspace.edit_task(task.id, TaskEdit.model_validate(edit_data)))
    print_success(f"Updated task {short_id(updated.id)}: {updated.title}")
    report_save(workspace)


@app.command("status")
def set_status(
    task_ref: str = typer.Argument(..., help="Task id or id prefix"),
    status: Status = typer.Argument(..., case_sensitive=False, help="New status"),
) -> None:
    """Set the status of a task."""
    workspace = open_workspace()
    task = resolve_task(workspace, task_ref)
    unwrap(workspace.set_status(task.id, status))
    print_success(f"{task.title}: {status.value}")
    report_save(workspace)


@app.command("start")
def start(task_ref: str = typer.Argument(..., help="Task id or id prefix")) -> None:
    """Mark a task as in progress."""
    workspace = open_workspace()
    task = resolve_task(workspace, task_ref)
    unwrap(workspace.start_task(task.id))
    print_success(f"Started: {task.title}")
    report_save(workspace)


@app.command("complete")
def complete(task_ref: str = typer.Argument(..., help="Task id or id prefix")) -> None:
    """Mark a task as completed."""
    workspace = open_workspace()
    task = resolve_task(workspace, task_ref)
    unwrap(workspace.complete_task(task.id))
    print_success(f"Completed: {task.title}")
    report_save(workspace)


@app.command("duplicate")
def duplicate(task_ref: str = typer.Argument(..., help="Task id or id prefix")) -> None:
    """Copy a task, restarting it a week from today."""
    workspace = open_workspace()
    task = resolve_task(workspace, task_ref)
    copy = unwrap(workspace.duplicate_task(task.id))
    print_success(f"Created {short_id(copy.id)}: {copy.title} (due {copy.due_date})")
    report_save(workspace)


@app.command("delete")
def delete(
    task_ref: str = typer.Argument(..., help="Task id or id prefix"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a task."""
    workspace = open_workspace()
    task = resolve_task(workspace, task_ref)

    confirm = workspace.settings is None or workspace.settings.show_confirmation_dialogs
    if confirm and not yes:
        if not typer.confirm(f"Delete task '{task.title}'?"):
            raise typer.Abort()

    unwrap(workspace.delete_task(task.id))
    print_success(f"Deleted: {task.title}")
    report_save(workspace)


# =============================================================================
# Assignment
# =============================================================================


@app.command("assign")
def assign(
    task_ref: str = typer.Argument(..., help="Task id or id prefix"),
    member_ref: str = typer.Argument(..., help="Member name, id or id prefix"),
) -> None:
    """Assign a team member to a task."""
    workspace = open_workspace()
    task = resolve_task(workspace, task_ref)
    member = resolve_member(workspace, member_ref)
    unwrap(workspace.assign_member(task.id, member.id))
    print_success(f"Assigned {member.name} to '{task.title}'")
    report_save(workspace)


@app.command("unassign")
def unassign(
    task_ref: str = typer.Argument(..., help="Task id or id prefix"),
    member_ref: str = typer.Argument(..., help="Member name, id or id prefix"),
) -> None:
    """Remove a team member from a task."""
    workspace = open_workspace()
    task = resolve_task(workspace, task_ref)
    member = resolve_member(workspace, member_ref)
    unwrap(workspace.unassign_member(task.id, member.id))
    print_success(f"Unassigned {member.name} from '{task.title}'")
    report_save(workspace)


# =============================================================================
# Export
# =============================================================================


@app.command("export")
def export(
    path: Optional[Path] = typer.Argument(
        None, help="Output file (default: <default export path>/todo_export.csv)"
    ),
) -> None:
    """Export all tasks to a CSV file."""
    workspace = open_workspace()
    if path is None:
        folder = workspace.settings.default_export_path if workspace.settings else ""
        path = Path(folder or "Exports/") / DEFAULT_EXPORT_FILENAME

    result = export_csv(workspace.tasks, path)
    if isinstance(result, Err):
        fail(result.error)
    print_success(f"Exported {len(workspace.tasks)} tasks to {result.value}")
