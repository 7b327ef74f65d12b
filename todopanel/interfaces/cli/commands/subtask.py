"""Sub-task CLI commands.

Sub-tasks are addressed as ``TASK SUBTASK`` where SUBTASK is a sub-task id,
an id prefix, or its position in the task's checklist (1-based).
"""

import typer

from todopanel.interfaces.cli.common import (
    open_workspace,
    print_success,
    report_save,
    resolve_member,
    resolve_subtask,
    resolve_task,
    short_id,
    unwrap,
)

app = typer.Typer(help="Sub-task commands")


@app.command("add")
def add(
    task_ref: str = typer.Argument(..., help="Task id or id prefix"),
    title: str = typer.Argument(..., help="Sub-task title"),
) -> None:
    """Add a sub-task to the end of a task's checklist."""
    workspace = open_workspace()
    task = resolve_task(workspace, task_ref)
    sub_task = unwrap(workspace.add_subtask(task.id, title))
    print_success(f"Added sub-task {short_id(sub_task.id)} to '{task.title}'")
    report_save(workspace)


@app.command("remove")
def remove(
    task_ref: str = typer.Argument(..., help="Task id or id prefix"),
    subtask_ref: str = typer.Argument(..., help="Sub-task id, id prefix or position"),
) -> None:
    """Remove a sub-task."""
    workspace = open_workspace()
    task = resolve_task(workspace, task_ref)
    sub_task = resolve_subtask(task, subtask_ref)
    unwrap(workspace.remove_subtask(task.id, sub_task.id))
    print_success(f"Removed sub-task: {sub_task.title}")
    report_save(workspace)


def _set_completion(task_ref: str, subtask_ref: str, completed: bool) -> None:
    workspace = open_workspace()
    task = resolve_task(workspace, task_ref)
    sub_task = resolve_subtask(task, subtask_ref)
    unwrap(workspace.set_subtask_completion(task.id, sub_task.id, completed))
    mark = "[x]" if completed else "[ ]"
    print_success(f"{mark} {sub_task.title}")
    report_save(workspace)


@app.command("done")
def done(
    task_ref: str = typer.Argument(..., help="Task id or id prefix"),
    subtask_ref: str = typer.Argument(..., help="Sub-task id, id prefix or position"),
) -> None:
    """Check off a sub-task."""
    _set_completion(task_ref, subtask_ref, True)


@app.command("undo")
def undo(
    task_ref: str = typer.Argument(..., help="Task id or id prefix"),
    subtask_ref: str = typer.Argument(..., help="Sub-task id, id prefix or position"),
) -> None:
    """Uncheck a sub-task."""
    _set_completion(task_ref, subtask_ref, False)


@app.command("assign")
def assign(
    task_ref: str = typer.Argument(..., help="Task id or id prefix"),
    subtask_ref: str = typer.Argument(..., help="Sub-task id, id prefix or position"),
    member_ref: str = typer.Argument(..., help="Member name, id or id prefix"),
) -> None:
    """Assign a team member to a sub-task."""
    workspace = open_workspace()
    task = resolve_task(workspace, task_ref)
    sub_task = resolve_subtask(task, subtask_ref)
    member = resolve_member(workspace, member_ref)
    unwrap(workspace.assign_subtask_member(task.id, sub_task.id, member.id))
    print_success(f"Assigned {member.name} to sub-task '{sub_task.title}'")
    report_save(workspace)


@app.command("unassign")
def unassign(
    task_ref: str = typer.Argument(..., help="Task id or id prefix"),
    subtask_ref: str = typer.Argument(..., help="Sub-task id, id prefix or position"),
    member_ref: str = typer.Argument(..., help="Member name, id or id prefix"),
) -> None:
    """Remove a team member from a sub-task."""
    workspace = open_workspace()
    task = resolve_task(workspace, task_ref)
    sub_task = resolve_subtask(task, subtask_ref)
    member = resolve_member(workspace, member_ref)
    unwrap(workspace.unassign_subtask_member(task.id, sub_task.id, member.id))
    print_success(f"Unassigned {member.name} from sub-task '{sub_task.title}'")
    report_save(workspace)
