"""Asset reference CLI commands.

Asset ids are opaque strings (usually a project-relative path or a GUID).
With ``--subtask`` the link is made on a sub-task instead of the task.
"""

from typing import Optional

import typer

from todopanel.interfaces.cli.common import (
    open_workspace,
    print_info,
    print_success,
    report_save,
    resolve_subtask,
    resolve_task,
    unwrap,
)

app = typer.Typer(help="Asset reference commands")

SUBTASK_HELP = "Link to this sub-task (id, id prefix or position) instead of the task"


@app.command("add")
def add(
    task_ref: str = typer.Argument(..., help="Task id or id prefix"),
    asset_id: str = typer.Argument(..., help="Asset id"),
    subtask: Optional[str] = typer.Option(None, "--subtask", "-s", help=SUBTASK_HELP),
) -> None:
    """Link an asset. Linking an already linked asset changes nothing."""
    workspace = open_workspace()
    task = resolve_task(workspace, task_ref)
    if subtask is not None:
        sub_task = resolve_subtask(task, subtask)
        unwrap(workspace.add_subtask_asset(task.id, sub_task.id, asset_id))
        print_success(f"Linked {asset_id} to sub-task '{sub_task.title}'")
    else:
        unwrap(workspace.add_asset_reference(task.id, asset_id))
        print_success(f"Linked {asset_id} to '{task.title}'")
    report_save(workspace)


@app.command("remove")
def remove(
    task_ref: str = typer.Argument(..., help="Task id or id prefix"),
    asset_id: str = typer.Argument(..., help="Asset id"),
    subtask: Optional[str] = typer.Option(None, "--subtask", "-s", help=SUBTASK_HELP),
) -> None:
    """Unlink an asset."""
    workspace = open_workspace()
    task = resolve_task(workspace, task_ref)
    if subtask is not None:
        sub_task = resolve_subtask(task, subtask)
        unwrap(workspace.remove_subtask_asset(task.id, sub_task.id, asset_id))
        print_success(f"Unlinked {asset_id} from sub-task '{sub_task.title}'")
    else:
        unwrap(workspace.remove_asset_reference(task.id, asset_id))
        print_success(f"Unlinked {asset_id} from '{task.title}'")
    report_save(workspace)


@app.command("list")
def list_assets(task_ref: str = typer.Argument(..., help="Task id or id prefix")) -> None:
    """List the assets linked to a task and its sub-tasks."""
    workspace = open_workspace()
    task = resolve_task(workspace, task_ref)

    if not task.referenced_asset_guids and not any(st.asset_guids for st in task.sub_tasks):
        print_info(f"No assets linked to '{task.title}'.")
        return

    for asset_id in task.referenced_asset_guids:
        typer.echo(asset_id)
    for position, sub_task in enumerate(task.sub_tasks, start=1):
        for asset_id in sub_task.asset_guids:
            typer.echo(f"{asset_id}  (sub-task {position}: {sub_task.title})")
