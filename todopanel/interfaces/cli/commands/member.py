"""Team member CLI commands."""

import typer

from todopanel.domain.member import DEFAULT_ROLE
from todopanel.interfaces.cli.common import (
    console,
    open_workspace,
    print_info,
    print_success,
    report_save,
    resolve_member,
    short_id,
    unwrap,
)
from todopanel.interfaces.cli.formatting import build_member_table

app = typer.Typer(help="Team member commands")


@app.command("add")
def add(
    name: str = typer.Argument(..., help="Member name"),
    role: str = typer.Option(DEFAULT_ROLE, "--role", "-r", help="Member role"),
) -> None:
    """Add a team member."""
    workspace = open_workspace()
    member = unwrap(workspace.add_team_member(name, role))
    print_success(f"Added {member.name} ({member.initials}) as {member.role} [{short_id(member.id)}]")
    report_save(workspace)


@app.command("list")
def list_members(
    all_members: bool = typer.Option(False, "--all", "-a", help="Include inactive members"),
) -> None:
    """List team members."""
    workspace = open_workspace()
    members = workspace.members if all_members else workspace.board.active_members()
    if not members:
        print_info("No team members.")
        return
    console.print(build_member_table(members, workspace.board))


@app.command("remove")
def remove(
    member_ref: str = typer.Argument(..., help="Member name, id or id prefix"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Remove a team member and all of their assignments."""
    workspace = open_workspace()
    member = resolve_member(workspace, member_ref)

    confirm = workspace.settings is None or workspace.settings.show_confirmation_dialogs
    if confirm and not yes:
        if not typer.confirm(f"Remove {member.name} from the team?"):
            raise typer.Abort()

    unwrap(workspace.delete_team_member(member.id))
    print_success(f"Removed {member.name}")
    report_save(workspace)


@app.command("deactivate")
def deactivate(member_ref: str = typer.Argument(..., help="Member name, id or id prefix")) -> None:
    """Hide a member from new assignments, keeping existing ones."""
    workspace = open_workspace()
    member = resolve_member(workspace, member_ref)
    unwrap(workspace.set_member_active(member.id, False))
    print_success(f"Deactivated {member.name}")
    report_save(workspace)


@app.command("activate")
def activate(member_ref: str = typer.Argument(..., help="Member name, id or id prefix")) -> None:
    """Make a member available for assignment again."""
    workspace = open_workspace()
    member = resolve_member(workspace, member_ref)
    unwrap(workspace.set_member_active(member.id, True))
    print_success(f"Activated {member.name}")
    report_save(workspace)
