"""CLI interface for todopanel using Typer.

This module provides the command-line interface for todopanel,
a team task board with sub-tasks, assignments and asset links.

Usage:
    todopanel add "Fix bug" -p High      # Add a task
    todopanel list                       # Show the board
    todopanel complete 3f2a              # Complete a task by id prefix
    todopanel member add "Ada Lovelace"  # Add a team member

The CLI is structured as:
- app: Main Typer application
- commands/: Individual command groups (task, subtask, member, etc.)
- common.py: Shared utilities for CLI commands
- formatting.py: Tables and detail views
- main.py: Entry point that runs the app
"""

from typing import Optional

import typer

from todopanel import __version__
from todopanel.interfaces.cli.commands import asset, member, settings, subtask, task
from todopanel.logging_setup import setup_logging

# Create the main Typer application
app = typer.Typer(
    name="todopanel",
    help="Team task board for the command line",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"todopanel version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log every change to stderr"),
) -> None:
    """todopanel - Tasks, sub-tasks and team assignments.

    Data is kept in ~/.todopanel (or $TODOPANEL_HOME).
    """
    setup_logging(verbose)


# =============================================================================
# Register Command Groups
# =============================================================================

app.add_typer(task.app, name="task")
app.add_typer(subtask.app, name="subtask")
app.add_typer(member.app, name="member")
app.add_typer(asset.app, name="asset")
app.add_typer(settings.app, name="settings")


# =============================================================================
# Top-Level Shortcuts for Task Commands
# =============================================================================

app.command("add")(task.add)
app.command("list")(task.list_tasks)
app.command("show")(task.show)
app.command("edit")(task.edit)
app.command("delete")(task.delete)
app.command("duplicate")(task.duplicate)
app.command("start")(task.start)
app.command("complete")(task.complete)
app.command("status")(task.set_status)
app.command("assign")(task.assign)
app.command("unassign")(task.unassign)
app.command("stats")(task.stats)
app.command("export")(task.export)
