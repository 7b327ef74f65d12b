"""CLI command groups for todopanel.

This package contains individual command groups that are registered
with the main Typer app. Each module provides a set of related commands.

Command groups:
- task: Task lifecycle, assignment, statistics and export
- subtask: Sub-task checklist management
- member: Team roster management
- asset: Asset reference links
- settings: Settings file management

Each command group is a Typer app that gets registered
with the main app using app.add_typer().
"""

from todopanel.interfaces.cli.commands import asset, member, settings, subtask, task

__all__ = ["task", "subtask", "member", "asset", "settings"]
