"""Shared utilities for todopanel CLI commands.

This module provides common utilities used across CLI commands:
- Workspace construction from the user's config directory
- Resolving task, sub-task and member references (id or unique id prefix)
- Formatted output helpers (error, success, info, warning)
"""

from collections.abc import Sequence
from typing import NoReturn, Protocol, TypeVar

import typer
from rich.console import Console

from todopanel.application import TodoWorkspace
from todopanel.config import get_config_dir, load_settings
from todopanel.domain.member import TeamMember
from todopanel.domain.shared import Err, Result
from todopanel.domain.task import SubTask, Task
from todopanel.infrastructure.storage import PREFS_FILENAME, BoardRepository, PreferenceStore

console = Console()

SHORT_ID_LENGTH = 8


class _HasId(Protocol):
    id: str


ItemT = TypeVar("ItemT", bound=_HasId)
T = TypeVar("T")


# =============================================================================
# Workspace
# =============================================================================


def open_workspace() -> TodoWorkspace:
    """Open the workspace stored in the user's config directory."""
    store = PreferenceStore(get_config_dir() / PREFS_FILENAME)
    return TodoWorkspace(BoardRepository(store), settings=load_settings())


def short_id(item_id: str) -> str:
    return item_id[:SHORT_ID_LENGTH]


# =============================================================================
# Output Helpers
# =============================================================================


def print_error(msg: str) -> None:
    """Print a formatted error message.

    Args:
        msg: Error message to display
    """
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message.

    Args:
        msg: Success message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    """Print a formatted info message."""
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_warning(msg: str) -> None:
    """Print a formatted warning message."""
    typer.echo(typer.style(f"Warning: {msg}", fg=typer.colors.YELLOW), err=True)


def print_separator(char: str = "=", width: int = 60) -> None:
    typer.echo(char * width)


def fail(msg: str) -> NoReturn:
    """Print an error and exit with status 1."""
    print_error(msg)
    raise typer.Exit(1)


def unwrap(result: Result[T, str]) -> T:
    """Return the value of an Ok result, or print the error and exit."""
    if isinstance(result, Err):
        fail(result.error)
    return result.value


def report_save(workspace: TodoWorkspace) -> None:
    """Warn when the last change could not be written to disk."""
    if workspace.last_save_error:
        print_warning(f"Change not saved: {workspace.last_save_error}")


# =============================================================================
# Reference Resolution
# =============================================================================


def resolve_ref(items: Sequence[ItemT], ref: str, label: str) -> ItemT:
    """Find an item by full id or unique id prefix.

    Raises:
        typer.Exit: If nothing matches or the prefix is ambiguous.
    """
    for item in items:
        if item.id == ref:
            return item

    matches = [item for item in items if item.id.startswith(ref)] if ref else []
    if len(matches) == 1:
        return matches[0]
    if not matches:
        fail(f"{label} not found: {ref}")
    fail(f"{label} reference '{ref}' is ambiguous ({len(matches)} matches)")


def resolve_task(workspace: TodoWorkspace, ref: str) -> Task:
    return resolve_ref(workspace.tasks, ref, "Task")


def resolve_subtask(task: Task, ref: str) -> SubTask:
    """Find a sub-task by id, id prefix, or 1-based position in the list.

    Positions are translated to the sub-task's id here, before anything
    is changed.
    """
    if ref.isdigit() and len(ref) <= 3:
        position = int(ref)
        if 1 <= position <= len(task.sub_tasks):
            return task.sub_tasks[position - 1]
    return resolve_ref(task.sub_tasks, ref, "Sub-task")


def resolve_member(workspace: TodoWorkspace, ref: str, active_only: bool = False) -> TeamMember:
    """Find a member by id, id prefix, or exact (case-insensitive) name.

    With ``active_only``, inactive members are not candidates (as in the
    member filter of the task list).
    """
    members = workspace.board.active_members() if active_only else workspace.members
    by_name = [m for m in members if m.name.casefold() == ref.casefold()]
    if len(by_name) == 1:
        return by_name[0]
    return resolve_ref(members, ref, "Active team member" if active_only else "Team member")
