"""Application service layer for todopanel.

Services mutate a board in place and return Results; they never touch
storage. ``TodoWorkspace`` ties the services to a repository and saves
after every successful mutation.

Services:
    task_service - Task lifecycle, sub-tasks, assignment and asset links
    member_service - Team roster management
    workspace - Session object owning the board

Example usage:
    >>> from todopanel.application import TodoWorkspace
    >>> from todopanel.domain.shared import is_ok
    >>>
    >>> result = workspace.duplicate_task(task_id)
    >>> if is_ok(result):
    ...     print(f"Created: {result.value.title}")
"""

from todopanel.application.member_service import (
    add_team_member,
    delete_team_member,
    find_member,
    set_member_active,
)
from todopanel.application.task_service import (
    add_asset_reference,
    add_subtask,
    add_subtask_asset,
    add_task,
    add_task_from_assets,
    assign_member,
    assign_subtask_member,
    complete_task,
    delete_task,
    duplicate_task,
    edit_task,
    find_subtask,
    find_task,
    remove_asset_reference,
    remove_subtask,
    remove_subtask_asset,
    set_status,
    set_subtask_completion,
    start_task,
    unassign_member,
    unassign_subtask_member,
)
from todopanel.application.workspace import BoardStore, TodoWorkspace

__all__ = [
    # Task service
    "find_task",
    "find_subtask",
    "add_task",
    "add_task_from_assets",
    "edit_task",
    "delete_task",
    "duplicate_task",
    "set_status",
    "start_task",
    "complete_task",
    "add_subtask",
    "remove_subtask",
    "set_subtask_completion",
    "assign_subtask_member",
    "unassign_subtask_member",
    "add_subtask_asset",
    "remove_subtask_asset",
    "assign_member",
    "unassign_member",
    "add_asset_reference",
    "remove_asset_reference",
    # Member service
    "find_member",
    "add_team_member",
    "delete_team_member",
    "set_member_active",
    # Workspace
    "BoardStore",
    "TodoWorkspace",
]
