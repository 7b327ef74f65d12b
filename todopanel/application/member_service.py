"""Team member application service.

Adds, removes and (de)activates team members on a board. Like the task
service, functions mutate the board in place and return Results.
"""

import random

from todopanel.domain.board import Board
from todopanel.domain.member import DEFAULT_ROLE, TeamMember, create_member
from todopanel.domain.shared import Err, Ok, Result


def find_member(board: Board, member_id: str) -> Result[TeamMember, str]:
    """Look up a team member, reporting a missing id as an error."""
    member = board.get_member(member_id)
    if member is None:
        return Err(f"Team member not found: {member_id}")
    return Ok(member)


def add_team_member(
    board: Board,
    name: str,
    role: str = DEFAULT_ROLE,
    rng: random.Random | None = None,
) -> Result[TeamMember, str]:
    """Create a team member and append it to the roster.

    Args:
        board: Board to add the member to.
        name: Display name; initials are derived from it.
        role: Free-text role.
        rng: Optional random generator for the palette colour.

    Returns:
        Ok(TeamMember) with the new member.
    """
    member = create_member(name, role, rng)
    board.members.append(member)
    return Ok(member)


def delete_team_member(board: Board, member_id: str) -> Result[TeamMember, str]:
    """Remove a team member and every assignment that points at it.

    The cascade sweeps every task and every one of their
    sub-tasks, so that no task is left holding the deleted id.

    Returns:
        Ok(TeamMember) with the removed member, or Err(str) if unknown.
    """
    found = find_member(board, member_id)
    if isinstance(found, Err):
        return found

    board.members.remove(found.value)
    for task in board.tasks:
        if member_id in task.assigned_members:
            task.assigned_members = [m for m in task.assigned_members if m != member_id]
        for sub_task in task.sub_tasks:
            if member_id in sub_task.assigned_to:
                sub_task.assigned_to = [m for m in sub_task.assigned_to if m != member_id]
    return Ok(found.value)


def set_member_active(board: Board, member_id: str, active: bool) -> Result[TeamMember, str]:
    """Activate or deactivate a member.

    Deactivation only hides the member from new assignments; existing task
    and sub-task assignments are kept.
    """
    found = find_member(board, member_id)
    if isinstance(found, Err):
        return found
    found.value.is_active = active
    return Ok(found.value)
