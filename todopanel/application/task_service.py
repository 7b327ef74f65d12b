"""Task application service.

Mutation operations on the tasks of a board. Every function works on the
board it is given, changes it in place and reports the outcome as a
Result. An unknown task, sub-task or member id is always an ``Err`` that
leaves the board untouched; operations with set semantics (assigning an
already assigned member, adding a present asset) succeed without change.

No I/O happens here - persisting the board after a successful mutation is
the workspace's job.
"""

from datetime import date, timedelta

from pydantic import ValidationError

from todopanel.domain.board import Board
from todopanel.domain.settings import (
    FALLBACK_CATEGORY,
    FALLBACK_DUE_DAYS,
    FALLBACK_ESTIMATE_HOURS,
    FALLBACK_PRIORITY,
    FALLBACK_STATUS,
    TodoSettings,
)
from todopanel.domain.shared import Err, Ok, Result
from todopanel.domain.task import (
    MUTABLE_TASK_FIELDS,
    Status,
    SubTask,
    Task,
    TaskDraft,
    TaskEdit,
    asset_name,
    infer_category,
)

COPY_SUFFIX = " (Copy)"
DUPLICATE_DUE_OFFSET = timedelta(days=7)


# =============================================================================
# Lookup Helpers
# =============================================================================


def find_task(board: Board, task_id: str) -> Result[Task, str]:
    """Look up a task, reporting a missing id as an error."""
    task = board.get_task(task_id)
    if task is None:
        return Err(f"Task not found: {task_id}")
    return Ok(task)


def find_subtask(board: Board, task_id: str, subtask_id: str) -> Result[tuple[Task, SubTask], str]:
    """Look up a sub-task together with the task that owns it."""
    found = find_task(board, task_id)
    if isinstance(found, Err):
        return found
    task = found.value
    sub_task = task.get_subtask(subtask_id)
    if sub_task is None:
        return Err(f"Sub-task not found: {subtask_id} (task '{task.title}')")
    return Ok((task, sub_task))


def _find_assignable_member(board: Board, member_id: str) -> Result[str, str]:
    member = board.get_member(member_id)
    if member is None:
        return Err(f"Team member not found: {member_id}")
    if not member.is_active:
        return Err(f"Team member '{member.name}' is inactive and cannot be assigned")
    return Ok(member.id)


# =============================================================================
# Task Lifecycle
# =============================================================================


def add_task(
    board: Board,
    draft: TaskDraft | None = None,
    settings: TodoSettings | None = None,
    today: date | None = None,
) -> Result[Task, str]:
    """Create a task and append it to the board.

    The task gets a fresh id and ``created_date = today``. Fields left unset
    in the draft come from the settings snapshot, or from the built-in
    fallbacks when there is no snapshot. An empty title is accepted.

    Args:
        board: Board to add the task to.
        draft: Field values for the new task.
        settings: Optional settings snapshot supplying defaults.
        today: Creation day (defaults to the current date).

    Returns:
        Ok(Task) with the appended task.
    """
    draft = draft or TaskDraft()
    today = today or date.today()

    if settings is not None:
        priority = settings.default_priority
        category = settings.default_category
        status = settings.default_status
        estimate = settings.default_estimate_hours
        due_days = settings.default_due_days
    else:
        priority = FALLBACK_PRIORITY
        category = FALLBACK_CATEGORY
        status = FALLBACK_STATUS
        estimate = FALLBACK_ESTIMATE_HOURS
        due_days = FALLBACK_DUE_DAYS

    try:
        task = Task(
            title=draft.title,
            description=draft.description,
            due_date=draft.due_date or today + timedelta(days=due_days),
            created_date=today,
            priority=draft.priority or priority,
            category=draft.category or category,
            status=draft.status or status,
            estimated_hours=estimate if draft.estimated_hours is None else draft.estimated_hours,
            actual_hours=draft.actual_hours,
            sub_tasks=[st.model_copy(deep=True) for st in draft.sub_tasks],
            assigned_members=list(draft.assigned_members),
            referenced_asset_guids=list(draft.referenced_asset_guids),
        )
    except ValidationError as e:
        return Err(f"Invalid task: {e}")

    board.tasks.append(task)
    return Ok(task)


def add_task_from_assets(
    board: Board,
    asset_ids: list[str],
    draft: TaskDraft | None = None,
    settings: TodoSettings | None = None,
    today: date | None = None,
) -> Result[Task, str]:
    """Create a task that links the given assets.

    Without a title the task is named after the first asset, and without a
    description it lists every asset name. The category, when the draft
    leaves it unset, is inferred from the first asset's extension. Every
    asset must pass the settings' asset rules, otherwise nothing is created.
    """
    if not asset_ids:
        return Err("At least one asset is required")
    for asset_id in asset_ids:
        checked = _check_asset(asset_id, settings)
        if isinstance(checked, Err):
            return checked

    draft = draft or TaskDraft()
    names = [asset_name(a) for a in asset_ids]
    updates = {
        "referenced_asset_guids": list(dict.fromkeys([*draft.referenced_asset_guids, *asset_ids])),
    }
    if not draft.title:
        updates["title"] = f"Work on {names[0]}"
    if not draft.description:
        updates["description"] = f"Task created from selection: {', '.join(names)}"
    if draft.category is None:
        updates["category"] = infer_category(asset_ids)

    return add_task(board, draft.model_copy(update=updates), settings, today)


def edit_task(board: Board, task_id: str, edit: TaskEdit) -> Result[Task, str]:
    """Replace every mutable field of a task.

    ``id`` and ``created_date`` are preserved. The replacement is validated
    as a whole before any field is written, so an invalid edit changes
    nothing.

    Args:
        board: Board holding the task.
        task_id: Id of the task to edit.
        edit: New values for all mutable fields.

    Returns:
        Ok(Task) with the edited task, or Err(str) if the task is missing
        or the values are invalid.
    """
    found = find_task(board, task_id)
    if isinstance(found, Err):
        return found
    task = found.value

    try:
        candidate = Task.model_validate({**task.model_dump(), **edit.model_dump()})
    except ValidationError as e:
        return Err(f"Invalid edit for task '{task.title}': {e}")

    for field_name in MUTABLE_TASK_FIELDS:
        setattr(task, field_name, getattr(candidate, field_name))
    return Ok(task)


def set_status(board: Board, task_id: str, status: Status) -> Result[Task, str]:
    """Set a task's status. Any status may follow any other."""
    found = find_task(board, task_id)
    if isinstance(found, Err):
        return found
    edit = TaskEdit.from_task(found.value).model_copy(update={"status": status})
    return edit_task(board, task_id, edit)


def start_task(board: Board, task_id: str) -> Result[Task, str]:
    """Quick action: force a task to InProgress."""
    return set_status(board, task_id, Status.IN_PROGRESS)


def complete_task(board: Board, task_id: str) -> Result[Task, str]:
    """Quick action: force a task to Completed."""
    return set_status(board, task_id, Status.COMPLETED)


def delete_task(board: Board, task_id: str) -> Result[Task, str]:
    """Remove a task from the board.

    Deletion is unconditional; asking the user for confirmation is up to
    the caller.

    Returns:
        Ok(Task) with the removed task, or Err(str) if it doesn't exist.
    """
    found = find_task(board, task_id)
    if isinstance(found, Err):
        return found
    board.tasks.remove(found.value)
    return Ok(found.value)


def duplicate_task(board: Board, task_id: str, today: date | None = None) -> Result[Task, str]:
    """Append a copy of a task as fresh, not-yet-started work.

    The copy gets a new id, the title suffixed with " (Copy)", today's
    creation date, a due date one week after the original's and status
    NotStarted. Sub-tasks are cloned with new ids and unchecked; every
    other field is copied as is.

    Args:
        board: Board holding the task.
        task_id: Id of the task to duplicate.
        today: Creation day of the copy (defaults to the current date).

    Returns:
        Ok(Task) with the new task, or Err(str) if the original is missing.
    """
    found = find_task(board, task_id)
    if isinstance(found, Err):
        return found
    original = found.value

    duplicate = Task(
        title=f"{original.title}{COPY_SUFFIX}",
        description=original.description,
        due_date=original.due_date + DUPLICATE_DUE_OFFSET,
        created_date=today or date.today(),
        priority=original.priority,
        category=original.category,
        status=Status.NOT_STARTED,
        estimated_hours=original.estimated_hours,
        actual_hours=original.actual_hours,
        sub_tasks=[
            SubTask(
                title=st.title,
                is_completed=False,
                assigned_to=list(st.assigned_to),
                asset_guids=list(st.asset_guids),
            )
            for st in original.sub_tasks
        ],
        assigned_members=list(original.assigned_members),
        referenced_asset_guids=list(original.referenced_asset_guids),
    )

    board.tasks.append(duplicate)
    return Ok(duplicate)


# =============================================================================
# Sub-tasks
# =============================================================================


def add_subtask(board: Board, task_id: str, title: str) -> Result[SubTask, str]:
    """Append an unchecked sub-task to a task."""
    found = find_task(board, task_id)
    if isinstance(found, Err):
        return found
    sub_task = SubTask(title=title)
    found.value.sub_tasks.append(sub_task)
    return Ok(sub_task)


def remove_subtask(board: Board, task_id: str, subtask_id: str) -> Result[SubTask, str]:
    """Remove a sub-task by its id."""
    found = find_subtask(board, task_id, subtask_id)
    if isinstance(found, Err):
        return found
    task, sub_task = found.value
    task.sub_tasks = [st for st in task.sub_tasks if st.id != sub_task.id]
    return Ok(sub_task)


def set_subtask_completion(
    board: Board,
    task_id: str,
    subtask_id: str,
    completed: bool,
) -> Result[SubTask, str]:
    """Check or uncheck a sub-task."""
    found = find_subtask(board, task_id, subtask_id)
    if isinstance(found, Err):
        return found
    _, sub_task = found.value
    sub_task.is_completed = completed
    return Ok(sub_task)


def assign_subtask_member(
    board: Board,
    task_id: str,
    subtask_id: str,
    member_id: str,
) -> Result[SubTask, str]:
    """Assign an active member to a sub-task (no-op if already assigned)."""
    found = find_subtask(board, task_id, subtask_id)
    if isinstance(found, Err):
        return found
    member = _find_assignable_member(board, member_id)
    if isinstance(member, Err):
        return member
    _, sub_task = found.value
    if member.value not in sub_task.assigned_to:
        sub_task.assigned_to = [*sub_task.assigned_to, member.value]
    return Ok(sub_task)


def unassign_subtask_member(
    board: Board,
    task_id: str,
    subtask_id: str,
    member_id: str,
) -> Result[SubTask, str]:
    """Remove a member from a sub-task (no-op if not assigned)."""
    found = find_subtask(board, task_id, subtask_id)
    if isinstance(found, Err):
        return found
    _, sub_task = found.value
    sub_task.assigned_to = [m for m in sub_task.assigned_to if m != member_id]
    return Ok(sub_task)


def add_subtask_asset(
    board: Board,
    task_id: str,
    subtask_id: str,
    asset_id: str,
    settings: TodoSettings | None = None,
) -> Result[SubTask, str]:
    """Link an asset to a sub-task (no-op if already linked)."""
    found = find_subtask(board, task_id, subtask_id)
    if isinstance(found, Err):
        return found
    allowed = _check_asset(asset_id, settings)
    if isinstance(allowed, Err):
        return allowed
    _, sub_task = found.value
    if asset_id not in sub_task.asset_guids:
        sub_task.asset_guids = [*sub_task.asset_guids, asset_id]
    return Ok(sub_task)


def remove_subtask_asset(
    board: Board,
    task_id: str,
    subtask_id: str,
    asset_id: str,
) -> Result[SubTask, str]:
    """Unlink an asset from a sub-task (no-op if not linked)."""
    found = find_subtask(board, task_id, subtask_id)
    if isinstance(found, Err):
        return found
    _, sub_task = found.value
    sub_task.asset_guids = [a for a in sub_task.asset_guids if a != asset_id]
    return Ok(sub_task)


# =============================================================================
# Member Assignment
# =============================================================================


def assign_member(board: Board, task_id: str, member_id: str) -> Result[Task, str]:
    """Assign an active team member to a task.

    Assigning a member who is already assigned is a no-op.

    Returns:
        Ok(Task), or Err(str) if the task or member is missing, or the
        member is inactive.
    """
    found = find_task(board, task_id)
    if isinstance(found, Err):
        return found
    member = _find_assignable_member(board, member_id)
    if isinstance(member, Err):
        return member
    task = found.value
    if member.value not in task.assigned_members:
        task.assigned_members = [*task.assigned_members, member.value]
    return Ok(task)


def unassign_member(board: Board, task_id: str, member_id: str) -> Result[Task, str]:
    """Remove a member from a task (no-op if not assigned)."""
    found = find_task(board, task_id)
    if isinstance(found, Err):
        return found
    task = found.value
    task.assigned_members = [m for m in task.assigned_members if m != member_id]
    return Ok(task)


# =============================================================================
# Asset References
# =============================================================================


def _check_asset(asset_id: str, settings: TodoSettings | None) -> Result[str, str]:
    if not asset_id:
        return Err("Asset id cannot be empty")
    if settings is not None and not settings.is_asset_allowed(asset_id):
        if not settings.enable_asset_linking:
            return Err("Asset linking is disabled in settings")
        return Err(f"Asset type is excluded in settings: {asset_id}")
    return Ok(asset_id)


def add_asset_reference(
    board: Board,
    task_id: str,
    asset_id: str,
    settings: TodoSettings | None = None,
) -> Result[Task, str]:
    """Link an asset to a task.

    References have set semantics: adding one that is already present
    changes nothing and keeps the existing order.

    Args:
        board: Board holding the task.
        task_id: Id of the task.
        asset_id: Opaque asset identifier.
        settings: Optional settings snapshot; may refuse the asset type or
            disable asset linking altogether.

    Returns:
        Ok(Task), or Err(str) if the task is missing or the asset refused.
    """
    found = find_task(board, task_id)
    if isinstance(found, Err):
        return found
    allowed = _check_asset(asset_id, settings)
    if isinstance(allowed, Err):
        return allowed
    task = found.value
    if asset_id not in task.referenced_asset_guids:
        task.referenced_asset_guids = [*task.referenced_asset_guids, asset_id]
    return Ok(task)


def remove_asset_reference(board: Board, task_id: str, asset_id: str) -> Result[Task, str]:
    """Unlink an asset from a task (no-op if not linked)."""
    found = find_task(board, task_id)
    if isinstance(found, Err):
        return found
    task = found.value
    task.referenced_asset_guids = [a for a in task.referenced_asset_guids if a != asset_id]
    return Ok(task)
