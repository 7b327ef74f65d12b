"""Pure task query functions.

All functions in this module are pure - no I/O, no side effects.
They take data in, return data out.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from datetime import date
from typing import TYPE_CHECKING

from .assets import asset_extension
from .models import ALL_MEMBERS, Category, Priority, Status, Task, TaskFilter, TaskStats

if TYPE_CHECKING:
    from todopanel.domain.settings import TodoSettings

TaskPredicate = Callable[[Task], bool]

# Warning window used when no settings snapshot exists
FALLBACK_WARNING_DAYS = 1


# =============================================================================
# Predicates
# =============================================================================


def matches_text(text: str) -> TaskPredicate:
    """Case-insensitive substring match on title or description."""
    needle = text.casefold()

    def predicate(task: Task) -> bool:
        return needle in task.title.casefold() or needle in task.description.casefold()

    return predicate


def has_priority(priority: Priority) -> TaskPredicate:
    return lambda task: task.priority == priority


def has_category(category: Category) -> TaskPredicate:
    return lambda task: task.category == category


def has_status(status: Status) -> TaskPredicate:
    return lambda task: task.status == status


def is_assigned_to(member_id: str) -> TaskPredicate:
    return lambda task: member_id in task.assigned_members


def is_not_completed(task: Task) -> bool:
    return task.status != Status.COMPLETED


def references_asset_type(extensions: Sequence[str]) -> TaskPredicate:
    """Task links at least one asset whose extension is in ``extensions``."""
    wanted = frozenset(extensions)
    return lambda task: any(asset_extension(a) in wanted for a in task.referenced_asset_guids)


def build_predicates(criteria: TaskFilter) -> list[TaskPredicate]:
    """Translate filter criteria into the list of predicates to apply.

    Criteria left at their wildcard value contribute no predicate.
    """
    predicates: list[TaskPredicate] = []

    if not criteria.show_completed:
        predicates.append(is_not_completed)

    if criteria.text_search:
        predicates.append(matches_text(criteria.text_search))

    if criteria.priority != Priority.ALL:
        predicates.append(has_priority(criteria.priority))

    if criteria.category != Category.ALL:
        predicates.append(has_category(criteria.category))

    if criteria.status != Status.ALL:
        predicates.append(has_status(criteria.status))

    if criteria.assigned_member_id != ALL_MEMBERS:
        predicates.append(is_assigned_to(criteria.assigned_member_id))

    if criteria.asset_extensions:
        predicates.append(references_asset_type(criteria.asset_extensions))

    return predicates


# =============================================================================
# Filtered View
# =============================================================================


def sort_key(task: Task) -> tuple[int, date]:
    """Priority descending, then earliest due date first."""
    return (-task.priority.rank, task.due_date)


def filter_tasks(tasks: Iterable[Task], criteria: TaskFilter | None = None) -> list[Task]:
    """Compute the filtered, ordered view of the task list.

    Args:
        tasks: The full task collection, in board order.
        criteria: Filter criteria; None matches every task.

    Returns:
        New list of matching tasks ordered by priority (Critical first),
        then due date (earliest first). Ties keep board order.
    """
    predicates = build_predicates(criteria or TaskFilter())
    matching = [task for task in tasks if all(p(task) for p in predicates)]
    return sorted(matching, key=sort_key)


# =============================================================================
# Due Dates and Statistics
# =============================================================================


def is_overdue(task: Task, today: date) -> bool:
    """A task is overdue once its due day has passed and it isn't completed."""
    return task.due_date < today and task.status != Status.COMPLETED


def is_due_soon(task: Task, today: date, settings: TodoSettings | None = None) -> bool:
    """Check whether a task falls inside the due-date warning window.

    The window is ``0 <= days until due <= due_date_warning_days``. Warnings
    can be switched off in settings; completed tasks never warn.
    """
    if task.status == Status.COMPLETED:
        return False
    warning_days = FALLBACK_WARNING_DAYS
    if settings is not None:
        if not settings.enable_due_date_warnings:
            return False
        warning_days = settings.due_date_warning_days
    days_left = (task.due_date - today).days
    return 0 <= days_left <= warning_days


def subtask_progress(task: Task) -> tuple[int, int]:
    """Return (completed, total) sub-task counts."""
    completed = sum(1 for sub_task in task.sub_tasks if sub_task.is_completed)
    return completed, len(task.sub_tasks)


def compute_stats(tasks: Sequence[Task], today: date) -> TaskStats:
    """Count tasks by the states shown in the statistics bar.

    Args:
        tasks: Tasks to summarise (usually the filtered view).
        today: Reference day for overdue detection.

    Returns:
        TaskStats with total, completed, in-progress and overdue counts.
    """
    return TaskStats(
        total=len(tasks),
        completed=sum(1 for t in tasks if t.status == Status.COMPLETED),
        in_progress=sum(1 for t in tasks if t.status == Status.IN_PROGRESS),
        overdue=sum(1 for t in tasks if is_overdue(t, today)),
    )
