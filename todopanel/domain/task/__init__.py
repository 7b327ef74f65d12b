"""Task domain - tasks, sub-tasks and the filtered task view.

All exports are pure (no I/O, no side effects).

Key Types:
    Priority, Category, Status - Task enumerations (``ALL`` is a filter wildcard)
    Task - A unit of trackable work
    SubTask - Checklist item owned by a task, addressed by its own id
    TaskDraft - Field values for a new task
    TaskEdit - Full replacement of a task's mutable fields
    TaskFilter - Criteria for the filtered view
    TaskStats - Counts for the statistics bar

Query Functions:
    filter_tasks - Filter and order tasks
    compute_stats - Count tasks by state
    is_overdue - Due day has passed
    is_due_soon - Inside the due-date warning window
    subtask_progress - Completed/total sub-task counts

Asset Functions:
    infer_category - Category suggested by the first asset's extension
    extensions_for - Extensions matched by an asset-type quick filter
"""

from .assets import (
    ASSET_TYPE_EXTENSIONS,
    CATEGORY_BY_EXTENSION,
    asset_extension,
    asset_name,
    extensions_for,
    infer_category,
)
from .models import (
    ALL_MEMBERS,
    MUTABLE_TASK_FIELDS,
    Category,
    Priority,
    Status,
    SubTask,
    Task,
    TaskDraft,
    TaskEdit,
    TaskFilter,
    TaskStats,
    new_id,
    truncate_to_date,
)
from .query import (
    build_predicates,
    compute_stats,
    filter_tasks,
    is_due_soon,
    is_overdue,
    sort_key,
    subtask_progress,
)

__all__ = [
    # Models
    "ALL_MEMBERS",
    "MUTABLE_TASK_FIELDS",
    "Priority",
    "Category",
    "Status",
    "SubTask",
    "Task",
    "TaskDraft",
    "TaskEdit",
    "TaskFilter",
    "TaskStats",
    "new_id",
    "truncate_to_date",
    # Query
    "build_predicates",
    "filter_tasks",
    "sort_key",
    "compute_stats",
    "is_overdue",
    "is_due_soon",
    "subtask_progress",
    # Assets
    "ASSET_TYPE_EXTENSIONS",
    "CATEGORY_BY_EXTENSION",
    "asset_extension",
    "asset_name",
    "extensions_for",
    "infer_category",
]
