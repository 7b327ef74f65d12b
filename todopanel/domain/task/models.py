"""Task domain models.

Pure domain models for the task board. Uses Pydantic for validation and
for the JSON shape written to the preference store.

Dates are calendar dates only: any ``datetime`` (or ISO timestamp string)
written to a date field is truncated to its own calendar day, both when a
model is built and when a field is assigned later.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

ALL_MEMBERS = "All"

MUTABLE_TASK_FIELDS = frozenset(
    {
        "title",
        "description",
        "due_date",
        "priority",
        "category",
        "status",
        "estimated_hours",
        "actual_hours",
        "sub_tasks",
        "assigned_members",
        "referenced_asset_guids",
    }
)


class Priority(str, Enum):
    """Task priority. ``ALL`` is only meaningful as a filter wildcard."""

    ALL = "All"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"

    @property
    def rank(self) -> int:
        """Severity rank used for ordering (Critical is highest)."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {
    Priority.ALL: 0,
    Priority.LOW: 1,
    Priority.MEDIUM: 2,
    Priority.HIGH: 3,
    Priority.CRITICAL: 4,
}


class Category(str, Enum):
    """Kind of work a task belongs to."""

    ALL = "All"
    GENERAL = "General"
    PROGRAMMING = "Programming"
    ART = "Art"
    DESIGN = "Design"
    TESTING = "Testing"
    DOCUMENTATION = "Documentation"
    AUDIO = "Audio"
    ANIMATION = "Animation"
    UI = "UI"


class Status(str, Enum):
    """Task status. Any status may follow any other."""

    ALL = "All"
    NOT_STARTED = "NotStarted"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    ON_HOLD = "OnHold"
    BLOCKED = "Blocked"


def new_id() -> str:
    """Generate an opaque unique identifier."""
    return str(uuid4())


def truncate_to_date(value: Any) -> Any:
    """Reduce a datetime (or ISO timestamp string) to its calendar date.

    Aware datetimes keep the day they were entered in; no conversion to
    another zone happens before truncation.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and len(value) > 10:
        try:
            return datetime.fromisoformat(value).date()
        except ValueError:
            return value
    return value


def unique_in_order(values: Any) -> Any:
    """Collapse duplicate ids, keeping the first occurrence of each."""
    if values is None:
        return []
    if isinstance(values, (list, tuple)):
        return list(dict.fromkeys(values))
    return values


def _reject_wildcard(value: Enum) -> Enum:
    if value.value == "All":
        raise ValueError("'All' is a filter wildcard and cannot be stored on a task")
    return value


class SubTask(BaseModel):
    """A checklist item owned by a task.

    Sub-tasks carry their own generated id so that removal and updates
    address them by identity, never by list position.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=new_id, frozen=True)
    title: str = ""
    is_completed: bool = False
    assigned_to: list[str] = Field(default_factory=list)
    asset_guids: list[str] = Field(default_factory=list)

    @field_validator("assigned_to", "asset_guids", mode="before")
    @classmethod
    def _collapse_duplicates(cls, value: Any) -> Any:
        return unique_in_order(value)


class Task(BaseModel):
    """A unit of trackable work.

    ``id`` and ``created_date`` are stamped when the task is added to the
    board and cannot be reassigned afterwards.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=new_id, frozen=True)
    title: str = ""
    description: str = ""
    due_date: date
    created_date: date = Field(default_factory=date.today, frozen=True)
    priority: Priority = Priority.MEDIUM
    category: Category = Category.GENERAL
    status: Status = Status.NOT_STARTED
    estimated_hours: int = Field(default=0, ge=0)
    actual_hours: int = Field(default=0, ge=0)
    sub_tasks: list[SubTask] = Field(default_factory=list)
    assigned_members: list[str] = Field(default_factory=list)
    referenced_asset_guids: list[str] = Field(default_factory=list)

    @field_validator("due_date", "created_date", mode="before")
    @classmethod
    def _truncate_dates(cls, value: Any) -> Any:
        return truncate_to_date(value)

    @field_validator("priority", "category", "status")
    @classmethod
    def _no_wildcard(cls, value: Enum) -> Enum:
        return _reject_wildcard(value)

    @field_validator("sub_tasks", mode="before")
    @classmethod
    def _default_sub_tasks(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("assigned_members", "referenced_asset_guids", mode="before")
    @classmethod
    def _collapse_duplicates(cls, value: Any) -> Any:
        return unique_in_order(value)

    def get_subtask(self, subtask_id: str) -> SubTask | None:
        """Get a sub-task by its id."""
        for sub_task in self.sub_tasks:
            if sub_task.id == subtask_id:
                return sub_task
        return None


class TaskDraft(BaseModel):
    """Field values for a new task.

    Anything left as None is filled from the settings snapshot, or from the
    built-in fallbacks when no settings exist.
    """

    title: str = ""
    description: str = ""
    due_date: date | None = None
    priority: Priority | None = None
    category: Category | None = None
    status: Status | None = None
    estimated_hours: int | None = Field(default=None, ge=0)
    actual_hours: int = Field(default=0, ge=0)
    sub_tasks: list[SubTask] = Field(default_factory=list)
    assigned_members: list[str] = Field(default_factory=list)
    referenced_asset_guids: list[str] = Field(default_factory=list)

    @field_validator("due_date", mode="before")
    @classmethod
    def _truncate_dates(cls, value: Any) -> Any:
        return truncate_to_date(value)

    @field_validator("assigned_members", "referenced_asset_guids", mode="before")
    @classmethod
    def _collapse_duplicates(cls, value: Any) -> Any:
        return unique_in_order(value)


class TaskEdit(BaseModel):
    """A complete replacement for every mutable field of a task.

    Build one from the current task with :meth:`from_task` and override the
    fields being changed::

        edit = TaskEdit.from_task(task).model_copy(update={"title": "New"})
    """

    title: str
    description: str
    due_date: date
    priority: Priority
    category: Category
    status: Status
    estimated_hours: int = Field(ge=0)
    actual_hours: int = Field(ge=0)
    sub_tasks: list[SubTask] = Field(default_factory=list)
    assigned_members: list[str] = Field(default_factory=list)
    referenced_asset_guids: list[str] = Field(default_factory=list)

    @field_validator("due_date", mode="before")
    @classmethod
    def _truncate_dates(cls, value: Any) -> Any:
        return truncate_to_date(value)

    @classmethod
    def from_task(cls, task: Task) -> "TaskEdit":
        """Snapshot the mutable fields of a task (deep copy)."""
        return cls.model_validate(task.model_dump(include=set(MUTABLE_TASK_FIELDS)))


class TaskFilter(BaseModel):
    """Criteria for the filtered task view.

    All criteria are combined with AND. The defaults match every task.
    """

    text_search: str = ""
    priority: Priority = Priority.ALL
    category: Category = Category.ALL
    status: Status = Status.ALL
    show_completed: bool = True
    assigned_member_id: str = ALL_MEMBERS
    # Lower-case extensions such as ".cs"; empty matches every task
    asset_extensions: list[str] = Field(default_factory=list)

    @field_validator("asset_extensions", mode="after")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        exts = (e.strip().lower().lstrip("*") for e in value)
        return [e if e.startswith(".") else f".{e}" for e in exts if e]


class TaskStats(BaseModel):
    """Counts shown in the statistics bar under the task list."""

    total: int = 0
    completed: int = 0
    in_progress: int = 0
    overdue: int = 0

    @property
    def progress_percent(self) -> float:
        """Calculate completion percentage."""
        if self.total == 0:
            return 0.0
        return round(self.completed / self.total * 100, 1)
