"""Settings snapshot for the task board.

``TodoSettings`` is an immutable snapshot of user preferences. Board
operations read defaults and display colours from it but never write to
it. When no snapshot exists at all, the ``FALLBACK_*`` values and the
fallback colour tables apply.
"""

from pydantic import BaseModel, ConfigDict, Field

from todopanel.domain.task.assets import asset_extension
from todopanel.domain.task.models import Category, Priority, Status

FALLBACK_PRIORITY = Priority.MEDIUM
FALLBACK_CATEGORY = Category.GENERAL
FALLBACK_STATUS = Status.NOT_STARTED
FALLBACK_ESTIMATE_HOURS = 0
FALLBACK_DUE_DAYS = 1

FALLBACK_PRIORITY_COLORS: dict[Priority, str] = {
    Priority.CRITICAL: "#800080",
    Priority.HIGH: "#ff0000",
    Priority.MEDIUM: "#ffeb04",
    Priority.LOW: "#00ff00",
}

FALLBACK_CATEGORY_COLORS: dict[Category, str] = {
    Category.PROGRAMMING: "#0000ff",
    Category.ART: "#ff00ff",
    Category.DESIGN: "#00ffff",
    Category.TESTING: "#00ff00",
    Category.DOCUMENTATION: "#ffffff",
    Category.AUDIO: "#cc66ff",
    Category.ANIMATION: "#ff8000",
    Category.UI: "#e6e633",
}

FALLBACK_STATUS_COLORS: dict[Status, str] = {
    Status.NOT_STARTED: "#808080",
    Status.IN_PROGRESS: "#3399ff",
    Status.COMPLETED: "#33cc33",
    Status.ON_HOLD: "#ffcc33",
    Status.BLOCKED: "#ff4d4d",
}

UNSET_COLOR = "#808080"

STATUS_SYMBOLS: dict[Status, str] = {
    Status.NOT_STARTED: "○",
    Status.IN_PROGRESS: "▶",
    Status.COMPLETED: "✓",
    Status.ON_HOLD: "⏸",
    Status.BLOCKED: "⛔",
}

STATUS_DESCRIPTIONS: dict[Status, str] = {
    Status.NOT_STARTED: "Task is ready to be started",
    Status.IN_PROGRESS: "Task is currently being worked on",
    Status.COMPLETED: "Task is finished",
    Status.ON_HOLD: "Task is temporarily paused",
    Status.BLOCKED: "Task cannot proceed due to dependencies or issues",
}

PRIORITY_DESCRIPTIONS: dict[Priority, str] = {
    Priority.CRITICAL: "Must be completed immediately",
    Priority.HIGH: "Important and time-sensitive",
    Priority.MEDIUM: "Normal priority task",
    Priority.LOW: "Can be done when time permits",
}


class TodoSettings(BaseModel):
    """User preferences read by the board.

    Frozen so that a loaded snapshot can be shared freely; write a new
    settings file to change it.
    """

    model_config = ConfigDict(frozen=True)

    # Default values for new tasks
    default_priority: Priority = Priority.MEDIUM
    default_category: Category = Category.GENERAL
    default_status: Status = Status.NOT_STARTED
    default_estimate_hours: int = Field(default=2, ge=0)
    default_due_days: int = Field(default=7, ge=0)

    # Behaviour
    show_confirmation_dialogs: bool = True
    enable_due_date_warnings: bool = True
    due_date_warning_days: int = Field(default=1, ge=0)
    enable_asset_linking: bool = True
    excluded_asset_types: list[str] = Field(default_factory=list)

    # Export
    default_export_path: str = "Exports/"

    # Colours
    priority_colors: dict[Priority, str] = Field(
        default_factory=lambda: {
            Priority.CRITICAL: "#800080",
            Priority.HIGH: "#ff0000",
            Priority.MEDIUM: "#ff8000",
            Priority.LOW: "#00ff00",
        }
    )
    status_colors: dict[Status, str] = Field(
        default_factory=lambda: dict(FALLBACK_STATUS_COLORS)
    )
    category_colors: dict[Category, str] = Field(
        default_factory=lambda: {
            Category.PROGRAMMING: "#3399ff",
            Category.ART: "#cc33cc",
            Category.DESIGN: "#00cccc",
            Category.TESTING: "#33cc33",
            Category.DOCUMENTATION: "#ffffff",
            Category.AUDIO: "#cc66ff",
            Category.ANIMATION: "#ff8000",
            Category.UI: "#e6e633",
        }
    )

    def is_asset_allowed(self, asset_id: str) -> bool:
        """Check whether an asset may be linked to a task.

        Asset ids are opaque; only ids that look like a file path with an
        extension can be refused by ``excluded_asset_types``.
        """
        if not self.enable_asset_linking:
            return False
        extension = asset_extension(asset_id).lstrip(".")
        if not extension:
            return True
        excluded = {ext.lower().lstrip(".") for ext in self.excluded_asset_types}
        return extension not in excluded


def priority_color(priority: Priority, settings: TodoSettings | None = None) -> str:
    """Display colour for a priority, falling back when no settings exist."""
    table = settings.priority_colors if settings is not None else FALLBACK_PRIORITY_COLORS
    return table.get(priority, UNSET_COLOR)


def category_color(category: Category, settings: TodoSettings | None = None) -> str:
    """Display colour for a category, falling back when no settings exist."""
    table = settings.category_colors if settings is not None else FALLBACK_CATEGORY_COLORS
    return table.get(category, UNSET_COLOR)


def status_color(status: Status, settings: TodoSettings | None = None) -> str:
    """Display colour for a status, falling back when no settings exist."""
    table = settings.status_colors if settings is not None else FALLBACK_STATUS_COLORS
    return table.get(status, UNSET_COLOR)
