"""Workspace: the session object that owns the board.

A ``TodoWorkspace`` is constructed explicitly with a repository and an
optional settings snapshot; there is no module-level instance. It loads
the board once, routes every mutation through the task and member
services, and persists the board synchronously after each successful
mutation, before returning to the caller.

Example usage:
    >>> workspace = TodoWorkspace(BoardRepository(PreferenceStore(path)))
    >>> result = workspace.add_task(TaskDraft(title="Fix bug", priority=Priority.HIGH))
    >>> if is_ok(result):
    ...     workspace.start_task(result.value.id)
    >>> workspace.query(TaskFilter(show_completed=False))
"""

import logging
import random
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import date
from typing import Protocol, TypeVar

from todopanel.application import member_service, task_service
from todopanel.domain.board import Board
from todopanel.domain.member import DEFAULT_ROLE, TeamMember
from todopanel.domain.settings import TodoSettings
from todopanel.domain.shared import Err, Result
from todopanel.domain.task import (
    Status,
    SubTask,
    Task,
    TaskDraft,
    TaskEdit,
    TaskFilter,
    TaskStats,
    compute_stats,
    filter_tasks,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BoardStore(Protocol):
    """Persistence boundary used by the workspace."""

    def load(self) -> Board: ...

    def save(self, board: Board) -> Result[None, str]: ...


class TodoWorkspace:
    """Owns the in-memory board and keeps the stored copy current.

    Attributes:
        board: The board being edited.
        settings: Read-only settings snapshot, or None for fallbacks.
        last_save_error: Message of the most recent failed save, cleared
            by the next successful one.
    """

    def __init__(
        self,
        repository: BoardStore,
        settings: TodoSettings | None = None,
        clock: Callable[[], date] = date.today,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the workspace and load the board.

        Args:
            repository: Where the board is loaded from and saved to.
            settings: Optional settings snapshot supplying defaults.
            clock: Source of "today" for creation dates and due checks.
            rng: Optional random generator for member colours.
        """
        self._repository = repository
        self.settings = settings
        self._clock = clock
        self._rng = rng
        self._batch_depth = 0
        self._dirty = False
        self.last_save_error: str | None = None
        self.board = repository.load()

    # -------------------- persistence --------------------

    def commit(self) -> Result[None, str]:
        """Save the board now.

        Save failures are logged and remembered in ``last_save_error``;
        they are never raised.
        """
        result = self._repository.save(self.board)
        if isinstance(result, Err):
            self.last_save_error = result.error
            logger.error(f"Failed to save board: {result.error}")
        else:
            self.last_save_error = None
            self._dirty = False
        return result

    @contextmanager
    def batch(self) -> Iterator["TodoWorkspace"]:
        """Group several mutations into a single save at the end of the block.

        Batches nest; only the outermost one saves.
        """
        self._batch_depth += 1
        try:
            yield self
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0 and self._dirty:
                self.commit()

    def _apply(self, action: str, result: Result[T, str]) -> Result[T, str]:
        if isinstance(result, Err):
            logger.debug(f"{action} rejected: {result.error}")
            return result
        logger.debug(f"{action} applied")
        self._dirty = True
        if self._batch_depth == 0:
            self.commit()
        return result

    # -------------------- queries --------------------

    def today(self) -> date:
        return self._clock()

    @property
    def tasks(self) -> list[Task]:
        return self.board.tasks

    @property
    def members(self) -> list[TeamMember]:
        return self.board.members

    def get_task(self, task_id: str) -> Result[Task, str]:
        return task_service.find_task(self.board, task_id)

    def get_member(self, member_id: str) -> Result[TeamMember, str]:
        return member_service.find_member(self.board, member_id)

    def query(self, criteria: TaskFilter | None = None) -> list[Task]:
        """The filtered, ordered task view."""
        return filter_tasks(self.board.tasks, criteria)

    def stats(self, criteria: TaskFilter | None = None) -> TaskStats:
        """Statistics over the filtered task view."""
        return compute_stats(self.query(criteria), self.today())

    # -------------------- tasks --------------------

    def add_task(self, draft: TaskDraft | None = None) -> Result[Task, str]:
        return self._apply(
            "add_task",
            task_service.add_task(self.board, draft, self.settings, self.today()),
        )

    def add_task_from_assets(
        self, asset_ids: list[str], draft: TaskDraft | None = None
    ) -> Result[Task, str]:
        return self._apply(
            "add_task_from_assets",
            task_service.add_task_from_assets(
                self.board, asset_ids, draft, self.settings, self.today()
            ),
        )

    def edit_task(self, task_id: str, edit: TaskEdit) -> Result[Task, str]:
        return self._apply("edit_task", task_service.edit_task(self.board, task_id, edit))

    def delete_task(self, task_id: str) -> Result[Task, str]:
        return self._apply("delete_task", task_service.delete_task(self.board, task_id))

    def duplicate_task(self, task_id: str) -> Result[Task, str]:
        return self._apply(
            "duplicate_task",
            task_service.duplicate_task(self.board, task_id, self.today()),
        )

    def set_status(self, task_id: str, status: Status) -> Result[Task, str]:
        return self._apply("set_status", task_service.set_status(self.board, task_id, status))

    def start_task(self, task_id: str) -> Result[Task, str]:
        return self._apply("start_task", task_service.start_task(self.board, task_id))

    def complete_task(self, task_id: str) -> Result[Task, str]:
        return self._apply("complete_task", task_service.complete_task(self.board, task_id))

    # -------------------- sub-tasks --------------------

    def add_subtask(self, task_id: str, title: str) -> Result[SubTask, str]:
        return self._apply("add_subtask", task_service.add_subtask(self.board, task_id, title))

    def remove_subtask(self, task_id: str, subtask_id: str) -> Result[SubTask, str]:
        return self._apply(
            "remove_subtask",
            task_service.remove_subtask(self.board, task_id, subtask_id),
        )

    def set_subtask_completion(
        self, task_id: str, subtask_id: str, completed: bool
    ) -> Result[SubTask, str]:
        return self._apply(
            "set_subtask_completion",
            task_service.set_subtask_completion(self.board, task_id, subtask_id, completed),
        )

    def assign_subtask_member(
        self, task_id: str, subtask_id: str, member_id: str
    ) -> Result[SubTask, str]:
        return self._apply(
            "assign_subtask_member",
            task_service.assign_subtask_member(self.board, task_id, subtask_id, member_id),
        )

    def unassign_subtask_member(
        self, task_id: str, subtask_id: str, member_id: str
    ) -> Result[SubTask, str]:
        return self._apply(
            "unassign_subtask_member",
            task_service.unassign_subtask_member(self.board, task_id, subtask_id, member_id),
        )

    def add_subtask_asset(
        self, task_id: str, subtask_id: str, asset_id: str
    ) -> Result[SubTask, str]:
        return self._apply(
            "add_subtask_asset",
            task_service.add_subtask_asset(
                self.board, task_id, subtask_id, asset_id, self.settings
            ),
        )

    def remove_subtask_asset(
        self, task_id: str, subtask_id: str, asset_id: str
    ) -> Result[SubTask, str]:
        return self._apply(
            "remove_subtask_asset",
            task_service.remove_subtask_asset(self.board, task_id, subtask_id, asset_id),
        )

    # -------------------- assignment and assets --------------------

    def assign_member(self, task_id: str, member_id: str) -> Result[Task, str]:
        return self._apply(
            "assign_member", task_service.assign_member(self.board, task_id, member_id)
        )

    def unassign_member(self, task_id: str, member_id: str) -> Result[Task, str]:
        return self._apply(
            "unassign_member", task_service.unassign_member(self.board, task_id, member_id)
        )

    def add_asset_reference(self, task_id: str, asset_id: str) -> Result[Task, str]:
        return self._apply(
            "add_asset_reference",
            task_service.add_asset_reference(self.board, task_id, asset_id, self.settings),
        )

    def remove_asset_reference(self, task_id: str, asset_id: str) -> Result[Task, str]:
        return self._apply(
            "remove_asset_reference",
            task_service.remove_asset_reference(self.board, task_id, asset_id),
        )

    # -------------------- team --------------------

    def add_team_member(self, name: str, role: str = DEFAULT_ROLE) -> Result[TeamMember, str]:
        return self._apply(
            "add_team_member",
            member_service.add_team_member(self.board, name, role, self._rng),
        )

    def delete_team_member(self, member_id: str) -> Result[TeamMember, str]:
        return self._apply(
            "delete_team_member", member_service.delete_team_member(self.board, member_id)
        )

    def set_member_active(self, member_id: str, active: bool) -> Result[TeamMember, str]:
        return self._apply(
            "set_member_active",
            member_service.set_member_active(self.board, member_id, active),
        )


__all__ = ["BoardStore", "TodoWorkspace"]
