"""Board aggregate.

The board is everything the repository persists: the ordered task list and
the ordered team roster. It offers lookups only; mutations live in the
application services.
"""

from pydantic import BaseModel, Field, model_validator

from todopanel.domain.member.models import TeamMember
from todopanel.domain.task.models import Task


class Board(BaseModel):
    """Ordered tasks and team members owned by one workspace."""

    tasks: list[Task] = Field(default_factory=list)
    members: list[TeamMember] = Field(default_factory=list)

    @model_validator(mode="after")
    def _ids_are_unique(self) -> "Board":
        for label, items in (("task", self.tasks), ("member", self.members)):
            seen: set[str] = set()
            for item in items:
                if item.id in seen:
                    raise ValueError(f"Duplicate {label} id: {item.id}")
                seen.add(item.id)
        return self

    def get_task(self, task_id: str) -> Task | None:
        """Get a task by its id."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def get_member(self, member_id: str) -> TeamMember | None:
        """Get a team member by its id."""
        for member in self.members:
            if member.id == member_id:
                return member
        return None

    def active_members(self) -> list[TeamMember]:
        """Members that can receive new assignments."""
        return [m for m in self.members if m.is_active]

    def member_names(self, member_ids: list[str]) -> list[str]:
        """Resolve member ids to names, skipping ids that no longer resolve."""
        names = []
        for member_id in member_ids:
            member = self.get_member(member_id)
            if member is not None:
                names.append(member.name)
        return names
