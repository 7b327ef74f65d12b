"""Team member domain models."""

from pydantic import BaseModel, Field

from todopanel.domain.task.models import new_id

DEFAULT_ROLE = "Developer"


class TeamMember(BaseModel):
    """A named collaborator who can be assigned to tasks and sub-tasks.

    ``color`` and ``initials`` are fixed when the member is created.
    Inactive members keep their existing assignments but are not offered
    for new ones.
    """

    id: str = Field(default_factory=new_id, frozen=True)
    name: str
    role: str = DEFAULT_ROLE
    color: str = "#3399ff"
    initials: str = "??"
    is_active: bool = True
