"""Member domain - team members and their derived display attributes."""

from todopanel.domain.member.factory import (
    MEMBER_PALETTE,
    create_member,
    make_initials,
    pick_color,
)
from todopanel.domain.member.models import DEFAULT_ROLE, TeamMember

__all__ = [
    "TeamMember",
    "DEFAULT_ROLE",
    "MEMBER_PALETTE",
    "create_member",
    "make_initials",
    "pick_color",
]
