"""Team member creation functions.

Pure functions for deriving a member's display attributes. The only
source of variation is the random generator used to pick a colour, which
callers can pass in for deterministic results.
"""

import random

from todopanel.domain.member.models import DEFAULT_ROLE, TeamMember

# Blue, red, green, orange, purple, cyan, magenta
MEMBER_PALETTE: tuple[str, ...] = (
    "#3399ff",
    "#cc3333",
    "#33cc33",
    "#cc9933",
    "#9933cc",
    "#33cccc",
    "#cc33cc",
)


def make_initials(full_name: str) -> str:
    """Derive display initials from a member's name.

    Examples:
        >>> make_initials("Ada Lovelace")
        'AL'
        >>> make_initials("Ada")
        'AD'
        >>> make_initials("Grace Brewster Hopper")
        'GH'
        >>> make_initials("")
        '??'
    """
    parts = full_name.split()
    if not parts:
        return "??"
    if len(parts) == 1:
        return parts[0][:2].upper()
    return (parts[0][0] + parts[-1][0]).upper()


def pick_color(rng: random.Random | None = None) -> str:
    """Pick a colour uniformly from the member palette."""
    return (rng or random).choice(MEMBER_PALETTE)


def create_member(
    name: str,
    role: str = DEFAULT_ROLE,
    rng: random.Random | None = None,
) -> TeamMember:
    """Create a new team member with a fresh id, colour and initials.

    Args:
        name: Display name of the member.
        role: Free-text role, defaults to "Developer".
        rng: Optional random generator used for the colour.

    Returns:
        A new active TeamMember.
    """
    return TeamMember(
        name=name,
        role=role,
        color=pick_color(rng),
        initials=make_initials(name),
    )
