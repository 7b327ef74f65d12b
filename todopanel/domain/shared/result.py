"""Result monad for explicit error handling in board and storage operations.

Every mutation of the task board reports its outcome as a Result instead of
raising: a lookup that misses (unknown task, member or sub-task id) or an input
the board refuses comes back as ``Err`` with a human readable message, and the
caller decides how to surface it.

Example usage:
    >>> def find_member(board, member_id: str) -> Result[TeamMember, str]:
    ...     member = board.get_member(member_id)
    ...     if member is None:
    ...         return Err(f"Team member not found: {member_id}")
    ...     return Ok(member)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Outcome of an operation that went through.

    Attributes:
        value: What the operation produced, e.g. the changed task.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Outcome of an operation that failed.

    A board operation that fails leaves the board unchanged.

    Attributes:
        error: Why it was refused, usually a message for the user.
    """

    error: E


# Using Union here as TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Ok[T] | Err[E]) -> bool:
    """True for Ok."""
    return isinstance(result, Ok)


def is_err(result: Ok[T] | Err[E]) -> bool:
    """True for Err."""
    return isinstance(result, Err)
