"""Shared domain utilities for todopanel.

Provides the Result monad used by every board operation for explicit
error handling.

Example usage:
    >>> from todopanel.domain.shared import Ok, Err, Result, is_ok
    >>>
    >>> def find_task(task_id: str) -> Result[dict, str]:
    ...     if task_id == "missing":
    ...         return Err("Task not found: missing")
    ...     return Ok({"id": task_id, "title": "Example"})
"""

from todopanel.domain.shared.result import (
    Err,
    Ok,
    Result,
    is_err,
    is_ok,
)

__all__ = [
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
]
