"""Storage infrastructure for todopanel.

Provides the persistence layer for the board, using Result monads for
explicit error handling.
"""

from todopanel.infrastructure.storage.json_storage import JsonStorage
from todopanel.infrastructure.storage.preference_store import PREFS_FILENAME, PreferenceStore
from todopanel.infrastructure.storage.repositories import (
    MEMBERS_KEY,
    SCHEMA_VERSION,
    TASKS_KEY,
    BoardRepository,
)

__all__ = [
    "JsonStorage",
    "PreferenceStore",
    "PREFS_FILENAME",
    "BoardRepository",
    "TASKS_KEY",
    "MEMBERS_KEY",
    "SCHEMA_VERSION",
]
