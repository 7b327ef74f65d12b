"""Infrastructure layer for todopanel.

Wraps file I/O behind Result-returning interfaces.

Exports:
    Storage:
        - JsonStorage: Low-level JSON file I/O
        - PreferenceStore: Per-user string key/value store
        - BoardRepository: Board persistence

    Export:
        - export_csv: CSV export of the task list
"""

from todopanel.infrastructure.export import export_csv, tasks_to_csv
from todopanel.infrastructure.storage import (
    BoardRepository,
    JsonStorage,
    PreferenceStore,
)

__all__ = [
    # Storage
    "JsonStorage",
    "PreferenceStore",
    "BoardRepository",
    # Export
    "export_csv",
    "tasks_to_csv",
]
