"""Per-user preference store.

A small key/value store of string values kept in one JSON file in the
user's config directory. The board is stored in it as opaque JSON blobs
under fixed keys.
"""

import logging
from pathlib import Path
from typing import Any

from todopanel.domain.shared import Err, Ok, Result
from todopanel.infrastructure.storage.json_storage import JsonStorage

logger = logging.getLogger(__name__)

PREFS_FILENAME = "prefs.json"
CORRUPT_SUFFIX = ".corrupt"


class PreferenceStore:
    """String key/value store backed by a JSON file.

    Every write reads the current file, updates it and writes the whole
    document back. Values that are not strings (written by something
    else) are kept on write but never returned.

    A file that exists but cannot be read is moved to ``<name>.corrupt``
    the first time it is seen, so that the next write starts a fresh file
    instead of replacing the only copy of the old data. If it cannot be
    moved, writes are refused.
    """

    def __init__(self, path: Path, storage: JsonStorage | None = None) -> None:
        """Initialize the store.

        Args:
            path: Location of the preference file.
            storage: JsonStorage instance to use. Creates new one if not provided.
        """
        self.path = path
        self._storage = storage or JsonStorage()
        self._write_blocked: str | None = None

    @property
    def corrupt_path(self) -> Path:
        return self.path.with_name(f"{self.path.name}{CORRUPT_SUFFIX}")

    def _read_all(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        result = self._storage.load_json(self.path)
        if isinstance(result, Ok):
            return result.value

        logger.warning(f"Preference file unreadable, treating as empty: {result.error}")
        self._set_aside()
        return {}

    def _set_aside(self) -> None:
        try:
            self.path.replace(self.corrupt_path)
        except OSError as e:
            self._write_blocked = f"preference file {self.path} is unreadable and could not be backed up: {e}"
            logger.error(self._write_blocked)
            return
        logger.warning(f"Unreadable preference file moved to {self.corrupt_path}")

    def _write(self, data: dict[str, Any]) -> Result[None, str]:
        if self._write_blocked is not None:
            return Err(f"Refusing to overwrite: {self._write_blocked}")
        return self._storage.save_json(self.path, data)

    def get_string(self, key: str, default: str = "") -> str:
        """Get the value stored under a key, or ``default`` if absent."""
        value = self._read_all().get(key)
        return value if isinstance(value, str) else default

    def has_key(self, key: str) -> bool:
        """Check if a string value is stored under a key."""
        return isinstance(self._read_all().get(key), str)

    def set_string(self, key: str, value: str) -> Result[None, str]:
        """Store a value under a key.

        Returns:
            Ok(None) if the file was written, Err(str) otherwise.
        """
        return self.set_many({key: value})

    def set_many(self, values: dict[str, str]) -> Result[None, str]:
        """Store several values in a single write."""
        data = self._read_all()
        data.update(values)
        return self._write(data)

    def delete_key(self, key: str) -> Result[None, str]:
        """Remove a key. Removing an absent key is not an error."""
        data = self._read_all()
        if key not in data:
            return Ok(None)
        del data[key]
        return self._write(data)
