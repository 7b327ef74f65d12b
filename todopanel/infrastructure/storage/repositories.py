"""Repository for the persisted board.

Tasks and team members are stored as two JSON blobs under fixed keys of
the preference store. Each blob carries a version tag::

    TodoList_Data        -> {"version": 1, "items": [<task>, ...]}
    TodoList_TeamMembers -> {"version": 1, "members": [<member>, ...]}

Blobs written before the tag existed are read as version 1.
"""

import json
import logging
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from todopanel.domain.board import Board
from todopanel.domain.shared import Err, Ok, Result
from todopanel.infrastructure.storage.preference_store import PreferenceStore

logger = logging.getLogger(__name__)

TASKS_KEY = "TodoList_Data"
MEMBERS_KEY = "TodoList_TeamMembers"
BACKUP_SUFFIX = "_Backup"
SCHEMA_VERSION = 1


class MalformedBlobError(ValueError):
    """A stored blob could not be turned back into board data."""


def _decode_blob(raw: str, field: str) -> list[Any]:
    """Decode a versioned blob into its raw item list."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedBlobError(f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedBlobError(f"expected an object, got {type(data).__name__}")

    version = data.get("version", SCHEMA_VERSION)
    if version != SCHEMA_VERSION:
        raise MalformedBlobError(f"unsupported version {version!r}")

    items = data.get(field)
    if items is None:
        return []
    if not isinstance(items, list):
        raise MalformedBlobError(f"'{field}' is not a list")
    return items


def _encode_blob(field: str, items: list[dict[str, Any]]) -> str:
    return json.dumps({"version": SCHEMA_VERSION, field: items}, ensure_ascii=False)


class BoardRepository:
    """Loads and saves the board through a preference store.

    ``load`` never fails: missing data gives an empty collection, and
    malformed data is logged, copied to a backup key and replaced by an
    empty collection. Tasks and members load independently, so a bad
    member blob doesn't cost the task list.
    """

    def __init__(self, store: PreferenceStore) -> None:
        """Initialize the repository.

        Args:
            store: Preference store holding the board blobs.
        """
        self._store = store

    def load(self) -> Board:
        """Load the board.

        Returns:
            The stored board, with empty collections for anything missing
            or unreadable.
        """
        tasks = self._load_collection(
            TASKS_KEY, "items", lambda items: Board(tasks=items).tasks
        )
        members = self._load_collection(
            MEMBERS_KEY, "members", lambda items: Board(members=items).members
        )
        board = Board(tasks=tasks, members=members)
        logger.debug(f"Loaded board: {len(board.tasks)} tasks, {len(board.members)} members")
        return board

    def _load_collection(
        self,
        key: str,
        field: str,
        build: Callable[[list[Any]], list[Any]],
    ) -> list[Any]:
        raw = self._store.get_string(key)
        if not raw:
            logger.debug(f"No stored data under {key}")
            return []

        try:
            return build(_decode_blob(raw, field))
        except (MalformedBlobError, ValidationError) as e:
            logger.warning(f"Discarding malformed data under {key}, starting empty: {e}")
            self._backup(key, raw)
            return []

    def _backup(self, key: str, raw: str) -> None:
        backup_key = f"{key}{BACKUP_SUFFIX}"
        result = self._store.set_string(backup_key, raw)
        if isinstance(result, Err):
            logger.error(f"Could not back up malformed data under {backup_key}: {result.error}")
        else:
            logger.warning(f"Malformed data preserved under {backup_key}")

    def save(self, board: Board) -> Result[None, str]:
        """Save the whole board as one unit.

        Args:
            board: Board to persist.

        Returns:
            Ok(None) if successful, Err(str) with error message if failed.
        """
        values = {
            TASKS_KEY: _encode_blob("items", [t.model_dump(mode="json") for t in board.tasks]),
            MEMBERS_KEY: _encode_blob(
                "members", [m.model_dump(mode="json") for m in board.members]
            ),
        }
        result = self._store.set_many(values)
        if isinstance(result, Ok):
            logger.debug(f"Saved board: {len(board.tasks)} tasks, {len(board.members)} members")
        return result
