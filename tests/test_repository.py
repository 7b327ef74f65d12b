# tests/test_repository.py

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path

import pytest

from todopanel.application import TodoWorkspace, task_service
from todopanel.application.member_service import add_team_member
from todopanel.domain.board import Board
from todopanel.domain.shared import Err, Ok
from todopanel.domain.task import Priority, SubTask, TaskDraft
from todopanel.infrastructure.storage import (
    MEMBERS_KEY,
    TASKS_KEY,
    BoardRepository,
    JsonStorage,
    PreferenceStore,
)
from todopanel.infrastructure.storage.repositories import BACKUP_SUFFIX


def _sample_board() -> Board:
    board = Board()
    ada = add_team_member(board, "Ada Lovelace").value
    task = task_service.add_task(
        board,
        TaskDraft(
            title="Fix bug",
            description='Crash when saving "scene"',
            due_date=date(2024, 1, 10),
            priority=Priority.HIGH,
            sub_tasks=[SubTask(title="repro", is_completed=True)],
            referenced_asset_guids=["Assets/Scenes/Main.unity"],
        ),
        today=date(2024, 1, 2),
    ).value
    task_service.assign_member(board, task.id, ada.id)
    return board


def test_save_then_load_round_trips(repository: BoardRepository) -> None:
    board = _sample_board()

    assert isinstance(repository.save(board), Ok)
    loaded = repository.load()

    assert loaded.model_dump() == board.model_dump()


def test_blobs_are_versioned_under_fixed_keys(
    repository: BoardRepository, prefs_path: Path
) -> None:
    repository.save(_sample_board())

    prefs = json.loads(prefs_path.read_text(encoding="utf-8"))
    tasks_blob = json.loads(prefs[TASKS_KEY])
    members_blob = json.loads(prefs[MEMBERS_KEY])

    assert tasks_blob["version"] == 1
    assert tasks_blob["items"][0]["priority"] == "High"
    assert tasks_blob["items"][0]["due_date"] == "2024-01-10"
    assert members_blob["members"][0]["initials"] == "AL"


def test_missing_data_loads_empty(repository: BoardRepository) -> None:
    board = repository.load()
    assert board.tasks == []
    assert board.members == []


def test_corrupted_blob_loads_empty_with_backup_and_warning(
    prefs_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    store = PreferenceStore(prefs_path)
    repository = BoardRepository(store)
    repository.save(_sample_board())
    store.set_string(TASKS_KEY, "{not json")

    with caplog.at_level(logging.WARNING):
        board = repository.load()

    assert board.tasks == []
    assert len(board.members) == 1
    assert store.get_string(f"{TASKS_KEY}{BACKUP_SUFFIX}") == "{not json"
    assert any(TASKS_KEY in r.getMessage() for r in caplog.records)


def test_invalid_items_are_treated_as_malformed(prefs_path: Path) -> None:
    store = PreferenceStore(prefs_path)
    store.set_string(TASKS_KEY, json.dumps({"version": 1, "items": [{"title": "no due date"}]}))

    assert BoardRepository(store).load().tasks == []
    assert store.has_key(f"{TASKS_KEY}{BACKUP_SUFFIX}")


def test_duplicate_ids_in_stored_blob_are_malformed(prefs_path: Path) -> None:
    store = PreferenceStore(prefs_path)
    item = {"id": "same", "title": "t", "due_date": "2024-01-01"}
    store.set_string(TASKS_KEY, json.dumps({"version": 1, "items": [item, item]}))

    assert BoardRepository(store).load().tasks == []


def test_unversioned_blob_is_read_as_current_version(prefs_path: Path) -> None:
    store = PreferenceStore(prefs_path)
    store.set_string(
        TASKS_KEY,
        json.dumps({"items": [{"id": "t1", "title": "legacy", "due_date": "2023-12-31T00:00:00"}]}),
    )

    tasks = BoardRepository(store).load().tasks

    assert [t.title for t in tasks] == ["legacy"]
    assert tasks[0].due_date == date(2023, 12, 31)


def test_unsupported_version_is_not_guessed_at(prefs_path: Path) -> None:
    store = PreferenceStore(prefs_path)
    store.set_string(TASKS_KEY, json.dumps({"version": 2, "items": []}))

    assert BoardRepository(store).load().tasks == []
    assert store.has_key(f"{TASKS_KEY}{BACKUP_SUFFIX}")


def test_unreadable_preference_file_loads_empty(prefs_path: Path) -> None:
    prefs_path.write_text("[]", encoding="utf-8")
    board = BoardRepository(PreferenceStore(prefs_path)).load()
    assert board.tasks == []


def test_save_failure_is_reported(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    repository = BoardRepository(PreferenceStore(blocker / "prefs.json"))

    result = repository.save(_sample_board())

    assert isinstance(result, Err)


def test_json_storage_rejects_non_object_documents(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert isinstance(JsonStorage().load_json(path), Err)


def test_preference_store_key_operations(prefs_path: Path) -> None:
    store = PreferenceStore(prefs_path)

    assert store.get_string("missing", "fallback") == "fallback"
    assert isinstance(store.set_many({"a": "1", "b": "2"}), Ok)
    assert store.has_key("a")

    assert isinstance(store.delete_key("a"), Ok)
    assert isinstance(store.delete_key("a"), Ok)
    assert not store.has_key("a")
    assert store.get_string("b") == "2"


def test_non_utf8_preference_file_loads_empty(prefs_path: Path) -> None:
    raw = b'{"TodoList_Data": "\xff\xfe"}'
    prefs_path.write_bytes(raw)
    store = PreferenceStore(prefs_path)

    board = BoardRepository(store).load()

    assert board.tasks == []
    assert store.corrupt_path.read_bytes() == raw


def test_unreadable_preference_file_is_kept_before_next_save(prefs_path: Path) -> None:
    first = TodoWorkspace(BoardRepository(PreferenceStore(prefs_path)))
    first.add_task(TaskDraft(title="precious"))
    text = prefs_path.read_text(encoding="utf-8")
    prefs_path.write_text(text[:-5], encoding="utf-8")

    second = TodoWorkspace(BoardRepository(PreferenceStore(prefs_path)))
    second.add_task(TaskDraft(title="new"))

    assert second.last_save_error is None
    assert "precious" in (prefs_path.parent / "prefs.json.corrupt").read_text(encoding="utf-8")
    reloaded = BoardRepository(PreferenceStore(prefs_path)).load()
    assert [t.title for t in reloaded.tasks] == ["new"]


def test_foreign_values_survive_writes(prefs_path: Path) -> None:
    prefs_path.write_text(json.dumps({"window": {"width": 640}, "a": "1"}), encoding="utf-8")
    store = PreferenceStore(prefs_path)

    store.set_string("b", "2")

    data = json.loads(prefs_path.read_text(encoding="utf-8"))
    assert data == {"window": {"width": 640}, "a": "1", "b": "2"}
    assert not store.has_key("window")
    assert store.get_string("window", "none") == "none"


def test_unreadable_file_that_cannot_be_moved_is_never_overwritten(
    prefs_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    prefs_path.write_text("{truncated", encoding="utf-8")

    def refuse(self: Path, target: Path) -> Path:
        raise PermissionError("read-only folder")

    monkeypatch.setattr(Path, "replace", refuse)
    store = PreferenceStore(prefs_path)

    result = store.set_string("a", "1")

    assert isinstance(result, Err)
    assert "Refusing to overwrite" in result.error
    assert prefs_path.read_text(encoding="utf-8") == "{truncated"
