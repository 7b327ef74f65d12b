# tests/conftest.py

from __future__ import annotations

import logging
import random
from collections.abc import Iterator
from datetime import date
from pathlib import Path

import pytest

from todopanel.application import TodoWorkspace
from todopanel.config import HOME_ENV_VAR
from todopanel.infrastructure.storage import BoardRepository, PreferenceStore

from .fakes import RecordingStore

TODAY = date(2024, 1, 8)


@pytest.fixture(autouse=True)
def todopanel_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config directory at a per-test folder."""
    home = tmp_path / "home"
    monkeypatch.setenv(HOME_ENV_VAR, str(home))
    return home


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """The CLI reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture()
def today() -> date:
    return TODAY


@pytest.fixture()
def prefs_path(tmp_path: Path) -> Path:
    return tmp_path / "prefs.json"


@pytest.fixture()
def repository(prefs_path: Path) -> BoardRepository:
    return BoardRepository(PreferenceStore(prefs_path))


@pytest.fixture()
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture()
def workspace(store: RecordingStore, today: date) -> TodoWorkspace:
    """Workspace on an in-memory store with a fixed clock and seeded colours."""
    return TodoWorkspace(store, clock=lambda: today, rng=random.Random(7))
