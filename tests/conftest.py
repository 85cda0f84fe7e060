# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from sczl.core.state import AppState
from sczl.tasks.task_list import TaskList
from sczl.tasks.task_store import TaskFileStore

from .fakes import FakeTaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="SCZL",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path,
        tasks_file_path=tmp_path / "sczl.txt",
    )


@pytest.fixture()
def file_store(settings: SimpleNamespace) -> TaskFileStore:
    return TaskFileStore(settings.tasks_file_path)


@pytest.fixture()
def fake_store() -> FakeTaskStore:
    return FakeTaskStore()


@pytest.fixture()
def state(settings: SimpleNamespace, file_store: TaskFileStore) -> AppState:
    """
    AppState wired with the real file store on tmp_path.

    NOTE: We keep the real TaskFileStore here because the persisted text is
    part of what we want to test.
    """
    return AppState(settings=settings, tasks=TaskList(), storage=file_store)
