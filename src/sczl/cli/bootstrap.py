# src/sczl/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the file store into AppState,
- loads the persisted task list (missing file => empty list).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskStorage
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskFileStore

logger = logging.getLogger(__name__)


def load_task_list(storage: TaskStorage) -> TaskList:
    """Load tasks, starting empty when the file is missing or unreadable."""
    try:
        return TaskList(storage.load())
    except FileNotFoundError as e:
        logger.warning("Error loading file. Starting with an empty task list (%s).", e)
        return TaskList()
    except OSError:
        logger.exception("Error loading file. Starting with an empty task list.")
        return TaskList()


def create_initial_state(*, settings=None, storage: TaskStorage | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and storage injectable makes the app easier to test and
    avoids hidden global config reads. If settings is None, falls back to
    get_settings().
    """
    if settings is None:
        settings = get_settings()

    if storage is None:
        storage = TaskFileStore(settings.tasks_file_path)

    return AppState(
        settings=settings,
        tasks=load_task_list(storage),
        storage=storage,
    )
