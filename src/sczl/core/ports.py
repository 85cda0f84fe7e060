# src/sczl/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Command execution depends on this Protocol instead of the concrete file store,
which keeps the storage swappable and makes testing easier.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task


class TaskStorage(Protocol):
    """Whole-list persistence for tasks."""

    def load(self) -> list[Task]: ...

    def save(self, tasks: Iterable[Task]) -> bool:
        """Persist all tasks; return False (never raise) on I/O failure."""
        ...
