# src/sczl/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .task_models import Task


class TaskList:
    """
    Ordered in-memory task collection.

    Insertion order is display order and file order. Indices are 0-based here;
    user-facing numbering (1-based) is the caller's concern. Never touches the
    filesystem.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def in_range(self, index: int) -> bool:
        return 0 <= index < len(self._tasks)

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        if not self.in_range(index):
            raise IndexError(f"task index out of range: {index}")
        return self._tasks[index]

    def remove(self, index: int) -> Task:
        """Remove and return the task at `index`; later tasks shift down by one."""
        if not self.in_range(index):
            raise IndexError(f"task index out of range: {index}")
        return self._tasks.pop(index)

    def to_list(self) -> list[Task]:
        return list(self._tasks)
