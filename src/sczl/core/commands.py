# src/sczl/core/commands.py

"""
Command model and execution.

Each command is an immutable value produced by the parser. `execute_command`
applies it to the task list, persists through the storage port when the list
changed, and returns the user-facing text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from ..tasks.task_list import TaskList
from ..tasks.task_models import Deadline, Event, Task, Todo, render_task, task_details
from .ports import TaskStorage

logger = logging.getLogger(__name__)

INVALID_TASK_NUMBER = "Invalid task number."
GOODBYE = "Bye. Hope to see you again soon!"


@dataclass(frozen=True, slots=True)
class AddTodo:
    description: str


@dataclass(frozen=True, slots=True)
class AddDeadline:
    description: str
    by: datetime


@dataclass(frozen=True, slots=True)
class AddEvent:
    description: str
    start: datetime
    end: datetime


@dataclass(frozen=True, slots=True)
class ListTasks:
    pass


@dataclass(frozen=True, slots=True)
class Mark:
    index: int  # 0-based


@dataclass(frozen=True, slots=True)
class Unmark:
    index: int  # 0-based


@dataclass(frozen=True, slots=True)
class Delete:
    index: int  # 0-based


@dataclass(frozen=True, slots=True)
class Find:
    keyword: str


@dataclass(frozen=True, slots=True)
class Exit:
    pass


Command = AddTodo | AddDeadline | AddEvent | ListTasks | Mark | Unmark | Delete | Find | Exit


@dataclass(frozen=True, slots=True)
class CommandResult:
    text: str
    is_exit: bool = False
    ok: bool = True


def _numbered(tasks: list[Task]) -> list[str]:
    return [f"{i}. {render_task(t)}" for i, t in enumerate(tasks, start=1)]


def _persist(tasks: TaskList, storage: TaskStorage) -> None:
    # In-memory list stays authoritative; a failed save only gets logged.
    if not storage.save(tasks):
        logger.warning("Task list not persisted (%d tasks kept in memory).", len(tasks))


def _add(task: Task, tasks: TaskList, storage: TaskStorage) -> CommandResult:
    tasks.add(task)
    _persist(tasks, storage)
    logger.debug("Added task %s", render_task(task))
    return CommandResult(
        "Got it. I've added this task:\n"
        f"  {render_task(task)}\n"
        f"Now you have {len(tasks)} tasks in the list."
    )


def _set_done(index: int, done: bool, tasks: TaskList, storage: TaskStorage) -> CommandResult:
    if not tasks.in_range(index):
        return CommandResult(INVALID_TASK_NUMBER, ok=False)
    task = tasks.get(index)
    task.done = done
    _persist(tasks, storage)
    header = (
        "Nice! I've marked this task as done:"
        if done
        else "OK, I've marked this task as not done yet:"
    )
    return CommandResult(f"{header}\n  {render_task(task)}")


def _delete(index: int, tasks: TaskList, storage: TaskStorage) -> CommandResult:
    if not tasks.in_range(index):
        return CommandResult(INVALID_TASK_NUMBER, ok=False)
    task = tasks.remove(index)
    _persist(tasks, storage)
    return CommandResult(
        "Noted. I've removed this task:\n"
        f"  {render_task(task)}\n"
        f"Now you have {len(tasks)} tasks in the list."
    )


def _find(keyword: str, tasks: TaskList) -> CommandResult:
    needle = keyword.lower()
    matches = [t for t in tasks if needle in task_details(t).lower()]
    if not matches:
        return CommandResult("No matching tasks found.")
    lines = ["Here are the matching tasks in your list:", *_numbered(matches)]
    return CommandResult("\n".join(lines))


def execute_command(command: Command, tasks: TaskList, storage: TaskStorage) -> CommandResult:
    match command:
        case AddTodo(description=description):
            return _add(Todo(description), tasks, storage)
        case AddDeadline(description=description, by=by):
            return _add(Deadline(description, by), tasks, storage)
        case AddEvent(description=description, start=start, end=end):
            return _add(Event(description, start, end), tasks, storage)
        case ListTasks():
            lines = ["Here are the tasks in your list:", *_numbered(tasks.to_list())]
            return CommandResult("\n".join(lines))
        case Mark(index=index):
            return _set_done(index, True, tasks, storage)
        case Unmark(index=index):
            return _set_done(index, False, tasks, storage)
        case Delete(index=index):
            return _delete(index, tasks, storage)
        case Find(keyword=keyword):
            return _find(keyword, tasks)
        case Exit():
            return CommandResult(GOODBYE, is_exit=True)
    raise TypeError(f"not a command: {command!r}")
