# src/sczl/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

# Three distinct datetime formats:
# - INPUT: what users type after /by and /at
# - STORAGE: what the task file holds
# - DISPLAY: what rendered tasks show
INPUT_DATETIME_FORMAT = "%Y-%m-%d %H%M"
STORAGE_DATETIME_FORMAT = "%Y-%m-%d %H:%M"
DISPLAY_DATETIME_FORMAT = "%b %d %Y, %H:%M"

# strptime alone accepts single-digit fields ("2024-1-5 900"), so the shape is checked first.
_INPUT_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2} \d{4}")
_STORAGE_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}")


class TaskKind(StrEnum):
    """Single-letter type code used in rendering and in the task file."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass(slots=True)
class Todo:
    description: str
    done: bool = False

    @property
    def kind(self) -> TaskKind:
        return TaskKind.TODO


@dataclass(slots=True)
class Deadline:
    description: str
    by: datetime
    done: bool = False

    @property
    def kind(self) -> TaskKind:
        return TaskKind.DEADLINE


@dataclass(slots=True)
class Event:
    description: str
    start: datetime
    end: datetime
    done: bool = False

    @property
    def kind(self) -> TaskKind:
        return TaskKind.EVENT


Task = Todo | Deadline | Event


def _parse_strict(text: str, shape: re.Pattern[str], fmt: str) -> datetime:
    raw = text.strip()
    if not shape.fullmatch(raw):
        raise ValueError(f"datetime {raw!r} does not match {fmt!r}")
    return datetime.strptime(raw, fmt)


def parse_input_datetime(text: str) -> datetime:
    """Parse a user-typed datetime (``yyyy-MM-dd HHmm``). Raises ValueError."""
    return _parse_strict(text, _INPUT_SHAPE, INPUT_DATETIME_FORMAT)


def parse_storage_datetime(text: str) -> datetime:
    """Parse a persisted datetime (``yyyy-MM-dd HH:mm``). Raises ValueError."""
    return _parse_strict(text, _STORAGE_SHAPE, STORAGE_DATETIME_FORMAT)


def format_storage_datetime(value: datetime) -> str:
    return value.strftime(STORAGE_DATETIME_FORMAT)


def format_display_datetime(value: datetime) -> str:
    return value.strftime(DISPLAY_DATETIME_FORMAT)


def task_details(task: Task) -> str:
    """
    Description plus the variant-specific time suffix.

    This is the text `find` searches in, so deadline/event dates are matchable.
    """
    match task:
        case Todo():
            return task.description
        case Deadline():
            return f"{task.description} (by: {format_display_datetime(task.by)})"
        case Event():
            return (
                f"{task.description} (from: {format_display_datetime(task.start)} "
                f"to: {format_display_datetime(task.end)})"
            )
    raise TypeError(f"not a task: {task!r}")


def render_task(task: Task) -> str:
    """Human-readable form, e.g. ``[D][X] submit report (by: Dec 01 2024, 18:00)``."""
    mark = "X" if task.done else " "
    return f"[{task.kind}][{mark}] {task_details(task)}"
