# src/sczl/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .task_models import (
    Deadline,
    Event,
    Task,
    TaskKind,
    Todo,
    format_storage_datetime,
    parse_storage_datetime,
)

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = " | "


class InvalidTaskLine(ValueError):
    """A persisted line that cannot be turned back into a task."""


def encode_task(task: Task) -> str:
    """
    Encode one task as a file record:

        T | 0 | read book
        D | 1 | submit report | 2024-12-01 18:00
        E | 0 | team sync | 2024-12-01 09:00 | 2024-12-01 10:00
    """
    fields = [str(task.kind), "1" if task.done else "0", task.description]
    match task:
        case Todo():
            pass
        case Deadline():
            fields.append(format_storage_datetime(task.by))
        case Event():
            fields.append(format_storage_datetime(task.start))
            fields.append(format_storage_datetime(task.end))
    return FIELD_SEPARATOR.join(fields)


def decode_line(line: str) -> Task:
    """
    Inverse of encode_task. Raises InvalidTaskLine on any malformed record.

    Datetimes are taken from the end of the record, so a description that
    itself contains the separator is re-joined intact.
    """
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) < 3:
        raise InvalidTaskLine(f"expected at least 3 fields, got {len(parts)}")

    code, done_flag = parts[0], parts[1]
    done = done_flag == "1"

    try:
        kind = TaskKind(code)
    except ValueError:
        raise InvalidTaskLine(f"unknown task type {code!r}") from None

    try:
        task: Task
        match kind:
            case TaskKind.TODO:
                task = Todo(FIELD_SEPARATOR.join(parts[2:]), done=done)
            case TaskKind.DEADLINE:
                if len(parts) < 4:
                    raise InvalidTaskLine("deadline record is missing its date")
                task = Deadline(
                    FIELD_SEPARATOR.join(parts[2:-1]),
                    parse_storage_datetime(parts[-1]),
                    done=done,
                )
            case TaskKind.EVENT:
                if len(parts) < 5:
                    raise InvalidTaskLine("event record is missing its start/end")
                task = Event(
                    FIELD_SEPARATOR.join(parts[2:-2]),
                    parse_storage_datetime(parts[-2]),
                    parse_storage_datetime(parts[-1]),
                    done=done,
                )
    except InvalidTaskLine:
        raise
    except ValueError as e:
        raise InvalidTaskLine(str(e)) from e
    return task


class TaskFileStore:
    """
    Flat-file task store: one ` | `-separated record per line.

    - load() raises FileNotFoundError when the file is absent; malformed lines
      are skipped with a warning.
    - save() rewrites the whole file via a temp file + os.replace. Failures are
      logged and reported through the return value, never raised.
    """

    def __init__(self, path: str | Path = "data/sczl.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        if not self._path.exists():
            raise FileNotFoundError(f"Task file not found: {self._path}")

        tasks: list[Task] = []
        skipped = 0
        # Bytes in, decoded per line: one undecodable line is skipped like any other bad record.
        with self._path.open("rb") as fh:
            for lineno, raw in enumerate(fh, start=1):
                try:
                    line = raw.decode("utf-8").rstrip("\r\n")
                except UnicodeDecodeError as e:
                    skipped += 1
                    logger.warning("Skipping invalid task (line %d: %s): %r", lineno, e, raw)
                    continue
                if not line.strip():
                    continue
                try:
                    tasks.append(decode_line(line))
                except InvalidTaskLine as e:
                    skipped += 1
                    logger.warning("Skipping invalid task (line %d: %s): %s", lineno, e, line)

        logger.info("Loaded %d tasks from %s (skipped=%d)", len(tasks), self._path, skipped)
        return tasks

    def save(self, tasks: Iterable[Task]) -> bool:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            payload = "".join(encode_task(t) + "\n" for t in tasks)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except OSError:
            logger.exception("An error occurred while saving tasks to %s", self._path)
            with contextlib.suppress(OSError):
                tmp.unlink()
            return False
        logger.debug("Saved tasks to %s", self._path)
        return True
