# src/sczl/core/parser.py

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from ..tasks.task_models import parse_input_datetime
from .commands import (
    AddDeadline,
    AddEvent,
    AddTodo,
    Command,
    Delete,
    Exit,
    Find,
    ListTasks,
    Mark,
    Unmark,
)

DATE_FORMAT_ERROR = "Invalid date format. Please use yyyy-MM-dd HHmm format."

# Hyphen between two datetimes: "... 0900-2024-12-01 ...". Year/month hyphens never match.
_INTERVAL_SEPARATOR = re.compile(r"(?<=\d{4})\s*-\s*(?=\d{4}-)")
_TASK_NUMBER = re.compile(r"[+-]?\d+")


@dataclass(frozen=True, slots=True)
class Failure:
    """A parse failure carrying the user-facing message."""

    message: str


ParseResult = Command | Failure
CommandParser = Callable[[str], ParseResult]


class CommandParserRegistry:
    """Keyword -> argument parser table."""

    def __init__(self) -> None:
        self._parsers: dict[str, CommandParser] = {}

    def register(self, keyword: str, parser: CommandParser) -> None:
        self._parsers[keyword] = parser

    def parse(self, line: str) -> ParseResult:
        """
        Turn "keyword args" into a Command, or a Failure with a message.

        Only the first space separates the keyword; everything after it is
        handed to the keyword's parser untouched.
        """
        keyword, _, args = line.strip().partition(" ")
        parser = self._parsers.get(keyword)
        if parser is None:
            return Failure("Unknown command.")
        return parser(args)


def _parse_todo(args: str) -> ParseResult:
    description = args.strip()
    if not description:
        return Failure("The description of a todo cannot be empty.")
    return AddTodo(description)


def _parse_deadline(args: str) -> ParseResult:
    description, marker, by_text = args.partition("/by")
    description, by_text = description.strip(), by_text.strip()
    if not marker or not description or not by_text:
        return Failure("Invalid deadline command format.")
    try:
        by = parse_input_datetime(by_text)
    except ValueError:
        return Failure(DATE_FORMAT_ERROR)
    return AddDeadline(description, by)


def _split_interval(interval: str) -> tuple[str, str]:
    m = _INTERVAL_SEPARATOR.search(interval)
    if m:
        return interval[: m.start()].strip(), interval[m.end() :].strip()
    start, _, end = interval.partition("-")
    return start.strip(), end.strip()


def _parse_event(args: str) -> ParseResult:
    description, marker, interval = args.partition("/at")
    description, interval = description.strip(), interval.strip()
    if not marker or not description or not interval:
        return Failure("Invalid event command format.")

    start_text, end_text = _split_interval(interval)
    if not start_text or not end_text:
        return Failure("Invalid time format for event command.")
    try:
        start = parse_input_datetime(start_text)
        end = parse_input_datetime(end_text)
    except ValueError:
        return Failure(DATE_FORMAT_ERROR)
    return AddEvent(description, start, end)


def _task_index(args: str) -> int | None:
    # Users count from 1; commands carry the 0-based index. Range is checked at execution.
    if not _TASK_NUMBER.fullmatch(args):
        return None
    return int(args) - 1


def _parse_mark(args: str) -> ParseResult:
    index = _task_index(args)
    return Failure("Invalid task number format.") if index is None else Mark(index)


def _parse_unmark(args: str) -> ParseResult:
    index = _task_index(args)
    return Failure("Invalid task number format.") if index is None else Unmark(index)


def _parse_delete(args: str) -> ParseResult:
    index = _task_index(args)
    return Failure("Invalid task number format.") if index is None else Delete(index)


def _parse_find(args: str) -> ParseResult:
    keyword = args.strip()
    if not keyword:
        return Failure("The search keyword cannot be empty.")
    return Find(keyword)


registry = CommandParserRegistry()

registry.register("todo", _parse_todo)
registry.register("deadline", _parse_deadline)
registry.register("event", _parse_event)
registry.register("list", lambda _args: ListTasks())
registry.register("mark", _parse_mark)
registry.register("unmark", _parse_unmark)
registry.register("delete", _parse_delete)
registry.register("bye", lambda _args: Exit())
registry.register("find", _parse_find)


def parse_command(line: str) -> ParseResult:
    return registry.parse(line)
