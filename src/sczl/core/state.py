# src/sczl/core/state.py

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..tasks.task_list import TaskList
from .commands import CommandResult, execute_command
from .parser import Failure, parse_command
from .ports import TaskStorage

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    # Store Settings on the state for easy access in connectors.
    settings: object

    tasks: TaskList
    storage: TaskStorage


def respond(state: AppState, line: str) -> CommandResult:
    """
    Handle one raw input line end to end: parse, execute, return the reply.

    This is the only call a presentation collaborator (console loop, chat
    window) needs. Expected errors come back as results with ok=False.
    """
    parsed = parse_command(line)
    if isinstance(parsed, Failure):
        logger.debug("Rejected input %r: %s", line, parsed.message)
        return CommandResult(parsed.message, ok=False)

    result = execute_command(parsed, state.tasks, state.storage)
    if not result.ok:
        logger.debug("Command %r failed: %s", parsed, result.text)
    return result
