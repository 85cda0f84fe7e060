# src/sczl/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.commands import CommandResult
from ..core.state import AppState, respond

logger = logging.getLogger(__name__)

InputFn = Callable[[], str]
OutputFn = Callable[[str], None]


def _welcome(app_name: str) -> str:
    return f"Hello! I'm {app_name}\nWhat can I do for you?"


def run_console_loop(
    state: AppState,
    read_line: InputFn = input,
    write: OutputFn = print,
) -> None:
    """
    Read one line at a time, answer it, stop after an exit command.

    The input source is owned by the caller and passed in (stdin by default),
    so tests and other front ends can drive the loop with scripted lines.
    """
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "SCZL"))
    logger.info("Console connector started (tasks=%d).", len(state.tasks))
    write(_welcome(app_name))

    while True:
        try:
            user_input = read_line().strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            continue

        try:
            result = respond(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            result = CommandResult("Internal error while handling a command.", ok=False)

        write(result.text)
        if result.is_exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
