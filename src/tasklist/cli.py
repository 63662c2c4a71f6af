# src/tasklist/cli.py

"""
Command-line interface for tasklist.

This module:
- parses the few startup options,
- loads the store once and runs the interactive command loop,
- saves the store once, when the session ends.

Commands read at the prompt: add, print, edit, delete, end.
"""

import argparse
import logging
import sys
from typing import Callable

from tasklist.config import get_settings
from tasklist.engine.actions import add_task, delete_task, edit_task
from tasklist.engine.editors import ask
from tasklist.engine.parse import ParseError
from tasklist.engine.render import print_tasks
from tasklist.logging_setup import setup_logging
from tasklist.state import AppState, create_initial_state

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tasklist",
        description="Interactive task list kept in taskList.yml",
    )
    parser.add_argument(
        "-C",
        "--cd",
        type=str,
        default=".",
        help="Work as if current directory is this path (default: .)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Show priority and urgency as letters instead of coloured cells",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write debug logs to this file",
    )
    return parser


# ---------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------

def cmd_print(state: AppState) -> None:
    print_tasks(state.tasks, color=state.settings.color)


COMMANDS: dict[str, Callable[[AppState], None]] = {
    "add": add_task,
    "print": cmd_print,
    "edit": edit_task,
    "delete": delete_task,
}


def dispatch(state: AppState, command: str) -> bool:
    """
    Run one top-level command.

    Returns False when the session should end.
    """
    if command == "end":
        return False

    handler = COMMANDS.get(command)
    if handler is None:
        print("The input action is invalid")
        return True

    handler(state)
    return True


def run_loop(state: AppState) -> None:
    """
    Read commands until `end` (or end of input), then save.

    End of input and Ctrl-C end the session like `end` does; a flow that
    was in progress is dropped.
    The list is saved even when an unexpected error ends the loop.
    """
    try:
        while dispatch(state, ask("Input an action (add, print, edit, delete, end):").strip()):
            pass
    except (EOFError, KeyboardInterrupt):
        logger.debug("Input closed, ending session")
    finally:
        state.save()

    print("Tasklist exiting!")


# ---------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------

def _tolerate_bad_input_bytes() -> None:
    reconfigure = getattr(sys.stdin, "reconfigure", None)
    if reconfigure is None:
        return
    try:
        reconfigure(errors="replace")
    except (OSError, ValueError):
        logger.debug("stdin cannot be reconfigured", exc_info=True)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = get_settings(args)
    setup_logging(console_level=settings.log_level, log_file=settings.log_file)
    _tolerate_bad_input_bytes()

    try:
        state = create_initial_state(settings)
    except ParseError as e:
        print(f"Error: {e}")
        return 1

    try:
        run_loop(state)
    except OSError as e:
        logger.error("Cannot save %s: %s", settings.store_path, e)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
