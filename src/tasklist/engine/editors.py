# src/tasklist/engine/editors.py

"""
Interactive field editors.

Each editor prompts once, writes the parsed value (or None) into the
task, and returns the ParseOutcome so the caller can decide whether to
retry. Editors never raise on bad input.

Shared by the add and edit flows.
"""

import logging
from datetime import date, datetime
from typing import Callable, Optional

from .model import Priority, Task
from .validate import ParseOutcome, compose_date_time, parse_date, parse_priority

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Console helpers
# ---------------------------------------------------------------------

def ask(prompt: str) -> str:
    """
    Print a prompt on its own line and read one line of input.

    EOFError propagates: the command loop treats it as end of session.
    """
    print(prompt)
    return read_line()


def read_line() -> str:
    """
    Read one line of input.

    A line that cannot be decoded comes back as a replacement character,
    which no field accepts, so it is reported as invalid input.
    """
    try:
        return input()
    except UnicodeDecodeError as e:
        logger.warning("Undecodable input line: %s", e)
        return "\ufffd"


# ---------------------------------------------------------------------
# Editors
# ---------------------------------------------------------------------

def set_priority(task: Task) -> ParseOutcome[Priority]:
    outcome = parse_priority(ask("Input the task priority (C, H, N, L):"))
    task.priority = outcome.value
    return outcome


def set_date(task: Task) -> ParseOutcome[date]:
    outcome = parse_date(ask("Input the date (yyyy-mm-dd):"))
    task.due_date = outcome.value
    return outcome


def set_date_time(task: Task, *, now: Optional[datetime] = None) -> ParseOutcome[datetime]:
    """
    Read `hh:mm` and combine it with the task's date.

    On success the derived time-of-day and urgency are recomputed against
    `now` (current UTC time by default). On failure the date-time and its
    derived fields are cleared.
    """
    outcome = compose_date_time(task.due_date, ask("Input the time (hh:mm):"))
    task.set_due(outcome.value, now=now)
    return outcome


def set_task_text(task: Task) -> ParseOutcome[list[str]]:
    """
    Read body lines until a blank line.

    A blank line before any text reports the task as blank and leaves the
    current body untouched.
    """
    print("Input a new task (enter a blank line to end):")
    lines: list[str] = []

    while True:
        line = read_line().strip()
        if line:
            lines.append(line)
            continue

        if not lines:
            print("The task is blank")
            return ParseOutcome.failure("blank task")

        task.text = lines
        return ParseOutcome.success(lines)


# ---------------------------------------------------------------------
# Dispatch by field name
# ---------------------------------------------------------------------

_EDITORS: dict[str, Callable[[Task], ParseOutcome]] = {
    "priority": set_priority,
    "date": set_date,
    "time": set_date_time,
    "task": set_task_text,
}


def run_editor(task: Task, field_name: str) -> ParseOutcome:
    """
    Run the editor registered for `field_name` once.
    """
    editor = _EDITORS[field_name.strip()]
    outcome = editor(task)
    logger.debug("edited %s: %s", field_name, "ok" if outcome.ok else outcome.error)
    return outcome
