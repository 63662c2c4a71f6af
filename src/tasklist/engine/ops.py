# src/tasklist/engine/ops.py

"""
Store-level operations and serialisation.

This module contains:
- serialisation of Task objects into plain records,
- writing the whole task list back to the store file,
- positional removal from the list.

No parsing is performed here.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from .model import Task

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Serialisation
# ---------------------------------------------------------------------

def task_to_record(task: "Task") -> dict[str, Any]:
    """
    Convert a Task into the mapping stored on disk.

    Key order is fixed; derived fields are written only when set.
    """
    record: dict[str, Any] = {
        "priority": task.priority.value if task.priority is not None else None,
        "date": task.due_date.isoformat() if task.due_date is not None else None,
        "dateTime": _format_date_time(task),
        "text": list(task.text),
    }
    if task.time_of_day is not None:
        record["time"] = task.time_of_day
    if task.urgency is not None:
        record["urgency"] = task.urgency.value
    return record


def _format_date_time(task: "Task") -> str | None:
    if task.date_time is None:
        return None
    if task.date_time.second or task.date_time.microsecond:
        return task.date_time.isoformat(timespec="seconds")
    return task.date_time.isoformat(timespec="minutes")


def save_tasks(path: str | Path, tasks: list["Task"]) -> None:
    """
    Persist the whole task list by fully re-rendering the store file.

    Errors (unwritable path, missing directory) propagate to the caller.
    """
    p = Path(path)
    data = [task_to_record(t) for t in tasks]
    p.write_text(
        yaml.safe_dump(data, sort_keys=False, allow_unicode=True),
        encoding="utf-8",
    )
    logger.debug("Saved %d task(s) to %s", len(tasks), p)


# ---------------------------------------------------------------------
# List mutation
# ---------------------------------------------------------------------

def remove_task(tasks: list["Task"], number: int) -> "Task":
    """
    Remove and return the task at 1-based position `number`.

    Later tasks shift down by one.
    """
    if number < 1 or number > len(tasks):
        raise IndexError(f"task number out of range: {number}")
    return tasks.pop(number - 1)
