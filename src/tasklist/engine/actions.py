# src/tasklist/engine/actions.py

"""
Task list actions.

This module contains the interactive add / edit / delete flows.

Design principles:
- Field prompts live in editors; flows only decide when to retry.
- Invalid input is reported and re-prompted, never raised.
- The list is mutated in place; persistence happens once, at session end.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .editors import ask, run_editor, set_date, set_date_time, set_priority, set_task_text
from .model import Task
from .ops import remove_task
from .render import NO_TASKS, print_tasks
from .validate import is_field_valid, parse_task_number

if TYPE_CHECKING:
    from ..state import AppState

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Add
# ---------------------------------------------------------------------

def add_task(state: "AppState") -> None:
    """
    Walk a new task through priority, date, time and text.

    Priority is re-prompted silently; date and time report the bad input
    first. The task is appended only when a non-blank body was entered.
    """
    task = Task()

    while not set_priority(task).ok:
        pass

    while not set_date(task).ok:
        print("The input date is invalid")

    while not set_date_time(task).ok:
        print("The input time is invalid")

    set_task_text(task)

    if task.has_text:
        state.tasks.append(task)
        logger.debug("Added task #%d", len(state.tasks))


# ---------------------------------------------------------------------
# Edit / delete
# ---------------------------------------------------------------------

def choose_task(state: "AppState") -> int:
    """
    Prompt until a valid 1-based task number is entered.
    """
    count = len(state.tasks)
    while True:
        outcome = parse_task_number(ask(f"Input the task number (1-{count}):"), count)
        if outcome.ok:
            return outcome.value
        print("Invalid task number")


def delete_task(state: "AppState") -> None:
    if not state.tasks:
        print(NO_TASKS)
        return

    print_tasks(state.tasks, color=state.settings.color)
    number = choose_task(state)

    remove_task(state.tasks, number)
    logger.debug("Deleted task #%d", number)
    print("The task is deleted")


def edit_task(state: "AppState") -> None:
    """
    Overwrite a single field of a chosen task.

    The new value is not checked: a bad value unsets the field and the
    task is still reported as changed.
    """
    if not state.tasks:
        print(NO_TASKS)
        return

    print_tasks(state.tasks, color=state.settings.color)
    number = choose_task(state)
    task = state.tasks[number - 1]

    while True:
        field_name = ask("Input a field to edit (priority, date, time, task):").strip()
        if is_field_valid(field_name):
            break
        print("Invalid field")

    run_editor(task, field_name)
    print("The task is changed")
