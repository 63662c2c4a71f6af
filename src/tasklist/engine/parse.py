# src/tasklist/engine/parse.py

"""
Task store parser.

Loads the whole task list from the store file into Task models.

Store layout:
- taskList.yml  : YAML sequence, one mapping per task
- taskList.json : legacy store of the earlier tool (read only, JSON is
                  valid YAML). Priority and urgency there are colour glyphs.

Derived fields (time, urgency) are taken as stored and NOT recomputed.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any, Optional

import yaml

from .model import Priority, Task, Urgency

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParseError(Exception):
    """
    Raised when the store file is unreadable or structurally invalid.
    """

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------

def load_tasks(path: str | Path, legacy_path: Optional[str | Path] = None) -> list[Task]:
    """
    Load the task list from `path`.

    If `path` does not exist, `legacy_path` is tried instead. If neither
    exists the list is empty: a missing store is not an error.
    """
    p = Path(path)
    if not p.exists() and legacy_path is not None and Path(legacy_path).exists():
        logger.info("Importing legacy store %s", legacy_path)
        p = Path(legacy_path)

    if not p.exists():
        logger.debug("No store at %s, starting with an empty list", p)
        return []

    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ParseError(str(p), f"Cannot read file: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ParseError(str(p), f"Invalid YAML: {e}") from e

    if data is None:
        return []

    if not isinstance(data, list):
        raise ParseError(str(p), "Store root must be a list of tasks")

    tasks = [task_from_record(str(p), i, raw) for i, raw in enumerate(data, start=1)]
    logger.debug("Loaded %d task(s) from %s", len(tasks), p)
    return tasks


def task_from_record(path: str, index: int, raw: Any) -> Task:
    """
    Build a Task from one stored mapping.
    """
    if not isinstance(raw, dict):
        raise ParseError(path, f"task[{index}] must be a mapping")

    where = f"task[{index}]"

    text = raw.get("text")
    if not isinstance(text, list) or not all(isinstance(s, str) for s in text):
        raise ParseError(path, f"{where}.text must be a list of strings")
    if not text:
        raise ParseError(path, f"{where}.text must not be empty")

    return Task(
        priority=_parse_priority(path, where, raw.get("priority")),
        due_date=_parse_date(path, where, raw.get("date")),
        date_time=_parse_date_time(path, where, raw.get("dateTime")),
        text=list(text),
        time_of_day=_parse_time_of_day(path, where, raw),
        urgency=_parse_urgency(path, where, raw.get("urgency", raw.get("terms"))),
    )


# ---------------------------------------------------------------------
# Field parsers
# ---------------------------------------------------------------------

def _optional_str(path: str, where: str, raw: dict[str, Any], key: str) -> Optional[str]:
    value = raw.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ParseError(path, f"{where}.{key} must be a string or null")


def _parse_time_of_day(path: str, where: str, raw: dict[str, Any]) -> Optional[str]:
    # The earlier tool stored the text "null" when a time was set without a date.
    value = _optional_str(path, where, raw, "time")
    if value == "null":
        return None
    return value


def _parse_priority(path: str, where: str, value: Any) -> Optional[Priority]:
    if value is None:
        return None
    if isinstance(value, str):
        try:
            return Priority(value.strip().upper())
        except ValueError:
            legacy = Priority.from_glyph(value)
            if legacy is not None:
                return legacy
    allowed = ", ".join(p.value for p in Priority)
    raise ParseError(path, f"Invalid {where}.priority '{value}' (allowed: {allowed})")


def _parse_urgency(path: str, where: str, value: Any) -> Optional[Urgency]:
    if value is None:
        return None
    if isinstance(value, str):
        try:
            return Urgency(value)
        except ValueError:
            legacy = Urgency.from_glyph(value)
            if legacy is not None:
                return legacy
    raise ParseError(path, f"Invalid {where}.urgency '{value}'")


def _parse_date(path: str, where: str, value: Any) -> Optional[date]:
    if value is None:
        return None

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError as e:
            raise ParseError(path, f"Invalid ISO date for {where}.date: '{value}'") from e

    raise ParseError(path, f"{where}.date must be an ISO date string")


def _parse_date_time(path: str, where: str, value: Any) -> Optional[datetime]:
    if value is None:
        return None

    if isinstance(value, datetime):
        return value.replace(tzinfo=None)

    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError as e:
            raise ParseError(path, f"Invalid ISO date-time for {where}.dateTime: '{value}'") from e

    raise ParseError(path, f"{where}.dateTime must be an ISO date-time string")
