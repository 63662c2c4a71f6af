# src/tasklist/engine/model.py

"""
Core domain models.

This module defines the in-memory representation of a task, its
priority and urgency enums, and the stamp record used by the renderer.

No filesystem access and no console I/O should happen here.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import NamedTuple, Optional

from . import deadline
from .deadline import Urgency
from .glyphs import BLUE, GREEN, RED, YELLOW


# ---------------------------------------------------------------------
# Priority
# ---------------------------------------------------------------------

class Priority(str, Enum):
    """
    Task priority, keyed by the letter the user types.
    """

    CRITICAL = "C"
    HIGH = "H"
    NORMAL = "N"
    LOW = "L"

    @property
    def glyph(self) -> str:
        return _PRIORITY_GLYPHS[self]

    @classmethod
    def from_glyph(cls, glyph: str) -> Optional["Priority"]:
        for member, g in _PRIORITY_GLYPHS.items():
            if g == glyph:
                return member
        return None


_PRIORITY_GLYPHS = {
    Priority.CRITICAL: RED,
    Priority.HIGH: YELLOW,
    Priority.NORMAL: GREEN,
    Priority.LOW: BLUE,
}


# ---------------------------------------------------------------------
# Stamp
# ---------------------------------------------------------------------

class Stamp(NamedTuple):
    """Non-text metadata of a task, in table column order."""

    due_date: Optional[date]
    time: Optional[str]
    priority: Optional[Priority]
    urgency: Optional[Urgency]


# ---------------------------------------------------------------------
# Task
# ---------------------------------------------------------------------

@dataclass(slots=True)
class Task:
    """
    In-memory representation of a single to-do item.

    Notes:
    - identity is positional (index in the task list), there is no id.
    - date_time is naive and read as UTC.
    - time_of_day and urgency are derived from date_time, but only at the
      moment date_time is set (see set_due). They are not refreshed later.
    """

    priority: Optional[Priority] = None
    due_date: Optional[date] = None
    date_time: Optional[datetime] = None
    text: list[str] = field(default_factory=list)

    # Derived fields
    time_of_day: Optional[str] = None
    urgency: Optional[Urgency] = None

    def set_due(self, value: Optional[datetime], *, now: Optional[datetime] = None) -> None:
        """
        Set the due date-time and recompute the derived fields from it.
        """
        self.date_time = value
        self.time_of_day = deadline.time_of_day(value)
        self.urgency = deadline.urgency_of(deadline.days_until(value, now))

    @property
    def stamp(self) -> Stamp:
        return Stamp(
            due_date=self.due_date,
            time=self.time_of_day,
            priority=self.priority,
            urgency=self.urgency,
        )

    @property
    def has_text(self) -> bool:
        return bool(self.text)
