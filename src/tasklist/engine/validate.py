# src/tasklist/engine/validate.py

"""
Input validation rules.

Every parser here takes raw console text and returns a ParseOutcome
instead of raising, so callers decide how to report and retry.

It does NOT prompt, print, or touch Task objects.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Final, Generic, Optional, TypeVar

from .model import Priority

T = TypeVar("T")


# ---------------------------------------------------------------------
# Result objects
# ---------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParseOutcome(Generic[T]):
    """
    Result of parsing a single piece of user input.

    Exactly one of `value` / `error` is meaningful: a failed outcome
    carries a short message and no value.
    """

    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ParseOutcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "ParseOutcome[T]":
        return cls(error=error)


# ---------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------

EDITABLE_FIELDS: Final[tuple[str, ...]] = ("priority", "date", "time", "task")

_DATE_RE = re.compile(r"^(\d{1,4})-(\d{1,2})-(\d{1,2})$", re.ASCII)
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{1,2})$", re.ASCII)
_NUMBER_RE = re.compile(r"^\d+$", re.ASCII)


def parse_priority(raw: str) -> ParseOutcome[Priority]:
    """
    Parse a priority letter (C, H, N, L), case-insensitive.
    """
    try:
        return ParseOutcome.success(Priority(raw.strip().upper()))
    except ValueError:
        return ParseOutcome.failure("invalid priority")


def parse_date(raw: str) -> ParseOutcome[date]:
    """
    Parse `yyyy-mm-dd` into a real calendar date.

    Month 13, day 32, Feb 30 and non-numeric parts all fail.
    """
    m = _DATE_RE.match(raw.strip())
    if m is None:
        return ParseOutcome.failure("invalid date")

    year, month, day = (int(g) for g in m.groups())
    try:
        return ParseOutcome.success(date(year, month, day))
    except ValueError:
        return ParseOutcome.failure("invalid date")


def parse_time(raw: str) -> ParseOutcome[time]:
    """
    Parse `hh:mm` (hour 0-23, minute 0-59).
    """
    m = _TIME_RE.match(raw.strip())
    if m is None:
        return ParseOutcome.failure("invalid time")

    hour, minute = (int(g) for g in m.groups())
    try:
        return ParseOutcome.success(time(hour, minute))
    except ValueError:
        return ParseOutcome.failure("invalid time")


def compose_date_time(day: Optional[date], raw_time: str) -> ParseOutcome[datetime]:
    """
    Combine a previously parsed date with a raw `hh:mm` string.

    Fails when the date is missing or the time does not parse.
    """
    if day is None:
        return ParseOutcome.failure("invalid time")

    parsed = parse_time(raw_time)
    if not parsed.ok:
        return ParseOutcome.failure(parsed.error or "invalid time")

    return ParseOutcome.success(datetime.combine(day, parsed.value))


def parse_task_number(raw: str, count: int) -> ParseOutcome[int]:
    """
    Parse a 1-based task number within `1..count`.
    """
    s = raw.strip()
    if _NUMBER_RE.match(s) is None:
        return ParseOutcome.failure("invalid task number")

    n = int(s)
    if n < 1 or n > count:
        return ParseOutcome.failure("invalid task number")

    return ParseOutcome.success(n)


def is_field_valid(name: str) -> bool:
    return name.strip() in EDITABLE_FIELDS
