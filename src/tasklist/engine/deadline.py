# src/tasklist/engine/deadline.py

"""
Due-date arithmetic and urgency buckets.

All comparisons happen in UTC: a naive due date-time is read as UTC and
"now" is the current UTC instant, so results do not depend on the local
time zone.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional

from .glyphs import GREEN, RED, YELLOW


# ---------------------------------------------------------------------
# Urgency
# ---------------------------------------------------------------------

class Urgency(str, Enum):
    """
    Urgency bucket derived from the day difference between due time and now.
    """

    OVERDUE = "overdue"
    DUE_TODAY = "today"
    UPCOMING = "upcoming"

    @property
    def glyph(self) -> str:
        return _URGENCY_GLYPHS[self]

    @property
    def letter(self) -> str:
        return _URGENCY_LETTERS[self]

    @classmethod
    def from_glyph(cls, glyph: str) -> Optional["Urgency"]:
        for member, g in _URGENCY_GLYPHS.items():
            if g == glyph:
                return member
        return None


_URGENCY_GLYPHS = {
    Urgency.OVERDUE: RED,
    Urgency.DUE_TODAY: YELLOW,
    Urgency.UPCOMING: GREEN,
}

_URGENCY_LETTERS = {
    Urgency.OVERDUE: "O",
    Urgency.DUE_TODAY: "T",
    Urgency.UPCOMING: "U",
}


# ---------------------------------------------------------------------
# Day arithmetic
# ---------------------------------------------------------------------

_ONE_DAY = timedelta(days=1)


def _now() -> datetime:
    """Return the current UTC instant (isolated for testability)."""
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def days_until(due: Optional[datetime], now: Optional[datetime] = None) -> Optional[int]:
    """
    Return the signed number of whole days from `now` until `due`.

    Partial days are dropped (truncation toward zero), so any instant
    within 24 hours of now, before or after, counts as day 0.
    Returns None when `due` is None.
    """
    if due is None:
        return None

    delta = _as_utc(due) - _as_utc(now if now is not None else _now())
    days = abs(delta) // _ONE_DAY
    return days if delta >= timedelta(0) else -days


def urgency_of(days: Optional[int]) -> Optional[Urgency]:
    """
    Map a day difference to an urgency bucket.

    None -> None, 0 -> due today, positive -> upcoming, negative -> overdue.
    """
    if days is None:
        return None
    if days == 0:
        return Urgency.DUE_TODAY
    if days > 0:
        return Urgency.UPCOMING
    return Urgency.OVERDUE


def time_of_day(value: Optional[datetime]) -> Optional[str]:
    """Return the hh:mm part of a date-time, or None."""
    if value is None:
        return None
    return value.strftime("%H:%M")
