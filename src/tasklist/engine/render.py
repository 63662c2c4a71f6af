# src/tasklist/engine/render.py

"""
Rendering helpers for CLI output.

This module is responsible for the fixed-width task table:
- header and dividers,
- per-task rows with the stamp columns (date, time, priority, urgency),
- body text wrapped into 44-character chunks, one source line at a time.

It is presentation-only: it never mutates tasks.
"""

from typing import Final, Iterable, Optional

from .model import Priority, Stamp, Task, Urgency


# ---------------------------------------------------------------------
# Layout constants
# ---------------------------------------------------------------------

BODY_WIDTH: Final[int] = 44

DIVIDER: Final[str] = "+----+------------+-------+---+---+--------------------------------------------+"
HEADER: Final[tuple[str, ...]] = (
    DIVIDER,
    "| N  |    Date    | Time  | P | D |                   Task                     |",
    DIVIDER,
)

_CONTINUATION: Final[str] = "|    |            |       |   |   |{chunk}|"

NO_TASKS: Final[str] = "No tasks have been input"


# ---------------------------------------------------------------------
# Cell helpers
# ---------------------------------------------------------------------

def format_index(n: int) -> str:
    """
    Format a 1-based row number for the N column.

    1-9 get two trailing spaces, 10-99 one, 100 and up none.
    """
    if n <= 9:
        return f"{n}  "
    if n <= 99:
        return f"{n} "
    return str(n)


def _priority_cell(priority: Optional[Priority], *, color: bool) -> str:
    if priority is None:
        return " "
    return priority.glyph if color else priority.value


def _urgency_cell(urgency: Optional[Urgency], *, color: bool) -> str:
    if urgency is None:
        return " "
    return urgency.glyph if color else urgency.letter


def _stamp_cells(stamp: Stamp, *, color: bool) -> tuple[str, str, str, str]:
    due = stamp.due_date.isoformat() if stamp.due_date is not None else ""
    return (
        due.ljust(10),
        (stamp.time or "").ljust(5),
        _priority_cell(stamp.priority, color=color),
        _urgency_cell(stamp.urgency, color=color),
    )


# ---------------------------------------------------------------------
# Wrapping
# ---------------------------------------------------------------------

def wrap_line(line: str, width: int = BODY_WIDTH) -> list[str]:
    """
    Split one body line into fixed-width chunks.

    Full chunks are kept as-is; the trailing partial chunk is right-padded
    with spaces to `width`. A line whose length is a multiple of `width`
    produces no padded chunk.
    """
    chunks: list[str] = []
    for i in range(0, len(line), width):
        chunks.append(line[i:i + width].ljust(width))
    return chunks


def wrap_text(lines: Iterable[str], width: int = BODY_WIDTH) -> list[str]:
    """
    Wrap every body line independently and flatten the chunks.

    No text flows from one source line into the next.
    """
    out: list[str] = []
    for line in lines:
        out.extend(wrap_line(line, width))
    return out


# ---------------------------------------------------------------------
# Rows / table
# ---------------------------------------------------------------------

def render_task_rows(n: int, task: Task, *, color: bool = True) -> list[str]:
    """
    Render one task as table rows (without the trailing divider).

    Only the first row carries the index and stamp columns.
    """
    chunks = wrap_text(task.text)
    if not chunks:
        return []

    date_s, time_s, prio_s, urg_s = _stamp_cells(task.stamp, color=color)

    rows = [f"| {format_index(n)}| {date_s} | {time_s} | {prio_s} | {urg_s} |{chunks[0]}|"]
    rows.extend(_CONTINUATION.format(chunk=c) for c in chunks[1:])
    return rows


def render_table(tasks: Iterable[Task], *, color: bool = True) -> list[str]:
    """
    Render the full task table, one divider after each task.
    """
    lines = list(HEADER)
    for n, task in enumerate(tasks, start=1):
        lines.extend(render_task_rows(n, task, color=color))
        lines.append(DIVIDER)
    return lines


def print_tasks(tasks: list[Task], *, color: bool = True) -> None:
    """
    Print the task table, or a notice when there is nothing to show.
    """
    if not tasks:
        print(NO_TASKS)
        return

    for line in render_table(tasks, color=color):
        print(line)
