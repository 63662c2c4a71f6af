# src/tasklist/engine/glyphs.py

"""
Single-cell colour glyphs used in the priority and urgency columns.

A glyph is one space on a bright ANSI background, followed by a reset.
"""

from typing import Final

RED: Final[str] = "\u001b[101m \u001b[0m"
YELLOW: Final[str] = "\u001b[103m \u001b[0m"
GREEN: Final[str] = "\u001b[102m \u001b[0m"
BLUE: Final[str] = "\u001b[104m \u001b[0m"
