"""
Cursor positioning for Chip-8 assembly lines.

Pure column arithmetic: the caller passes the line text and the current
cursor column and applies the returned column to its own buffer.

    loop:   JP      loop
    ^       ^
    |       instruction_column()
    first_nonblank_column()

smart_home() toggles between the two. The "state" is the cursor column
itself; nothing is remembered between calls.
"""

from __future__ import annotations

from .indent import analyze_line

__all__ = ['instruction_column', 'first_nonblank_column', 'smart_home']


def instruction_column(line: str) -> int:
    """Column of the first character after the label, its colon and blanks.

    Without a label this is the first non-blank column; ``len(line)`` when
    nothing follows.
    """
    return analyze_line(line).instruction_col


def first_nonblank_column(line: str) -> int:
    return len(line) - len(line.lstrip())


def smart_home(line: str, cursor: int) -> int:
    """Return the column a "home" keypress at ``cursor`` should move to."""
    target = instruction_column(line)
    if cursor == target:
        return first_nonblank_column(line)
    return target
