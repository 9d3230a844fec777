"""
Line indenter for Chip-8 assembly.

Canonical layout, one line at a time (no surrounding context):

    ;;; Section header              <- section comments at column 0
    loop:   JP      loop            <- label at column 0, instruction at 8
            ADD     V0, 1           <- no label: instruction at 8
    verylonglabel: CLS              <- label wider than the column: one space

Only the whitespace in front of the instruction is rewritten; the rest of
the line is kept byte for byte, so the operation is idempotent.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from .config import INSTRUCTION_COLUMN, LABEL_SUFFIX, SECTION_COMMENT, validate_column
from .lexer import LABEL_RE

__all__ = ['LineInfo', 'analyze_line', 'indent_line', 'indent_source']

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineInfo:
    """Layout facts derived from one source line."""
    text: str
    label: Optional[str] = None
    instruction_col: int = 0      # first non-blank after the label; len(text) if none
    is_section_comment: bool = False

    @property
    def has_instruction(self) -> bool:
        return self.instruction_col < len(self.text)


def _skip_blanks(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def analyze_line(line: str) -> LineInfo:
    """Split a line into its label and instruction start."""
    stripped = line.lstrip()
    m = LABEL_RE.match(line)
    label = m.group(1) if m else None
    start = _skip_blanks(line, m.end() if m else 0)
    return LineInfo(
        text=line,
        label=label,
        instruction_col=start,
        is_section_comment=stripped.startswith(SECTION_COMMENT),
    )


def indent_line(line: str, column: int = INSTRUCTION_COLUMN) -> str:
    """Return ``line`` re-indented to the canonical layout."""
    validate_column(column)
    info = analyze_line(line)

    if info.is_section_comment:
        return line.lstrip()

    rest = line[info.instruction_col:]

    if info.label is not None:
        head = info.label + LABEL_SUFFIX
        if not info.has_instruction:
            return head
        return head.ljust(max(column, len(head) + 1)) + rest

    if not info.has_instruction:
        return line
    return " " * column + rest


def indent_source(text: str, column: int = INSTRUCTION_COLUMN) -> str:
    """Re-indent every line of ``text``, keeping its line endings."""
    validate_column(column)
    out = []
    changed = 0
    for raw in text.splitlines(keepends=True):
        body = raw.rstrip("\r\n")
        ending = raw[len(body):]
        new = indent_line(body, column)
        if new != body:
            changed += 1
        out.append(new + ending)
    log.debug("Re-indented %d of %d lines (column %d)", changed, len(out), column)
    return "".join(out)
