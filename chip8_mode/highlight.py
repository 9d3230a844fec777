"""
Syntax highlighting for Chip-8 assembly.

Maps each token category to a rich style, the way an editor maps
font-lock categories to faces, and renders lines as ``rich.text.Text``.
"""

from __future__ import annotations
from typing import Dict, Optional

from rich.text import Text

from .lexer import TokenType, tokenize

__all__ = ['FACES', 'highlight_line', 'highlight_source']


# ──────────────────────────────────────────────
# Faces
# ──────────────────────────────────────────────

FACES: Dict[TokenType, str] = {
    TokenType.LABEL:      "bold blue",      # function-name
    TokenType.OPERATION:  "magenta",        # keyword
    TokenType.PSEUDO_OP:  "bold cyan",      # preprocessor
    TokenType.REGISTER:   "yellow",         # variable-name
    TokenType.NUMBER:     "green",          # constant
    TokenType.IDENTIFIER: "",
    TokenType.COMMENT:    "dim italic",
}


def highlight_line(line: str, faces: Optional[Dict[TokenType, str]] = None) -> Text:
    """Return ``line`` as styled text, one span per token (comments included)."""
    faces = FACES if faces is None else faces
    line = line.rstrip("\r\n")
    text = Text(line)
    for tok in tokenize(line, include_comments=True):
        style = faces.get(tok.type, "")
        if style:
            text.stylize(style, tok.col, tok.end)
    return text


def highlight_source(source: str, faces: Optional[Dict[TokenType, str]] = None) -> Text:
    """Highlight a whole source text, keeping one output line per input line."""
    return Text("\n").join(highlight_line(line, faces) for line in source.splitlines())
