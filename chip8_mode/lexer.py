"""
Token classifier for Chip-8 assembly.

Scans one line at a time and tags each word with exactly one category.
Nothing is ever rejected: text that fits no category (whitespace,
punctuation, malformed literals) is simply not emitted.

Priority, highest first:
    label > operation > pseudo-operation > number > register > identifier

A label is only recognised at the start of a line (leading whitespace
allowed) and must be followed immediately by a colon. Everything from the
first unescaped ';' to end of line is a comment and is never scanned for
words.
"""

from __future__ import annotations
import enum
import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .config import COMMENT_CHAR, ESCAPE_CHAR
from .vocab import is_operation, is_pseudo_op, is_register

__all__ = ['TokenType', 'Token', 'Lexer', 'classify_word', 'find_comment', 'tokenize']


# ──────────────────────────────────────────────
# Token types
# ──────────────────────────────────────────────

class TokenType(enum.Enum):
    LABEL = "label"
    OPERATION = "operation"
    PSEUDO_OP = "pseudo-operation"
    NUMBER = "number"
    REGISTER = "register"
    IDENTIFIER = "identifier"
    COMMENT = "comment"


# ──────────────────────────────────────────────
# Token data class
# ──────────────────────────────────────────────

@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    line: int
    col: int    # 0-based

    @property
    def end(self) -> int:
        return self.col + len(self.value)

    @property
    def span(self) -> Tuple[int, int]:
        return (self.col, self.end)

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r}, L{self.line}:{self.col})"


# ──────────────────────────────────────────────
# Patterns
# ──────────────────────────────────────────────

IDENTIFIER = r'[A-Za-z_][A-Za-z0-9_]*'

LABEL_RE = re.compile(rf'^\s*({IDENTIFIER}):')
# Candidate words: optional literal prefix followed by a word-character run.
WORD_RE = re.compile(r'[#$]?\w+', re.ASCII)
NUMBER_RE = re.compile(r'(?:[0-9]+|#[0-9A-Fa-f]+|\$[01]+)\Z')
IDENTIFIER_RE = re.compile(rf'{IDENTIFIER}\Z')


def classify_word(word: str) -> Optional[TokenType]:
    """Classify a single word, ignoring the label rule.

    Returns None when the word fits no category (e.g. '12A' or '$12').
    """
    if is_operation(word):
        return TokenType.OPERATION
    if is_pseudo_op(word):
        return TokenType.PSEUDO_OP
    if NUMBER_RE.match(word):
        return TokenType.NUMBER
    if is_register(word):
        return TokenType.REGISTER
    if IDENTIFIER_RE.match(word):
        return TokenType.IDENTIFIER
    return None


def find_comment(line: str) -> Optional[int]:
    """Return the column of the first unescaped comment character, or None."""
    escaped = False
    for i, ch in enumerate(line):
        if escaped:
            escaped = False
        elif ch == ESCAPE_CHAR:
            escaped = True
        elif ch == COMMENT_CHAR:
            return i
    return None


def tokenize(line: str, include_comments: bool = False, line_num: int = 1) -> Iterator[Token]:
    """Lazily yield the classified tokens of one line, left to right.

    With ``include_comments`` the comment (if any) is yielded last as a
    single COMMENT token.
    """
    line = line.rstrip("\r\n")
    comment_col = find_comment(line)
    code = line if comment_col is None else line[:comment_col]

    pos = 0
    m = LABEL_RE.match(code)
    if m:
        yield Token(TokenType.LABEL, m.group(1), line_num, m.start(1))
        pos = m.end()

    for word in WORD_RE.finditer(code, pos):
        kind = classify_word(word.group())
        if kind is not None:
            yield Token(kind, word.group(), line_num, word.start())

    if include_comments and comment_col is not None:
        yield Token(TokenType.COMMENT, line[comment_col:], line_num, comment_col)


# ──────────────────────────────────────────────
# Lexer
# ──────────────────────────────────────────────

class Lexer:
    """Tokenizes a whole Chip-8 source text, line by line."""

    def __init__(self, source: str, include_comments: bool = False):
        self.source = source
        self.include_comments = include_comments
        self.tokens: List[Token] = []

    def tokenize(self) -> List[Token]:
        """Tokenize every line and return the flat token list (lines are 1-based)."""
        self.tokens = []
        for line_num, line in enumerate(self.source.splitlines(), start=1):
            self.tokens.extend(tokenize(line, self.include_comments, line_num))
        return self.tokens
