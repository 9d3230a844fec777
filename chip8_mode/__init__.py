"""
Chip-8 Assembly Mode
====================
Language support for Chip-8 assembly source, meant to be called from an
editor or a formatter:

    ┌─────────┐    ┌──────────┐    ┌───────────┐
    │  vocab  │───>│  lexer   │───>│ highlight │   token spans + faces
    └─────────┘    └──────────┘    └───────────┘
                        │
                        v
                   ┌──────────┐    ┌───────────┐
                   │  indent  │───>│  cursor   │   line layout + "home" column
                   └──────────┘    └───────────┘

Everything works on one line of text at a time and is a pure function of
its arguments; the caller owns the buffer and the cursor.
"""

__version__ = "0.1.0"

from .config import INSTRUCTION_COLUMN, ConfigError
from .lexer import Lexer, Token, TokenType, classify_word, tokenize
from .indent import LineInfo, analyze_line, indent_line, indent_source
from .cursor import first_nonblank_column, instruction_column, smart_home
from .highlight import FACES, highlight_line, highlight_source
