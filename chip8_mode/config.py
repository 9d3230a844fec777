"""
Chip-8 Assembly Mode — Static Configuration
===========================================

Layout constants shared by the indenter, the cursor helper and the CLI.
Callers override the instruction column per call; everything else is fixed.
"""

# =============================================================================
#  LAYOUT
# =============================================================================
INSTRUCTION_COLUMN = 8    # column where the operation/operand part starts
LABEL_SUFFIX = ":"        # terminates a label definition


# =============================================================================
#  COMMENTS
# =============================================================================
COMMENT_CHAR = ";"
ESCAPE_CHAR = "\\"        # "\;" does not start a comment
SECTION_COMMENT = COMMENT_CHAR * 3   # ";;;" header lines live at column 0


class ConfigError(ValueError):
    """Raised when a layout setting is out of range."""


def validate_column(column) -> int:
    """Return ``column`` if it is a usable instruction column."""
    if isinstance(column, bool) or not isinstance(column, int):
        raise ConfigError(f"Instruction column must be an integer, got {column!r}")
    if column < 0:
        raise ConfigError(f"Instruction column must be >= 0, got {column}")
    return column
