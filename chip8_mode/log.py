"""
Logging setup for the chip8_mode package and the chip8fmt tool.

Console output goes through rich; an optional log file receives every
record in the pipe-separated format used by the other tools.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

__all__ = ['LOGGER_NAME', 'FILE_FORMAT', 'setup_logging']

LOGGER_NAME = "chip8_mode"
FILE_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Configure and return the package logger.

    Calling it again replaces the handlers installed by the previous call,
    so the CLI can be driven repeatedly from tests.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # ── Console handler ──
    ch = RichHandler(
        level=level,
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    logger.addHandler(ch)

    # ── File handler: captures everything (DEBUG+) ──
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(fh)

    logger.debug("Logger initialized (console level %s)", logging.getLevelName(level))
    return logger
