#!/usr/bin/env python3
"""
chip8fmt — Chip-8 assembly formatter CLI

Usage:
    python chip8fmt.py [files...] [-i | --check | --tokens | --highlight]
                       [--column 8] [--format txt|json] [-v | -q] [--log-file PATH]

With no files (or "-") the source is read from stdin.

Modes:
    (default)     print the re-indented source to stdout
    -i            rewrite each file in place
    --check       list files that would be re-indented, exit 1 if any
    --tokens      dump the classified tokens
    --highlight   print the source with syntax colors

Examples:
    python chip8fmt.py game.c8s
    python chip8fmt.py -i src/*.c8s --column 10
    python chip8fmt.py --check src/*.c8s
    python chip8fmt.py --tokens --format json game.c8s
"""

import argparse
import json
import logging
import os
import sys

# Allow running from project root or as module
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from rich.console import Console

from chip8_mode import __version__
from chip8_mode.config import INSTRUCTION_COLUMN, ConfigError, validate_column
from chip8_mode.highlight import highlight_source
from chip8_mode.indent import indent_source
from chip8_mode.lexer import Lexer
from chip8_mode.log import setup_logging

log = logging.getLogger("chip8_mode.cli")

STDIN = "-"


def _read(path: str) -> str:
    if path == STDIN:
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _display_name(path: str) -> str:
    return "<stdin>" if path == STDIN else path


def _tokens_to_dict(name: str, tokens) -> dict:
    return {
        "file": name,
        "tokens": [
            {"type": t.type.value, "value": t.value, "line": t.line,
             "start": t.col, "end": t.end}
            for t in tokens
        ],
    }


def _print_tokens(name: str, tokens) -> None:
    for tok in tokens:
        print(f"{name}:{tok.line}:{tok.col}\t{tok.type.value:<17}{tok.value}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chip8fmt",
        description="Indent, check and highlight Chip-8 assembly source",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("files", nargs="*", default=[STDIN],
                        help="Source files (default: stdin)")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-i", "--in-place", action="store_true",
                      help="Rewrite files in place")
    mode.add_argument("--check", action="store_true",
                      help="Report files that would be re-indented (exit 1 if any)")
    mode.add_argument("--tokens", action="store_true",
                      help="Dump the token stream")
    mode.add_argument("--highlight", action="store_true",
                      help="Print the source with syntax colors")
    parser.add_argument("--column", type=int, default=INSTRUCTION_COLUMN,
                        help=f"Instruction column (default: {INSTRUCTION_COLUMN})")
    parser.add_argument("--format", choices=["txt", "json"], default="txt",
                        help="Token dump format (default: txt)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log details and show tracebacks")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Only log errors")
    parser.add_argument("--log-file", help="Also write the log to this file")
    parser.add_argument("--version", action="version",
                        version=f"chip8fmt {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.quiet:
        level = logging.ERROR
    elif args.verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    setup_logging(level, args.log_file)

    try:
        column = validate_column(args.column)
        if args.in_place and STDIN in args.files:
            log.error("Cannot rewrite stdin in place")
            return 1

        would_change = []
        failed = []
        json_docs = []
        for path in args.files:
            name = _display_name(path)
            log.debug("Reading %s", name)
            try:
                source = _read(path)
            except (OSError, UnicodeDecodeError) as e:
                log.error("Cannot read %s: %s", name, e)
                failed.append(name)
                continue

            if args.tokens:
                tokens = Lexer(source, include_comments=True).tokenize()
                if args.format == "json":
                    json_docs.append(_tokens_to_dict(name, tokens))
                else:
                    _print_tokens(name, tokens)
                continue

            if args.highlight:
                Console(highlight=False).print(highlight_source(source))
                continue

            formatted = indent_source(source, column)
            if args.check:
                if formatted != source:
                    would_change.append(name)
                    print(f"would reformat {name}")
            elif args.in_place:
                if formatted != source:
                    try:
                        with open(path, "w", encoding="utf-8", newline="") as f:
                            f.write(formatted)
                    except OSError as e:
                        log.error("Cannot write %s: %s", name, e)
                        failed.append(name)
                        continue
                    log.info("Reformatted %s", name)
                else:
                    log.debug("%s already formatted", name)
            else:
                sys.stdout.write(formatted)

        if json_docs:
            print(json.dumps(json_docs, indent=2))

        if failed:
            log.error("%d file(s) could not be processed", len(failed))
            return 1
        if args.check:
            if would_change:
                log.info("%d file(s) would be reformatted", len(would_change))
                return 1
            log.info("%d file(s) already formatted", len(args.files))
        return 0

    except ConfigError as e:
        log.error("Configuration error: %s", e)
        return 1
    except Exception as e:
        log.error("Internal error: %s", e, exc_info=args.verbose)
        return 2


if __name__ == "__main__":
    sys.exit(main())
