"""
Chip-8 keyword vocabularies.

Three fixed tables drive token classification: machine operations,
assembler pseudo-operations and register names. Lookups are
case-insensitive; the tuples keep the canonical (upper-case) spelling in
display order, the frozensets are what the classifier consults.

Sources: Cowgod's Chip-8 Technical Reference 1.0 (operations, registers),
SCHIP 1.1 extensions (SCD/SCR/SCL/EXIT/LOW/HIGH, HF) and the CHIPPER
assembler manual 2.11 (pseudo-operations).
"""

from __future__ import annotations
from typing import FrozenSet, Tuple

__all__ = [
    'OPERATIONS', 'PSEUDO_OPS', 'REGISTERS',
    'is_operation', 'is_pseudo_op', 'is_register',
]


# ──────────────────────────────────────────────
# Operations (machine instruction mnemonics)
# ──────────────────────────────────────────────

OPERATIONS: Tuple[str, ...] = (
    # Chip-8
    'CLS', 'RET', 'SYS', 'JP', 'CALL', 'SE', 'SNE', 'LD', 'ADD',
    'OR', 'AND', 'XOR', 'SUB', 'SHR', 'SUBN', 'SHL', 'RND', 'DRW',
    'SKP', 'SKNP',
    # Super Chip-8
    'SCD', 'SCR', 'SCL', 'EXIT', 'LOW', 'HIGH',
)


# ──────────────────────────────────────────────
# Pseudo-operations (assembler directives)
# ──────────────────────────────────────────────

PSEUDO_OPS: Tuple[str, ...] = (
    'ALIGN', 'DA', 'DB', 'DEFINE', 'DS', 'DW', 'ELSE', 'END', 'ENDIF',
    'EQU', 'IFDEF', 'IFUND', 'INCLUDE', 'OPTION', 'ORG', 'UNDEF', 'XREF',
)


# ──────────────────────────────────────────────
# Registers
# ──────────────────────────────────────────────
# V0-VF general purpose, DT/ST timers, I index, F/HF font pointers.

REGISTERS: Tuple[str, ...] = tuple(f'V{n:X}' for n in range(16)) + (
    'DT', 'ST', 'I', 'F', 'HF',
)


_OPERATION_SET: FrozenSet[str] = frozenset(OPERATIONS)
_PSEUDO_OP_SET: FrozenSet[str] = frozenset(PSEUDO_OPS)
_REGISTER_SET: FrozenSet[str] = frozenset(REGISTERS)


def is_operation(word: str) -> bool:
    return word.upper() in _OPERATION_SET


def is_pseudo_op(word: str) -> bool:
    return word.upper() in _PSEUDO_OP_SET


def is_register(word: str) -> bool:
    return word.upper() in _REGISTER_SET
