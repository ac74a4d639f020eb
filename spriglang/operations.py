"""Shared definitions for AST operation identifiers.

This module centralizes the operator constants used by the parser and
interpreter to label nodes in the abstract syntax tree.  Keeping them in one
place prevents the two components from drifting apart when new operations are
added or existing ones are renamed.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported AST operation names.

    Values are the operators' source spellings, so ``Op(lexeme)`` maps a token
    back to its operation.
    """

    # Arithmetic
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    # Comparison
    EQ = "=="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    # Unary
    NEG = "neg"
    NOT = "!"

    # Boolean
    AND = "and"
    OR = "or"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


# Binding power of each binary operator; higher binds tighter.
BINARY_PRECEDENCE: dict[Op, int] = {
    Op.EQ: 1,
    Op.NE: 1,
    Op.LT: 2,
    Op.LE: 2,
    Op.GT: 2,
    Op.GE: 2,
    Op.ADD: 3,
    Op.SUB: 3,
    Op.MUL: 4,
    Op.DIV: 4,
}


__all__ = ["Op", "BINARY_PRECEDENCE"]
