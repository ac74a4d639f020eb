"""AST node definitions for Sprig.

Nodes are passive frozen dataclasses: they carry no behaviour and are
dispatched on by the interpreter with ``match``. Every node records the line
and column where it starts; positions are excluded from equality so that two
programs differing only in layout compare equal.


File: ast.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple, Union

from spriglang.operations import Op


def _position():
    return field(default=0, compare=False, repr=False, kw_only=True)


# Expressions

@dataclass(frozen=True)
class Literal:
    value: Any
    line: int = _position()
    column: int = _position()


@dataclass(frozen=True)
class Identifier:
    name: str
    line: int = _position()
    column: int = _position()


@dataclass(frozen=True)
class Unary:
    op: Op
    operand: Expr
    line: int = _position()
    column: int = _position()


@dataclass(frozen=True)
class Binary:
    op: Op
    left: Expr
    right: Expr
    line: int = _position()
    column: int = _position()


@dataclass(frozen=True)
class Logical:
    """Short-circuiting ``and``/``or``."""
    op: Op
    left: Expr
    right: Expr
    line: int = _position()
    column: int = _position()


@dataclass(frozen=True)
class Call:
    callee: Expr
    arguments: Tuple[Expr, ...]
    line: int = _position()
    column: int = _position()


@dataclass(frozen=True)
class Assignment:
    name: str
    value: Expr
    line: int = _position()
    column: int = _position()


@dataclass(frozen=True)
class Grouping:
    inner: Expr
    line: int = _position()
    column: int = _position()


Expr = Union[Literal, Identifier, Unary, Binary, Logical, Call, Assignment, Grouping]


# Statements

@dataclass(frozen=True)
class ExpressionStatement:
    expression: Expr
    line: int = _position()
    column: int = _position()


@dataclass(frozen=True)
class VariableDeclaration:
    name: str
    initializer: Optional[Expr] = None
    line: int = _position()
    column: int = _position()


@dataclass(frozen=True)
class Block:
    statements: Tuple[Stmt, ...]
    line: int = _position()
    column: int = _position()


@dataclass(frozen=True)
class If:
    condition: Expr
    then_branch: Stmt
    else_branch: Optional[Stmt] = None
    line: int = _position()
    column: int = _position()


@dataclass(frozen=True)
class While:
    condition: Expr
    body: Stmt
    line: int = _position()
    column: int = _position()


@dataclass(frozen=True)
class FunctionDeclaration:
    name: str
    params: Tuple[str, ...]
    body: Block
    line: int = _position()
    column: int = _position()


@dataclass(frozen=True)
class Return:
    value: Optional[Expr] = None
    line: int = _position()
    column: int = _position()


@dataclass(frozen=True)
class Print:
    expression: Expr
    line: int = _position()
    column: int = _position()


@dataclass(frozen=True)
class Break:
    line: int = _position()
    column: int = _position()


@dataclass(frozen=True)
class Continue:
    line: int = _position()
    column: int = _position()


Stmt = Union[
    ExpressionStatement, VariableDeclaration, Block, If, While,
    FunctionDeclaration, Return, Print, Break, Continue,
]

Program = List[Stmt]


__all__ = [
    "Literal", "Identifier", "Unary", "Binary", "Logical", "Call",
    "Assignment", "Grouping", "Expr",
    "ExpressionStatement", "VariableDeclaration", "Block", "If", "While",
    "FunctionDeclaration", "Return", "Print", "Break", "Continue", "Stmt",
    "Program",
]
