"""Sprig language package.

This package provides the lexer, parser and tree-walk interpreter for the
Sprig scripting language.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from spriglang.exceptions import (
    LexError,
    ParseError,
    SprigError,
    SprigRuntimeError,
    format_error,
)
from spriglang.interpreter import Interpreter, interpret
from spriglang.lexer import Token, TokenKind, tokenize
from spriglang.parser import Parser, parse_source

__version__ = "0.1.0"

__all__ = [
    "Interpreter",
    "LexError",
    "ParseError",
    "Parser",
    "SprigError",
    "SprigRuntimeError",
    "Token",
    "TokenKind",
    "format_error",
    "interpret",
    "parse_source",
    "tokenize",
]
