"""
Expression parsing utilities for Sprig.

These functions operate on a `spriglang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions. The arithmetic,
comparison and equality levels share one precedence-climbing loop driven by
`spriglang.operations.BINARY_PRECEDENCE`; every binary level is
left-associative.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from spriglang import ast
from spriglang.exceptions import ParseError
from spriglang.lexer import TokenKind
from spriglang.operations import BINARY_PRECEDENCE, Op

if TYPE_CHECKING:
    from spriglang.parser import Parser


KEYWORD_LITERALS = {
    'true': True,
    'false': False,
    'nil': None,
}


# ---- Highest precedence ----

def parse_primary(parser: 'Parser') -> ast.Expr:
    """Parse a literal, identifier or parenthesized expression."""
    tok = parser.curr_token

    if tok.type in (TokenKind.NUMBER, TokenKind.STRING):
        parser.advance()
        return ast.Literal(tok.value, line=tok.line, column=tok.column)

    if tok.type is TokenKind.KEYWORD and tok.lexeme in KEYWORD_LITERALS:
        parser.advance()
        return ast.Literal(KEYWORD_LITERALS[tok.lexeme], line=tok.line, column=tok.column)

    if tok.type is TokenKind.IDENTIFIER:
        parser.advance()
        return ast.Identifier(tok.lexeme, line=tok.line, column=tok.column)

    if tok.matches(TokenKind.PUNCTUATION, '('):
        parser.advance()
        inner = parser.expr()
        parser.eat(TokenKind.PUNCTUATION, ')')
        return ast.Grouping(inner, line=tok.line, column=tok.column)

    raise parser.error("Expected expression")


def parse_arguments(parser: 'Parser') -> tuple:
    """Parse a comma separated argument list; the opening '(' is already consumed."""
    args = []
    if not parser.check(TokenKind.PUNCTUATION, ')'):
        args.append(parser.expr())
        while parser.check(TokenKind.PUNCTUATION, ','):
            parser.advance()
            args.append(parser.expr())
    parser.eat(TokenKind.PUNCTUATION, ')')
    return tuple(args)


def parse_call(parser: 'Parser') -> ast.Expr:
    """Parse a primary expression followed by zero or more argument lists."""
    result = parser.primary()
    while parser.check(TokenKind.PUNCTUATION, '('):
        paren = parser.advance()
        args = parse_arguments(parser)
        result = ast.Call(result, args, line=paren.line, column=paren.column)
    return result


def parse_unary(parser: 'Parser') -> ast.Expr:
    """Parse prefix negation and logical not."""
    tok = parser.curr_token
    if tok.matches(TokenKind.OPERATOR, '-') or tok.matches(TokenKind.OPERATOR, '!'):
        parser.advance()
        op = Op.NEG if tok.lexeme == '-' else Op.NOT
        return ast.Unary(op, parser.unary(), line=tok.line, column=tok.column)
    return parser.call()


def _binary_op(parser: 'Parser') -> Op | None:
    """Return the binary operation for the current token, if it is one."""
    tok = parser.curr_token
    if tok.type is not TokenKind.OPERATOR:
        return None
    try:
        op = Op(tok.lexeme)
    except ValueError:
        return None
    return op if op in BINARY_PRECEDENCE else None


def parse_binary(parser: 'Parser', min_precedence: int = 1) -> ast.Expr:
    """Parse '*', '/', '+', '-', comparison and equality operators."""
    result = parser.unary()
    while True:
        op = _binary_op(parser)
        if op is None or BINARY_PRECEDENCE[op] < min_precedence:
            return result
        tok = parser.advance()
        right = parser.binary(BINARY_PRECEDENCE[op] + 1)
        result = ast.Binary(op, result, right, line=tok.line, column=tok.column)


def parse_logical_and(parser: 'Parser') -> ast.Expr:
    """Parse logical AND expressions using the 'and' keyword."""
    result = parser.binary()
    while parser.check(TokenKind.KEYWORD, 'and'):
        tok = parser.advance()
        result = ast.Logical(Op.AND, result, parser.binary(), line=tok.line, column=tok.column)
    return result


def parse_logical_or(parser: 'Parser') -> ast.Expr:
    """Parse logical OR expressions using the 'or' keyword."""
    result = parser.logical_and()
    while parser.check(TokenKind.KEYWORD, 'or'):
        tok = parser.advance()
        result = ast.Logical(Op.OR, result, parser.logical_and(), line=tok.line, column=tok.column)
    return result


def parse_assignment(parser: 'Parser') -> ast.Expr:
    """
    Parse ``name = value``. Assignment is right-associative, so ``a = b = 1``
    assigns to ``b`` first.
    """
    target = parser.logical_or()
    if parser.check(TokenKind.OPERATOR, '='):
        equals = parser.curr_token
        parser.advance()
        value = parser.assignment()
        if isinstance(target, ast.Identifier):
            return ast.Assignment(target.name, value, line=target.line, column=target.column)
        raise ParseError("Invalid assignment target", equals, parser.source_file)
    return target


# ---- Entry point ----

def parse_expr(parser: 'Parser') -> ast.Expr:
    """Parse an expression starting from the lowest-precedence operator."""
    return parser.assignment()
