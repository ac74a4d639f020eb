"""
Main parser entry point for Sprig.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`spriglang.parser.expressions` and `spriglang.parser.statements`.

Parsing is fail-fast: the first token that does not fit the grammar raises a
`ParseError` and no partial program is returned.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging

from spriglang import ast
from spriglang.exceptions import ParseError
from spriglang.lexer import Token, TokenKind, tokenize

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """Sprig parser."""

    def __init__(self, tokens: list[Token], file: str = "<input>"):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances ending with an EOF token.
            file (str): The name of the script.
        """
        if not tokens or tokens[-1].type is not TokenKind.EOF:
            raise ValueError("token list must end with an EOF token")
        self.tokens = tokens
        self.position = 0
        self.curr_token = self.tokens[self.position]
        self.source_file = file
        self.loop_depth = 0
        self.function_depth = 0
        self._logger = logging.getLogger("SprigParser")

    def peek(self, offset: int = 1) -> Token:
        """
        Return the token ``offset`` places ahead without consuming anything.
        """
        index = min(self.position + offset, len(self.tokens) - 1)
        return self.tokens[index]

    def check(self, token_type: TokenKind, lexeme: str | None = None) -> bool:
        """
        Return ``True`` if the current token has the given kind and lexeme.
        """
        return self.curr_token.matches(token_type, lexeme)

    def advance(self) -> Token:
        """
        Consume the current token and return it. EOF is never consumed.
        """
        tok = self.curr_token
        if tok.type is not TokenKind.EOF:
            self.position += 1
            self.curr_token = self.tokens[self.position]
        return tok

    def eat(self, token_type: TokenKind, lexeme: str | None = None) -> Token:
        """
        Consume the current token if it matches the expected kind and lexeme.

        Parameters:
            token_type (TokenKind): The expected token kind.
            lexeme (str | None): The expected lexeme, if it matters.

        Returns:
            Token: The consumed token.

        Raises:
            ParseError: If the token does not match.
        """
        if self.check(token_type, lexeme):
            return self.advance()
        expected = f"{token_type.value} '{lexeme}'" if lexeme else token_type.value
        raise self.error(f"Expected {expected}")

    def error(self, expected: str) -> ParseError:
        """
        Build a `ParseError` describing what was expected and what was found.
        """
        return ParseError(
            f"{expected}, but got {self.curr_token.describe()}",
            self.curr_token,
            self.source_file,
        )


    # Expression wrappers
    def primary(self) -> ast.Expr:
        """
        Parse a literal, identifier or parenthesized group.
        """
        return _expr.parse_primary(self)

    def call(self) -> ast.Expr:
        """
        Parse a primary expression followed by any number of call suffixes.
        """
        return _expr.parse_call(self)

    def unary(self) -> ast.Expr:
        """
        Parse a prefix ``-`` or ``!`` expression.
        """
        return _expr.parse_unary(self)

    def binary(self, min_precedence: int = 1) -> ast.Expr:
        """
        Parse arithmetic, comparison and equality operators by precedence climbing.
        """
        return _expr.parse_binary(self, min_precedence)

    def logical_and(self) -> ast.Expr:
        """
        Parse a logical AND expression.
        """
        return _expr.parse_logical_and(self)

    def logical_or(self) -> ast.Expr:
        """
        Parse a logical OR expression.
        """
        return _expr.parse_logical_or(self)

    def assignment(self) -> ast.Expr:
        """
        Parse an assignment, the lowest-precedence expression form.
        """
        return _expr.parse_assignment(self)

    def expr(self) -> ast.Expr:
        """
        Parse a full expression.
        """
        return _expr.parse_expr(self)


    # Statement wrappers
    def block(self) -> ast.Block:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def statement(self) -> ast.Stmt:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_let(self) -> ast.VariableDeclaration:
        """
        Parse a 'let' variable declaration.
        """
        return _stmt.parse_let(self)

    def parse_print(self) -> ast.Print:
        """
        Parse a 'print' statement used for output.
        """
        return _stmt.parse_print(self)

    def parse_if(self) -> ast.If:
        """
        Parse an 'if' conditional statement.
        """
        return _stmt.parse_if(self)

    def parse_while(self) -> ast.While:
        """
        Parse a 'while' loop.
        """
        return _stmt.parse_while(self)

    def parse_break(self) -> ast.Break:
        """
        Parse a 'break' statement for loop termination.
        """
        return _stmt.parse_break(self)

    def parse_continue(self) -> ast.Continue:
        """
        Parse a 'continue' statement.
        """
        return _stmt.parse_continue(self)

    def parse_func_def(self) -> ast.FunctionDeclaration:
        """
        Parse a function definition statement.
        """
        return _stmt.parse_func_def(self)

    def parse_return(self) -> ast.Return:
        """
        Parse a 'return' statement from within a function.
        """
        return _stmt.parse_return(self)

    def parse_expression_statement(self) -> ast.ExpressionStatement:
        """
        Parse an expression used as a statement.
        """
        return _stmt.parse_expression_statement(self)


    def parse(self) -> ast.Program:
        """
        Parse the full input into a list of statements.
        """
        statements = []
        while self.curr_token.type is not TokenKind.EOF:
            statements.append(self.statement())
        self.eat(TokenKind.EOF)
        self._logger.debug("parsed %d top-level statements from %s", len(statements), self.source_file)
        return statements


def parse_source(source: str, file: str = "<input>") -> ast.Program:
    """
    Tokenize and parse ``source`` in one step.
    """
    return Parser(tokenize(source, file), file).parse()
