"""Lexer for Sprig.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its kind, raw lexeme, decoded value and source position.

1. Token Definitions
Token kinds are literal numbers and strings, identifiers, keywords, operators,
punctuation and a final end-of-input marker. Identifiers are matched first and
reclassified as keywords when their text is a reserved word.

2. Longest Match
Two-character operators (``==``, ``!=``, ``<=``, ``>=``) are listed before
their one-character prefixes, so ``==`` is never read as two ``=`` tokens.

3. Comments and Whitespace
``#`` and ``//`` start a comment that runs to the end of the line. Comments and
whitespace are skipped without producing tokens, but still advance the line
and column counters so positions stay accurate.

4. Errors
A ``"`` that does not begin a complete string literal raises
:class:`UnterminatedStringError`; any other character outside the alphabet
raises :class:`InvalidCharacterError`. Both carry the offending position.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from enum import Enum
from typing import Any, Iterator

from spriglang.exceptions import InvalidCharacterError, UnterminatedStringError


class TokenKind(str, Enum):
    """
    Enumeration of token kinds.
    """
    NUMBER = "number"
    STRING = "string"
    IDENTIFIER = "identifier"
    KEYWORD = "keyword"
    OPERATOR = "operator"
    PUNCTUATION = "punctuation"
    EOF = "eof"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


KEYWORDS = frozenset({
    'let', 'fn', 'return',
    'if', 'else', 'while', 'break', 'continue',
    'print',
    'true', 'false', 'nil',
    'and', 'or',
})

ESCAPES = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    '0': '\0',
    '"': '"',
    '\\': '\\',
}


class Token:
    """
    Represents a lexical token with a kind, lexeme and position.
    """
    __slots__ = ('type', 'lexeme', 'value', 'line', 'column')

    def __init__(self, type_: TokenKind, lexeme: str, line: int, column: int, value: Any = None):
        """
        Initialize a new token.

        Parameters:
            type_ (TokenKind): The token kind.
            lexeme (str): The raw source text of the token.
            line (int): 1-based line of the first character.
            column (int): 1-based column of the first character.
            value (Any): The decoded literal value. Defaults to the lexeme.
        """
        self.type = type_
        self.lexeme = lexeme
        self.value = lexeme if value is None and type_ is not TokenKind.EOF else value
        self.line = line
        self.column = column

    def matches(self, type_: TokenKind, lexeme: str | None = None) -> bool:
        """
        Return ``True`` if the token has the given kind and, if provided, lexeme.
        """
        return self.type is type_ and (lexeme is None or self.lexeme == lexeme)

    def describe(self) -> str:
        """
        Return a short human readable description used in error messages.
        """
        if self.type is TokenKind.EOF:
            return "end of input"
        return f"{self.type.value} '{self.lexeme}'"

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type.name}, {self.lexeme!r}, line={self.line}, column={self.column})"


# ASCII digits only; input() numbers follow the same rule.
NUMBER_PATTERN = r'[0-9]+(?:\.[0-9]+)?'

token_specification: list[tuple[str, str]] = [
    # Skipped
    ('COMMENT',      r'(?:\#|//)[^\n]*'),
    ('NEWLINE',      r'\n'),
    ('SKIP',         r'[ \t\r]+'),

    # Literals
    ('NUMBER',       NUMBER_PATTERN),
    ('STRING',       r'"(?:[^"\\]|\\.)*"'),
    ('UNTERMINATED', r'"'),

    # Identifiers and keywords
    ('IDENTIFIER',   r'[A-Za-z_][A-Za-z0-9_]*'),

    # Operators, two-character forms first
    ('OPERATOR',     r'==|!=|<=|>=|[=<>+\-*/!]'),

    # Delimiters
    ('PUNCTUATION',  r'[(){},;]'),

    # Anything else
    ('MISMATCH',     r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification),
    re.DOTALL,
)


def decode_string(lexeme: str) -> str:
    """
    Strip the quotes from a string lexeme and resolve escape sequences.

    Unknown escapes are kept verbatim, backslash included.
    """
    body = lexeme[1:-1]
    out = []
    i = 0
    while i < len(body):
        char = body[i]
        if char == '\\' and i + 1 < len(body):
            nxt = body[i + 1]
            out.append(ESCAPES.get(nxt, '\\' + nxt))
            i += 2
            continue
        out.append(char)
        i += 1
    return ''.join(out)


def iter_tokens(code: str, file: str | None = None) -> Iterator[Token]:
    """
    Lazily convert source code into tokens.

    Parameters:
        code (str): The source code to tokenize.
        file (str | None): Source name attached to errors.

    Yields:
        Token: Tokens in source order, ending with a single EOF token.

    Raises:
        UnterminatedStringError: If a string literal is not closed.
        InvalidCharacterError: If an unexpected character is encountered.
    """
    line_num = 1
    line_start = 0

    for match_obj in TOKEN_REGEX.finditer(code):
        kind = match_obj.lastgroup
        lexeme = match_obj.group()
        column = match_obj.start() - line_start + 1

        if kind == 'NEWLINE':
            line_num += 1
            line_start = match_obj.end()
            continue
        if kind in ('SKIP', 'COMMENT'):
            continue
        if kind == 'UNTERMINATED':
            raise UnterminatedStringError(line_num, column, file)
        if kind == 'MISMATCH':
            raise InvalidCharacterError(lexeme, line_num, column, file)

        if kind == 'NUMBER':
            yield Token(TokenKind.NUMBER, lexeme, line_num, column, float(lexeme))
        elif kind == 'STRING':
            yield Token(TokenKind.STRING, lexeme, line_num, column, decode_string(lexeme))
            # Strings may span lines
            newlines = lexeme.count('\n')
            if newlines:
                line_num += newlines
                line_start = match_obj.start() + lexeme.rindex('\n') + 1
        elif kind == 'IDENTIFIER':
            if lexeme in KEYWORDS:
                yield Token(TokenKind.KEYWORD, lexeme, line_num, column)
            else:
                yield Token(TokenKind.IDENTIFIER, lexeme, line_num, column)
        else:
            yield Token(TokenKind[kind], lexeme, line_num, column)

    yield Token(TokenKind.EOF, '', line_num, len(code) - line_start + 1)


def tokenize(code: str, file: str | None = None) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        file (str | None): Source name attached to errors.

    Returns:
        list[Token]: A list of Token instances terminated by exactly one EOF token.

    Raises:
        LexError: If the source contains an unterminated string or an invalid character.
    """
    return list(iter_tokens(code, file))
