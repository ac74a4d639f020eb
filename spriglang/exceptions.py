"""Errors.

Every error raised by the lexer, parser or interpreter derives from
:class:`SprigError` and carries the source position it refers to. Errors are
never caught inside the pipeline; they propagate unchanged to the caller,
which can render them with :func:`format_error`.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class SprigError(Exception):
    """
    Base class for all language errors.
    """
    kind = "Error"

    def __init__(self, message, line=None, column=None, file=None):
        self.message = message
        self.line = line
        self.column = column
        self.file = file
        text = message
        if line is not None:
            text += f" on line {line}"
            if column is not None:
                text += f" char {column}"
        if file is not None:
            text += f" in {file}"
        super().__init__(text)


# Lexical errors

class LexError(SprigError):
    """
    Error raised while tokenizing source text.
    """
    kind = "LexError"


class InvalidCharacterError(LexError):
    """
    Error for a character outside the language's alphabet.
    """
    def __init__(self, char, line=None, column=None, file=None):
        self.char = char
        super().__init__(f"Invalid character '{char}'", line, column, file)


class UnterminatedStringError(LexError):
    """
    Error for a string literal missing its closing quote.
    """
    def __init__(self, line=None, column=None, file=None):
        super().__init__("Unterminated string", line, column, file)


# Syntax errors

class ParseError(SprigError):
    """
    Error raised when the token sequence does not match the grammar.
    """
    kind = "ParseError"

    def __init__(self, message, token=None, file=None):
        self.token = token
        line = token.line if token is not None else None
        column = token.column if token is not None else None
        super().__init__(message, line, column, file)

    @property
    def at_eof(self) -> bool:
        """
        Return ``True`` if the error was raised on the end-of-input token.
        """
        return self.token is not None and self.token.type.name == "EOF"


# Runtime errors

class SprigRuntimeError(SprigError):
    """
    Error raised while evaluating a program.
    """
    kind = "RuntimeError"


class UndefinedVariableError(SprigRuntimeError):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, line=None, column=None, file=None):
        self.varname = varname
        super().__init__(f"Undefined variable '{varname}'", line, column, file)


class TypeMismatchError(SprigRuntimeError):
    """
    Error for operands of the wrong type.
    """


class DivisionByZeroError(SprigRuntimeError):
    """
    Error for division by a zero divisor.
    """
    def __init__(self, line=None, column=None, file=None):
        super().__init__("Division by zero", line, column, file)


class ArityError(SprigRuntimeError):
    """
    Error for calls with the wrong number of arguments.
    """
    def __init__(self, name, expected, got, line=None, column=None, file=None):
        self.expected = expected
        self.got = got
        super().__init__(
            f"Function '{name}' expects {expected} argument(s) but got {got}",
            line, column, file,
        )


class NotCallableError(SprigRuntimeError):
    """
    Error for calling a value that is not a function.
    """


def format_error(error: SprigError, source: str) -> str:
    """
    Render an error together with the source line it points at.

    Parameters:
        error (SprigError): The error to render.
        source (str): The full source text the error was raised for.

    Returns:
        str: ``<Kind>: <message>, on line L char C:`` followed by the source
        line and a caret under the offending column. Errors without a
        position render as ``<Kind>: <message>``.
    """
    header = f"{error.kind}: {error.message}"
    if error.line is None:
        return header

    lines = source.split("\n")
    text = lines[error.line - 1] if 0 < error.line <= len(lines) else ""
    column = error.column or 1
    header += f", on line {error.line} char {column}"
    if error.file is not None:
        header += f" in {error.file}"
    return f"{header}:\n{text}\n{' ' * (column - 1)}^"
