"""Built-in functions.

Built-ins are ordinary values bound in the global scope, so they can be
shadowed, passed around and called like user-defined functions. Each
implementation receives the running interpreter followed by the evaluated
arguments.


File: builtins.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from typing import TYPE_CHECKING, Any

from spriglang.environment import Environment
from spriglang.lexer import NUMBER_PATTERN
from spriglang.values import BuiltinFunction

if TYPE_CHECKING:
    from spriglang.interpreter import Interpreter


INPUT_PROMPT = "Input: "


def builtin_input(interpreter: 'Interpreter') -> Any:
    """
    Read one line from the interpreter's input stream.

    Returns the line as a number when it is written the way a Sprig number
    literal is, otherwise as a string with the trailing newline removed. End
    of input yields nil.
    """
    interpreter.write(INPUT_PROMPT, end="")
    line = interpreter.read_line()
    if line == "":
        return None
    text = line.rstrip("\r\n")
    if re.fullmatch(NUMBER_PATTERN, text.strip()):
        return float(text.strip())
    return text


BUILTINS = (
    BuiltinFunction("input", 0, builtin_input),
)


def install_builtins(env: Environment) -> None:
    """Define every built-in function in ``env``."""
    for builtin in BUILTINS:
        env.define(builtin.name, builtin)
