"""Runtime values.

Sprig values map onto Python objects:

- Number   -> ``float``
- String   -> ``str``
- Boolean  -> ``bool``
- Nil      -> ``None``
- Function -> :class:`FunctionValue` or :class:`BuiltinFunction`

``bool`` is a subclass of ``int`` and compares equal to ``1.0``, so every
check here tests the exact type rather than relying on Python's numeric
coercions.


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from spriglang import ast
from spriglang.environment import Environment


class FunctionValue:
    """Runtime representation of a user-defined function."""

    def __init__(self, name: str, params: tuple, body: ast.Block, closure: Environment):
        self.name = name
        self.params = params
        self.body = body
        # Scope active at the point of definition, shared with every call.
        self.closure = closure

    @property
    def arity(self) -> int:
        return len(self.params)

    def __repr__(self) -> str:
        return f"<fn {self.name}>"


@dataclass
class BuiltinFunction:
    name: str
    arity: Optional[int]
    fn: Callable[..., Any]

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"


def is_number(value: Any) -> bool:
    return type(value) is float


def is_callable(value: Any) -> bool:
    return isinstance(value, (FunctionValue, BuiltinFunction))


def type_name(value: Any) -> str:
    """Return the Sprig name of a value's type, for error messages."""
    if value is None:
        return "nil"
    if type(value) is bool:
        return "boolean"
    if type(value) is float:
        return "number"
    if type(value) is str:
        return "string"
    if is_callable(value):
        return "function"
    return type(value).__name__


def is_truthy(value: Any) -> bool:
    """Booleans are themselves, nil is false, every other value is true."""
    if value is None:
        return False
    if type(value) is bool:
        return value
    return True


def same_variant(left: Any, right: Any) -> bool:
    return type_name(left) == type_name(right)


def values_equal(left: Any, right: Any) -> bool:
    """
    Compare two values of the same variant, or anything against nil.

    Callers are responsible for rejecting other mixed-variant comparisons.
    """
    if left is None or right is None:
        return left is None and right is None
    if is_callable(left):
        return left is right
    return left == right


def stringify(value: Any) -> str:
    """Return the text ``print`` writes for ``value``."""
    if value is None:
        return "nil"
    if type(value) is bool:
        return "true" if value else "false"
    if type(value) is float:
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if type(value) is str:
        return value
    return repr(value)
