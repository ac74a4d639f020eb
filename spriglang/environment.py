"""Variable scopes.

A scope maps names to values and points at its enclosing scope. Lookups and
assignments walk outward through the chain; declarations only ever touch the
innermost scope. Scopes are plain objects, so a function value that holds on
to its defining scope keeps that scope (and its parents) alive after the call
that created it has returned.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Any, Dict, Optional

from spriglang.exceptions import UndefinedVariableError


class Environment:
    """Represents a scope mapping identifiers to values."""

    def __init__(self, parent: Optional['Environment'] = None):
        self.parent = parent
        self.values: Dict[str, Any] = {}

    def child(self) -> 'Environment':
        """Return a new scope nested inside this one."""
        return Environment(self)

    def define(self, name: str, value: Any) -> None:
        """Bind ``name`` in this scope, replacing any existing binding here."""
        self.values[name] = value

    def _resolve(self, name: str) -> Optional['Environment']:
        env = self
        while env is not None:
            if name in env.values:
                return env
            env = env.parent
        return None

    def get(self, name: str, line=None, column=None, file=None) -> Any:
        """
        Return the value bound to ``name`` in the nearest enclosing scope.

        Raises:
            UndefinedVariableError: If no scope in the chain defines ``name``.
        """
        env = self._resolve(name)
        if env is None:
            raise UndefinedVariableError(name, line, column, file)
        return env.values[name]

    def assign(self, name: str, value: Any, line=None, column=None, file=None) -> None:
        """
        Rebind ``name`` in the nearest scope that already defines it.

        Raises:
            UndefinedVariableError: If no scope in the chain defines ``name``.
        """
        env = self._resolve(name)
        if env is None:
            raise UndefinedVariableError(name, line, column, file)
        env.values[name] = value

    def __contains__(self, name: str) -> bool:
        return self._resolve(name) is not None
