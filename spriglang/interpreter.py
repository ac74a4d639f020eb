"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
arithmetic, variables, closures, conditionals, loops, and output statements.

1. Execution Model
The interpreter evaluates an abstract syntax tree (AST) in a top-down, recursive manner.
Statements are executed via `execute()` and expressions are evaluated via `evaluate()`. Both
dispatch on the node's dataclass with `match`. The scope to work in is always passed in
explicitly; the interpreter itself only holds the global scope and its I/O streams.

2. Environment
Blocks run in a child of the current scope. Calls run in a child of the function's *captured*
scope, not the caller's, which is what lets closures see the variables of the function that
defined them.

3. Control Flow
`execute()` returns a `Signal` rather than raising: NORMAL to fall through, RETURN carrying a
value, BREAK and CONTINUE. Blocks stop at the first signal that is not NORMAL and hand it to
their caller; loops consume BREAK and CONTINUE; calls consume RETURN.

4. Error Handling
Runtime errors such as undefined variables, type mismatches, division by zero and bad calls
are raised as typed `SprigRuntimeError` subclasses carrying line, column and file. Nothing
here catches them, and output already written stays written. A host `RecursionError` from
unbounded recursion is deliberately left alone; it is fatal, not a runtime error.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, TextIO

from spriglang.ast import (
    Assignment, Binary, Block, Break, Call, Continue, Expr, ExpressionStatement,
    FunctionDeclaration, Grouping, Identifier, If, Literal, Logical, Print,
    Program, Return, Stmt, Unary, VariableDeclaration, While,
)
from spriglang.builtins import install_builtins
from spriglang.environment import Environment
from spriglang.exceptions import (
    ArityError,
    DivisionByZeroError,
    NotCallableError,
    TypeMismatchError,
)
from spriglang.lexer import tokenize
from spriglang.operations import Op
from spriglang.parser import Parser
from spriglang.values import (
    BuiltinFunction,
    FunctionValue,
    is_number,
    is_truthy,
    same_variant,
    stringify,
    type_name,
    values_equal,
)


class SignalKind(Enum):
    """
    Outcome of executing a statement.
    """
    NORMAL = "normal"
    RETURN = "return"
    BREAK = "break"
    CONTINUE = "continue"


@dataclass(frozen=True)
class Signal:
    """
    Control signal returned by `Interpreter.execute`.
    """
    kind: SignalKind
    value: Any = None

    @staticmethod
    def returning(value: Any) -> 'Signal':
        return Signal(SignalKind.RETURN, value)


NORMAL = Signal(SignalKind.NORMAL)
BREAK = Signal(SignalKind.BREAK)
CONTINUE = Signal(SignalKind.CONTINUE)


class Interpreter:
    """Tree-walk interpreter for Sprig."""

    def __init__(self, file: str = "<input>", out: Optional[TextIO] = None, stdin: Optional[TextIO] = None):
        """
        Initialize the interpreter.

        Parameters:
            file (str): Script name attached to runtime errors.
            out (TextIO | None): Stream ``print`` writes to. Defaults to the
                current ``sys.stdout`` at the time of each write.
            stdin (TextIO | None): Stream ``input()`` reads from. Defaults to
                the current ``sys.stdin``.
        """
        self.file = file
        self.out = out
        self.stdin = stdin
        self.globals = Environment()
        install_builtins(self.globals)
        self._logger = logging.getLogger("SprigInterpreter")

    # I/O

    def write(self, text: str, end: str = "\n") -> None:
        """Write ``text`` to the output stream and flush it."""
        out = self.out if self.out is not None else sys.stdout
        out.write(text + end)
        out.flush()

    def read_line(self) -> str:
        """Read a line from the input stream; returns ``''`` at end of input."""
        stream = self.stdin if self.stdin is not None else sys.stdin
        return stream.readline()

    # Entry points

    def run(self, program: Program, env: Optional[Environment] = None) -> None:
        """
        Execute a parsed program, by default in the global scope.
        """
        env = env if env is not None else self.globals
        for stmt in program:
            self.execute(stmt, env)

    # Helpers

    def _mismatch(self, message: str, node) -> TypeMismatchError:
        return TypeMismatchError(message, node.line, node.column, self.file)

    def _require_numbers(self, node: Binary, lhs: Any, rhs: Any) -> None:
        if not (is_number(lhs) and is_number(rhs)):
            raise self._mismatch(
                f"Operator '{node.op.value}' expects numbers, got {type_name(lhs)} and {type_name(rhs)}",
                node,
            )

    # Expressions

    def evaluate(self, node: Expr, env: Environment) -> Any:
        """
        Recursively evaluate an expression node and return its computed value.

        Parameters:
            node (Expr): An expression node.
            env (Environment): The scope to resolve identifiers in.

        Returns:
            The evaluated result of the expression.

        Raises:
            SprigRuntimeError: On undefined variables, type mismatches,
                division by zero, or invalid calls.
        """
        match node:
            case Literal(value=value):
                return value

            case Grouping(inner=inner):
                return self.evaluate(inner, env)

            case Identifier(name=name):
                return env.get(name, node.line, node.column, self.file)

            case Assignment(name=name, value=value_node):
                value = self.evaluate(value_node, env)
                env.assign(name, value, node.line, node.column, self.file)
                return value

            case Unary(op=op, operand=operand_node):
                operand = self.evaluate(operand_node, env)
                if op == Op.NOT:
                    return not is_truthy(operand)
                if not is_number(operand):
                    raise self._mismatch(
                        f"Unary minus (-) requires a numeric operand, got {type_name(operand)}", node
                    )
                return -operand

            case Logical(op=op, left=left_node, right=right_node):
                lhs = self.evaluate(left_node, env)
                if op == Op.OR:
                    if is_truthy(lhs):
                        return lhs
                elif not is_truthy(lhs):
                    return lhs
                return self.evaluate(right_node, env)

            case Binary():
                lhs = self.evaluate(node.left, env)
                rhs = self.evaluate(node.right, env)
                return self._binary(node, lhs, rhs)

            case Call(callee=callee_node, arguments=arg_nodes):
                callee = self.evaluate(callee_node, env)
                args = [self.evaluate(arg, env) for arg in arg_nodes]
                return self.call(callee, args, node)

        raise TypeError(f"Invalid expression node: {node!r}")

    def _binary(self, node: Binary, lhs: Any, rhs: Any) -> Any:
        op = node.op
        match op:
            case Op.EQ | Op.NE:
                if lhs is not None and rhs is not None and not same_variant(lhs, rhs):
                    raise self._mismatch(
                        f"Cannot compare {type_name(lhs)} and {type_name(rhs)} with '{op.value}'", node
                    )
                equal = values_equal(lhs, rhs)
                return equal if op == Op.EQ else not equal

            case Op.ADD:
                if type(lhs) is str and type(rhs) is str:
                    return lhs + rhs
                self._require_numbers(node, lhs, rhs)
                return lhs + rhs

            case Op.SUB:
                self._require_numbers(node, lhs, rhs)
                return lhs - rhs

            case Op.MUL:
                self._require_numbers(node, lhs, rhs)
                return lhs * rhs

            case Op.DIV:
                self._require_numbers(node, lhs, rhs)
                if rhs == 0:
                    raise DivisionByZeroError(node.line, node.column, self.file)
                return lhs / rhs

            case Op.LT | Op.LE | Op.GT | Op.GE:
                if not (type(lhs) is str and type(rhs) is str):
                    self._require_numbers(node, lhs, rhs)
                if op == Op.LT:
                    return lhs < rhs
                if op == Op.LE:
                    return lhs <= rhs
                if op == Op.GT:
                    return lhs > rhs
                return lhs >= rhs

        raise TypeError(f"Unknown binary operator '{op}'")

    def call(self, callee: Any, args: list, node: Call) -> Any:
        """
        Call a function value with already-evaluated arguments.

        Raises:
            NotCallableError: If ``callee`` is not a function.
            ArityError: If the argument count does not match the parameter count.
        """
        if isinstance(callee, BuiltinFunction):
            if callee.arity is not None and len(args) != callee.arity:
                raise ArityError(callee.name, callee.arity, len(args), node.line, node.column, self.file)
            return callee.fn(self, *args)

        if not isinstance(callee, FunctionValue):
            raise NotCallableError(
                f"Cannot call a value of type {type_name(callee)}", node.line, node.column, self.file
            )
        if len(args) != callee.arity:
            raise ArityError(callee.name, callee.arity, len(args), node.line, node.column, self.file)

        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug("call %s(%s) on line %s", callee.name, ", ".join(map(stringify, args)), node.line)
        scope = callee.closure.child()
        for param, arg in zip(callee.params, args):
            scope.define(param, arg)

        signal = self.execute_block(callee.body.statements, scope)
        if signal.kind is SignalKind.RETURN:
            return signal.value
        return None

    # Statements

    def execute_block(self, statements, env: Environment) -> Signal:
        """
        Execute statements in order inside ``env``, stopping at the first
        signal that is not NORMAL and returning it.
        """
        for stmt in statements:
            signal = self.execute(stmt, env)
            if signal.kind is not SignalKind.NORMAL:
                return signal
        return NORMAL

    def execute(self, stmt: Stmt, env: Environment) -> Signal:
        """
        Execute a single statement.

        Parameters:
            stmt (Stmt): The statement node.
            env (Environment): The scope to execute in.

        Returns:
            Signal: How control leaves the statement.
        """
        match stmt:
            case ExpressionStatement(expression=expression):
                self.evaluate(expression, env)
                return NORMAL

            case Print(expression=expression):
                self.write(stringify(self.evaluate(expression, env)))
                return NORMAL

            case VariableDeclaration(name=name, initializer=initializer):
                value = self.evaluate(initializer, env) if initializer is not None else None
                env.define(name, value)
                return NORMAL

            case Block(statements=statements):
                return self.execute_block(statements, env.child())

            case If(condition=condition, then_branch=then_branch, else_branch=else_branch):
                if is_truthy(self.evaluate(condition, env)):
                    return self.execute(then_branch, env)
                if else_branch is not None:
                    return self.execute(else_branch, env)
                return NORMAL

            case While(condition=condition, body=body):
                while is_truthy(self.evaluate(condition, env)):
                    signal = self.execute(body, env)
                    if signal.kind is SignalKind.BREAK:
                        break
                    if signal.kind is SignalKind.RETURN:
                        return signal
                return NORMAL

            case FunctionDeclaration(name=name, params=params, body=body):
                # Defined before the body can run, so the function can call itself.
                env.define(name, FunctionValue(name, params, body, env))
                return NORMAL

            case Return(value=value_node):
                value = self.evaluate(value_node, env) if value_node is not None else None
                return Signal.returning(value)

            case Break():
                return BREAK

            case Continue():
                return CONTINUE

        raise TypeError(f"Unknown statement type: {type(stmt).__name__}")


def interpret(source: str, file: str = "<input>", interpreter: Optional[Interpreter] = None) -> Interpreter:
    """
    Tokenize, parse and run ``source``, returning the interpreter used.

    Raises:
        SprigError: The first lexical, syntax or runtime error encountered.
    """
    interpreter = interpreter if interpreter is not None else Interpreter(file)
    program = Parser(tokenize(source, file), file).parse()
    interpreter.run(program)
    return interpreter
