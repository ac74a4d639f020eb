"""
Tests for scoping rules in Sprig Language
"""
import pytest

from spriglang.exceptions import UndefinedVariableError
from spriglang.tests.utils import run_source


def test_block_scope_does_not_leak():
    """
    Test that names declared in a block vanish when it ends.
    """
    with pytest.raises(UndefinedVariableError):
        run_source("{ let inner = 1; } print inner;")


def test_block_shadowing():
    """
    Test that a block can shadow an outer name without touching it.
    """
    source = (
        'let a = "outer";\n'
        "{\n"
        '    let a = "inner";\n'
        "    print a;\n"
        "}\n"
        "print a;\n"
    )
    assert run_source(source) == ["inner", "outer"]


def test_assignment_reaches_outer_scope():
    """
    Test that assigning inside a block updates the enclosing binding.
    """
    assert run_source("let n = 1; { { n = n + 10; } } print n;") == ["11"]


def test_functions_have_fresh_env():
    """
    Test that each call gets its own scope for locals.
    """
    source = (
        "fn inner() {\n"
        "    let x = 1;\n"
        "    return x;\n"
        "}\n"
        "fn outer() {\n"
        "    let x = 2;\n"
        "    return inner();\n"
        "}\n"
        "print outer();\n"
    )
    assert run_source(source) == ["1"]


def test_functions_do_not_see_caller_locals():
    """
    Test that a function resolves names where it was defined, not where it is called.
    """
    source = (
        "fn show() { return secret; }\n"
        "fn caller() {\n"
        "    let secret = 42;\n"
        "    return show();\n"
        "}\n"
        "caller();\n"
    )
    with pytest.raises(UndefinedVariableError):
        run_source(source)


def test_globals_visible():
    """
    Test that global variables are visible inside functions.
    """
    source = (
        "let g = 5;\n"
        "fn read_g() {\n"
        "    return g;\n"
        "}\n"
        "print read_g();\n"
    )
    assert run_source(source) == ["5"]


def test_globals_declared_after_function_are_visible():
    """
    Test that lookups happen at call time against the live defining scope.
    """
    source = (
        "fn read_late() { return late; }\n"
        "let late = 7;\n"
        "print read_late();\n"
    )
    assert run_source(source) == ["7"]


def test_parameters_shadow_globals():
    """
    Test that parameters are local to the call.
    """
    source = (
        "let x = 1;\n"
        "fn set(x) { x = 99; return x; }\n"
        "print set(5);\n"
        "print x;\n"
    )
    assert run_source(source) == ["99", "1"]
