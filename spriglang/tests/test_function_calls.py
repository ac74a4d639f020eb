"""
Tests for function calls in Sprig Language.
"""
import pytest

from spriglang.exceptions import ArityError, NotCallableError
from spriglang.interpreter import Interpreter
from spriglang.tests.utils import parse_source, run_source


def test_call_without_return_yields_nil():
    """
    Test that a body that finishes normally returns nil.
    """
    assert run_source("fn f() { let a = 1; } print f();") == ["nil"]


def test_bare_return_yields_nil():
    """
    Test that ``return;`` returns nil and stops the body.
    """
    assert run_source('fn f() { return; print "unreachable"; } print f();') == ["nil"]


def test_return_from_nested_blocks_and_loops():
    """
    Test that a return deep inside loops and ifs leaves the whole call.
    """
    source = (
        "fn find(limit) {\n"
        "    let i = 0;\n"
        "    while true {\n"
        "        i = i + 1;\n"
        "        if i == limit {\n"
        "            { return i * 10; }\n"
        "        }\n"
        "    }\n"
        "}\n"
        "print find(4);\n"
    )
    assert run_source(source) == ["40"]


def test_arguments_evaluated_left_to_right():
    """
    Test the order of argument evaluation.
    """
    source = (
        "fn show(x) { print x; return x; }\n"
        "fn pair(a, b) { return a - b; }\n"
        "print pair(show(1), show(2));\n"
    )
    assert run_source(source) == ["1", "2", "-1"]


def test_wrong_argument_count():
    """
    Test that calls must pass exactly one argument per parameter.
    """
    with pytest.raises(ArityError) as exc:
        run_source("fn f(a, b) { }\nf(1);")
    assert exc.value.expected == 2
    assert exc.value.got == 1
    assert exc.value.line == 2


@pytest.mark.parametrize("source", [
    "let x = 3; x();",
    '"text"();',
    "nil();",
    "fn f() { } f()();",
])
def test_calling_non_function(source):
    """
    Test that only functions can be called.
    """
    with pytest.raises(NotCallableError):
        run_source(source)


def test_output_before_error_is_kept(capsys):
    """
    Test that output already written stays written when a later call fails.
    """
    interpreter = Interpreter("<test>")
    with pytest.raises(NotCallableError):
        interpreter.run(parse_source("print 1; print 2; 3();"))
    assert capsys.readouterr().out.splitlines() == ["1", "2"]
