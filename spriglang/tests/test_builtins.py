"""
Tests for Sprig built-in functions.
"""
import builtins
import io

import pytest

from spriglang.exceptions import ArityError
from spriglang.interpreter import Interpreter
from spriglang.tests.utils import parse_source, run_source


def test_input_reads_number():
    """
    Test that numeric input comes back as a number.
    """
    lines = run_source("let n = input(); print n * 2;", stdin="21\n")
    assert lines == ["Input: 42"]


def test_input_reads_text():
    """
    Test that non-numeric input comes back as a string.
    """
    lines = run_source('print "hello " + input();', stdin="world\n")
    assert lines == ["Input: hello world"]


def test_input_at_end_of_stream_is_nil():
    assert run_source("print input();", stdin="") == ["Input: nil"]


def test_input_takes_no_arguments():
    with pytest.raises(ArityError):
        run_source("input(1);")


def test_input_uses_process_stdin(monkeypatch, capsys):
    """
    Test that the default streams are the process's stdin and stdout.
    """
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n"))
    interpreter = Interpreter("<test>")
    interpreter.run(parse_source("let times = input(); let k = 0; while k < times { k = k + 1; } print k;"))
    assert capsys.readouterr().out == "Input: 4\n"


def test_builtins_can_be_shadowed():
    """
    Test that built-ins are ordinary global bindings.
    """
    assert run_source('fn input() { return "mine"; } print input();') == ["mine"]


def test_host_input_is_not_used(monkeypatch):
    """
    Test that the built-in reads the stream directly rather than the host prompt.
    """
    monkeypatch.setattr(builtins, "input", lambda prompt="": pytest.fail("host input() called"))
    assert run_source("print input();", stdin="3\n") == ["Input: 3"]


@pytest.mark.parametrize("text", ["nan", "inf", "infinity", "1e3", "1_000", "-4", ".5", "\u0663"])
def test_input_only_reads_sprig_number_syntax(text):
    """
    Test that input outside the number literal syntax stays a string.
    """
    lines = run_source('let n = input(); print n == n; print n + "!";', stdin=text + "\n")
    assert lines == ["Input: true", text + "!"]


def test_input_number_with_surrounding_spaces():
    assert run_source("print input() + 1;", stdin="  2.5 \n") == ["Input: 3.5"]
