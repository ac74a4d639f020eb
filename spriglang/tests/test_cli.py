"""
Tests for the Sprig command line entry point.
"""
import builtins
import logging

import pytest

import sprig


@pytest.fixture
def script(tmp_path):
    """
    Write source text to a temporary ``.sprig`` file and return its path.
    """
    def write(source: str) -> str:
        path = tmp_path / "prog.sprig"
        path.write_text(source, encoding="utf-8")
        return str(path)
    return write


def test_run_script_success(script, capsys):
    status = sprig.main(["sprig", script("let x = 5; x = x + 1; print x;")])
    captured = capsys.readouterr()
    assert status == sprig.EXIT_OK
    assert captured.out == "6\n"
    assert captured.err == ""


def test_runtime_error_keeps_earlier_output(script, capsys):
    """
    Test that a failing program exits non-zero and prior output survives.
    """
    status = sprig.main(["sprig", script('print "before";\nprint 10 / 0;\nprint "after";\n')])
    captured = capsys.readouterr()
    assert status == sprig.EXIT_ERROR
    assert captured.out == "before\n"
    assert captured.err.startswith("RuntimeError: Division by zero, on line 2 char 10")
    assert "print 10 / 0;" in captured.err


def test_parse_error_runs_nothing(script, capsys):
    """
    Test that a syntax error anywhere stops the program before it starts.
    """
    status = sprig.main(["sprig", script('print "never";\nlet = 3;\n')])
    captured = capsys.readouterr()
    assert status == sprig.EXIT_ERROR
    assert captured.out == ""
    assert captured.err.startswith("ParseError:")


def test_lex_error(script, capsys):
    status = sprig.main(["sprig", script("print 1 $ 2;")])
    assert status == sprig.EXIT_ERROR
    assert capsys.readouterr().err.startswith("LexError: Invalid character '$'")


def test_stack_exhaustion_is_fatal(script, capsys):
    status = sprig.main(["sprig", script("fn loop() { return loop(); } loop();")])
    assert status == sprig.EXIT_FATAL
    assert "Fatal: stack exhausted" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    status = sprig.main(["sprig", str(tmp_path / "absent.sprig")])
    assert status == sprig.EXIT_ERROR
    assert "Error reading file" in capsys.readouterr().err


def test_help(capsys):
    assert sprig.main(["sprig", "--help"]) == sprig.EXIT_OK
    assert "Usage:" in capsys.readouterr().out


def test_too_many_arguments(capsys):
    assert sprig.main(["sprig", "a.sprig", "b.sprig"]) == sprig.EXIT_ERROR
    assert "Usage:" in capsys.readouterr().out


def test_debug_dump(script, capsys, monkeypatch):
    """
    Test that SPRIGDEBUG prints tokens and AST to stderr.
    """
    monkeypatch.setenv("SPRIGDEBUG", "1")
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", list(root.handlers))
    monkeypatch.setattr(root, "level", root.level)
    status = sprig.main(["sprig", script("print 1;")])
    captured = capsys.readouterr()
    assert status == sprig.EXIT_OK
    assert captured.out == "1\n"
    assert "Tokens:" in captured.err
    assert "AST:" in captured.err


def feed(monkeypatch, lines):
    """
    Replace ``input`` with a function returning ``lines`` then raising EOFError.
    """
    pending = list(lines)

    def fake_input(prompt=""):
        if not pending:
            raise EOFError
        return pending.pop(0)

    monkeypatch.setattr(builtins, "input", fake_input)


def test_repl_keeps_state_between_inputs(monkeypatch, capsys):
    feed(monkeypatch, ["let x = 2;", "x = x * 21;", "print x;", "exit"])
    assert sprig.main(["sprig"]) == sprig.EXIT_OK
    assert "42" in capsys.readouterr().out.splitlines()


def test_repl_buffers_incomplete_statements(monkeypatch, capsys):
    feed(monkeypatch, ["fn twice(n) {", "  return n * 2;", "}", "print twice(4);"])
    assert sprig.main(["sprig"]) == sprig.EXIT_OK
    assert "8" in capsys.readouterr().out.splitlines()


def test_repl_reports_errors_and_continues(monkeypatch, capsys):
    feed(monkeypatch, ["print nope;", "print 1;"])
    assert sprig.main(["sprig"]) == sprig.EXIT_OK
    captured = capsys.readouterr()
    assert "RuntimeError: Undefined variable 'nope'" in captured.err
    assert "1" in captured.out.splitlines()


def test_repl_deep_nesting_is_fatal(monkeypatch, capsys):
    """
    Test that stack exhaustion while parsing REPL input is reported as fatal.
    """
    depth = 20000
    feed(monkeypatch, ["print " + "(" * depth + "1" + ")" * depth + ";"])
    assert sprig.main(["sprig"]) == sprig.EXIT_FATAL
    assert "Fatal: stack exhausted" in capsys.readouterr().err
