"""
Tests for Sprig variable scopes.
"""
import pytest

from spriglang.environment import Environment
from spriglang.exceptions import UndefinedVariableError


def test_define_and_get():
    env = Environment()
    env.define("a", 1.0)
    assert env.get("a") == 1.0


def test_define_overwrites_in_current_scope():
    env = Environment()
    env.define("a", 1.0)
    env.define("a", 2.0)
    assert env.values == {"a": 2.0}


def test_get_searches_outward():
    root = Environment()
    root.define("a", "root")
    leaf = root.child().child()
    assert leaf.get("a") == "root"


def test_inner_definition_shadows():
    root = Environment()
    root.define("a", "root")
    inner = root.child()
    inner.define("a", "inner")
    assert inner.get("a") == "inner"
    assert root.get("a") == "root"


def test_assign_mutates_nearest_defining_scope():
    """
    Test that assignment updates the scope that owns the name.
    """
    root = Environment()
    root.define("a", 1.0)
    middle = root.child()
    middle.define("a", 2.0)
    leaf = middle.child()
    leaf.assign("a", 3.0)
    assert middle.values["a"] == 3.0
    assert root.values["a"] == 1.0
    assert "a" not in leaf.values


def test_assign_never_declares():
    env = Environment().child()
    with pytest.raises(UndefinedVariableError):
        env.assign("missing", 1.0)
    assert "missing" not in env


def test_get_undefined_carries_position():
    env = Environment()
    with pytest.raises(UndefinedVariableError) as exc:
        env.get("ghost", 3, 4, "demo.sprig")
    err = exc.value
    assert (err.varname, err.line, err.column, err.file) == ("ghost", 3, 4, "demo.sprig")
    assert str(err) == "Undefined variable 'ghost' on line 3 char 4 in demo.sprig"


def test_child_outlives_nothing_but_its_references():
    """
    Test that a scope captured by reference stays usable after its creator is gone.
    """
    def make():
        scope = Environment().child()
        scope.define("kept", True)
        return scope

    captured = make()
    assert captured.get("kept") is True
