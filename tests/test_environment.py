import pytest

from lisparse.errors import (
    LispInvalidSymbol,
    LispRedefinitionError,
    LispUnboundAssignment,
    LispUnboundSymbol,
)
from lisparse.types.environment import Environment
from lisparse.types.symbol import Symbol

a, b = Symbol("a"), Symbol("b")


def test_define_and_lookup():
    env = Environment()
    env.define(a, 1)
    assert env.lookup(a) == 1


def test_lookup_walks_parent_chain():
    root = Environment()
    root.define(a, 1)
    child = root.new_child().new_child()
    assert child.lookup(a) == 1
    assert len(list(child.frames())) == 3
    assert child.find(a) is root


def test_inner_binding_shadows_outer():
    root = Environment()
    root.define(a, 1)
    child = root.new_child()
    child.define(a, 2)
    assert child.lookup(a) == 2
    assert root.lookup(a) == 1


def test_unbound_lookup_raises():
    with pytest.raises(LispUnboundSymbol):
        Environment().new_child().lookup(a)


def test_local_redefinition_rejected_and_preserved():
    env = Environment()
    env.define(a, 1)
    with pytest.raises(LispRedefinitionError):
        env.define(a, 2)
    assert env.lookup(a) == 1


def test_define_never_touches_parent():
    root = Environment()
    child = root.new_child()
    child.define(a, 1)
    assert a not in root
    assert a in child


def test_set_mutates_nearest_frame():
    root = Environment()
    root.define(a, 1)
    mid = root.new_child()
    mid.define(a, 2)
    leaf = mid.new_child()
    leaf.set(a, 3)
    assert mid.lookup(a) == 3
    assert root.lookup(a) == 1


def test_set_unbound_raises_without_mutation():
    env = Environment()
    with pytest.raises(LispUnboundAssignment):
        env.set(b, 1)
    assert b not in env


def test_names_must_be_symbols():
    with pytest.raises(LispInvalidSymbol):
        Environment().define("a", 1)


def test_update_replaces_bindings():
    env = Environment()
    env.define(a, 1)
    env.update({a: 2, b: 3})
    assert env.lookup(a) == 2
    assert env.lookup(b) == 3


def test_str_marks_parent():
    root = Environment()
    root.define(a, 1)
    assert str(root) == "{a: 1}"
    assert str(root.new_child()) == "{} -> ..."
    assert repr(root.new_child()) == "<Environment chain: {} -> {a: 1}>"
