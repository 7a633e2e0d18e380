import pytest

from minischeme.errors import SchemeInvalidSymbol, SchemeUnboundSymbol
from minischeme.types.environment import Environment
from minischeme.types.symbol import Symbol

X = Symbol("x")
Y = Symbol("y")


def test_set_and_get(env):
    env.set(X, 42)
    assert env.get(X) == 42
    assert env.lookup(X) == 42
    assert X in env


def test_get_unbound_returns_default(env):
    assert env.get(X) is None
    assert env.get(X, "missing") == "missing"
    assert X not in env


def test_lookup_unbound_raises(env):
    with pytest.raises(SchemeUnboundSymbol, match="Unbound symbol x"):
        env.lookup(X)


def test_set_overwrites_in_place(env):
    env.set(X, 1)
    env.set(X, 2)
    assert env.lookup(X) == 2


def test_child_falls_back_to_parent(env):
    env.set(X, 1)
    child = Environment.extend(env)
    assert child.outer is env
    assert child.vars == {}
    assert child.lookup(X) == 1
    assert child.find(X) is env


def test_child_set_shadows_without_touching_parent(env):
    env.set(X, 1)
    child = Environment.extend(env)
    child.set(X, 2)
    assert child.lookup(X) == 2
    assert env.lookup(X) == 1


def test_siblings_share_parent(env):
    a = Environment.extend(env)
    b = Environment.extend(env)
    env.set(Y, "shared")
    assert a.lookup(Y) == "shared"
    assert b.lookup(Y) == "shared"
    a.set(X, 1)
    assert X not in b


def test_lookup_walks_many_levels(env):
    env.set(X, 0)
    scope = env
    for _ in range(50):
        scope = Environment.extend(scope)
    assert scope.lookup(X) == 0
    assert len(list(scope.chain())) == 51


def test_set_rejects_non_symbols(env):
    with pytest.raises(SchemeInvalidSymbol):
        env.set("x", 1)
    assert "x" not in env


def test_update_binds_in_current_scope(env):
    child = Environment.extend(env)
    child.update({X: 1, Y: 2})
    assert child.vars == {X: 1, Y: 2}
    assert env.vars == {}


def test_returned_lists_are_shared(env):
    value = [1, 2]
    env.set(X, value)
    assert env.lookup(X) is value


def test_str_and_repr(env):
    env.set(X, 1)
    child = Environment.extend(env)
    child.set(Y, 2)
    assert str(env) == "{x: 1}"
    assert str(child) == "{y: 2} -> ..."
    assert repr(child) == "<Environment chain: {y: 2} -> {x: 1}>"
