import pytest

from lisparse.types.environment import Environment
from lisparse.types.symbol import Symbol
from lisparse.types.nil import Nil, T
from lisparse.types.lambda_fn import Lambda
from lisparse.evaluation.evaluator import evaluate
from lisparse.builtin.env_builtin import register

# -----------------------------------------------------
# Fixtures
# -----------------------------------------------------

@pytest.fixture
def env():
    e = Environment()
    register(e)
    e.define(Symbol("x"), 42)
    e.define(Symbol("y"), 100)
    return e

# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(1, env) == 1
    assert evaluate(3.14, env) == 3.14
    assert evaluate(T, env) is T
    assert evaluate(Nil, env) is Nil


def test_symbol_lookup(env):
    assert evaluate(Symbol("x"), env) == 42
    assert evaluate(Symbol("y"), env) == 100


def test_unbound_symbol_is_reported(env, reported):
    assert evaluate(Symbol("z"), env) is Nil
    assert any("unbound symbol z" in m for m in reported())


def test_unbound_symbol_inside_call_does_not_abort(env, reported):
    # the failed lookup stands in as nil, which + reports and skips
    assert evaluate([Symbol("+"), 1, Symbol("nope"), 2], env) == 3
    assert len(reported()) == 2


def test_empty_list_is_nil(env, reported):
    assert evaluate([], env) is Nil
    assert reported() == []


def test_simple_expression(env):
    assert evaluate([Symbol("+"), 1, 2], env) == 3


def test_nested_expression(env):
    expr = [Symbol("*"), [Symbol("+"), Symbol("x"), 1], 2]
    assert evaluate(expr, env) == 86


def test_data_head_returns_itself(env, reported):
    assert evaluate([1, 2, 3], env) == 1
    assert evaluate([Symbol("x"), 7], env) == 42
    assert reported() == []


def test_arguments_evaluated_left_to_right(env, capsys):
    expr = [Symbol("list"),
            [Symbol("write"), Symbol("first")],
            [Symbol("write"), Symbol("second")]]
    assert evaluate(expr, env) == [Symbol("first"), Symbol("second")]
    assert capsys.readouterr().out == "first\nsecond\n"


def test_lambda_value_applied_directly(env):
    lam = evaluate([Symbol("lambda"), [Symbol("a"), Symbol("b")],
                    [Symbol("+"), Symbol("a"), Symbol("b")]], env)
    assert isinstance(lam, Lambda)
    assert evaluate([lam, 2, 3], env) == 5


def test_computed_head(env):
    # ((lambda (n) (* n n)) 9)
    expr = [[Symbol("lambda"), [Symbol("n")], [Symbol("*"), Symbol("n"), Symbol("n")]], 9]
    assert evaluate(expr, env) == 81


def test_keyword_bound_under_another_name_still_dispatches(env):
    env.define(Symbol("my-quote"), Symbol("quote"))
    assert evaluate([Symbol("my-quote"), [Symbol("a")]], env) == [Symbol("a")]


def test_deep_recursion_is_not_caught(env):
    env.define(Symbol("loop"), evaluate(
        [Symbol("lambda"), [Symbol("n")], [Symbol("loop"), Symbol("n")]], env))
    with pytest.raises(RecursionError):
        evaluate([Symbol("loop"), 1], env)
