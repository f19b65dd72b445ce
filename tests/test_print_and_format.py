import pytest

from lisparse.printer import printed
from lisparse.builtin.env_builtin import add
from lisparse.types.environment import Environment
from lisparse.types.lambda_fn import Lambda
from lisparse.types.nil import Nil, T
from lisparse.types.symbol import Symbol


@pytest.mark.parametrize(
    "value,expected",
    [
        (15, "15"),
        (-2, "-2"),
        (16.5, "16.5"),
        (2.0, "2.0"),
        (-2.2, "-2.2"),
        (Symbol("abc"), "abc"),
        (T, "t"),
        (Nil, "nil"),
        ([], "nil"),
        ([1, 2.5, Symbol("x")], "(1 2.5 x)"),
        ([[1], [Symbol("a"), [T, Nil]]], "((1) (a (t nil)))"),
    ]
)
def test_printed(value, expected):
    assert printed(value) == expected


def test_float_always_has_point_or_exponent():
    for value in (1.0, 1e20, 1e-7, -3.0):
        text = printed(value)
        assert "." in text or "e" in text


def test_procedures_print_opaquely():
    assert printed(add).startswith("#<")
    lam = Lambda([Symbol("x"), Symbol("y")], [Symbol("x")], Environment())
    assert printed(lam) == "#<lambda (x y)>"


def test_printed_results(run):
    assert printed(run("(+ 1 2 3)")) == "6"
    assert printed(run("(< 1 2)")) == "t"
    assert printed(run("'(a (b) c)")) == "(a (b) c)"


@pytest.mark.parametrize(
    "value,expected",
    [
        (float("inf"), "+inf.0"),
        (float("-inf"), "-inf.0"),
        (float("nan"), "+nan.0"),
    ]
)
def test_non_finite_floats(value, expected):
    assert printed(value) == expected


def test_overflowed_product_prints_with_point(run):
    assert printed(run("(* 1.0e200 1.0e200)")) == "+inf.0"
