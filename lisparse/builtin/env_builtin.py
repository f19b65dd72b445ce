"""Built-in procedures for the lisparse runtime environment.

Arithmetic, comparison, reduction and list processing exposed to Lisp code,
plus `register`, which installs them (and the special-form keywords) into a
root environment.

Every builtin has the signature `fn(env, args) -> value`. Type mismatches on
individual operands are reported and skipped where a partial result makes
sense; otherwise the builtin raises and the evaluator turns the failure into
Nil. Numeric promotion is shared by all of them: any Float operand makes the
result a Float.
"""
from __future__ import annotations

import math
from functools import reduce, wraps

from lisparse import LispValue
from lisparse.config import get_float_epsilon
from lisparse.errors import (
    LispArityError,
    LispOverflowError,
    LispTypeError,
    LispZeroDivision,
    report,
)
from lisparse.evaluation.apply import apply as apply_engine, is_procedure
from lisparse.evaluation.evaluator import evaluate
from lisparse.evaluation.special_forms import SPECIAL_FORMS
from lisparse.printer import printed
from lisparse.types.environment import Environment
from lisparse.types.nil import Nil, boolean, is_nil
from lisparse.types.symbol import Symbol


def is_number(x: LispValue) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _numbers(name: str, args: list[LispValue]) -> list[int | float]:
    """Keep the numeric operands, reporting each one that is not."""
    nums = []
    for a in args:
        if is_number(a):
            nums.append(a)
        else:
            report(LispTypeError(f"Operands of {name} should be numbers, got {printed(a)}"))
    return nums


def _require_numbers(name: str, args: list[LispValue]) -> None:
    for a in args:
        if not is_number(a):
            raise LispTypeError(f"Operands of {name} should be numbers, got {printed(a)}")


def _promote(result: int | float, operands) -> int | float:
    if any(isinstance(x, float) for x in operands):
        return float(result)
    return result


def _binary(name: str, args: list[LispValue]) -> tuple:
    if len(args) != 2:
        raise LispArityError(f"{name} requires exactly 2 arguments, got {len(args)}")
    _require_numbers(name, args)
    return args[0], args[1]


def _numeric(fn):
    """Turn host overflow while widening an int to a float into a LispError."""
    @wraps(fn)
    def wrapper(env: Environment, expr: list[LispValue]) -> LispValue:
        try:
            return fn(env, expr)
        except OverflowError as err:
            raise LispOverflowError(f"{fn.__name__}: {err}") from err
    return wrapper


# -------------------------------
# Arithmetic
# -------------------------------
@_numeric
def add(env: Environment, expr: list[LispValue]) -> LispValue:
    """Sum of all numeric arguments; 0 with none."""
    nums = _numbers("+", expr)
    return _promote(sum(nums), nums)


@_numeric
def mul(env: Environment, expr: list[LispValue]) -> LispValue:
    """Product of all numeric arguments; 1 with none."""
    nums = _numbers("*", expr)
    result = 1
    for x in nums:
        result *= x
    return _promote(result, nums)


@_numeric
def sub(env: Environment, expr: list[LispValue]) -> LispValue:
    """(- a b) subtracts; (- a) negates."""
    if len(expr) == 1:
        _require_numbers("-", expr)
        return -expr[0]
    a, b = _binary("-", expr)
    return _promote(a - b, expr)


@_numeric
def div(env: Environment, expr: list[LispValue]) -> LispValue:
    """(/ a b) is always a Float."""
    a, b = _binary("/", expr)
    if b == 0:
        raise LispZeroDivision(f"Division of {printed(a)} by zero")
    return float(a) / float(b)


@_numeric
def absolute(env: Environment, expr: list[LispValue]) -> LispValue:
    if len(expr) != 1:
        raise LispArityError("abs requires exactly 1 argument")
    _require_numbers("abs", expr)
    return abs(expr[0])


# -------------------------------
# Comparison
# -------------------------------
def _close(a, b) -> bool:
    if isinstance(a, int) and isinstance(b, int):
        return a == b
    eps = get_float_epsilon()
    return math.isclose(a, b, rel_tol=eps, abs_tol=eps)


@_numeric
def equals(env: Environment, expr: list[LispValue]) -> LispValue:
    a, b = _binary("=", expr)
    return boolean(_close(a, b))


@_numeric
def not_equals(env: Environment, expr: list[LispValue]) -> LispValue:
    a, b = _binary("/=", expr)
    return boolean(not _close(a, b))


@_numeric
def lt(env: Environment, expr: list[LispValue]) -> LispValue:
    a, b = _binary("<", expr)
    return boolean(a < b and not _close(a, b))


@_numeric
def lte(env: Environment, expr: list[LispValue]) -> LispValue:
    a, b = _binary("<=", expr)
    return boolean(a < b or _close(a, b))


@_numeric
def gt(env: Environment, expr: list[LispValue]) -> LispValue:
    a, b = _binary(">", expr)
    return boolean(a > b and not _close(a, b))


@_numeric
def gte(env: Environment, expr: list[LispValue]) -> LispValue:
    a, b = _binary(">=", expr)
    return boolean(a > b or _close(a, b))


# -------------------------------
# Reduction
# -------------------------------
def _pairwise(name: str, pick):
    def combine(a, b):
        return _promote(pick(a, b), (a, b))

    def fold(env: Environment, expr: list[LispValue]) -> LispValue:
        if len(expr) < 2:
            raise LispArityError(f"{name} requires at least 2 arguments, got {len(expr)}")
        _require_numbers(name, expr)
        return reduce(combine, expr)

    fold.__name__ = name
    return _numeric(fold)


maximum = _pairwise("max", max)
minimum = _pairwise("min", min)


def begin(env: Environment, expr: list[LispValue]) -> LispValue:
    """Arguments are already evaluated in order; return the last one."""
    return expr[-1] if expr else Nil


# -------------------------------
# Lists
# -------------------------------
def _as_list(x: LispValue) -> list[LispValue] | None:
    """A Python list view of a Lisp list, None for non-lists."""
    if x is Nil:
        return []
    if isinstance(x, list):
        return x
    return None


def _lisp_list(items: list[LispValue]) -> LispValue:
    return list(items) if items else Nil


def list_builtin(env: Environment, expr: list[LispValue]) -> LispValue:
    """Construct a list from the provided arguments."""
    return _lisp_list(expr)


def cons(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Prepend head to tail.

    - tail Nil: a single-element list [head].
    - tail a list: a new list [head] + tail.
    - tail an atom: the two-element list [head, tail], standing in for a
      dotted pair.
    """
    if len(expr) != 2:
        raise LispArityError("cons requires exactly 2 arguments")
    head, tail = expr
    if is_nil(tail):
        return [head]
    if isinstance(tail, list):
        return [head] + tail
    return [head, tail]


def car(env: Environment, expr: list[LispValue]) -> LispValue:
    """First element of a list; Nil for empty lists and non-lists."""
    if len(expr) != 1:
        raise LispArityError("car requires exactly 1 argument")
    xs = expr[0]
    if isinstance(xs, list) and xs:
        return xs[0]
    return Nil


def cdr(env: Environment, expr: list[LispValue]) -> LispValue:
    """All but the first element; Nil for short lists and non-lists."""
    if len(expr) != 1:
        raise LispArityError("cdr requires exactly 1 argument")
    xs = expr[0]
    if isinstance(xs, list) and len(xs) > 1:
        return xs[1:]
    return Nil


def append(env: Environment, expr: list[LispValue]) -> LispValue:
    """
    Concatenate list arguments one level deep.
    Nil counts as the empty list; other atoms are reported and skipped.
    """
    result = []
    for item in expr:
        xs = _as_list(item)
        if xs is None:
            report(LispTypeError(f"append expects list arguments, got {printed(item)}"))
            continue
        result.extend(xs)
    return _lisp_list(result)


def _callee(name: str, fn: LispValue) -> LispValue:
    if not is_procedure(fn):
        raise LispTypeError(f"{name} expects a procedure first, got {printed(fn)}")
    return fn


def map_builtin(env: Environment, expr: list[LispValue]) -> LispValue:
    """(map f xs ys ...) applies f element-wise across same-length lists."""
    if len(expr) < 2:
        raise LispArityError("map requires a procedure and at least 1 list")
    fn = _callee("map", expr[0])
    columns = []
    for arg in expr[1:]:
        xs = _as_list(arg)
        if xs is None:
            raise LispTypeError(f"map expects list arguments, got {printed(arg)}")
        columns.append(xs)
    if len({len(xs) for xs in columns}) != 1:
        raise LispTypeError("map expects lists of the same length")
    return _lisp_list(
        [apply_engine(fn, list(row), env, evaluate) for row in zip(*columns)]
    )


def apply(env: Environment, expr: list[LispValue]) -> LispValue:
    """(apply f a b ... xs): call f with a, b, ... followed by the elements of xs."""
    if len(expr) < 2:
        raise LispArityError("apply requires a procedure and a list of arguments")
    fn = _callee("apply", expr[0])
    spread = _as_list(expr[-1])
    if spread is None:
        raise LispTypeError(f"Last argument to apply must be a list, got {printed(expr[-1])}")
    return apply_engine(fn, list(expr[1:-1]) + spread, env, evaluate)


# -------------------------------
# Predicates and output
# -------------------------------
def logical_not(env: Environment, expr: list[LispValue]) -> LispValue:
    """T for nil, Nil for anything else."""
    if len(expr) != 1:
        raise LispArityError("not requires exactly 1 argument")
    return boolean(is_nil(expr[0]))


def null(env: Environment, args: list[LispValue]) -> LispValue:
    """Predicate: T if the single argument is Nil or the empty list."""
    if len(args) != 1:
        raise LispArityError("null? requires exactly 1 argument")
    return boolean(is_nil(args[0]))


def is_symbol(env: Environment, args: list[LispValue]) -> LispValue:
    """Predicate: T if the single argument is a Symbol."""
    if len(args) != 1:
        raise LispArityError("symbol? requires exactly 1 argument")
    return boolean(isinstance(args[0], Symbol))


def print_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Print space-separated printed forms of args followed by newline; returns Nil."""
    print(" ".join(printed(a) for a in args))
    return Nil


BUILTINS = {
    Symbol("+"): add,
    Symbol("-"): sub,
    Symbol("*"): mul,
    Symbol("/"): div,
    Symbol("abs"): absolute,
    Symbol("="): equals,
    Symbol("/="): not_equals,
    Symbol("<"): lt,
    Symbol("<="): lte,
    Symbol(">"): gt,
    Symbol(">="): gte,
    Symbol("max"): maximum,
    Symbol("min"): minimum,
    Symbol("begin"): begin,
    Symbol("list"): list_builtin,
    Symbol("cons"): cons,
    Symbol("car"): car,
    Symbol("cdr"): cdr,
    Symbol("append"): append,
    Symbol("map"): map_builtin,
    Symbol("apply"): apply,
    Symbol("not"): logical_not,
    Symbol("null?"): null,
    Symbol("symbol?"): is_symbol,
    Symbol("print"): print_builtin,
}


def register(env: Environment) -> None:
    """Register all builtin functions and special-form keywords into `env`."""
    env.update(BUILTINS)
    # keywords evaluate to themselves so the evaluator can dispatch on them
    env.update({keyword: keyword for keyword in SPECIAL_FORMS})
