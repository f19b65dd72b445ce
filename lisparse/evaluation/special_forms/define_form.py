from lisparse import EvaluatorFn
from lisparse import SExpression, LispValue
from lisparse.errors import LispShapeError, LispInvalidSymbol
from lisparse.types.nil import Nil
from lisparse.types.symbol import Symbol
from lisparse.types.environment import Environment


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    The name is taken literally, never evaluated. Binds in the local frame
    only; a name already bound there is rejected and keeps its value.
    """
    if len(tail) != 2:
        raise LispShapeError("define requires exactly 2 arguments: (define name value)")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise LispInvalidSymbol(f"define first argument must be a Symbol, got {name}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return Nil
