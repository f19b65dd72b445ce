from lisparse import EvaluatorFn
from lisparse import SExpression, LispValue
from lisparse.errors import LispInvalidSymbol, LispShapeError
from lisparse.types.symbol import Symbol
from lisparse.types.environment import Environment


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise LispShapeError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise LispInvalidSymbol(f"set! first argument must be a Symbol, got {var_sym}")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)

    return value
