from lisparse import SExpression, LispValue, EvaluatorFn
from lisparse.errors import LispShapeError
from lisparse.types.nil import Nil


def quoted(expr: SExpression) -> LispValue:
    """Turn an unevaluated form into data; empty lists become Nil."""
    if isinstance(expr, list):
        if not expr:
            return Nil
        return [quoted(item) for item in expr]
    return expr


def quote_form(
    tail: list[SExpression], env, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise LispShapeError("quote expects exactly 1 argument")
    return quoted(tail[0])
