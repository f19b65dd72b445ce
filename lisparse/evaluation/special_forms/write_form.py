from lisparse import EvaluatorFn
from lisparse import SExpression, LispValue
from lisparse.errors import LispShapeError
from lisparse.types.symbol import Symbol
from lisparse.types.environment import Environment


def write_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(write symbol): print the bare symbol name, unevaluated."""
    if len(tail) != 1 or not isinstance(tail[0], Symbol):
        raise LispShapeError("write expects exactly 1 symbol")
    print(tail[0].name)
    return tail[0]
