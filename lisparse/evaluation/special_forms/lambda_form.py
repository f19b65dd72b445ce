from lisparse.errors import LispShapeError
from lisparse.types.lambda_fn import Lambda

from lisparse import EvaluatorFn
from lisparse import SExpression, LispValue
from lisparse.types.environment import Environment
from lisparse.types.nil import Nil
from lisparse.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(lambda (p1 p2 ...) body ...)

    Body forms run in order when the closure is called; the last one gives
    the result.

    The closure captures `env` itself, not a copy, so later mutations of
    enclosing bindings are visible inside the body.
    """
    if len(tail) < 2:
        raise LispShapeError("lambda requires a parameter list and a body")

    params, *body_forms = tail
    if params is Nil:
        params = []
    if not isinstance(params, list):
        raise LispShapeError(f"lambda parameters must be a list, got {params}")
    for p in params:
        if not isinstance(p, Symbol):
            raise LispShapeError(f"lambda parameter {p} is not a symbol")
    if len(set(params)) != len(params):
        raise LispShapeError("lambda parameters must be distinct")

    return Lambda(list(params), list(body_forms), env)
