from lisparse import EvaluatorFn
from lisparse import SExpression, LispValue
from lisparse.errors import LispShapeError
from lisparse.types.environment import Environment
from lisparse.types.nil import truthy


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(if test then else), both branches mandatory."""
    if len(tail) != 3:
        raise LispShapeError("if requires a test, a then-expression and an else-expression")

    test, then_expr, else_expr = tail
    # Lisp truthiness: anything but nil
    if truthy(evaluate_fn(test, env)):
        return evaluate_fn(then_expr, env)
    return evaluate_fn(else_expr, env)
