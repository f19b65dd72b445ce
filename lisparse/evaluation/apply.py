"""Application engine for lisparse.

Centralizes procedure application so the evaluator and the `map`/`apply`
builtins share one set of semantics:
- Closures (Lambda) get an arity check, a fresh child frame of their captured
  environment, and their body evaluated there.
- Builtins (Python callables registered in the environment) are called with
  the runtime env and the evaluated argument list.

There is no trampoline: each closure call recurses on the Python stack.
"""

from typing import Callable

from lisparse import LispValue, EvaluatorFn
from lisparse.types.environment import Environment
from lisparse.types.lambda_fn import Lambda
from lisparse.types.nil import Nil
from lisparse.errors import LispTypeError


def is_procedure(value: LispValue) -> bool:
    return isinstance(value, Lambda) or callable(value)


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lisp Lambda value to already-evaluated arguments.

    Body forms are evaluated in order in the new frame; the last value is
    the result.

    Raises LispArityError when the argument count differs from the number
    of formals.
    """
    frame = fn.extend_env(list(args))
    result: LispValue = Nil
    for form in fn.body:
        result = evaluate_fn(form, frame)
    return result


def apply(
    head: Lambda | Callable[[Environment, list[LispValue]], LispValue] | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Python callable.

    - For Lambda, defer to apply_lambda.
    - For Python callables (builtins), invoke with the runtime env and list of args.
    - Otherwise, raise a type error.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    elif callable(head):
        return head(env, args)
    else:
        raise LispTypeError(f"Cannot apply non-function {head}")
