"""Core recursive evaluator for lisparse.

Dispatch on the shape of the expression:
- Symbol: environment lookup.
- Number / Boolean: self-evaluating.
- Empty list: Nil.
- Non-empty list: evaluate the head; a special-form keyword dispatches on
  the unevaluated tail, a procedure is applied to the evaluated tail, and
  any other head value is returned as-is.

Errors raised by lookup, special forms or application are reported and the
failing form evaluates to Nil, so the enclosing form keeps going.
RecursionError is deliberately not caught.
"""

from __future__ import annotations

from lisparse import SExpression, LispValue
from lisparse.errors import LispError, report
from lisparse.types.environment import Environment
from lisparse.types.nil import Nil
from lisparse.types.symbol import Symbol
from lisparse.evaluation.apply import apply, is_procedure
from lisparse.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate a single expression in `env`."""
    match expr:
        case Symbol():
            try:
                return env.lookup(expr)
            except LispError as err:
                return report(err)

        case []:
            return Nil

        case [head_expr, *tail]:
            head = evaluate(head_expr, env)

            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                try:
                    return SPECIAL_FORMS[head](tail, env, evaluate)
                except LispError as err:
                    return report(err)

            if is_procedure(head):
                args = [evaluate(arg, env) for arg in tail]
                try:
                    return apply(head, args, env, evaluate)
                except LispError as err:
                    return report(err)

            # A list whose head is plain data evaluates to that head.
            return head

    # --- Atoms return as-is ---
    return expr
