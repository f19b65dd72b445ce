"""Canonical textual form of lisparse values."""

import math

from lisparse import LispValue
from lisparse.types.lambda_fn import Lambda
from lisparse.types.nil import NilType, TrueType
from lisparse.types.symbol import Symbol


def printed(value: LispValue) -> str:
    """Render `value` the way the REPL shows it.

    Floats always carry a decimal point or an exponent (infinities and NaN
    print as +inf.0, -inf.0 and +nan.0), the empty list prints
    as nil, and procedures get an opaque #<...> form.
    """
    match value:
        case NilType() | []:
            return "nil"
        case TrueType():
            return "t"
        case int():
            return str(value)
        case float() if math.isnan(value):
            return "+nan.0"
        case float() if math.isinf(value):
            return "+inf.0" if value > 0 else "-inf.0"
        case float():
            return repr(value)
        case Symbol():
            return value.name
        case list():
            return "(" + " ".join(printed(v) for v in value) + ")"
        case Lambda():
            return str(value)
        case _ if callable(value):
            name = getattr(value, "__name__", "?")
            return f"#<builtin {name}>"
        case _:
            return str(value)
