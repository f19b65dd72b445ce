"""Registry of special forms for the lisparse evaluator.

Maps keyword Symbols to handler functions `(tail, env, evaluate_fn)` that
receive the unevaluated tail of the form. The evaluator consults this table
when a list head evaluates to one of these keywords.
"""

from lisparse.types.symbol import Symbol
from lisparse.evaluation.special_forms.set_form import set_form
from lisparse.evaluation.special_forms.quote_forms import quote_form
from lisparse.evaluation.special_forms.lambda_form import lambda_form
from lisparse.evaluation.special_forms.define_form import define_form
from lisparse.evaluation.special_forms.if_form import if_form
from lisparse.evaluation.special_forms.write_form import write_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("set!"): set_form,
    Symbol("quote"): quote_form,
    Symbol("lambda"): lambda_form,
    Symbol("write"): write_form,
}
