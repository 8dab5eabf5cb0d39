"""Registry of special forms for the Fez evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
Every handler takes `(tail, env, evaluate_fn)` where `tail` is the form
without its head. The evaluator consults this table before treating a
combination as a procedure call.
"""

from fez.types.symbol import Symbol
from fez.evaluation.special_forms.quote_form import quote_form
from fez.evaluation.special_forms.if_form import if_form
from fez.evaluation.special_forms.begin_form import begin_form
from fez.evaluation.special_forms.set_form import set_form
from fez.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("begin"): begin_form,
    Symbol("set!"): set_form,
    Symbol("lambda"): lambda_form,
}
