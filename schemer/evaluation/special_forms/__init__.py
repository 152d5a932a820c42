"""Registry of special forms for the Schemer evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary procedure application.
Every handler takes (tail, env, evaluate_fn) where `tail` is the unevaluated
list of operands.
"""

from schemer.types.symbol import Symbol
from schemer.evaluation.special_forms.quote_form import quote_form
from schemer.evaluation.special_forms.if_form import if_form
from schemer.evaluation.special_forms.set_form import set_form
from schemer.evaluation.special_forms.define_form import define_form
from schemer.evaluation.special_forms.lambda_form import lambda_form
from schemer.evaluation.special_forms.begin_form import begin_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("set!"): set_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("begin"): begin_form,
}
