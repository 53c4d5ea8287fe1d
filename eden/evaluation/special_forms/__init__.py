"""Registry of special forms for the Eden evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table once per list, by head symbol, before
ordinary function application. Handlers raise FormMismatch when the list does
not have the shape they accept.
"""

from eden.types.symbol import Symbol
from eden.evaluation.special_forms.if_form import if_form
from eden.evaluation.special_forms.define_form import define_form
from eden.evaluation.special_forms.set_form import set_form
from eden.evaluation.special_forms.lambda_form import lambda_form
from eden.evaluation.special_forms.quote_form import quote_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("set!"): set_form,
    Symbol("lambda"): lambda_form,
    Symbol("quote"): quote_form,
}
