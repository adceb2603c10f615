"""Registry of special forms for the yascm evaluator.

Maps form names to handler functions that implement non-standard evaluation
rules. Each Interpreter binds these names in its global environment as
SpecialForm values, which the evaluator dispatches on before ordinary
procedure application.
"""

from yascm.evaluation.special_forms.quote_form import quote_form
from yascm.evaluation.special_forms.if_form import if_form
from yascm.evaluation.special_forms.cond_form import cond_form
from yascm.evaluation.special_forms.logic_forms import and_form, or_form
from yascm.evaluation.special_forms.progn_form import begin_form
from yascm.evaluation.special_forms.define_form import define_form
from yascm.evaluation.special_forms.set_form import set_form
from yascm.evaluation.special_forms.lambda_form import lambda_form
from yascm.evaluation.special_forms.let_form import let_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "if": if_form,
    "cond": cond_form,
    "and": and_form,
    "or": or_form,
    "begin": begin_form,
    "define": define_form,
    "set!": set_form,
    "lambda": lambda_form,
    "let": let_form,
}
