"""Registry of special forms for the minischeme evaluator.

Maps Symbols to handler functions ``(tail, env, evaluate_fn) -> value`` that
implement non-standard evaluation rules. The evaluator consults this table
before treating a list as a procedure call, so these names cannot be
overridden by user definitions in head position.
"""

from minischeme.types.symbol import Symbol
from minischeme.evaluation.numeric import OPERATORS
from minischeme.evaluation.special_forms.define_form import define_form
from minischeme.evaluation.special_forms.if_form import if_form
from minischeme.evaluation.special_forms.lambda_form import lambda_form
from minischeme.evaluation.special_forms.operator_forms import binary_operator_form

SPECIAL_FORMS = {
    Symbol("define"): define_form,
    Symbol("if"): if_form,
    Symbol("lambda"): lambda_form,
    **{Symbol(op): binary_operator_form(op) for op in OPERATORS},
}
