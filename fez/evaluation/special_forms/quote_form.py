from fez import EvaluatorFn
from fez import SExpression, LispValue
from fez.errors import ArityMismatch
from fez.evaluation.special_forms.operands import form_operands
from fez.types.environment import Environment


def quote_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    operands = form_operands("quote", tail)
    if len(operands) != 1:
        raise ArityMismatch("quote", 1, len(operands))
    return operands[0]
