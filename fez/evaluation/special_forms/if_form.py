from fez import EvaluatorFn
from fez import SExpression, LispValue
from fez.errors import ArityMismatch
from fez.evaluation.special_forms.operands import form_operands
from fez.types.boolean import FALSE
from fez.types.environment import Environment


def if_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    operands = form_operands("if", tail)
    if len(operands) not in (2, 3):
        raise ArityMismatch("if requires 2 or 3 operands", None, len(operands))

    test = evaluate_fn(operands[0], env)
    # Scheme truthiness: everything except the #f singleton is true
    if test is not FALSE:
        return evaluate_fn(operands[1], env)
    if len(operands) == 3:
        return evaluate_fn(operands[2], env)
    return FALSE
