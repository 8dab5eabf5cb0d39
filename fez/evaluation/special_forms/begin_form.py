from fez import EvaluatorFn
from fez import SExpression, LispValue
from fez.evaluation.special_forms.operands import form_operands
from fez.types.environment import Environment
from fez.types.marker import EMPTY_BEGIN
from fez.types.pair import Pair


def eval_sequence(body: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate `body` left to right and return the last value.

    An empty body yields EMPTY_BEGIN. Shared by `begin` and closure bodies.
    """
    result: LispValue = EMPTY_BEGIN
    while isinstance(body, Pair):
        result = evaluate_fn(body.car, env)
        body = body.cdr
    return result


def begin_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    form_operands("begin", tail)
    return eval_sequence(tail, env, evaluate_fn)
