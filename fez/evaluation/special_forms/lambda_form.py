from fez import EvaluatorFn
from fez import SExpression, LispValue
from fez.errors import ArityMismatch
from fez.evaluation.special_forms.operands import form_operands
from fez.types.closure import Closure
from fez.types.environment import Environment
from fez.types.pair import Pair


def lambda_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    # (lambda formals body...) closes over the current env, not the global one.
    # The body is kept as a list and run as an implicit begin.
    form_operands("lambda", tail)
    if not isinstance(tail, Pair):
        raise ArityMismatch("lambda requires a parameter list")
    return Closure(tail.car, tail.cdr, env)
