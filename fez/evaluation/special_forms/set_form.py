from fez import EvaluatorFn
from fez import SExpression, LispValue
from fez.errors import ArityMismatch, FezSyntaxError
from fez.types.environment import Environment
from fez.evaluation.special_forms.operands import form_operands
from fez.types.symbol import Symbol


def set_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    operands = form_operands("set!", tail)
    if len(operands) != 2:
        raise ArityMismatch("set!", 2, len(operands))
    var_sym, val_expr = operands
    if not isinstance(var_sym, Symbol):
        raise FezSyntaxError(f"set! first argument must be a Symbol, got {var_sym}")
    value = evaluate_fn(val_expr, env)
    return env.update(var_sym, value)
