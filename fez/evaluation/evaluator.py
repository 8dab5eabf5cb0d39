"""Core evaluator for the Fez interpreter.

`evaluate` classifies an expression by shape:

- a Symbol is a variable reference, looked up in `env`;
- numbers, strings, booleans and vectors evaluate to themselves;
- a Pair is a combination: a special form when its head names one,
  otherwise a procedure call with operands evaluated left to right;
- anything else (including the empty list) cannot be evaluated.
"""

from __future__ import annotations

from fez import SExpression, LispValue
from fez.errors import FezSyntaxError, UnevaluableExpression
from fez.evaluation.apply import apply
from fez.evaluation.special_forms import SPECIAL_FORMS
from fez.types.boolean import Boolean
from fez.types.environment import Environment
from fez.types.pair import NIL, Pair, to_list
from fez.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Symbol():
            return env.lookup(expr)

        # Python bools are ints; they are not Fez values.
        case bool():
            raise UnevaluableExpression(expr)

        case int() | float() | complex() | str() | Boolean() | list():
            return expr

        case Pair(car=head, cdr=tail):
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail, env, evaluate)

            fn = evaluate(head, env)
            operands, terminator = to_list(tail)
            if terminator is not NIL:
                raise FezSyntaxError(f"Combination is not a proper list: {expr}")
            args = [evaluate(operand, env) for operand in operands]
            return apply(fn, args, evaluate)

    raise UnevaluableExpression(expr)
