"""Application engine for Fez.

Only two kinds of value can be applied: a Primitive, whose argument count
must match its declared arity, and a Closure, whose body runs as a sequence
in a fresh frame over its captured environment. Anything else (including
arbitrary Python callables) is NotCallable.

There is no tail-call elimination: `apply` and `evaluate` recurse on the
host stack, so deep recursion ends in the host's RecursionError.
"""

import logging

from fez import LispValue, EvaluatorFn
from fez.errors import ArityMismatch, NotCallable
from fez.evaluation.special_forms.begin_form import eval_sequence
from fez.types.closure import Closure
from fez.types.primitive import Primitive

logger = logging.getLogger(__name__)


def apply_primitive(fn: Primitive, args: list[LispValue]) -> LispValue:
    if len(args) != fn.arity:
        raise ArityMismatch(fn.name, fn.arity, len(args))
    logger.debug("primitive %s called with %d argument(s)", fn.name, len(args))
    return fn.fn(*args)


def apply_closure(fn: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    new_env = fn.extend_env(args)
    logger.debug("closure %s entered in frame %x", fn, id(new_env))
    return eval_sequence(fn.body, new_env, evaluate_fn)


def apply(head: LispValue, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a Primitive or Closure to already-evaluated `args`."""
    match head:
        case Primitive():
            return apply_primitive(head, args)
        case Closure():
            return apply_closure(head, args, evaluate_fn)
        case _:
            raise NotCallable(head)
