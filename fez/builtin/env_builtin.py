"""Bootstrap environment builder.

Primitive procedures are described by a plain registry (name -> host
function and arity) and installed by `register`. `make_global_environment`
returns a fresh, fully populated global environment; nothing here runs at
import time.
"""
from __future__ import annotations

import logging
import operator
from typing import Callable, Iterable, Mapping

from fez import LispValue
from fez.config import get_placeholders
from fez.errors import FezTypeError
from fez.types.boolean import Boolean
from fez.types.environment import Environment
from fez.types.pair import NIL, Pair
from fez.types.primitive import Primitive
from fez.types.symbol import Symbol

logger = logging.getLogger(__name__)

PrimitiveSpec = tuple[Callable[..., LispValue], int]

# Value given to predeclared placeholder variables
PLACEHOLDER = Symbol("void")


def _check_pair(name: str, value: LispValue) -> Pair:
    if not isinstance(value, Pair):
        raise FezTypeError(f"{name}: expected a pair, got {value}")
    return value


def car(p: LispValue) -> LispValue:
    return _check_pair("car", p).car


def cdr(p: LispValue) -> LispValue:
    return _check_pair("cdr", p).cdr


def set_car(p: LispValue, value: LispValue) -> LispValue:
    _check_pair("set-car!", p).car = value
    return p


def set_cdr(p: LispValue, value: LispValue) -> LispValue:
    _check_pair("set-cdr!", p).cdr = value
    return p


def is_pair(value: LispValue) -> Boolean:
    return Boolean.of(isinstance(value, Pair))


def is_null(value: LispValue) -> Boolean:
    return Boolean.of(value is NIL)


def is_symbol(value: LispValue) -> Boolean:
    return Boolean.of(isinstance(value, Symbol))


def is_eq(a: LispValue, b: LispValue) -> Boolean:
    """Identity, except that numbers compare by value."""
    if _is_number(a) and _is_number(b):
        return Boolean.of(a == b)
    return Boolean.of(a is b)


def _is_number(value: LispValue) -> bool:
    return isinstance(value, (int, float, complex)) and not isinstance(value, bool)


def _numeric(name: str, op: Callable[[LispValue, LispValue], LispValue]) -> Callable[..., LispValue]:
    def wrapper(a: LispValue, b: LispValue) -> LispValue:
        if not (_is_number(a) and _is_number(b)):
            raise FezTypeError(f"{name}: expected numbers, got {a} and {b}")
        return op(a, b)
    wrapper.__name__ = name
    return wrapper


def _predicate(name: str, op: Callable[..., bool]) -> Callable[..., Boolean]:
    numeric = _numeric(name, op)

    def wrapper(a: LispValue, b: LispValue) -> Boolean:
        return Boolean.of(numeric(a, b))
    wrapper.__name__ = name
    return wrapper


PRIMITIVES: dict[str, PrimitiveSpec] = {
    "cons": (Pair, 2),
    "car": (car, 1),
    "cdr": (cdr, 1),
    "set-car!": (set_car, 2),
    "set-cdr!": (set_cdr, 2),
    "+": (_numeric("+", operator.add), 2),
    "-": (_numeric("-", operator.sub), 2),
    "*": (_numeric("*", operator.mul), 2),
    "=": (_predicate("=", operator.eq), 2),
    "<": (_predicate("<", operator.lt), 2),
    ">": (_predicate(">", operator.gt), 2),
    "eq?": (is_eq, 2),
    "pair?": (is_pair, 1),
    "null?": (is_null, 1),
    "symbol?": (is_symbol, 1),
}


def register(env: Environment, registry: Mapping[str, PrimitiveSpec] | None = None) -> None:
    """Define every primitive in `registry` (default PRIMITIVES) into `env`."""
    if registry is None:
        registry = PRIMITIVES
    for name, (fn, arity) in registry.items():
        env.define(Symbol(name), Primitive(name, arity, fn))


def make_global_environment(
    registry: Mapping[str, PrimitiveSpec] | None = None,
    placeholders: Iterable[str] | None = None,
) -> Environment:
    """Build a fresh global environment.

    Placeholders default to the names configured by FEZ_PLACEHOLDERS and are
    bound to the symbol `void` so that programs can `set!` them.
    """
    env = Environment()
    register(env, registry)
    if placeholders is None:
        placeholders = get_placeholders()
    for name in placeholders:
        env.define(Symbol(name), PLACEHOLDER)
    logger.debug("global environment built with %d binding(s)", len(env.vars))
    return env
