"""Runtime environment for Fez.

An Environment is one frame of bindings (Symbol -> value) plus a link to the
enclosing frame. Chaining frames innermost-first gives lexical shadowing:
lookup and update walk outward and stop at the first frame binding the name.
The global environment is just the outermost frame handed to `evaluate`.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Iterable, Optional

from fez import LispValue
from fez.errors import ArityMismatch, FezSyntaxError, UnboundVariable
from fez.types.pair import NIL, Pair, from_list, length
from fez.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Environment:
    """Hierarchical mapping from Symbols to mutable value cells."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Only the bootstrap builder uses this; evaluation itself never creates
        bindings except through `extend`.
        """
        if not isinstance(name, Symbol):
            raise FezSyntaxError(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest frame in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Return the value bound to `name`, innermost frame first.

        Raises UnboundVariable if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise UnboundVariable(name)
        return env.vars[name]

    def update(self, name: Symbol, value: LispValue) -> LispValue:
        """Overwrite the nearest existing binding of `name` and return `value`.

        Never creates a binding; raises UnboundVariable instead.
        """
        env = self.find(name)
        if env is None:
            raise UnboundVariable(name)
        env.vars[name] = value
        logger.debug("update %s in frame %x", name, id(env))
        return value

    def extend(self, names: LispValue, values: Iterable[LispValue]) -> Environment:
        """Return a new frame over this one pairing `names` with `values`.

        `names` is a formal parameter list: NIL, a proper list of symbols, a
        list ending in a symbol instead of NIL (`(a b . rest)`), or a bare
        symbol. A trailing symbol receives the remaining values as a list.
        """
        supplied = list(values)
        frame = Environment(outer=self)
        fixed = 0
        p = names
        while isinstance(p, Pair):
            if not isinstance(p.car, Symbol):
                raise FezSyntaxError(f"Formal parameter must be a symbol, got {p.car}")
            if fixed >= len(supplied):
                raise ArityMismatch("too few values", fixed + length(p), len(supplied))
            frame.vars[p.car] = supplied[fixed]
            fixed += 1
            p = p.cdr

        if p is NIL:
            if fixed < len(supplied):
                raise ArityMismatch("too many values", fixed, len(supplied))
        elif isinstance(p, Symbol):
            frame.vars[p] = from_list(supplied[fixed:])
        else:
            raise FezSyntaxError(f"Malformed parameter list: {names}")

        logger.debug("extend frame %x with %s", id(self), frame)
        return frame

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Single-frame view with an indicator for the enclosing frame."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env: Optional[Environment] = self
            chain = []
            while env is not None:
                with StringIO() as frame_buf:
                    env._write_vars(frame_buf)
                    chain.append(frame_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
