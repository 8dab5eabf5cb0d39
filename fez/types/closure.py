"""Closure representation for Fez."""

from __future__ import annotations

import logging
from io import StringIO

from fez import LispValue, SExpression
from fez.types.environment import Environment
from fez.types.pair import write

logger = logging.getLogger(__name__)


class Closure:
    """A first-class procedure: formal parameters, body, defining environment.

    `env` is captured by reference. Later `set!`s on outer bindings are
    visible when the closure runs.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: SExpression, body: SExpression, env: Environment):
        self.formals: SExpression = formals
        self.body: SExpression = body
        self.env: Environment = env
        logger.debug("closure created: formals=%s in frame %x", formals, id(env))

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind `args` to the formals in a fresh frame over the captured env."""
        return self.env.extend(self.formals, args)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<closure (lambda ")
            buffer.write(write(self.formals))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
