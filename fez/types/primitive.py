from __future__ import annotations

from typing import Callable

from fez import LispValue


class Primitive:
    """A host function with a fixed arity.

    The evaluator never looks inside `fn`; the applier checks the argument
    count against `arity` and then calls `fn(*args)`.
    """

    __slots__ = ("name", "arity", "fn")

    def __init__(self, name: str, arity: int, fn: Callable[..., LispValue]):
        self.name = name
        self.arity = arity
        self.fn = fn

    def __repr__(self) -> str:
        return f"#<primitive {self.name}/{self.arity}>"
