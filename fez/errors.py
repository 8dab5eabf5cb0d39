"""Error kinds raised by the Fez reader and evaluator.

Every error aborts the current evaluation; nothing inside the core catches
them. Each one carries the offending name, expression or value so the caller
can report it.
"""

from __future__ import annotations

from typing import Any


class FezError(Exception):
    """ Base class for all Fez errors"""
    pass


class UnboundVariable(FezError):
    """ Raised when lookup or update finds no binding for a name"""

    def __init__(self, name: Any):
        super().__init__(f"Unbound variable {name}")
        self.name = name


class UnevaluableExpression(FezError):
    """ Raised when an atom of unrecognised shape is evaluated"""

    def __init__(self, expr: Any):
        super().__init__(f"Cannot evaluate {expr!r}")
        self.expr = expr


class ArityMismatch(FezError):
    """ Raised when a count of arguments, values or operands is wrong"""

    def __init__(self, context: str, expected: int | None = None, actual: int | None = None):
        if expected is None and actual is None:
            msg = f"{context}"
        elif expected is None:
            msg = f"{context}, got {actual}"
        else:
            msg = f"{context}: expected {expected}, got {actual}"
        super().__init__(msg)
        self.context = context
        self.expected = expected
        self.actual = actual


class NotCallable(FezError):
    """ Raised when a non-procedure is applied"""

    def __init__(self, value: Any):
        super().__init__(f"Not a function: {value}")
        self.value = value


class FezSyntaxError(FezError):
    """ Raised on unreadable source or a malformed special form"""


class FezTypeError(FezError):
    """ Raised when a primitive receives an argument of the wrong type"""


class IncompleteInput(FezSyntaxError):
    """ Raised when the source ends inside an unfinished expression"""
