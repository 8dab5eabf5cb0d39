"""Scheme booleans.

There are exactly two Boolean instances, TRUE and FALSE. Only FALSE is false:
truth tests in the evaluator compare against it by identity, so Python's own
notion of falsiness (0, "", [], None) never leaks into Scheme code.
"""

from __future__ import annotations


class Boolean:
    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = value

    @staticmethod
    def of(value: object) -> Boolean:
        """Convert a host truth value coming out of a primitive."""
        return TRUE if value else FALSE

    def __repr__(self):
        return "#t" if self.value else "#f"

    def __str__(self):
        return repr(self)

    # No __bool__: Scheme truth is tested with `is FALSE`.

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


TRUE = Boolean(True)
FALSE = Boolean(False)
