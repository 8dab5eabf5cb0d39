"""Mutable pairs and the empty list.

Lists are chains of cons cells rather than Python lists: `set-cdr!` must be
able to splice structure in place, and dotted formal parameter lists need an
improper tail.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator

from fez import LispValue


class EmptyList:
    """The empty list `()`. A single instance, NIL, exists."""

    __slots__ = ()

    def __repr__(self):
        return "()"

    def __iter__(self):
        return iter(())

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


NIL = EmptyList()

# Written in place of a pair that is already being printed
CYCLE_MARKER = "..."


class Pair:
    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue = NIL):
        self.car = car
        self.cdr = cdr

    def __iter__(self) -> Iterator[LispValue]:
        """Iterate the elements of a proper list.

        Stops at NIL; an improper tail is not yielded. Use `to_list` when the
        tail matters.
        """
        p: LispValue = self
        while isinstance(p, Pair):
            yield p.car
            p = p.cdr

    def __eq__(self, other: object) -> bool:
        # Structural comparison; `eq?` uses identity instead.
        if not isinstance(other, Pair):
            return NotImplemented
        return _equal(self, other, set())

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return write(self)

    __str__ = __repr__


def _equal(a: LispValue, b: LispValue, seen: set[tuple[int, int]]) -> bool:
    # A pair of cells already under comparison is assumed equal, so cycles end.
    while isinstance(a, Pair) and isinstance(b, Pair):
        key = (id(a), id(b))
        if key in seen:
            return True
        seen.add(key)
        if not _equal(a.car, b.car, seen):
            return False
        a, b = a.cdr, b.cdr
    return a == b


def from_list(items: Iterable[LispValue], tail: LispValue = NIL) -> LispValue:
    """Build a chain of pairs from `items`, terminated by `tail`."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def to_list(value: LispValue) -> tuple[list[LispValue], LispValue]:
    """Split a pair chain into its elements and its terminator."""
    items: list[LispValue] = []
    while isinstance(value, Pair):
        items.append(value.car)
        value = value.cdr
    return items, value


def length(value: LispValue) -> int:
    n = 0
    while isinstance(value, Pair):
        n += 1
        value = value.cdr
    return n


def write(value: LispValue) -> str:
    """Render a value in Scheme external syntax.

    A pair reached again while it is still being printed is written as
    `...`, so circular structure built with `set-car!`/`set-cdr!` prints.
    """
    with StringIO() as buffer:
        _write(value, buffer, set())
        return buffer.getvalue()


def _write(value: LispValue, buffer: StringIO, active: set[int]) -> None:
    match value:
        case Pair() if id(value) in active:
            buffer.write(CYCLE_MARKER)
        case Pair():
            chain = [id(value)]
            active.add(id(value))
            buffer.write("(")
            _write(value.car, buffer, active)
            rest = value.cdr
            while isinstance(rest, Pair) and id(rest) not in active:
                chain.append(id(rest))
                active.add(id(rest))
                buffer.write(" ")
                _write(rest.car, buffer, active)
                rest = rest.cdr
            if rest is not NIL:
                buffer.write(" . ")
                _write(rest, buffer, active)
            buffer.write(")")
            active.difference_update(chain)
        case str():
            escaped = value.replace("\\", "\\\\").replace('"', '\\"')
            buffer.write(f'"{escaped}"')
        case list():
            buffer.write("#(")
            for i, item in enumerate(value):
                if i:
                    buffer.write(" ")
                _write(item, buffer, active)
            buffer.write(")")
        case _:
            buffer.write(str(value))
