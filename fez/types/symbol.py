from __future__ import annotations
import sys


class Symbol:
    """An identifier. Symbols are unique per name: Symbol("x") is Symbol("x").

    Identity is equality, so `eq?` and environment lookups never compare
    strings.
    """

    __slots__ = ("id",)

    _table: dict[str, Symbol] = {}

    def __new__(cls, name: str) -> Symbol:
        sym = cls._table.get(name)
        if sym is None:
            sym = super().__new__(cls)
            sym.id = sys.intern(name)
            cls._table[name] = sym
        return sym

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (Symbol, (self.id,))

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
