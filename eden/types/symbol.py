from __future__ import annotations

import sys


class Symbol:
    """An identifier. Each name maps to a single Symbol instance."""

    __slots__ = ("name",)

    _table: dict[str, Symbol] = {}

    def __new__(cls, name: str) -> Symbol:
        name = sys.intern(name)
        sym = cls._table.get(name)
        if sym is None:
            sym = super().__new__(cls)
            sym.name = name
            cls._table[name] = sym
        return sym

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name is other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __reduce__(self):
        return (Symbol, (self.name,))

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
