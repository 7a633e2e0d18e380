"""Symbols: bare identifiers such as ``define``, ``+`` or ``fact``.

Every name maps to exactly one Symbol object, so symbols compare by
identity and special-form dispatch is a plain dict hit. A Symbol never
equals a ``str``: string literals and names stay distinct inside the tree.
"""

from __future__ import annotations

from typing import ClassVar


class Symbol:
    __slots__ = ("name",)

    _table: ClassVar[dict[str, Symbol]] = {}

    def __new__(cls, name: str) -> Symbol:
        symbol = cls._table.get(name)
        if symbol is None:
            symbol = super().__new__(cls)
            symbol.name = name
            cls._table[name] = symbol
        return symbol

    def __reduce__(self):
        return Symbol, (self.name,)

    def __copy__(self) -> Symbol:
        return self

    def __deepcopy__(self, memo) -> Symbol:
        return self

    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"

    def __str__(self) -> str:
        return self.name
