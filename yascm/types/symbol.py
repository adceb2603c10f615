from __future__ import annotations


class Symbol:
    """An interned name.

    Symbols compare by identity: two symbols are equal only if they are the
    same object, which SymbolTable.intern guarantees for equal text.
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class SymbolTable:
    """Intern table owned by one interpreter; nothing is ever evicted."""

    __slots__ = ("_symbols",)

    def __init__(self):
        self._symbols: dict[str, Symbol] = {}

    def intern(self, name: str) -> Symbol:
        sym = self._symbols.get(name)
        if sym is None:
            sym = Symbol(name)
            self._symbols[name] = sym
        return sym

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)
