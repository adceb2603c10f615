from __future__ import annotations


class Boolean:
    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = value

    def __repr__(self): return "#t" if self.value else "#f"


TRUE = Boolean(True)
FALSE = Boolean(False)


def make_bool(value: bool) -> Boolean:
    return TRUE if value else FALSE


class EmptyListType:
    def __repr__(self): return "()"


class ElseType:
    def __repr__(self): return "else"


class OkType:
    def __repr__(self): return "ok"


class UnspecifiedType:
    def __repr__(self): return "#<unspecified>"


EmptyList = EmptyListType()
Else = ElseType()
Ok = OkType()
Unspecified = UnspecifiedType()
