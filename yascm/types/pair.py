"""Cons cells and helpers for moving between Lisp lists and Python lists."""

from __future__ import annotations

from typing import Iterable, Iterator

from yascm import LispValue
from yascm.types.errors import YascmTypeError
from yascm.types.sentinels import EmptyList


class Pair:
    """A mutable (car . cdr) cell. Both slots may be rebound, so chains may be cyclic."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue):
        self.car = car
        self.cdr = cdr

    def __repr__(self) -> str:
        # Local import: the printer depends on this module.
        from yascm.printer import to_string
        return to_string(self)


def from_iterable(items: Iterable[LispValue], tail: LispValue = EmptyList) -> LispValue:
    """Build a list whose elements are `items`, terminated by `tail`."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def iterate(lst: LispValue) -> Iterator[LispValue]:
    """Yield the elements of a proper list; raise on an improper tail."""
    while isinstance(lst, Pair):
        yield lst.car
        lst = lst.cdr
    if lst is not EmptyList:
        raise YascmTypeError("Expected a proper list")


def to_python_list(lst: LispValue) -> list[LispValue]:
    return list(iterate(lst))
