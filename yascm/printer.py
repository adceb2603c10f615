"""Canonical textual form of yascm values.

Lists are walked along their cdr chain iteratively; a cyclic cdr chain never
terminates and a cyclic car chain exhausts the stack, both at the caller's risk.
"""

from __future__ import annotations

import sys
from io import StringIO
from typing import TextIO

from yascm import LispValue
from yascm.types.character import Character
from yascm.types.closure import Closure
from yascm.types.environment import Environment
from yascm.types.pair import Pair
from yascm.types.procedure import Primitive, SpecialForm
from yascm.types.sentinels import (
    Boolean,
    Else,
    EmptyList,
    Ok,
    Unspecified,
)
from yascm.types.symbol import Symbol


def write_value(obj: LispValue, out: TextIO) -> None:
    """Write the canonical form of `obj` to `out`."""
    if obj is Unspecified:
        return
    if isinstance(obj, Pair):
        _write_pair(obj, out)
        return
    out.write(_atom_to_string(obj))


def _write_pair(obj: Pair, out: TextIO) -> None:
    out.write("(")
    write_value(obj.car, out)
    rest = obj.cdr
    while isinstance(rest, Pair):
        out.write(" ")
        write_value(rest.car, out)
        rest = rest.cdr
    if rest is not EmptyList:
        out.write(" . ")
        write_value(rest, out)
    out.write(")")


def _atom_to_string(obj: LispValue) -> str:
    match obj:
        case Boolean():
            return "#t" if obj.value else "#f"
        case int() | float():
            return str(obj)
        case Character():
            return f"#\\{obj.value}"
        case str():
            return f'"{obj}"'
        case Symbol():
            return obj.name
        case Closure():
            return "#<compound-procedure>"
        case Primitive():
            return f"#<primitive-procedure {obj.name}>"
        case SpecialForm():
            return f"#<special-form {obj.name}>"
        case Environment():
            return "#<environment>"
    if obj is EmptyList:
        return "()"
    if obj is Ok:
        return "ok"
    if obj is Else:
        return "else"
    return repr(obj)


def to_string(obj: LispValue) -> str:
    with StringIO() as buffer:
        write_value(obj, buffer)
        return buffer.getvalue()


def display(obj: LispValue, out: TextIO | None = None) -> None:
    """Print `obj` in canonical form without a trailing newline."""
    (out or sys.stdout).write(to_string(obj))
