"""Named wrappers for host-implemented operators.

Primitives receive `(env, args)` with args already evaluated; special forms
receive `(tail, env, evaluate_fn)` with the raw argument expressions.
"""

from __future__ import annotations

from typing import Callable

from yascm import LispValue


class Primitive:
    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[..., LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, env, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"#<primitive {self.name}>"


class SpecialForm:
    __slots__ = ("name", "handler")

    def __init__(self, name: str, handler: Callable[..., LispValue]):
        self.name = name
        self.handler = handler

    def __repr__(self) -> str:
        return f"#<special-form {self.name}>"
