"""Closure representation for user-defined procedures."""

from __future__ import annotations

from yascm import SExpression, LispValue
from yascm.types.environment import Environment


class Closure:
    """A procedure value: parameter structure, body forms, and defining env.

    `params` is kept in its source shape: a proper list of symbols, a list
    ending in a rest symbol, or a bare symbol that collects every argument.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: SExpression, body: list[SExpression], env: Environment):
        self.params = params
        self.body = body
        self.env = env

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind argument values to the parameters in a fresh frame over the captured env."""
        return Environment.extend(self.params, args, self.env)

    def __repr__(self) -> str:
        return "#<compound-procedure>"
