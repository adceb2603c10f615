"""Runtime environment for yascm.

An Environment is one frame of lexical scope: an insertion-ordered mapping of
Symbols to evaluated values plus a link to the enclosing frame. The global
frame is the only one whose `outer` is None.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from yascm import LispValue, SExpression
from yascm.types.errors import (
    YascmArityError,
    YascmInvalidSymbol,
    YascmUnboundSymbol,
)
from yascm.types.pair import Pair, from_iterable
from yascm.types.sentinels import EmptyList
from yascm.types.symbol import Symbol


class Environment:
    """Chained mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    @classmethod
    def extend(
        cls, params: SExpression, args: list[LispValue], outer: Environment
    ) -> Environment:
        """Build a frame binding `params` to `args` on top of `outer`.

        Parameters are walked pairwise with the arguments. When the parameter
        structure ends in a bare symbol, that symbol receives the remaining
        arguments as a list.
        """
        env = cls(outer)
        i = 0
        while isinstance(params, Pair):
            name = params.car
            if not isinstance(name, Symbol):
                raise YascmInvalidSymbol(f"Parameter {name!r} is not a symbol")
            if i >= len(args):
                raise YascmArityError(f"Too few arguments: missing a value for {name}")
            env.define(name, args[i])
            i += 1
            params = params.cdr
        remaining = list(args[i:])
        if isinstance(params, Symbol):
            env.define(params, from_iterable(remaining))
        elif params is not EmptyList:
            raise YascmInvalidSymbol(f"Parameter {params!r} is not a symbol")
        elif remaining:
            raise YascmArityError(f"Too many arguments: {remaining}")
        return env

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` in this frame, overwriting an existing binding here.

        Parent frames are never consulted.
        """
        if not isinstance(name, Symbol):
            raise YascmInvalidSymbol(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest frame in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises YascmUnboundSymbol if the symbol is not found.
        """
        env = self.find(name)
        if env is None:
            raise YascmUnboundSymbol(f"Cannot set unbound symbol {name}")
        env.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises YascmUnboundSymbol if not found.
        """
        env = self.find(name)
        if env is None:
            raise YascmUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def __contains__(self, name: Symbol) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return "#<environment>"
