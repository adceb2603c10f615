from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional, TextIO

from yascm import SExpression, LispValue
from yascm.reader.parser import Reader
from yascm.types.environment import Environment
from yascm.types.procedure import SpecialForm
from yascm.types.sentinels import Else, Unspecified
from yascm.types.symbol import Symbol, SymbolTable
from yascm.builtin.env_builtin import register
from yascm.evaluation.evaluator import evaluate
from yascm.evaluation.special_forms import SPECIAL_FORMS
from yascm.modules.loader import echo_result, load_file, register_loader


class Interpreter:
    """
    Interpreter state: one symbol table and one global environment.

    Everything a program can reach lives here, so separate interpreters never
    share symbols or bindings.
    """

    def __init__(self, prelude: str | None = None):
        self.symbols: SymbolTable = SymbolTable()
        self.env: Environment = Environment()

        for name, handler in SPECIAL_FORMS.items():
            self.env.define(self.symbol(name), SpecialForm(name, handler))
        self.env.define(self.symbol("else"), Else)
        register(self.env, self.symbols)
        register_loader(self, self.env)

        if prelude:
            self.eval(prelude)

    def symbol(self, name: str) -> Symbol:
        return self.symbols.intern(name)

    def read(self, source: str | TextIO) -> Iterator[SExpression]:
        """Yield the top-level forms of `source` one at a time."""
        return Reader(source, self.symbols).parse_all()

    def evaluate(self, expr: SExpression) -> LispValue:
        return evaluate(expr, self.env)

    def eval_stream(self, source: str | TextIO, echo: Optional[TextIO] = None) -> LispValue:
        """Read and evaluate forms until end of input; return the last value."""
        result: LispValue = Unspecified
        for expr in self.read(source):
            result = self.evaluate(expr)
            if echo is not None:
                echo_result(result, echo)
        return result

    def eval(self, code: str) -> LispValue:
        return self.eval_stream(code)

    def eval_all(self, code: str) -> list[LispValue]:
        return [self.evaluate(expr) for expr in self.read(code)]

    def load(self, path: str | Path, echo: Optional[bool] = None) -> bool:
        return load_file(self, path, echo)
