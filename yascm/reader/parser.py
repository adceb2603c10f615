"""
  Lisp Reader

- Streaming, one character of lookahead over a string or text stream
- Emits yascm values directly:

    - integers -> int
    - #t / #f -> TRUE / FALSE
    - #\\c -> Character
    - "..." -> str (copied verbatim, no escapes)
    - symbols -> interned Symbol
    - 'x -> (quote x)
    - (a b c) -> Pair chain ending in EmptyList
    - () -> EmptyList

Any unrecognised character yields None, which callers treat as end-of-stream.
"""

from __future__ import annotations

import io
from typing import Iterator, Optional, TextIO

from yascm import SExpression
from yascm.types.character import Character
from yascm.types.errors import YascmSyntaxError
from yascm.types.pair import from_iterable
from yascm.types.sentinels import TRUE, FALSE
from yascm.types.symbol import SymbolTable

WHITESPACE = " \t\r\n"
DELIMITERS = WHITESPACE + '()";'
SYMBOL_INITIALS = "*/+-><=?!"


def is_delimiter(c: str) -> bool:
    # end of input ("") is also a delimiter
    return c == "" or c in DELIMITERS


def is_digit(c: str) -> bool:
    return c != "" and "0" <= c <= "9"


def is_initial(c: str) -> bool:
    return c != "" and (("a" <= c <= "z") or ("A" <= c <= "Z") or c in SYMBOL_INITIALS)


class Reader:
    def __init__(self, source: str | TextIO, symbols: SymbolTable):
        self.stream: TextIO = io.StringIO(source) if isinstance(source, str) else source
        self.symbols = symbols
        self.lookahead: Optional[str] = None
        self.eof = False

    def peek(self) -> str:
        if self.lookahead is None:
            self.lookahead = self.stream.read(1)
            if self.lookahead == "":
                self.eof = True
        return self.lookahead

    def advance(self) -> str:
        c = self.peek()
        self.lookahead = None
        return c

    def skip_whitespace(self) -> None:
        """Skip blanks and `;` line comments."""
        while True:
            c = self.peek()
            if c != "" and c in WHITESPACE:
                self.advance()
            elif c == ";":
                while self.advance() not in ("\n", ""):
                    pass
            else:
                return

    def parse_expr(self) -> Optional[SExpression]:
        """Read one expression, or None at end of input."""
        self.skip_whitespace()
        c = self.advance()

        if c == "#":
            return self._read_hash()

        if is_digit(c) or (c == "-" and is_digit(self.peek())):
            return self._read_integer(c)

        if c == '"':
            return self._read_string()

        if is_initial(c):
            return self._read_symbol(c)

        if c == "'":
            expr = self.parse_expr()
            if expr is None:
                raise YascmSyntaxError("Expected an expression after quote")
            return from_iterable([self.symbols.intern("quote"), expr])

        if c == "(":
            return self._read_list()

        return None

    def parse_all(self) -> Iterator[SExpression]:
        while (expr := self.parse_expr()) is not None:
            yield expr

    # --- literal readers ---

    def _read_hash(self) -> SExpression:
        c = self.advance()
        if c == "t":
            return TRUE
        if c == "f":
            return FALSE
        if c == "\\":
            ch = self.advance()
            if ch == "":
                raise YascmSyntaxError("Incomplete character literal")
            if not is_delimiter(self.peek()):
                raise YascmSyntaxError("Character not followed by delimiter")
            return Character(ch)
        raise YascmSyntaxError(f"Unknown boolean or character literal: #{c}")

    def _read_integer(self, first: str) -> int:
        sign = 1
        digits = first
        if first == "-":
            sign = -1
            digits = ""
        while is_digit(self.peek()):
            digits += self.advance()
        if not is_delimiter(self.peek()):
            raise YascmSyntaxError("Number not followed by delimiter")
        return sign * int(digits)

    def _read_string(self) -> str:
        chars: list[str] = []
        while (c := self.advance()) != '"':
            if c == "":
                raise YascmSyntaxError("Unterminated string literal")
            chars.append(c)
        return "".join(chars)

    def _read_symbol(self, first: str) -> SExpression:
        chars = [first]
        while is_initial(self.peek()) or is_digit(self.peek()):
            chars.append(self.advance())
        if not is_delimiter(self.peek()):
            raise YascmSyntaxError(
                f"Symbol {''.join(chars)!r} not followed by delimiter"
            )
        return self.symbols.intern("".join(chars))

    def _read_list(self) -> SExpression:
        items: list[SExpression] = []
        while True:
            self.skip_whitespace()
            c = self.peek()
            if c == "":
                raise YascmSyntaxError("Unmatched '('")
            if c == ")":
                self.advance()
                return from_iterable(items)
            if c == "." and items:
                raise YascmSyntaxError("Dotted pair syntax is not supported")
            expr = self.parse_expr()
            if expr is None:
                raise YascmSyntaxError(f"Unexpected character {c!r} in list")
            items.append(expr)


def read_all(source: str | TextIO, symbols: SymbolTable) -> list[SExpression]:
    """Read every top-level form in `source`."""
    return list(Reader(source, symbols).parse_all())
