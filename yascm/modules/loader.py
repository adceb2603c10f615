"""Loading of source files: read and evaluate every top-level form in order."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Protocol, TextIO, TYPE_CHECKING

from yascm import LispValue
from yascm.config import echo_enabled, get_load_roots
from yascm.printer import write_value
from yascm.types.environment import Environment
from yascm.types.errors import YascmArityError, YascmError, YascmTypeError
from yascm.types.procedure import Primitive
from yascm.types.sentinels import FALSE, Ok, Unspecified

if TYPE_CHECKING:
    from yascm.interpreter import Interpreter

logger = logging.getLogger(__name__)


class _HasEvalStream(Protocol):
    def eval_stream(self, source: TextIO, echo: Optional[TextIO] = None) -> LispValue: ...


def resolve_path(path: str | Path) -> Optional[Path]:
    p = Path(path)
    if p.is_file():
        return p
    if p.is_absolute():
        return None
    for root in get_load_roots():
        candidate = root / p
        if candidate.is_file():
            return candidate
    return None


def load_file(
    itp: _HasEvalStream, path: str | Path, echo: Optional[bool] = None
) -> bool:
    """Evaluate every form in the file at `path`.

    Stops at end of input or at the first fault. When echo is on, each
    result is printed on its own line. Returns True when the whole file ran.
    """
    if echo is None:
        echo = echo_enabled()
    p = resolve_path(path)
    if p is None:
        logger.error("Cannot find file %s", path)
        return False
    logger.info("Loading %s", p)
    try:
        with p.open(encoding='utf-8') as f:
            itp.eval_stream(f, echo=sys.stdout if echo else None)
    except (YascmError, ZeroDivisionError, RecursionError) as ex:
        logger.error("Load of %s aborted: %s", p, ex)
        return False
    except (OSError, UnicodeDecodeError) as ex:
        logger.error("Cannot read %s: %s", p, ex)
        return False
    return True


def register_loader(itp: Interpreter, env: Environment) -> None:
    """Bind the `load` primitive for this interpreter into `env`."""

    def load(_: Environment, args: list[LispValue]) -> LispValue:
        """(load "path") evaluates a file in the global environment; ok or #f."""
        if len(args) != 1:
            raise YascmArityError("load requires exactly 1 argument")
        if not isinstance(args[0], str):
            raise YascmTypeError(f"load expects a string path, got {type(args[0]).__name__}")
        return Ok if load_file(itp, args[0]) else FALSE

    env.define(itp.symbol("load"), Primitive("load", load))


def echo_result(value: LispValue, out: TextIO) -> None:
    if value is Unspecified:
        return
    write_value(value, out)
    out.write("\n")
