"""Interactive read-eval-print loop.

Usage: python -m yascm.repl [--echo] [files ...]

Files are loaded in order before the prompt starts. A fault in any form is
reported and the loop resumes with the next form.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from yascm.config import get_log_level, get_prompt
from yascm.interpreter import Interpreter
from yascm.modules.loader import echo_result
from yascm.reader.parser import Reader
from yascm.types.errors import YascmError

logger = logging.getLogger(__name__)


def run_repl(
    itp: Interpreter,
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
    prompt: Optional[str] = None,
) -> None:
    prompt = get_prompt() if prompt is None else prompt
    reader = Reader(stdin, itp.symbols)
    show_prompt = True
    while True:
        if show_prompt:
            stdout.write(prompt)
            stdout.flush()
        # stray characters yield no form and do not re-prompt
        show_prompt = True
        try:
            expr = reader.parse_expr()
            if expr is None:
                if reader.eof:
                    break
                show_prompt = False
                continue
            echo_result(itp.evaluate(expr), stdout)
        except (YascmError, ZeroDivisionError, RecursionError) as ex:
            logger.debug("Fault at top level", exc_info=True)
            stderr.write(f"Error: {ex}\n")
        except KeyboardInterrupt:
            break
    stdout.write("\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="yascm", description="A small Scheme interpreter")
    parser.add_argument("files", nargs="*", help="source files to load before the prompt")
    parser.add_argument("--echo", action="store_true", help="print the result of each loaded form")
    parser.add_argument("--no-repl", action="store_true", help="exit after loading files")
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    itp = Interpreter()
    status = 0
    for path in args.files:
        if not itp.load(path, echo=args.echo or None):
            status = 1
    if not args.no_repl:
        run_repl(itp, sys.stdin, sys.stdout, sys.stderr)
    return status


if __name__ == "__main__":
    sys.exit(main())
