"""Read-eval-print loop and demonstration driver for Schemer.

One line of input is one top-level form. Errors are reported and the
session continues with its global environment intact.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, TextIO

from schemer.config import get_log_level, get_prompt, get_recursion_limit
from schemer.errors import SchemerError
from schemer.interpreter import Interpreter

logger = logging.getLogger(__name__)

DEMO_PROGRAMS = (
    "(define square (lambda (y) (* y y)))",
    "(square 4)",
    "( 12 )",
    "(quote (a b c))",
    "(if (< 10 20) (+ 1 1) (+ 3 3))",
    "(define x 5)",
    "(set! x 6)",
    "( x )",
    "(begin (define y 5) (+ y y))",
)


def eval_line(interp: Interpreter, line: str, out: TextIO, err: TextIO) -> bool:
    """Evaluate one line, printing the result or the error. Returns True on success."""
    try:
        text = interp.run(line)
    except (SchemerError, RecursionError) as ex:
        logger.warning("Error evaluating %r: %s", line, ex)
        print(f"{type(ex).__name__}: {ex}", file=err)
        return False
    if text is not None:
        print(text, file=out)
    return True


def repl(
    interp: Interpreter | None = None,
    prompt: str | None = None,
    lines: Iterable[str] | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> Interpreter:
    """Run the loop until EOF. `lines` replaces interactive input when given."""
    out = out or sys.stdout
    err = err or sys.stderr
    interp = interp or Interpreter()
    prompt = get_prompt() if prompt is None else prompt
    source = iter(lines) if lines is not None else None
    try:
        while True:
            try:
                if source is None:
                    line = input(prompt)
                else:
                    line = next(source)
            except (EOFError, StopIteration):
                break
            if not line.strip():
                continue
            eval_line(interp, line, out, err)
    except KeyboardInterrupt:
        pass
    return interp


def demo(
    interp: Interpreter | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> Interpreter:
    """Feed the fixed demonstration programs, echoing each before its result."""
    out = out or sys.stdout
    err = err or sys.stderr
    interp = interp or Interpreter()
    for program in DEMO_PROGRAMS:
        print(">> " + program, file=out)
        eval_line(interp, program, out, err)
    return interp


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="schemer", description="Minimal Scheme interpreter")
    parser.add_argument("--demo", action="store_true", help="run the demonstration programs and exit")
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)

    limit = get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)

    if args.demo:
        demo()
    else:
        repl()


if __name__ == "__main__":
    main()
