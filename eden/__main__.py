"""
Command line entry point for Eden.

Usage:
    python -m eden                      # interactive loop
    python -m eden FILE.lisp ...        # load files in order
    python -m eden -e "(+ 1 2)"         # evaluate expressions and print them
    python -m eden FILE.lisp -i         # load, then stay interactive
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from eden import __version__
from eden.config import get_log_level
from eden.errors import EdenError, EdenIncompleteInput
from eden.interpreter import Interpreter
from eden.reader.parser import read_all
from eden.types.printer import to_lisp_string

logger = logging.getLogger(__name__)

PROMPT = "eden> "
CONTINUATION = "...   "


def repl(interp: Interpreter, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Read-eval-print until end of input.

    Lines accumulate while the input is an incomplete form. Errors are printed
    and the loop continues with the same environment.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    buffer = ""
    while True:
        stdout.write(CONTINUATION if buffer else PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            if buffer.strip():
                print("Error: unexpected end of input", file=stdout)
            stdout.write("\n")
            return
        buffer += line
        try:
            forms = read_all(buffer)
        except EdenIncompleteInput:
            continue
        except EdenError as exc:
            print(f"Error: {exc}", file=stdout)
            buffer = ""
            continue
        buffer = ""
        try:
            for form in forms:
                print(to_lisp_string(interp.eval_fn(form, interp.env)), file=stdout)
        except EdenError as exc:
            logger.debug("Evaluation failed", exc_info=True)
            print(f"Error: {exc}", file=stdout)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="eden", description="Eden Lisp interpreter")
    parser.add_argument("files", nargs="*", help="source files to load, in order")
    parser.add_argument(
        "-e", "--eval", dest="exprs", action="append", default=[], metavar="EXPR",
        help="evaluate EXPR and print its value (repeatable)",
    )
    parser.add_argument(
        "-i", "--interactive", action="store_true",
        help="start the interactive loop after files and expressions",
    )
    parser.add_argument("--no-prelude", action="store_true", help="skip the bundled prelude")
    parser.add_argument("--log-level", default=get_log_level(), help="logging level (default: %(default)s)")
    parser.add_argument("--version", action="version", version=f"eden {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    interp = Interpreter(prelude=None if args.no_prelude else 'auto')
    try:
        for path in args.files:
            interp.load(path)
        for expr in args.exprs:
            print(to_lisp_string(interp.eval(expr)))
    except EdenError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.interactive or not (args.files or args.exprs):
        repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
