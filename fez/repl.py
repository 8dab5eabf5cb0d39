"""Command-line entry point: run a Fez file or an interactive REPL."""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from typing import Iterator, TextIO

from fez.config import get_log_level, get_recursion_limit
from fez.errors import FezError, IncompleteInput
from fez.interpreter import Interpreter
from fez.reader.parser import read
from fez.evaluation.evaluator import evaluate
from fez.types.marker import EMPTY_BEGIN
from fez.types.pair import write

logger = logging.getLogger(__name__)

PROMPT = "fez> "
CONTINUATION_PROMPT = "...> "


def read_input(stream: TextIO | None = None) -> Iterator[str]:
    """
    Yield complete chunks of source from `stream`, one per balanced input.
    Lines are accumulated while the reader reports the input as incomplete.
    """
    if stream is None:
        stream = sys.stdin
    pending = ""
    interactive = stream.isatty()
    while True:
        if interactive:
            print(CONTINUATION_PROMPT if pending else PROMPT, end="", flush=True)
        line = stream.readline()
        if not line:
            if pending.strip():
                yield pending
            return
        pending += line
        try:
            list(read(pending))
        except IncompleteInput:
            continue
        except FezError:
            pass  # reported when the chunk is evaluated
        yield pending
        pending = ""


def repl(interp: Interpreter, stream: TextIO | None = None, out: TextIO | None = None) -> None:
    """Read-eval-print loop. Errors are reported and the loop continues."""
    if out is None:
        out = sys.stdout
    for chunk in read_input(stream):
        try:
            for expr in read(chunk):
                result = evaluate(expr, interp.env)
                if result is not EMPTY_BEGIN:
                    print(write(result), file=out)
        except FezError as e:
            print(f"error: {e}", file=sys.stderr)
        except RecursionError:
            print("error: maximum recursion depth exceeded", file=sys.stderr)


def run_file(interp: Interpreter, path: str) -> int:
    with open(path, "r", encoding="utf-8") as f:
        source = f.read()
    try:
        result = interp.eval(source)
    except FezError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        print("error: maximum recursion depth exceeded", file=sys.stderr)
        return 1
    if result is not EMPTY_BEGIN:
        print(write(result))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = ArgumentParser(description="Fez: a minimal Scheme evaluator")
    parser.add_argument("file", type=str, nargs="?", default=None)
    parser.add_argument("-v", "--verbose", action="store_true", help="log at DEBUG level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.setrecursionlimit(get_recursion_limit())
    logger.debug("recursion limit set to %d", sys.getrecursionlimit())

    interp = Interpreter()
    if args.file is not None:
        return run_file(interp, args.file)
    repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
