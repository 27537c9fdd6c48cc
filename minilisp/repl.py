"""Interactive read-eval-print loop."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from .environment import setup_environment
from .evaluator import evaluate
from .natives import setup_native_functions
from .parser import read
from .printer import print_value
from .types import Environment

BANNER = "MiniLisp λ - A tiny Lisp interpreter"
PROMPT = "λ> "


def repl(env: Environment, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Read lines until end of input or ``exit``, printing each result."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    print(BANNER, file=stdout)
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line or line.strip() == "exit":
            break
        try:
            result = evaluate(read(line), env)
        except (ValueError, TypeError, LookupError) as err:
            print(f"Error: {err}", file=stdout)
        else:
            print(print_value(result), file=stdout)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interpreter on standard input and output."""
    env = setup_environment()
    setup_native_functions(env)
    print(BANNER)
    print("Type 'exit' to quit")
    print()
    repl(env)
    return 0