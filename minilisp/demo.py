"""Worked examples of calling Python from Lisp and Lisp from Python."""

from __future__ import annotations

import argparse
import math
import sys
from typing import List, Sequence, TextIO

from .environment import setup_environment
from .evaluator import evaluate
from .interop import (
    call_lisp_function,
    from_lisp_number,
    register_lisp_function,
    to_lisp_number,
)
from .natives import (
    native_add,
    native_length,
    native_multiply,
    native_uppercase,
    register_native_function,
    setup_native_functions,
)
from .parser import ParseError, read
from .printer import print_value
from .repl import repl
from .types import Bool, Environment, Number, Symbol, Value

_EVAL_ERRORS = (ValueError, TypeError, LookupError)


def _square(args: List[Value]) -> Value:
    if len(args) != 1:
        raise ValueError("square requires exactly one argument")
    value = args[0]
    if not isinstance(value, Number):
        raise TypeError("square requires a numeric argument")
    return Number(value.value * value.value)


def _concat(args: List[Value]) -> Value:
    if not all(isinstance(arg, Symbol) for arg in args):
        raise TypeError("concat requires symbol arguments")
    return Symbol("".join(arg.name for arg in args))


def _truncate(number: float) -> int:
    """Truncate toward zero, saturating like a 64-bit integer cast."""
    if math.isnan(number):
        return 0
    limit = 2**63
    if number >= limit:
        return limit - 1
    if number < -limit:
        return -limit
    return int(number)


def _is_even(args: List[Value]) -> Value:
    if len(args) != 1:
        raise ValueError("is-even requires exactly one argument")
    value = args[0]
    if not isinstance(value, Number):
        raise TypeError("is-even requires a numeric argument")
    return Bool(_truncate(value.value) % 2 == 0)


def register_example_functions() -> None:
    """Register the example native functions used by the demos."""
    register_native_function("native-add", native_add)
    register_native_function("native-multiply", native_multiply)
    register_native_function("native-length", native_length)
    register_native_function("native-uppercase", native_uppercase)
    register_native_function("native-square", _square)
    register_native_function("square", _square)
    register_native_function("concat", _concat)
    register_native_function("is-even", _is_even)


def _run(code: str, env: Environment, out: TextIO, blank_after: bool = True) -> None:
    print(f"Lisp code: {code}", file=out)
    end = "\n\n" if blank_after else "\n"
    try:
        result = evaluate(read(code), env)
    except _EVAL_ERRORS as err:
        print(f"Error: {err}", file=out, end=end)
    else:
        print(f"Result: {print_value(result)}", file=out, end=end)


def _register(name: str, params: str, body: str, env: Environment, out: TextIO) -> bool:
    try:
        register_lisp_function(name, params, body, env)
    except ParseError as err:
        print(f"Error registering function: {err}", file=out)
        return False
    return True


def _report_call(name: str, numbers: Sequence[float], env: Environment, out: TextIO) -> None:
    try:
        result = call_lisp_function(name, [to_lisp_number(n) for n in numbers], env)
    except _EVAL_ERRORS as err:
        print(f"Error: {err}", file=out)
        return
    number = from_lisp_number(result)
    if number is None:
        print("Result could not be converted to a number", file=out)
    else:
        print(f"Result: {number:g} (Python float value)", file=out)
    print(f"Lisp representation: {print_value(result)}", file=out)


def demo_lisp_to_native(env: Environment, out: TextIO | None = None) -> None:
    """Show Lisp code calling registered native functions."""
    out = sys.stdout if out is None else out
    print("=== Demo: Calling native functions from Lisp ===", file=out)
    print(
        "You can call Python functions from Lisp using the 'native-call' form.\n",
        file=out,
    )
    _run("(native-call native-add 1 2 3)", env, out)
    _run("(+ (native-call native-square 3) (native-call native-square 4))", env, out)
    _run(
        "(define pythagoras (lambda (a b) "
        "(sqrt (+ (native-call native-square a) (native-call native-square b)))))",
        env,
        out,
        blank_after=False,
    )
    # Not a real square root; it only shows a later definition being picked up.
    _register("sqrt", "(x)", "(* x 0.5)", env, out)
    _run("(pythagoras 3 4)", env, out)
    print("=== End of Lisp -> native Demo ===\n", file=out)


def demo_native_to_lisp(env: Environment, out: TextIO | None = None) -> None:
    """Show Python code defining and calling Lisp functions."""
    out = sys.stdout if out is None else out
    print("=== Demo: Calling Lisp from Python ===", file=out)
    print("You can define and call Lisp functions from Python code.\n", file=out)

    print("Defining a Lisp function 'square' from Python...", file=out)
    if _register("square", "(x)", "(* x x)", env, out):
        print("Function 'square' registered successfully!", file=out)
    print("\nCalling Lisp 'square' function from Python with argument 5...", file=out)
    _report_call("square", [5.0], env, out)

    print("\nDefining a more complex Lisp function 'sum-of-squares'...", file=out)
    if _register("sum-of-squares", "(x y)", "(+ (* x x) (* y y))", env, out):
        print("Function 'sum-of-squares' registered successfully!", file=out)
    print("\nCalling 'sum-of-squares' with arguments 3 and 4...", file=out)
    _report_call("sum-of-squares", [3.0, 4.0], env, out)
    print("\n=== End of Python -> Lisp Demo ===\n", file=out)


def run_lisp_examples(env: Environment, out: TextIO | None = None) -> None:
    """Run Lisp snippets that use the example native functions."""
    out = sys.stdout if out is None else out
    print("=== Calling Native Functions from Lisp ===\n", file=out)
    _run("(native-call square 5)", env, out)
    _run("(native-call concat hello world)", env, out)
    _run("(native-call is-even 42)", env, out)
    _run(
        "(define sum-of-squares (lambda (x y) "
        "(+ (native-call square x) (native-call square y))))",
        env,
        out,
        blank_after=False,
    )
    _run("(sum-of-squares 3 4)", env, out)
    print("=== End of Examples ===", file=out)


def main(argv: Sequence[str] | None = None) -> int:
    """Run every demo, then start the interactive loop unless told not to."""
    parser = argparse.ArgumentParser(description="Interop demonstrations.")
    parser.add_argument(
        "--no-repl", action="store_true", help="exit after the demonstrations"
    )
    options = parser.parse_args(argv)

    env = setup_environment()
    setup_native_functions(env)
    register_example_functions()

    demo_lisp_to_native(env, sys.stdout)
    demo_native_to_lisp(env, sys.stdout)
    run_lisp_examples(env, sys.stdout)

    if not options.no_repl:
        print(
            "\nStarting interactive REPL. Try using the functions demonstrated above."
        )
        repl(env)
    return 0