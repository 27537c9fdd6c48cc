"""Conversions between Python and Lisp values, and calls across the boundary."""

from __future__ import annotations

from functools import reduce
from typing import Iterable

from .evaluator import evaluate
from .parser import read
from .types import NIL, Bool, Cons, Environment, Lambda, Nil, Number, Symbol, Value, cons


def call_lisp_function(name: str, args: Iterable[Value], env: Environment) -> Value:
    """Call the Lisp function bound to ``name`` with already-built Lisp arguments.

    Raises LookupError if ``name`` is not bound in ``env``.
    """
    try:
        func = env[name]
    except KeyError:
        raise LookupError(f"Function '{name}' not found in environment") from None
    return evaluate(cons(func, to_lisp_list(args)), env)


def to_lisp_number(n: float) -> Number:
    """Wrap a Python number as a Lisp number."""
    return Number(float(n))


def to_lisp_symbol(s: str) -> Symbol:
    """Wrap a Python string as a Lisp symbol."""
    return Symbol(s)


def to_lisp_bool(b: bool) -> Bool:
    """Wrap a Python truth value as a Lisp boolean."""
    return Bool(bool(b))


def to_lisp_list(values: Iterable[Value]) -> Value:
    """Build a proper Lisp list from Lisp values."""
    return reduce(lambda acc, item: cons(item, acc), reversed(list(values)), NIL)


def from_lisp_number(value: Value) -> float | None:
    """Return the float held by a Lisp number, or None for any other value."""
    return value.value if isinstance(value, Number) else None


def from_lisp_string(value: Value) -> str | None:
    """Return the name of a Lisp symbol, or None for any other value."""
    return value.name if isinstance(value, Symbol) else None


def from_lisp_bool(value: Value) -> bool | None:
    """Return the truth of a Lisp boolean or nil, or None for any other value."""
    if isinstance(value, Bool):
        return value.value
    if isinstance(value, Nil):
        return False
    return None


def from_lisp_list(value: Value) -> list[Value]:
    """Collect the elements of a Lisp list; a non-list yields an empty list."""
    items = []
    while isinstance(value, Cons):
        items.append(value.first)
        value = value.rest
    return items


def register_lisp_function(name: str, params: str, body: str, env: Environment) -> None:
    """Bind ``name`` in ``env`` to a lambda read from ``params`` and ``body``.

    Raises ParseError if either text cannot be read.
    """
    params_expr = read(params)
    body_expr = read(body)
    env[name] = Lambda(params_expr, body_expr, env)