"""Lisp values and the basic list primitives."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Union


@dataclass(frozen=True)
class Nil:
    """The empty list, also used as the 'nothing' result."""


NIL = Nil()


@dataclass(frozen=True)
class Bool:
    """A boolean value."""

    value: bool


@dataclass(frozen=True)
class Number:
    """A floating-point number."""

    value: float


@dataclass(frozen=True)
class Symbol:
    """A named symbol."""

    name: str


@dataclass(frozen=True)
class Cons:
    """A pair: the building block of lists."""

    first: Value
    rest: Value


@dataclass(frozen=True, eq=False)
class Procedure:
    """A built-in form that receives its arguments unevaluated."""

    name: str
    func: Callable[[Value, Environment], Value]


@dataclass(frozen=True, eq=False)
class Lambda:
    """A user-defined function closing over an environment."""

    params: Value
    body: Value
    env: Environment = field(repr=False)


Value = Union[Nil, Bool, Number, Symbol, Cons, Procedure, Lambda]
Environment = Dict[str, Value]


def cons(first: Value, rest: Value) -> Cons:
    """Build a pair from two values."""
    return Cons(first, rest)


def car(pair: Value) -> Value:
    """Return the first element of a pair, or nil for anything else."""
    return pair.first if isinstance(pair, Cons) else NIL


def cdr(pair: Value) -> Value:
    """Return the rest of a pair, or nil for anything else."""
    return pair.rest if isinstance(pair, Cons) else NIL