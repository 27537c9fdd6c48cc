"""The global environment with its built-in forms."""

from __future__ import annotations

import operator
from typing import Callable, Iterator

from .evaluator import eval_list, evaluate
from .types import (
    NIL,
    Bool,
    Cons,
    Environment,
    Lambda,
    Number,
    Procedure,
    Symbol,
    Value,
    car,
    cdr,
)


def _items(lst: Value) -> Iterator[Value]:
    while isinstance(lst, Cons):
        yield lst.first
        lst = lst.rest


def _numbers(lst: Value) -> Iterator[float]:
    return (item.value for item in _items(lst) if isinstance(item, Number))


def _quote(args: Value, env: Environment) -> Value:
    return car(args)


def _add(args: Value, env: Environment) -> Value:
    result = 0.0
    for number in _numbers(eval_list(args, env)):
        result += number
    return Number(result)


def _subtract(args: Value, env: Environment) -> Value:
    values = eval_list(args, env)
    first = car(values)
    if not isinstance(first, Number):
        return Number(0.0)
    result = first.value
    for number in _numbers(cdr(values)):
        result -= number
    return Number(result)


def _multiply(args: Value, env: Environment) -> Value:
    result = 1.0
    for number in _numbers(eval_list(args, env)):
        result *= number
    return Number(result)


def _divide(args: Value, env: Environment) -> Value:
    values = eval_list(args, env)
    first = car(values)
    if not isinstance(first, Number):
        return Number(0.0)
    result = first.value
    for number in _numbers(cdr(values)):
        if number != 0.0:
            result /= number
    return Number(result)


def _comparison(test: Callable[[float, float], bool]):
    def compare(args: Value, env: Environment) -> Value:
        values = eval_list(args, env)
        first, rest = car(values), cdr(values)
        second = car(rest)
        if (
            isinstance(first, Number)
            and isinstance(rest, Cons)
            and isinstance(second, Number)
        ):
            return Bool(test(first.value, second.value))
        return Bool(False)

    return compare


def _define(args: Value, env: Environment) -> Value:
    name = car(args)
    if isinstance(name, Symbol):
        value = evaluate(car(cdr(args)), env)
        env[name.name] = value
        return value
    return NIL


def _lambda(args: Value, env: Environment) -> Value:
    return Lambda(car(args), car(cdr(args)), env)


def setup_environment() -> Environment:
    """Create a fresh global environment holding the built-ins."""
    env: Environment = {"nil": NIL, "#t": Bool(True)}
    builtins = {
        "quote": _quote,
        "+": _add,
        "define": _define,
        "lambda": _lambda,
        "-": _subtract,
        "*": _multiply,
        "/": _divide,
        "=": _comparison(operator.eq),
        "<": _comparison(operator.lt),
        ">": _comparison(operator.gt),
    }
    env.update((name, Procedure(name, func)) for name, func in builtins.items())
    return env