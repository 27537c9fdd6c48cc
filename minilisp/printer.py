"""Rendering Lisp values as text."""

from __future__ import annotations

import math
from decimal import Decimal

from .types import Bool, Cons, Lambda, Nil, Number, Procedure, Symbol, Value


def print_value(value: Value) -> str:
    """Return the textual form of a value."""
    match value:
        case Nil():
            return "()"
        case Bool(True):
            return "#t"
        case Bool(False):
            return "#f"
        case Number(number):
            return _format_number(number)
        case Symbol(name):
            return name
        case Procedure(name, _):
            return f"<procedure:{name}>"
        case Lambda():
            return "<lambda>"
        case Cons():
            return _format_list(value)
    raise TypeError(f"not a Lisp value: {value!r}")


def _format_number(number: float) -> str:
    number = float(number)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _format_list(pair: Cons) -> str:
    parts = []
    current: Value = pair
    while isinstance(current, Cons):
        parts.append(print_value(current.first))
        current = current.rest
    tail = "" if isinstance(current, Nil) else f" . {print_value(current)}"
    return "(" + " ".join(parts) + tail + ")"