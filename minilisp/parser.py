"""Reader turning source text into Lisp values."""

from __future__ import annotations

import re
from functools import reduce

from .types import NIL, Number, Symbol, Value, cons

_WHITESPACE = re.compile(r"\s*")
_ATOM = re.compile(r"[^\s()]*")
_QUOTE = Symbol("quote")


class ParseError(ValueError):
    """Raised when the input cannot be read as an expression."""


def read(text: str) -> Value:
    """Read the first expression in ``text``; anything after it is ignored."""
    return _Reader(text).read_expr()


def _atom_value(atom: str) -> Value:
    if "_" not in atom:
        try:
            return Number(float(atom))
        except ValueError:
            pass
    return Symbol(atom)


class _Reader:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip_whitespace(self) -> None:
        self._pos = _WHITESPACE.match(self._text, self._pos).end()

    def _peek(self) -> str | None:
        if self._pos < len(self._text):
            return self._text[self._pos]
        return None

    def read_expr(self) -> Value:
        self._skip_whitespace()
        char = self._peek()
        if char is None:
            raise ParseError("Unexpected end of input")
        if char == "(":
            self._pos += 1
            return self._read_list()
        if char == "'":
            self._pos += 1
            return cons(_QUOTE, cons(self.read_expr(), NIL))
        return self._read_atom()

    def _read_list(self) -> Value:
        items = []
        while True:
            self._skip_whitespace()
            char = self._peek()
            if char is None:
                raise ParseError("Expected ')' but got end of input")
            if char == ")":
                self._pos += 1
                break
            items.append(self.read_expr())
        return reduce(lambda acc, item: cons(item, acc), reversed(items), NIL)

    def _read_atom(self) -> Value:
        match = _ATOM.match(self._text, self._pos)
        atom = match.group()
        self._pos = match.end()
        if not atom:
            raise ParseError("Expected atom but got nothing")
        return _atom_value(atom)