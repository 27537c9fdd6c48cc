"""A tiny Lisp interpreter with a REPL and calls between Lisp and Python."""

__version__ = "0.1.0"