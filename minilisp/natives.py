"""Python functions callable from Lisp through the ``native-call`` form."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from .evaluator import eval_list
from .interop import from_lisp_list
from .types import Environment, Number, Procedure, Symbol, Value, car, cdr

NativeFunction = Callable[[List[Value]], Value]


class FunctionRegistry:
    """Named Python functions that Lisp code may call."""

    def __init__(self) -> None:
        self._functions: Dict[str, NativeFunction] = {}

    def register(self, name: str, func: NativeFunction) -> None:
        """Make ``func`` callable under ``name``, replacing any earlier one."""
        self._functions[name] = func

    def get(self, name: str) -> Optional[NativeFunction]:
        """Return the function registered under ``name``, or None."""
        return self._functions.get(name)


_REGISTRY = FunctionRegistry()


def register_native_function(name: str, func: NativeFunction) -> None:
    """Register ``func`` in the shared registry under ``name``."""
    _REGISTRY.register(name, func)


def native_call(args: Value, env: Environment) -> Value:
    """Implement ``(native-call name arg ...)``: evaluate the args and call ``name``."""
    name = car(args)
    if not isinstance(name, Symbol):
        raise TypeError("Expected function name as first argument")
    values = from_lisp_list(eval_list(cdr(args), env))
    func = _REGISTRY.get(name.name)
    if func is None:
        raise LookupError(f"Native function '{name.name}' not found")
    return func(values)


def setup_native_functions(env: Environment) -> None:
    """Install the ``native-call`` form in ``env``."""
    env["native-call"] = Procedure("native-call", native_call)


def _numbers(args: List[Value], name: str) -> List[float]:
    if len(args) < 2:
        raise ValueError(f"{name} requires at least two arguments")
    if not all(isinstance(arg, Number) for arg in args):
        raise TypeError(f"{name} requires numeric arguments")
    return [arg.value for arg in args]


def _single(args: List[Value], name: str) -> Value:
    if len(args) != 1:
        raise ValueError(f"{name} requires exactly one argument")
    return args[0]


def native_add(args: List[Value]) -> Value:
    """Sum two or more numbers."""
    total = 0.0
    for number in _numbers(args, "native-add"):
        total += number
    return Number(total)


def native_multiply(args: List[Value]) -> Value:
    """Multiply two or more numbers."""
    product = 1.0
    for number in _numbers(args, "native-multiply"):
        product *= number
    return Number(product)


def native_length(args: List[Value]) -> Value:
    """Return the length of a single list argument."""
    return Number(float(len(from_lisp_list(_single(args, "native-length")))))


def native_uppercase(args: List[Value]) -> Value:
    """Upper-case a single symbol argument."""
    value = _single(args, "native-uppercase")
    if not isinstance(value, Symbol):
        raise TypeError("native-uppercase requires a symbol argument")
    return Symbol(value.name.upper())