import pytest

from minilisp.environment import setup_environment
from minilisp.evaluator import evaluate
from minilisp.interop import to_lisp_list
from minilisp.natives import (
    FunctionRegistry,
    native_add,
    native_call,
    native_length,
    native_multiply,
    native_uppercase,
    register_native_function,
    setup_native_functions,
)
from minilisp.parser import read
from minilisp.printer import print_value
from minilisp.types import NIL, Number, Procedure, Symbol


@pytest.fixture
def env():
    environment = setup_environment()
    setup_native_functions(environment)
    return environment


def test_registry_register_and_get():
    registry = FunctionRegistry()
    registry.register("add", native_add)
    assert registry.get("add") is native_add
    assert registry.get("other") is None


def test_registry_replaces_entry():
    registry = FunctionRegistry()
    registry.register("f", native_add)
    registry.register("f", native_multiply)
    assert registry.get("f") is native_multiply


def test_setup_installs_native_call(env):
    proc = env["native-call"]
    assert isinstance(proc, Procedure)
    assert proc.func is native_call


def test_native_add_matches_builtin(env):
    result = native_add([Number(1.0), Number(2.0), Number(3.0)])
    assert result == evaluate(read("(+ 1 2 3)"), env)


def test_native_multiply_matches_builtin(env):
    result = native_multiply([Number(2.0), Number(3.0), Number(4.0)])
    assert result == evaluate(read("(* 2 3 4)"), env)


@pytest.mark.parametrize("func", [native_add, native_multiply])
def test_arithmetic_needs_two_arguments(func):
    with pytest.raises(ValueError, match="at least two arguments"):
        func([Number(1.0)])


@pytest.mark.parametrize("func", [native_add, native_multiply])
def test_arithmetic_needs_numbers(func):
    with pytest.raises(TypeError, match="numeric arguments"):
        func([Number(1.0), Symbol("a")])


def test_native_length_counts_elements():
    items = [Symbol("a"), Symbol("b"), Symbol("c")]
    assert native_length([to_lisp_list(items)]) == Number(float(len(items)))


def test_native_length_of_nil_is_zero():
    assert native_length([NIL]) == Number(0.0)


def test_native_length_argument_count():
    with pytest.raises(ValueError, match="exactly one argument"):
        native_length([])


def test_native_uppercase():
    assert native_uppercase([Symbol("hello")]) == Symbol("HELLO")


def test_native_uppercase_rejects_numbers():
    with pytest.raises(TypeError, match="symbol argument"):
        native_uppercase([Number(1.0)])


def test_native_call_evaluates_arguments(env):
    register_native_function("test-collect", to_lisp_list)
    result = evaluate(read("(native-call test-collect 1 (+ 1 1))"), env)
    assert print_value(result) == "(1 2)"


def test_native_call_with_registered_add(env):
    register_native_function("test-add", native_add)
    result = evaluate(read("(native-call test-add 4 5)"), env)
    assert result == evaluate(read("(+ 4 5)"), env)


def test_native_call_unknown_function(env):
    with pytest.raises(LookupError, match="no-such-function"):
        evaluate(read("(native-call no-such-function 1)"), env)


def test_native_call_requires_symbol_name(env):
    with pytest.raises(TypeError, match="function name"):
        evaluate(read("(native-call 3 1)"), env)