import io

import pytest

from minilisp.demo import (
    demo_lisp_to_native,
    demo_native_to_lisp,
    main,
    register_example_functions,
    run_lisp_examples,
)
from minilisp.environment import setup_environment
from minilisp.evaluator import evaluate
from minilisp.interop import call_lisp_function, to_lisp_number
from minilisp.natives import setup_native_functions
from minilisp.parser import read
from minilisp.printer import print_value
from minilisp.types import Bool, Lambda, Symbol


@pytest.fixture
def env():
    environment = setup_environment()
    setup_native_functions(environment)
    register_example_functions()
    return environment


def run(code, env):
    return evaluate(read(code), env)


def test_native_square_matches_lisp_multiplication(env):
    assert run("(native-call native-square 4)", env) == run("(* 4 4)", env)
    assert run("(native-call square 7)", env) == run("(* 7 7)", env)


def test_square_rejects_wrong_argument_count(env):
    with pytest.raises(ValueError):
        run("(native-call square 1 2)", env)


def test_square_rejects_non_number(env):
    with pytest.raises(TypeError):
        run("(native-call square hello)", env)


def test_concat_rejects_numbers(env):
    with pytest.raises(TypeError):
        run("(native-call concat hello 3)", env)


@pytest.mark.parametrize("code, expected", [
    ("(native-call is-even 42)", True),
    ("(native-call is-even 7)", False),
    ("(native-call is-even 0)", True),
])
def test_is_even(env, code, expected):
    assert run(code, env) == Bool(expected)


def test_is_even_requires_one_argument(env):
    with pytest.raises(ValueError):
        run("(native-call is-even)", env)


def test_demo_lisp_to_native_output_and_bindings(env):
    out = io.StringIO()
    demo_lisp_to_native(env, out)
    text = out.getvalue()
    assert "Result: 6\n" in text
    assert "Result: 12.5\n" in text
    assert "Error" not in text
    assert isinstance(env["sqrt"], Lambda)
    assert isinstance(env["pythagoras"], Lambda)


def test_demo_native_to_lisp_output_and_bindings(env):
    out = io.StringIO()
    demo_native_to_lisp(env, out)
    text = out.getvalue()
    assert "Result: 25 (Python float value)" in text
    assert "Lisp representation: 25" in text
    assert isinstance(env["square"], Lambda)
    result = call_lisp_function(
        "sum-of-squares", [to_lisp_number(3), to_lisp_number(4)], env
    )
    assert result == run("(+ (* 3 3) (* 4 4))", env)


def test_main_without_repl(capsys):
    assert main(["--no-repl"]) == 0
    text = capsys.readouterr().out
    assert "=== End of Examples ===" in text
    assert "Starting interactive REPL" not in text


def test_main_with_repl(monkeypatch, capsys, env):
    monkeypatch.setattr(
        "sys.stdin",
        io.StringIO("(native-call native-square 3)\n(native-call missing 1)\nexit\n"),
    )
    assert main([]) == 0
    text = capsys.readouterr().out
    assert "Starting interactive REPL" in text
    assert print_value(run("(* 3 3)", env)) + "\n" in text
    assert "Error: Native function 'missing' not found" in text