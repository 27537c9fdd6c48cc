import pytest

from minilisp.parser import read
from minilisp.printer import print_value
from minilisp.types import NIL, Bool, Lambda, Number, Procedure, Symbol, cons


def test_nil_prints_as_empty_list():
    assert print_value(NIL) == "()"


def test_booleans():
    assert print_value(Bool(True)) == "#t"
    assert print_value(Bool(False)) == "#f"


def test_integral_number_has_no_fraction():
    assert print_value(Number(5.0)) == "5"


def test_fractional_number():
    assert print_value(Number(2.5)) == "2.5"


def test_large_number_is_not_in_exponent_form():
    assert print_value(Number(1e20)) == "100000000000000000000"


def test_small_number_is_not_in_exponent_form():
    assert print_value(Number(1e-7)) == "0.0000001"


def test_nan():
    assert print_value(Number(float("nan"))) == "NaN"


def test_symbol_prints_its_name():
    assert print_value(Symbol("hello")) == "hello"


def test_procedure():
    proc = Procedure("+", lambda args, env: NIL)
    assert print_value(proc) == "<procedure:+>"


def test_lambda():
    assert print_value(Lambda(NIL, NIL, {})) == "<lambda>"


def test_dotted_pair():
    assert print_value(cons(Symbol("a"), Symbol("b"))) == "(a . b)"


def test_improper_list_tail():
    value = cons(Symbol("a"), cons(Symbol("b"), Symbol("c")))
    assert print_value(value) == "(a b . c)"


@pytest.mark.parametrize(
    "text",
    ["(a b c)", "(a (b c) 2.5 ())", "(quote x)", "(define f (lambda (x) (* x x)))", "x"],
)
def test_round_trip(text):
    assert print_value(read(text)) == text


def test_quote_shorthand_prints_long_form():
    assert print_value(read("'x")) == "(quote x)"