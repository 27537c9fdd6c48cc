# minilisp

A tiny Lisp interpreter. It reads one expression at a time, evaluates it
against a shared environment, and prints the result. Python code can define
and call Lisp functions, and Lisp code can call registered Python functions
through the `native-call` form.

## Installing

```
pip install .
```

## The REPL

```
minilisp
```

Type one expression on each line; only the first expression on a line is
read. Type `exit`, or end the input, to quit.

```
λ> (define square (lambda (x) (* x x)))
<lambda>
λ> (square 7)
49
λ> '(1 2 3)
(1 2 3)
```

The built-in forms are `quote`, `define`, `lambda`, `+`, `-`, `*`, `/`, `=`,
`<`, `>` and `native-call`. The symbols `nil` and `#t` are bound to the empty
list and true. Arithmetic ignores arguments that are not numbers, and
division skips any divisor of zero. A symbol with no binding evaluates to
`()`, and so does a call whose head is not a procedure or lambda.
Read errors and errors raised by native functions are printed as
`Error: ...` and the loop carries on.

## A guided demo

```
minilisp-demo
```

This runs the interop examples and then starts the REPL with the example
native functions registered. Pass `--no-repl` to stop after the examples.

## Using it from Python

```python
from minilisp.environment import setup_environment
from minilisp.parser import read
from minilisp.evaluator import evaluate
from minilisp.printer import print_value

env = setup_environment()
result = evaluate(read("(+ 1 2 3)"), env)
print(print_value(result))  # 6
```

`read` raises `minilisp.parser.ParseError` (a `ValueError`) on incomplete
input. Values are the dataclasses in `minilisp.types`: `Nil`, `Bool`,
`Number`, `Symbol`, `Cons`, `Procedure` and `Lambda`, with `cons`, `car` and
`cdr` helpers.

### Calling Lisp from Python

```python
from minilisp.interop import (
    register_lisp_function, call_lisp_function,
    to_lisp_number, from_lisp_number,
)

register_lisp_function("sum-of-squares", "(x y)", "(+ (* x x) (* y y))", env)
result = call_lisp_function("sum-of-squares", [to_lisp_number(3), to_lisp_number(4)], env)
print(from_lisp_number(result))  # 25.0
```

`call_lisp_function` raises `LookupError` when the name is not bound.
`minilisp.interop` also has `to_lisp_symbol`, `to_lisp_bool`, `to_lisp_list`,
`from_lisp_string`, `from_lisp_bool` and `from_lisp_list`.

### Calling Python from Lisp

```python
from minilisp.natives import register_native_function, setup_native_functions
from minilisp.types import Number

setup_native_functions(env)

def cube(args):
    if len(args) != 1 or not isinstance(args[0], Number):
        raise TypeError("cube requires one number")
    return Number(args[0].value ** 3)

register_native_function("cube", cube)
print(print_value(evaluate(read("(native-call cube 3)"), env)))  # 27
```

A native function receives a list of evaluated Lisp values and returns a Lisp
value. `native-call` raises `LookupError` for an unregistered name. The
registry is shared by the whole process. `native_add`, `native_multiply`,
`native_length` and `native_uppercase` in `minilisp.natives` are ready-made
functions to register.

## What it does not do

There are no conditionals (`if`, `cond`), no strings, no `let` and no error
forms in the language itself, and expressions cannot span several input
lines in the REPL. Lambda bodies are a single expression.

## Running the tests

```
pip install .[test]
pytest
```