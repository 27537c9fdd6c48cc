"""Expression evaluation and parameter binding."""

from __future__ import annotations

from functools import reduce

from .types import (
    NIL,
    Cons,
    Environment,
    Lambda,
    Nil,
    Procedure,
    Symbol,
    Value,
    car,
    cdr,
    cons,
)


def evaluate(expr: Value, env: Environment) -> Value:
    """Evaluate an expression in an environment."""
    if isinstance(expr, Symbol):
        return env.get(expr.name, NIL)
    if isinstance(expr, Cons):
        func = evaluate(expr.first, env)
        if isinstance(func, Procedure):
            return func.func(expr.rest, env)
        if isinstance(func, Lambda):
            args = eval_list(expr.rest, env)
            local: Environment = {}
            bind_params(func.params, args, local, func.env)
            return evaluate(func.body, local)
        return NIL
    return expr


def eval_list(exprs: Value, env: Environment) -> Value:
    """Evaluate each element of a list, returning a list of the results."""
    results = []
    current = exprs
    while not isinstance(current, Nil):
        results.append(evaluate(car(current), env))
        current = cdr(current)
    return reduce(lambda acc, item: cons(item, acc), reversed(results), NIL)


def bind_params(
    params: Value, args: Value, env: Environment, outer_env: Environment
) -> None:
    """Bind parameters to arguments in ``env`` and copy in ``outer_env``.

    A symbol in parameter position takes all remaining arguments. When the
    parameter and argument lists end together, every outer binding is copied,
    replacing any parameter of the same name.
    """
    while True:
        if isinstance(params, Nil) and isinstance(args, Nil):
            env.update(outer_env)
            return
        if isinstance(params, Symbol):
            env[params.name] = args
            env.update(
                (key, value) for key, value in outer_env.items() if key != params.name
            )
            return
        if isinstance(params, Cons) and isinstance(args, Cons):
            bind_params(params.first, args.first, env, outer_env)
            params, args = params.rest, args.rest
            continue
        return