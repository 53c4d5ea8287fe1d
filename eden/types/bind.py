from __future__ import annotations

from eden import LispValue
from eden.errors import EdenArityError
from eden.types.environment import Environment
from eden.types.symbol import Symbol


def bind_arguments(
    params: list[Symbol],
    variadic: Symbol | None,
    supplied_args: list[LispValue],
    closure_env: Environment,
    name: str | None = None,
) -> Environment:
    """
    Single source of truth for parameter binding in Eden.

    Supports:
    - Positional required parameters, bound in order
    - An optional variadic parameter capturing the remaining arguments as a list

    Without a variadic parameter the argument count must match exactly; with one
    it must be at least the number of positional parameters.

    Returns a new Environment whose outer is the closure_env, populated with
    the bindings for evaluating the callee body.
    """
    required = len(params)
    provided = len(supplied_args)
    label = name or "anonymous procedure"

    if variadic is None and provided != required:
        raise EdenArityError(
            f"{label} expects {required} argument(s), got {provided}"
        )
    if variadic is not None and provided < required:
        raise EdenArityError(
            f"{label} expects at least {required} argument(s), got {provided}"
        )

    local_env = Environment(outer=closure_env)
    for param, value in zip(params, supplied_args):
        local_env.define(param, value)
    if variadic is not None:
        local_env.define(variadic, list(supplied_args[required:]))
    return local_env
