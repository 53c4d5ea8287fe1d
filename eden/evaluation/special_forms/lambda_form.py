from __future__ import annotations

from eden import EvaluatorFn
from eden import SExpression, LispValue
from eden.evaluation.signals import FormMismatch
from eden.types.closure import Closure
from eden.types.environment import Environment
from eden.types.symbol import Symbol
from eden.types.values import DottedList


def parse_params(formals: SExpression) -> tuple[list[Symbol], Symbol | None]:
    """Split a formal parameter list into positional names and an optional variadic name.

    (a b)      -> [a, b], None
    (a b . r)  -> [a, b], r
    r          -> [], r
    """
    if isinstance(formals, Symbol):
        return [], formals
    if isinstance(formals, list):
        params, variadic = list(formals), None
    elif isinstance(formals, DottedList):
        params, variadic = list(formals.head), formals.tail
        if not isinstance(variadic, Symbol):
            raise FormMismatch("variadic parameter must be a symbol")
    else:
        raise FormMismatch("parameter list must be a list of symbols")

    if not all(isinstance(p, Symbol) for p in params):
        raise FormMismatch("parameters must be symbols")
    names = params + ([variadic] if variadic is not None else [])
    if len(set(names)) != len(names):
        raise FormMismatch("duplicate parameter name")
    return params, variadic


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body...) needs at least one body form; the body is
    # evaluated in sequence when the closure is called.
    if len(tail) < 2:
        raise FormMismatch("lambda requires a parameter list and a body")

    params, variadic = parse_params(tail[0])
    return Closure(params, list(tail[1:]), env, variadic)
