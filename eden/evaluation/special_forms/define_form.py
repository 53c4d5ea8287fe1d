"""The define special form.

`define` has three shapes that share a head symbol, so each shape is tried in
order and declines with FormMismatch when the list does not fit it:

    (define name expr)
    (define (name p1 ... . rest) body...)
    (define (name p1 ...) body...)
"""

from __future__ import annotations

from eden import EvaluatorFn
from eden import SExpression, LispValue
from eden.evaluation.signals import FormMismatch
from eden.evaluation.special_forms.lambda_form import parse_params
from eden.types.closure import Closure
from eden.types.environment import Environment
from eden.types.symbol import Symbol
from eden.types.values import DottedList


def define_variable(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 2 or not isinstance(tail[0], Symbol):
        raise FormMismatch("expected (define name expr)")
    name, val_expr = tail
    value = evaluate_fn(val_expr, env)
    return env.define(name, value)


def define_variadic_function(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) < 2 or not isinstance(tail[0], DottedList):
        raise FormMismatch("expected (define (name params . rest) body...)")
    name, *params = tail[0].head
    return _define_closure(name, DottedList(params, tail[0].tail), tail[1:], env)


def define_function(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) < 2 or not isinstance(tail[0], list) or not tail[0]:
        raise FormMismatch("expected (define (name params) body...)")
    name, *params = tail[0]
    return _define_closure(name, params, tail[1:], env)


def _define_closure(
    name: SExpression,
    param_spec: SExpression,
    body: list[SExpression],
    env: Environment,
) -> Closure:
    if not isinstance(name, Symbol):
        raise FormMismatch("function name must be a symbol")
    if isinstance(param_spec, DottedList) and not param_spec.head:
        # (define (name . rest) ...): every argument goes to rest
        param_spec = param_spec.tail
    params, variadic = parse_params(param_spec)
    closure = Closure(params, list(body), env, variadic, name=str(name))
    env.define(name, closure)
    return closure


DEFINE_SHAPES = (define_variable, define_variadic_function, define_function)


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    for shape in DEFINE_SHAPES:
        try:
            return shape(tail, env, evaluate_fn)
        except FormMismatch:
            continue
    raise FormMismatch("malformed define")
