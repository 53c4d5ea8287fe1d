from eden import EvaluatorFn
from eden import SExpression, LispValue
from eden.evaluation.signals import FormMismatch
from eden.types.environment import Environment
from eden.types.symbol import Symbol


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise FormMismatch("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise FormMismatch("set! first argument must be a symbol")
    value = evaluate_fn(val_expr, env)
    return env.set(var_sym, value)
