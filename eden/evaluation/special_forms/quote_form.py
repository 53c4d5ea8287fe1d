from eden import EvaluatorFn
from eden import SExpression, LispValue
from eden.evaluation.signals import FormMismatch
from eden.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise FormMismatch("quote expects exactly 1 argument")
    return tail[0]
