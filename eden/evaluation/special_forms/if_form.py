from eden import EvaluatorFn
from eden import SExpression, LispValue
from eden.evaluation.signals import FormMismatch
from eden.types.environment import Environment
from eden.types.values import as_boolean


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if cond then else)
    The condition must coerce to a boolean; there is no general truthiness.
    """
    if len(tail) != 3:
        raise FormMismatch("if requires a condition, a then-expression and an else-expression")

    cond_expr, then_expr, else_expr = tail
    if as_boolean(evaluate_fn(cond_expr, env)):
        return evaluate_fn(then_expr, env)
    return evaluate_fn(else_expr, env)
