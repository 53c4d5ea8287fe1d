"""Core evaluator for the Eden interpreter.

Classifies an expression once and dispatches: atoms are self-evaluating,
symbols are looked up, quoted data is returned as is, and lists are either a
special form (by head symbol) or a function application. There is no
trampoline: each closure call recurses on the host stack.
"""

from __future__ import annotations

from eden import SExpression, LispValue
from eden.errors import EdenUnboundSymbol, EdenUnrecognizedForm
from eden.evaluation.apply import apply
from eden.evaluation.signals import FormMismatch
from eden.evaluation.special_forms import SPECIAL_FORMS
from eden.types.environment import Environment
from eden.types.printer import to_lisp_string
from eden.types.symbol import Symbol
from eden.types.values import Quoted


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env`, raising an EdenRuntimeError subclass on failure."""
    match expr:
        case Symbol():
            value = env.get(expr)
            if value is None:
                raise EdenUnboundSymbol(expr)
            return value
        case Quoted():
            return expr.value
        case list():
            return evaluate_list(expr, env)

    # --- Atoms (numbers, strings, booleans, dotted lists, procedures) return as-is ---
    return expr


def evaluate_list(expr: list[SExpression], env: Environment) -> LispValue:
    if not expr:
        raise EdenUnrecognizedForm("Cannot evaluate the empty list ()")

    head, *tail_args = expr

    # --- Special forms handling ---
    if isinstance(head, Symbol):
        form = SPECIAL_FORMS.get(head)
        if form is not None:
            try:
                return form(tail_args, env, evaluate)
            except FormMismatch as mismatch:
                raise EdenUnrecognizedForm(
                    f"{mismatch}: {to_lisp_string(expr)}"
                ) from None

    # --- Function application: head first, then arguments left to right ---
    fn = evaluate(head, env)
    args = [evaluate(arg, env) for arg in tail_args]
    return apply(fn, args, env, evaluate)
