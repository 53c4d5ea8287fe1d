"""Application engine for Eden.

This module centralizes function application semantics for the interpreter:
- Closures bind their arguments in a new frame whose parent is the frame the
  closure was defined in (lexical scope), then evaluate the body in order.
- Primitives receive the evaluated arguments and the caller's environment.

Keeping this logic in one place keeps the evaluator and the `apply` primitive
consistent.
"""

from __future__ import annotations

from eden import LispValue, EvaluatorFn
from eden.errors import EdenNotCallable
from eden.types.closure import Closure
from eden.types.environment import Environment
from eden.types.primitive import Primitive
from eden.types.printer import to_lisp_string


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Closure to already-evaluated arguments.

    Arity is checked while binding (EdenArityError). Body forms run in the new
    frame one after another; the first error aborts the rest, and the value of
    the last form is the result.
    """
    call_env = fn.extend_env(args)
    result: LispValue = None
    for form in fn.body:
        result = evaluate_fn(form, call_env)
    return result


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Closure or a Primitive.

    - For Closure, defer to apply_closure.
    - For Primitive, invoke with the caller's env and the list of args.
    - Otherwise, raise EdenNotCallable.
    """
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    if isinstance(head, Primitive):
        return head(env, args)
    raise EdenNotCallable(f"Not a procedure: {to_lisp_string(head)}")
