"""Built-in functions for the Eden runtime environment.

This module defines arithmetic, comparison, boolean, list processing,
equality, application and loading primitives, and the registration utilities
that install them into a root environment.

Every primitive has the signature ``fn(env, args)`` where ``env`` is the
caller's environment and ``args`` the already-evaluated arguments.
"""
from __future__ import annotations

import logging
import operator
from typing import Callable

from eden import LispValue
from eden.errors import EdenArityError, EdenTypeError, EdenDivisionByZero
from eden.evaluation.apply import apply as apply_engine
from eden.evaluation.evaluator import evaluate
from eden.modules.loader import load_file
from eden.types.environment import Environment
from eden.types.primitive import Primitive, PrimitiveFn
from eden.types.printer import to_lisp_string
from eden.types.symbol import Symbol
from eden.types.values import (
    DottedList,
    as_boolean,
    as_number,
    as_text,
    check_range,
    is_eqv,
    is_procedure,
)

logger = logging.getLogger(__name__)


def _expect(name: str, args: list[LispValue], count: int) -> None:
    if len(args) != count:
        raise EdenArityError(
            f"{name} requires exactly {count} argument(s), got {len(args)}"
        )


def _numbers(name: str, args: list[LispValue]) -> tuple[int, int]:
    _expect(name, args, 2)
    return as_number(args[0]), as_number(args[1])


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> int:
    """(+ a b)"""
    a, b = _numbers("+", args)
    return check_range(a + b)


def sub(env: Environment, args: list[LispValue]) -> int:
    """(- a b)"""
    a, b = _numbers("-", args)
    return check_range(a - b)


def mul(env: Environment, args: list[LispValue]) -> int:
    """(* a b)"""
    a, b = _numbers("*", args)
    return check_range(a * b)


def _truncate_div(n: int, d: int) -> int:
    # Integer division rounding toward zero (Python's // floors).
    q = abs(n) // abs(d)
    return q if (n >= 0) == (d > 0) else -q


def _divisor(name: str, args: list[LispValue]) -> tuple[int, int]:
    n, d = _numbers(name, args)
    if d == 0:
        raise EdenDivisionByZero(f"{name}: division by zero")
    return n, d


def div(env: Environment, args: list[LispValue]) -> int:
    """(/ n d): integer quotient truncated toward zero."""
    n, d = _divisor("/", args)
    return check_range(_truncate_div(n, d))


def quotient(env: Environment, args: list[LispValue]) -> int:
    n, d = _divisor("quotient", args)
    return check_range(_truncate_div(n, d))


def mod(env: Environment, args: list[LispValue]) -> int:
    """(mod n d): remainder of truncated division; takes the sign of n."""
    n, d = _divisor("mod", args)
    return n - d * _truncate_div(n, d)


def remainder(env: Environment, args: list[LispValue]) -> int:
    n, d = _divisor("remainder", args)
    return n - d * _truncate_div(n, d)


# -------------------------------
# Comparison and boolean logic
# -------------------------------
def _comparison(
    name: str,
    coerce: Callable[[LispValue], LispValue],
    op: Callable[[LispValue, LispValue], bool],
) -> PrimitiveFn:
    def compare(env: Environment, args: list[LispValue]) -> bool:
        _expect(name, args, 2)
        return op(coerce(args[0]), coerce(args[1]))

    compare.__name__ = f"compare_{name}"
    compare.__doc__ = f"({name} a b)"
    return compare


def logical_and(env: Environment, args: list[LispValue]) -> bool:
    _expect("&&", args, 2)
    a, b = as_boolean(args[0]), as_boolean(args[1])
    return a and b


def logical_or(env: Environment, args: list[LispValue]) -> bool:
    _expect("||", args, 2)
    a, b = as_boolean(args[0]), as_boolean(args[1])
    return a or b


def logical_xor(env: Environment, args: list[LispValue]) -> bool:
    """(/= a b): #t when exactly one of the two booleans is true."""
    _expect("/=", args, 2)
    return as_boolean(args[0]) != as_boolean(args[1])


# -------------------------------
# List operations
# -------------------------------
def car(env: Environment, args: list[LispValue]) -> LispValue:
    """First element of a list, or first head element of a dotted list."""
    _expect("car", args, 1)
    value = args[0]
    if isinstance(value, list):
        if not value:
            raise EdenTypeError("car: cannot take the car of the empty list")
        return value[0]
    if isinstance(value, DottedList):
        return value.head[0]
    raise EdenTypeError(f"car: expected a list, got {to_lisp_string(value)}")


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    """Everything after the first element.

    For a dotted list with a single head element this is the bare tail, which
    need not be a list: (cdr '(1 . 2)) => 2.
    """
    _expect("cdr", args, 1)
    value = args[0]
    if isinstance(value, list):
        if not value:
            raise EdenTypeError("cdr: cannot take the cdr of the empty list")
        return value[1:]
    if isinstance(value, DottedList):
        if len(value.head) == 1:
            return value.tail
        return DottedList(value.head[1:], value.tail)
    raise EdenTypeError(f"cdr: expected a list, got {to_lisp_string(value)}")


def cons(env: Environment, args: list[LispValue]) -> LispValue:
    _expect("cons", args, 2)
    head, tail = args
    if isinstance(tail, list):
        return [head] + tail
    if isinstance(tail, DottedList):
        return DottedList([head] + tail.head, tail.tail)
    return DottedList([head], tail)


# -------------------------------
# Equality
# -------------------------------
def eqv(env: Environment, args: list[LispValue]) -> bool:
    """Structural equality of variant and contents."""
    _expect("eqv?", args, 2)
    return is_eqv(args[0], args[1])


def equal(env: Environment, args: list[LispValue]) -> bool:
    """Equality of canonical rendering; procedures only equal themselves."""
    _expect("equal?", args, 2)
    a, b = args
    if is_procedure(a) or is_procedure(b):
        return a is b
    return to_lisp_string(a) == to_lisp_string(b)


# -------------------------------
# Function application and loading
# -------------------------------
def apply(env: Environment, args: list[LispValue]) -> LispValue:
    """(apply fn args-list) calls fn with the elements of args-list."""
    _expect("apply", args, 2)
    fn, fn_args = args
    if not isinstance(fn_args, list):
        raise EdenTypeError(
            f"apply: arguments must be a list, got {to_lisp_string(fn_args)}"
        )
    return apply_engine(fn, list(fn_args), env, evaluate)


def load(env: Environment, args: list[LispValue]) -> LispValue:
    """(load "file") evaluates each form of the file in the caller's environment."""
    _expect("load", args, 1)
    return load_file(as_text(args[0]), env, evaluate)


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, PrimitiveFn] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "mod": mod,
    "quotient": quotient,
    "remainder": remainder,
    "=": _comparison("=", as_number, operator.eq),
    ">": _comparison(">", as_number, operator.gt),
    "<": _comparison("<", as_number, operator.lt),
    ">=": _comparison(">=", as_number, operator.ge),
    "<=": _comparison("<=", as_number, operator.le),
    "&&": logical_and,
    "||": logical_or,
    "/=": logical_xor,
    "string=?": _comparison("string=?", as_text, operator.eq),
    "string<?": _comparison("string<?", as_text, operator.lt),
    "string>?": _comparison("string>?", as_text, operator.gt),
    "string<=?": _comparison("string<=?", as_text, operator.le),
    "string>=?": _comparison("string>=?", as_text, operator.ge),
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "eqv?": eqv,
    "equal?": equal,
    "apply": apply,
    "load": load,
}


def register(env: Environment) -> None:
    env.update({Symbol(name): Primitive(name, fn) for name, fn in BUILTINS.items()})


def new_root_environment() -> Environment:
    """Build a fresh root environment holding every primitive.

    Each call returns an independent environment; nothing is shared between
    interpreters.
    """
    env = Environment()
    register(env)
    logger.debug("Built root environment with %d primitives", len(BUILTINS))
    return env
