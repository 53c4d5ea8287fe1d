"""Value model helpers for Eden.

Numbers, text, booleans and proper lists are plain Python ``int``, ``str``,
``bool`` and ``list``. Improper lists and quoted data get their own types
below. ``bool`` is a subclass of ``int`` in Python, so every numeric test here
excludes it explicitly.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from eden import LispValue
from eden.errors import EdenOverflowError, EdenTypeError
from eden.types.closure import Closure
from eden.types.primitive import Primitive

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class DottedList(NamedTuple):
    """An improper list ``(a b . c)``: a non-empty head and a non-list tail."""

    head: list[LispValue]
    tail: LispValue


class Quoted:
    """Reader output for ``'datum``; evaluates to the datum itself."""

    __slots__ = ("value",)

    def __init__(self, value: LispValue):
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Quoted) and is_eqv(self.value, other.value)

    def __hash__(self) -> int:
        return hash(("quote", repr(self.value)))

    def __repr__(self) -> str:
        return f"Quoted({self.value!r})"


def make_dotted(head: list[LispValue], tail: LispValue) -> LispValue:
    """Build ``(head... . tail)`` in normal form.

    A list tail splices into a proper list and a dotted tail merges its head,
    so a DottedList never ends in another list.
    """
    if not head:
        return tail
    if isinstance(tail, list):
        return list(head) + tail
    if isinstance(tail, DottedList):
        return DottedList(list(head) + tail.head, tail.tail)
    return DottedList(list(head), tail)


# -------------------------------
# Type predicates
# -------------------------------
def is_number(value: LispValue) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_boolean(value: LispValue) -> bool:
    return isinstance(value, bool)


def is_text(value: LispValue) -> bool:
    return isinstance(value, str)


def is_procedure(value: LispValue) -> bool:
    return isinstance(value, (Closure, Primitive))


def check_range(n: int) -> int:
    """Return n unchanged if it fits a signed 64-bit integer."""
    if n < INT_MIN or n > INT_MAX:
        raise EdenOverflowError(f"Integer overflow: {n} is outside the 64-bit range")
    return n


# -------------------------------
# Coercions
# -------------------------------
def as_number(value: LispValue) -> int:
    """Number as is, or Text holding a decimal integer."""
    if is_number(value):
        return value
    if is_text(value) and _INTEGER_RE.fullmatch(value):
        return check_range(int(value))
    raise EdenTypeError(f"Expected a number, got {_describe(value)}")


def as_boolean(value: LispValue) -> bool:
    """Boolean as is, Number as a nonzero test, or Text "true"/"false"."""
    if is_boolean(value):
        return value
    if is_number(value):
        return value != 0
    if is_text(value) and value in ("true", "false"):
        return value == "true"
    raise EdenTypeError(f"Expected a boolean, got {_describe(value)}")


def as_text(value: LispValue) -> str:
    """Text as is, or the decimal rendering of a Number."""
    if is_text(value):
        return value
    if is_number(value):
        return str(value)
    raise EdenTypeError(f"Expected a string, got {_describe(value)}")


def _describe(value: LispValue) -> str:
    # Imported here: the printer depends on this module
    from eden.types.printer import to_lisp_string
    return to_lisp_string(value)


# -------------------------------
# Equality
# -------------------------------
def is_eqv(a: LispValue, b: LispValue) -> bool:
    """Structural equality: same variant and same contents.

    Procedures are only equal to themselves.
    """
    if a is b:
        return True
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_eqv(x, y) for x, y in zip(a, b))
    if isinstance(a, DottedList) and isinstance(b, DottedList):
        return is_eqv(a.head, b.head) and is_eqv(a.tail, b.tail)
    if is_procedure(a) or is_procedure(b):
        return False
    if type(a) is not type(b):
        return False
    return a == b
