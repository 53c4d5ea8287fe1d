"""Canonical text rendering of Eden values.

The output of to_lisp_string reads back as the same value for all data
(numbers, strings, booleans, symbols, lists, dotted lists, quoted data).
Procedures render as opaque tags.
"""

from __future__ import annotations

from eden import LispValue
from eden.types.closure import Closure
from eden.types.primitive import Primitive
from eden.types.symbol import Symbol
from eden.types.values import DottedList, Quoted

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def quote_text(text: str) -> str:
    return '"' + "".join(_ESCAPES.get(c, c) for c in text) + '"'


def to_lisp_string(value: LispValue) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case str():
            return quote_text(value)
        case Symbol():
            return str(value)
        case list():
            return "(" + " ".join(to_lisp_string(v) for v in value) + ")"
        case DottedList(head, tail):
            items = " ".join(to_lisp_string(v) for v in head)
            return f"({items} . {to_lisp_string(tail)})"
        case Quoted():
            return "'" + to_lisp_string(value.value)
        case Closure() | Primitive():
            return str(value)
    return repr(value)
