from eden.types.symbol import Symbol
from eden.types.environment import Environment
from eden.types.closure import Closure
from eden.types.primitive import Primitive
from eden.types.values import (
    DottedList,
    Quoted,
    make_dotted,
    as_number,
    as_boolean,
    as_text,
    is_eqv,
)
from eden.types.printer import to_lisp_string

__all__ = [
    "Symbol",
    "Environment",
    "Closure",
    "Primitive",
    "DottedList",
    "Quoted",
    "make_dotted",
    "as_number",
    "as_boolean",
    "as_text",
    "is_eqv",
    "to_lisp_string",
]
