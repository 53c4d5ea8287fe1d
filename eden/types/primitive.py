from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from eden import LispValue

if TYPE_CHECKING:
    from eden.types.environment import Environment

PrimitiveFn = Callable[["Environment", list[LispValue]], LispValue]


class Primitive:
    """A native procedure: called with the caller's environment and evaluated arguments."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __str__(self) -> str:
        return f"#<primitive {self.name}>"

    def __repr__(self) -> str:
        return str(self)
