"""Closure representation for Eden."""

from __future__ import annotations

from eden import SExpression, LispValue
from eden.types.bind import bind_arguments
from eden.types.environment import Environment
from eden.types.symbol import Symbol


class Closure:
    """A user-defined procedure with parameters, body, and the env it was defined in."""

    __slots__ = ("params", "variadic", "body", "env", "name")

    def __init__(
        self,
        params: list[Symbol],
        body: list[SExpression],
        env: Environment,
        variadic: Symbol | None = None,
        name: str | None = None,
    ):
        self.params: list[Symbol] = params
        self.variadic: Symbol | None = variadic
        self.body: list[SExpression] = body
        self.env: Environment = env
        self.name: str | None = name

    def __str__(self) -> str:
        if self.name:
            return f"#<procedure {self.name}>"
        return "#<procedure>"

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this closure's parameters and
        return a new frame, child of the defining environment, for the body.
        """
        return bind_arguments(self.params, self.variadic, list(args), self.env, self.name)
