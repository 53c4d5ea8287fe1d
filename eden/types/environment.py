"""Runtime environment for Eden.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. A frame is created for the root and for
every closure call; closures keep a reference to the frame they were defined in,
so several closures and active calls may share one ancestor frame.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from eden import LispValue
from eden.errors import EdenInvalidSymbol, EdenUnboundSymbol, EdenUnboundAssignment
from eden.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer", "__weakref__")

    def __init__(self, outer: Optional[Environment] = None):
        # Runtime environment stores evaluated LispValue(s)
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def child(self) -> Environment:
        """Return a new empty frame whose parent is this one."""
        return Environment(outer=self)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def define(self, name: Symbol, value: LispValue) -> LispValue:
        """Bind `name` to `value` in this frame, shadowing any outer binding.

        Raises EdenInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise EdenInvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = value
        return value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> LispValue:
        """Update the innermost existing binding for `name`.

        Raises EdenUnboundAssignment if no frame in the chain binds the symbol.
        """
        env = self.find(name)
        if env is None:
            raise EdenUnboundAssignment(name)
        env.vars[name] = value
        return value

    def get(self, name: Symbol) -> LispValue | None:
        """Return the innermost binding for `name`, or None if it is unbound."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises EdenUnboundSymbol if not found.
        """
        env = self.find(name)
        if env is None:
            raise EdenUnboundSymbol(name)
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame_buf:
                env._write_vars(frame_buf)
                chain.append(frame_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
