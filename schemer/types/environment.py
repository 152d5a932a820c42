"""Runtime environment for Schemer.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Exactly one environment per session (the
global one) has no `outer`; every closure call creates a child of the
closure's defining environment.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from schemer import LispValue
from schemer.errors import SchemerArityError, SchemerTypeError, SchemerUnboundVariable
from schemer.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, shadowing any outer binding.

        Raises SchemerTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise SchemerTypeError(f"Cannot define {name!r}: not a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises SchemerUnboundVariable if the symbol is not found.
        """
        env = self.find(name)
        if env is None:
            raise SchemerUnboundVariable(f"Cannot set unbound symbol {name}")
        env.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises SchemerUnboundVariable once the global frame has been searched.
        """
        env = self.find(name)
        if env is None:
            raise SchemerUnboundVariable(f"Cannot lookup unbound symbol {name}")
        return env.vars[name]

    def child(self, params: list[Symbol], args: Iterable[LispValue]) -> Environment:
        """Create a frame whose parent is this one, binding params to args by position."""
        args = list(args)
        if len(params) != len(args):
            raise SchemerArityError(
                f"Expected {len(params)} argument(s), got {len(args)}"
            )
        env = Environment(outer=self)
        for param, arg in zip(params, args):
            env.define(param, arg)
        return env

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation, innermost frame first."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                with StringIO() as frame:
                    env._write_vars(frame)
                    chain.append(frame.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
