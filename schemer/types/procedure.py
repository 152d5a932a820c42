"""Procedure values: native builtins and user-defined closures."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Callable, Optional

from schemer import SExpression, LispValue
from schemer.errors import SchemerArityError
from schemer.types.environment import Environment
from schemer.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Builtin:
    """A native procedure with a declared arity (None means variadic)."""

    __slots__ = ("name", "fn", "arity")

    def __init__(self, name: str, fn: Callable[..., LispValue], arity: Optional[int]):
        self.name = name
        self.fn = fn
        self.arity = arity

    def __call__(self, args: list[LispValue]) -> LispValue:
        if self.arity is not None and len(args) != self.arity:
            raise SchemerArityError(
                f"{self.name} expects {self.arity} argument(s), got {len(args)}"
            )
        return self.fn(*args)

    def __repr__(self) -> str:
        return f"#<builtin {self.name}>"


class Closure:
    """A first-class lambda with formal parameters, body, and defining env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        # Captured by reference: later set! on the defining env is visible here
        self.env: Environment = env
        logger.debug(
            "Closure created: params=(%s) def_env_id=%s",
            " ".join(str(f) for f in formals),
            id(env),
        )

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind argument values to the formals in a fresh child of the defining env."""
        return self.env.child(self.formals, args)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<closure (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)


def is_procedure(value: LispValue) -> bool:
    return isinstance(value, (Builtin, Closure))
