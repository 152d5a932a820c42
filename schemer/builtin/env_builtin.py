"""Built-in procedures for the Schemer global environment.

Each native function takes its operands positionally and is wrapped in a
Builtin descriptor declaring its arity; the descriptor rejects a wrong
argument count before the function runs.
"""
from __future__ import annotations

import logging
import operator
from typing import Callable

from schemer import LispValue
from schemer.types.environment import Environment
from schemer.types.procedure import Builtin
from schemer.types.symbol import Symbol
from schemer.types.unspecified import Unspecified
from schemer.errors import SchemerTypeError, SchemerZeroDivisionError

logger = logging.getLogger(__name__)


def is_number(x: LispValue) -> bool:
    # bool is an int subclass but never a number here
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _check_numbers(name: str, *args: LispValue) -> None:
    for a in args:
        if not is_number(a):
            raise SchemerTypeError(f"All arguments to {name} must be numbers, got {a!r}")


def _check_list(name: str, x: LispValue) -> list[LispValue]:
    if not isinstance(x, list):
        raise SchemerTypeError(f"{name} expects a list, got {x!r}")
    return x


# -------------------------------
# Arithmetic
# -------------------------------
def _arithmetic(name: str, op: Callable[[LispValue, LispValue], LispValue]):
    def fn(a: LispValue, b: LispValue) -> LispValue:
        _check_numbers(name, a, b)
        return op(a, b)

    return fn


def div(a: LispValue, b: LispValue) -> LispValue:
    """Floor division for two integers, true division otherwise."""
    _check_numbers("/", a, b)
    try:
        if isinstance(a, int) and isinstance(b, int):
            return a // b
        return a / b
    except ZeroDivisionError:
        raise SchemerZeroDivisionError("Division by zero")


# -------------------------------
# Comparison and logic
# -------------------------------
def _comparison(name: str, op: Callable[[LispValue, LispValue], bool]):
    def fn(a: LispValue, b: LispValue) -> bool:
        _check_numbers(name, a, b)
        return op(a, b)

    return fn


def num_equals(a: LispValue, b: LispValue) -> bool:
    return a == b


def logical_not(x: LispValue) -> bool:
    """Only an explicit false negates to true."""
    return x is False


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Deep equality for Lisp values, with element-wise comparison for lists."""
    if a is b:
        return True
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    # 1 and 1.0 are equal; booleans never equal numbers
    if is_number(a) and is_number(b):
        return a == b
    if type(a) != type(b):
        return False
    return a == b


def is_eq(a: LispValue, b: LispValue) -> bool:
    """Identity: the same underlying object."""
    return a is b


# -------------------------------
# Lists
# -------------------------------
def length(xs: LispValue) -> int:
    return len(_check_list("length", xs))


def cons(head: LispValue, tail: LispValue) -> list[LispValue]:
    """Return a new list [head] + tail; the tail is not mutated."""
    return [head] + _check_list("cons", tail)


def car(xs: LispValue) -> LispValue:
    xs = _check_list("car", xs)
    if not xs:
        raise SchemerTypeError("car of empty list")
    return xs[0]


def cdr(xs: LispValue) -> list[LispValue]:
    xs = _check_list("cdr", xs)
    if not xs:
        raise SchemerTypeError("cdr of empty list")
    return xs[1:]


def append(xs: LispValue, ys: LispValue) -> list[LispValue]:
    return _check_list("append", xs) + _check_list("append", ys)


def list_builtin(*args: LispValue) -> list[LispValue]:
    """Construct a list from the provided arguments."""
    return list(args)


# -------------------------------
# Predicates
# -------------------------------
def is_list(x: LispValue) -> bool:
    return isinstance(x, list)


def is_null(x: LispValue) -> bool:
    """True for the empty list and the unspecified value."""
    return x is Unspecified or x == []


def is_symbol(x: LispValue) -> bool:
    return isinstance(x, Symbol)


BUILTINS: tuple[Builtin, ...] = (
    Builtin("+", _arithmetic("+", operator.add), 2),
    Builtin("-", _arithmetic("-", operator.sub), 2),
    Builtin("*", _arithmetic("*", operator.mul), 2),
    Builtin("/", div, 2),
    Builtin("not", logical_not, 1),
    Builtin(">", _comparison(">", operator.gt), 2),
    Builtin("<", _comparison("<", operator.lt), 2),
    Builtin(">=", _comparison(">=", operator.ge), 2),
    Builtin("<=", _comparison("<=", operator.le), 2),
    Builtin("=", num_equals, 2),
    Builtin("equal?", is_equal, 2),
    Builtin("eq?", is_eq, 2),
    Builtin("length", length, 1),
    Builtin("cons", cons, 2),
    Builtin("car", car, 1),
    Builtin("cdr", cdr, 1),
    Builtin("append", append, 2),
    Builtin("list", list_builtin, None),
    Builtin("list?", is_list, 1),
    Builtin("null?", is_null, 1),
    Builtin("symbol?", is_symbol, 1),
)


def register(env: Environment) -> None:
    """Register all builtin procedures into the given environment."""
    env.update({Symbol(b.name): b for b in BUILTINS})


def new_global_environment() -> Environment:
    """Create a parentless environment populated with the builtin library."""
    env = Environment()
    register(env)
    logger.debug("Global environment created with %d builtins", len(env.vars))
    return env
