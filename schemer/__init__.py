# Core type aliases for Schemer's data model.
# Plain Python types represent both code (forms) and runtime values:
# int, float, list and the interned Symbol. No Cons type is defined.
#
# Naming guidance:
# - SExpression: reader/parser code, denoting syntactic forms (code-as-data).
# - LispValue:  evaluator/runtime code, denoting evaluated values.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type passed into special forms
EvaluatorFn = Callable[..., LispValue]

# Public surface. Imported after the aliases above, which submodules rely on.
from schemer.errors import (  # noqa: E402
    SchemerError,
    SchemerSyntaxError,
    SchemerUnboundVariable,
    SchemerArityError,
    SchemerTypeError,
    SchemerZeroDivisionError,
)
from schemer.reader.parser import tokenize, parse  # noqa: E402
from schemer.evaluation.evaluator import evaluate  # noqa: E402
from schemer.builtin.env_builtin import new_global_environment  # noqa: E402
from schemer.printer import to_string  # noqa: E402
from schemer.interpreter import Interpreter  # noqa: E402

__all__ = [
    "LispValue",
    "SExpression",
    "EvaluatorFn",
    "SchemerError",
    "SchemerSyntaxError",
    "SchemerUnboundVariable",
    "SchemerArityError",
    "SchemerTypeError",
    "SchemerZeroDivisionError",
    "tokenize",
    "parse",
    "evaluate",
    "new_global_environment",
    "to_string",
    "Interpreter",
]
