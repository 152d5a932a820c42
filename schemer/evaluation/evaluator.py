"""Core tree-walking evaluator for the Schemer interpreter.

Dispatch order for a list form: special forms by head symbol, then the
single-element shorthand `(e)`, then ordinary procedure application with
every element (operator included) evaluated left to right.
"""

from __future__ import annotations

from schemer import SExpression, LispValue
from schemer.errors import SchemerSyntaxError
from schemer.types.environment import Environment
from schemer.types.procedure import is_procedure
from schemer.types.symbol import Symbol
from schemer.evaluation.apply import apply
from schemer.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env`; errors propagate to the caller unchanged."""
    match expr:
        case Symbol():
            return env.lookup(expr)

        case []:
            raise SchemerSyntaxError("Cannot evaluate empty list ()")

        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, evaluate)

        case [only]:
            # (12) => 12 and (x) => x, but (f) still calls a thunk
            value = evaluate(only, env)
            if is_procedure(value):
                return apply(value, [], evaluate)
            return value

        case [*items]:
            head, *args = [evaluate(item, env) for item in items]
            return apply(head, args, evaluate)

    # --- Atoms return as-is ---
    return expr
