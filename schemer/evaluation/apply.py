"""Application engine for Schemer.

Centralizes procedure application for the evaluator:
- Builtins check their declared arity, then call the native function.
- Closures bind arguments in a child of their defining environment and
  evaluate the body there. Each nested call recurses on the Python stack;
  there is no tail-call elimination.
"""

from schemer import LispValue, EvaluatorFn
from schemer.errors import SchemerTypeError
from schemer.types.procedure import Builtin, Closure


def apply_closure(
    fn: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn
) -> LispValue:
    """Apply a Closure; a count mismatch raises SchemerArityError."""
    new_env = fn.extend_env(args)
    return evaluate_fn(fn.body, new_env)


def apply(
    head: Builtin | Closure | object,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Closure or a Builtin; anything else is not applicable."""
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    elif isinstance(head, Builtin):
        return head(args)
    else:
        raise SchemerTypeError(f"Cannot apply non-procedure {head!r}")
