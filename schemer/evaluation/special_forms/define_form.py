from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.evaluation.special_forms.malformed import malformed
from schemer.types.symbol import Symbol
from schemer.types.unspecified import Unspecified
from schemer.types.environment import Environment


def define_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """
    (define var exp)
    Always binds in the local frame; an outer binding of the same name is shadowed.
    """
    if len(tail) != 2:
        raise malformed("define", "define requires exactly 2 arguments: (define var exp)")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise malformed("define", f"define first argument must be a symbol, got {name!r}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return Unspecified
