from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.evaluation.special_forms.malformed import malformed
from schemer.types.symbol import Symbol
from schemer.types.unspecified import Unspecified
from schemer.types.environment import Environment


def set_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 2:
        raise malformed("set!", "set! requires exactly 2 arguments: (set! var exp)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise malformed("set!", f"set! first argument must be a symbol, got {var_sym!r}")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)
    return Unspecified
