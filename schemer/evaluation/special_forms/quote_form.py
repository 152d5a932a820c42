from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.evaluation.special_forms.malformed import malformed
from schemer.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """(quote datum) returns datum unevaluated."""
    if len(tail) != 1:
        raise malformed("quote", "quote expects exactly 1 argument: (quote datum)")
    return tail[0]
