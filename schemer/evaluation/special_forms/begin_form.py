from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.evaluation.special_forms.malformed import malformed
from schemer.types.environment import Environment


def begin_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if not tail:
        raise malformed("begin", "begin requires at least 1 expression")
    for e in tail[:-1]:
        evaluate_fn(e, env)
    return evaluate_fn(tail[-1], env)
