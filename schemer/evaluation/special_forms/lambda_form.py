from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.evaluation.special_forms.malformed import malformed
from schemer.types.environment import Environment
from schemer.types.procedure import Closure
from schemer.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    # (lambda (params...) body): a single body expression, evaluated per call
    if len(tail) != 2:
        raise malformed("lambda", "lambda requires a parameter list and one body expression")

    params, body = tail
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise malformed("lambda", f"lambda parameters must be a list of symbols, got {params!r}")

    return Closure(list(params), body, env)
