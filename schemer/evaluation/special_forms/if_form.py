from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.evaluation.special_forms.malformed import malformed
from schemer.types.environment import Environment


def is_truthy(value: LispValue) -> bool:
    # Only an explicit boolean false is falsy; 0, () and the unspecified value are true
    return value is not False


def if_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 3:
        raise malformed("if", "if requires exactly 3 arguments: (if test conseq alt)")

    test, conseq, alt = tail
    if is_truthy(evaluate_fn(test, env)):
        return evaluate_fn(conseq, env)
    return evaluate_fn(alt, env)
