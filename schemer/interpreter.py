from __future__ import annotations

from schemer import LispValue
from schemer.reader.parser import parse
from schemer.evaluation.evaluator import evaluate
from schemer.printer import to_string
from schemer.types.environment import Environment
from schemer.types.unspecified import Unspecified
from schemer.builtin.env_builtin import new_global_environment


class Interpreter:
    """
    A session handle owning one global environment.
    Every call evaluates one top-level form against the same environment,
    so `define`/`set!` effects persist between calls. Separate instances
    never share bindings.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else new_global_environment()

    def eval(self, code: str) -> LispValue:
        """Parse and evaluate a single form."""
        return evaluate(parse(code), self.env)

    def run(self, code: str) -> str | None:
        """Evaluate a single form and return its printed text, or None if unspecified."""
        result = self.eval(code)
        if result is Unspecified:
            return None
        return to_string(result)
