import pytest

from schemer.builtin.env_builtin import new_global_environment
from schemer.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    return new_global_environment()


@pytest.fixture
def interp():
    """Fresh interpreter session; bindings persist across calls within a test."""
    return Interpreter()
