import pytest

from lispy.types.environment import Environment
from lispy.builtin.env_builtin import register
from lispy.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Fresh interpreter; definitions persist only within one test."""
    return Interpreter()
