import pytest

from fez.builtin.env_builtin import make_global_environment
from fez.interpreter import Interpreter


@pytest.fixture
def env():
    """A fresh global environment with the default primitives and two placeholders."""
    return make_global_environment(placeholders=("foo", "bar"))


@pytest.fixture
def interp(env):
    return Interpreter(env)
