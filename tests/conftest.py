import pytest

from minischeme.interpreter import Interpreter, evaluate_source
from minischeme.types.environment import Environment


@pytest.fixture
def env():
    """Fresh global environment."""
    return Environment()


@pytest.fixture
def run(env):
    """Evaluate source text against the test's environment."""
    def _run(source):
        return evaluate_source(source, env)
    return _run


@pytest.fixture
def interp():
    return Interpreter()
