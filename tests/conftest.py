import pytest

from lispy.builtin.env_builtin import register
from lispy.evaluation.evaluator import evaluate
from lispy.reader.parser import parse
from lispy.reader.reader import read
from lispy.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def run(env):
    """Evaluate one line of source against the `env` fixture and return the Value."""
    def _run(source: str):
        return evaluate(env, read(parse(source)))
    return _run
