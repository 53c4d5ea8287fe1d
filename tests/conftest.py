import pytest

from eden.builtin import new_root_environment
from eden.evaluation import evaluate
from eden.reader import read_all


def eval_source(source, env):
    """Read and evaluate every form in source, returning the last result."""
    result = None
    for form in read_all(source):
        result = evaluate(form, env)
    return result


@pytest.fixture
def env():
    """Fresh root environment with primitives loaded."""
    return new_root_environment()


@pytest.fixture
def run(env):
    """Evaluate source text in the test's root environment."""
    def _run(source):
        return eval_source(source, env)
    return _run
