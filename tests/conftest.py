import pytest

from mal.interpreter import Interpreter, make_root_environment


@pytest.fixture
def env():
    """Fresh root environment with builtins and the prelude loaded."""
    return make_root_environment()


@pytest.fixture
def interp():
    return Interpreter()
