import pytest

from yascm.interpreter import Interpreter
from yascm.printer import to_string


@pytest.fixture
def interp():
    """Fresh interpreter with special forms and builtins loaded."""
    return Interpreter()


@pytest.fixture
def run(interp):
    """Evaluate source in `interp` and return the printed form of the last value."""
    def _run(source: str) -> str:
        return to_string(interp.eval(source))
    return _run
