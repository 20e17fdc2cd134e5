import pytest

from orelang.evaluation.evaluator import Evaluator
from orelang.interpreter import Interpreter
from orelang.reader.parser import parse
from orelang.types.store import VariableStore

# Every test starts from an unconfigured environment: no iteration cap and the
# default log level, whatever the shell running pytest has exported.


@pytest.fixture(autouse=True)
def _clean_config_env(monkeypatch):
    monkeypatch.delenv("ORELANG_MAX_ITERATIONS", raising=False)
    monkeypatch.delenv("ORELANG_LOG_LEVEL", raising=False)


@pytest.fixture
def store():
    return VariableStore()


@pytest.fixture
def evaluator(store):
    return Evaluator(store)


@pytest.fixture
def interp():
    return Interpreter(max_iterations=None)


@pytest.fixture
def node():
    """Parse JSON text into a Node, for terse test programs."""
    return parse
