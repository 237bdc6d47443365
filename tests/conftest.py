import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hello_di.dependencies.dao import clear_hello_dao_override, set_hello_dao_override


class FakeHelloDao:
    """Duck-typed double: satisfies HelloDao without inheriting from it."""

    def __init__(self, greeting: str) -> None:
        self.greeting = greeting
        self.calls = 0

    def hello(self) -> str:
        self.calls += 1
        return self.greeting


@pytest.fixture()
def make_dao():
    return FakeHelloDao


@pytest.fixture()
def mock_dao():
    return FakeHelloDao("MockValue")


@pytest.fixture()
def dao_override(mock_dao):
    # Install the double for the test, always restore the empty slot afterwards
    token = set_hello_dao_override(mock_dao)
    yield mock_dao
    clear_hello_dao_override(token)
