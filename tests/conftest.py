import sys
from pathlib import Path

import pytest

FIXTURES = Path(__file__).resolve().parent / "fixtures"
sys.path.insert(0, str(FIXTURES))

import demo  # noqa: E402


@pytest.fixture(autouse=True)
def clear_calls():
    demo.CALLS.clear()
    yield
    demo.CALLS.clear()
