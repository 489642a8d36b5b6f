"""
Test fixtures for the traversal builder tests.

Provides:
- A fresh dispatch Configuration per test
- A send handler that records every call it receives
"""

import os
import sys
from typing import Any

import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from gremlin_dsl.core.config import Configuration  # noqa: E402


class RecordingHandler:
    """Send handler that remembers its calls and returns a fixed result."""

    def __init__(self, result: Any = "result"):
        self.result = result
        self.calls: list[tuple[Any, str]] = []

    def __call__(self, traversal: Any, query: str) -> Any:
        self.calls.append((traversal, query))
        return self.result


@pytest.fixture
def configuration() -> Configuration:
    """Isolated dispatch context with no default handler"""
    return Configuration()


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def default_configuration():
    """Process-wide default configuration, reset after the test"""
    from gremlin_dsl.core.config import configuration as default

    previous = default.get_send_handler()
    default.clear_send_handler()
    yield default
    if previous is None:
        default.clear_send_handler()
    else:
        default.set_send_handler(previous)
