"""Shared pytest fixtures for strikepath tests."""

import sys
from pathlib import Path

import pytest
from loguru import logger

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# Import all fixtures for global availability
from tests.fixtures.chart_fixtures import *
from tests.fixtures.market_fixtures import *


@pytest.fixture
def log_messages():
    """
    Capture loguru output for the duration of a test.

    Returns:
        list[str]: Formatted messages, appended as they are logged

    Example:
        def test_warns(log_messages):
            do_something()
            assert any("warning text" in m for m in log_messages)
    """
    messages = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
