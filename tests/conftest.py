"""Pytest configuration and shared fixtures for all tests."""

import os
import sys
from pathlib import Path

# Keep tests from writing log files or picking up a local .env rate
os.environ.setdefault("ORGREWARDS_LOG_FILE", "")
os.environ.setdefault("ORGREWARDS_MINING_RATE", "0.007")

# Make the project root importable without installing the package
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message), level="DEBUG")
    yield messages
    logger.remove(handler_id)
