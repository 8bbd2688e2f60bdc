"""
conftest.py
-----------
Shared pytest configuration and fixtures for ijs-logger tests.

Contains:
- Runtime isolation (every test starts from a fresh logger runtime)
- Recording sinks wired into rich and plain runtimes
- Frame helpers for caller attribution tests
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from ijs_logger.core.runtime.logger_runtime import configure, reset_runtime
from ijs_logger.core.runtime.logger_settings import LoggerSettings
from ijs_logger.logger.caller_filter import StackFrame
from ijs_logger.sinks.recording_sink import RecordingSink


# ===========================================================
# Runtime Fixtures
# ===========================================================

@pytest.fixture(autouse=True)
def fresh_runtime():
    """Drop the runtime singleton before and after each test."""
    reset_runtime()
    yield
    reset_runtime()


@pytest.fixture
def recording_sink():
    return RecordingSink()


@pytest.fixture
def rich_runtime(recording_sink):
    """Runtime in rich mode writing to a RecordingSink."""
    return configure(LoggerSettings(rich_mode=True), recording_sink)


@pytest.fixture
def plain_runtime(recording_sink):
    """Runtime in plain + attribution mode writing to a RecordingSink."""
    return configure(LoggerSettings(rich_mode=False), recording_sink)


# ===========================================================
# Test Utilities
# ===========================================================

@pytest.fixture
def make_frames():
    """Build StackFrames from (type, method) tuples, innermost first."""
    def _make(*pairs):
        return [StackFrame(type_name, method_name) for type_name, method_name in pairs]
    return _make


# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Mark everything outside integration tests as unit tests."""
    for item in items:
        if "integration" not in item.nodeid:
            item.add_marker(pytest.mark.unit)
