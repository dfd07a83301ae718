"""
Pytest configuration and fixtures for the test suite.

Defines markers for selective test execution:
    pytest -m unit          # Fast unit tests
    pytest -m integration   # Client tests with mocked HTTP

Fixtures are centralized in tests/fixtures/ for reuse across all test modules.
"""

import copy
import json
import os
import sys

import pytest

# Add src to path for imports
src_dir = os.path.join(os.path.dirname(__file__), '..', 'src')
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

# Add tests directory to path for fixtures import
tests_dir = os.path.dirname(__file__)
if tests_dir not in sys.path:
    # Ensure src directory stays ahead of tests for module resolution
    sys.path.insert(1, tests_dir)

from heracles.logging_config import reset_logging

from fixtures import (
    EVENTS_JSONLD,
    API_DOCUMENTATION_JSONLD,
    ENTRY_POINT_JSONLD,
    EVENTS_TTL,
    SAMPLE_CLIENT_CONFIG,
)


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Remove handlers installed by setup_logging after each test."""
    yield
    reset_logging()


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: Client tests with mocked HTTP")


@pytest.fixture
def events_jsonld():
    """Named graph with a collection of one untyped event."""
    return copy.deepcopy(EVENTS_JSONLD)


@pytest.fixture
def api_documentation_jsonld():
    """API documentation pointing at http://temp.uri/api."""
    return copy.deepcopy(API_DOCUMENTATION_JSONLD)


@pytest.fixture
def entry_point_jsonld():
    """Entry point exposing a collection and an operation."""
    return copy.deepcopy(ENTRY_POINT_JSONLD)


@pytest.fixture
def events_ttl():
    """Turtle rendition of an events collection."""
    return EVENTS_TTL


@pytest.fixture
def sample_client_config():
    return copy.deepcopy(SAMPLE_CLIENT_CONFIG)


@pytest.fixture
def temp_config_file(tmp_path, sample_client_config):
    """Write the sample configuration to a temporary file."""
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps(sample_client_config), encoding="utf-8")
    return str(config_path)
