"""
Centralized test fixtures for the Heracles test suite.

This package provides reusable fixtures for testing, including:
- Hydra JSON-LD and Turtle documents
- Configuration samples
- Mock HTTP responses

Usage:
    from fixtures import EVENTS_JSONLD, create_mock_response, route

Or use the pytest fixtures in conftest.py which import from here.
"""

from .hydra_fixtures import (
    HYDRA_NS,
    SCHEMA_NS,
    BASE_URL,
    API_DOCUMENTATION_URL,
    ENTRY_POINT_URL,
    EVENTS_URL,
    EVENT_URL,
    NAMED_GRAPH,
    EVENTS_JSONLD,
    EVENT_PROPERTIES,
    EVENTS_TTL,
    API_DOCUMENTATION_JSONLD,
    ENTRY_POINT_JSONLD,
)
from .config_fixtures import (
    SAMPLE_CLIENT_CONFIG,
    MINIMAL_CLIENT_CONFIG,
)
from .http_fixtures import (
    JSON_LD,
    create_mock_response,
    return_ok,
    return_not_found,
    route,
)
