"""
Centralized constants for the Heracles Hydra client.

This module provides a single source of truth for vocabulary IRIs, media
types, error literals and default values used throughout the package.
"""

from typing import Final

from rdflib import Namespace

# ============================================================================
# Vocabulary
# ============================================================================

HYDRA: Final[Namespace] = Namespace("http://www.w3.org/ns/hydra/core#")
"""Hydra Core vocabulary namespace."""

HYDRA_NAMESPACE: Final[str] = str(HYDRA)


# ============================================================================
# Media Types
# ============================================================================

class MediaTypes:
    """Media types understood by the built-in hypermedia handlers."""

    JSON_LD: Final[str] = "application/ld+json"
    TURTLE: Final[str] = "text/turtle"


# ============================================================================
# Error Messages
# ============================================================================

class ErrorMessages:
    """Literals surfaced to callers by the error taxonomy."""

    NO_URL_PROVIDED: Final[str] = "There was no Url provided."
    API_DOCUMENTATION_NOT_PROVIDED: Final[str] = "API documentation not provided."
    NO_ENTRY_POINT_DEFINED: Final[str] = "API documentation has no entry point defined."
    NO_HYPERMEDIA_PROCESSOR: Final[str] = (
        "No hypermedia processor instance was provided for registration."
    )
    INVALID_RESPONSE: Final[str] = "Remote server responded with a status of "
    RESPONSE_FORMAT_NOT_SUPPORTED: Final[str] = "Response format is not supported."


# ============================================================================
# Client Defaults
# ============================================================================

class ClientDefaults:
    """Resource client configuration defaults."""

    TIMEOUT_SECONDS: Final[int] = 30
    """Default HTTP request timeout."""

    REMOVE_HYPERMEDIA_FROM_PAYLOAD: Final[bool] = False
    """Leave hypermedia controls in the payload unless asked otherwise."""

    BLANK_NODE_PREFIX: Final[str] = "_:bnode"
    """Prefix of identifiers synthesized for anonymous nodes."""


# ============================================================================
# Logging Configuration
# ============================================================================

class LoggingConfig:
    """Logging configuration."""

    DEFAULT_LOG_LEVEL: Final[str] = "INFO"
    """Default logging level."""

    LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    """Default log format string."""

    DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
    """Default date format for logs."""

    DEFAULT_FORMAT_STYLE: Final[str] = "text"
    """Human-readable formatter style."""

    JSON_DATE_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S.%fZ"
    """ISO-8601 timestamp format for structured logs."""

    SUPPORTED_FORMATS: Final[tuple[str, ...]] = ("text", "json")
    """Supported formatter styles."""

    MAX_LOG_FILE_MB: Final[int] = 10
    """Maximum log file size before rotation (MB)."""

    LOG_BACKUP_COUNT: Final[int] = 5
    """Number of backup log files to keep."""

    ROTATION_ENABLED: Final[bool] = True
    """Enable log rotation by default when a file handler is configured."""
