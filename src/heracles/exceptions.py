"""
Exceptions raised by the Heracles Hydra client.

Every failure is terminal for the call that raised it; the client never
retries and never falls back to another handler.
"""

from typing import Optional

from .constants import ErrorMessages


class HydraClientError(Exception):
    """Base class for all client errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingAddressError(HydraClientError):
    """Raised when neither a URL nor a resource with an IRI was given."""

    def __init__(self, message: str = ErrorMessages.NO_URL_PROVIDED):
        super().__init__(message)


class UpstreamStatusError(HydraClientError):
    """Raised when the remote server answers with anything but HTTP 200."""

    def __init__(self, status_code: int, url: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        super().__init__(f"{ErrorMessages.INVALID_RESPONSE}{status_code}")


class MissingDiscoveryMetadataError(HydraClientError):
    """Raised when the API documentation link cannot be discovered."""

    def __init__(self, message: str = ErrorMessages.API_DOCUMENTATION_NOT_PROVIDED):
        super().__init__(message)


class UnsupportedRepresentationError(HydraClientError):
    """Raised when no registered handler understands the response."""

    def __init__(self, message: str = ErrorMessages.RESPONSE_FORMAT_NOT_SUPPORTED,
                 content_type: Optional[str] = None):
        self.content_type = content_type
        super().__init__(message)


class MissingEntryPointError(HydraClientError):
    """Raised when the API documentation does not point to an entry point."""

    def __init__(self, message: str = ErrorMessages.NO_ENTRY_POINT_DEFINED):
        super().__init__(message)


class NoHandlerRegisteredError(HydraClientError):
    """Raised when an empty handler is given for registration."""

    def __init__(self, message: str = ErrorMessages.NO_HYPERMEDIA_PROCESSOR):
        super().__init__(message)


class TransportError(HydraClientError):
    """Exception for transport level failures (timeouts, refused connections)."""

    def __init__(self, status_code: int, error_code: str, message: str):
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(f"[{error_code}] {message} (HTTP {status_code})")
        self.message = message


class GraphNormalizationError(HydraClientError):
    """Raised when the linked-data document cannot be flattened or framed."""
