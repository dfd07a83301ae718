"""
Protocol definitions for pluggable client components.

Using protocols allows for duck typing while still providing type hints
and documentation.

Protocols:
    HypermediaHandler: Separate a response into data and hypermedia
    EnrichmentHook: Post-process a separated resource
"""

from typing import Any, Protocol, Sequence, runtime_checkable

from ..models.resource import WebResource


__all__ = [
    "HypermediaHandler",
    "EnrichmentHook",
    "is_hypermedia_handler",
    "is_enrichment_hook",
]


@runtime_checkable
class HypermediaHandler(Protocol):
    """
    Protocol for hypermedia processors.

    A handler declares the media types it understands and turns a raw HTTP
    response of one of those types into a ``WebResource``.

    Example implementation:
        class JsonHandler:
            supported_media_types = ["application/json"]

            def process(self, response, strip_from_payload=False) -> WebResource:
                return WebResource(data=response.json(), iri=response.url)
    """

    supported_media_types: Sequence[str]

    def process(self, response: Any, strip_from_payload: bool = False) -> WebResource:
        """
        Separate hypermedia controls from the response payload.

        Args:
            response: HTTP response (``requests.Response`` compatible).
            strip_from_payload: Remove hypermedia from the returned data.

        Returns:
            The separated resource.
        """
        ...


@runtime_checkable
class EnrichmentHook(Protocol):
    """Protocol for components post-processing resources after separation."""

    def enrich_hypermedia(self, resource: WebResource) -> WebResource:
        """Return the resource, possibly with additional hypermedia."""
        ...


# =============================================================================
# Type Checking Utilities
# =============================================================================

def is_hypermedia_handler(obj: Any) -> bool:
    """Check if object implements HypermediaHandler."""
    return isinstance(obj, HypermediaHandler)


def is_enrichment_hook(obj: Any) -> bool:
    """Check if object implements EnrichmentHook."""
    return isinstance(obj, EnrichmentHook)
