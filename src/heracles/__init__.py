"""
Heracles, a generic client for Hydra-powered Web APIs.

Usage:
    from heracles import HydraClient, ClientConfig

    client = HydraClient(ClientConfig(remove_hypermedia_from_payload=True))
    api_documentation = client.get_api_documentation("http://example.com/")
    entry_point = api_documentation.get_entry_point()
    for control in entry_point.hypermedia:
        print(control.get("iri"), control.get("isA"))
"""

from .client import HydraClient
from .config import ClientConfig
from .constants import HYDRA, MediaTypes
from .enrichment import ResourceEnrichmentProvider
from .exceptions import (
    GraphNormalizationError,
    HydraClientError,
    MissingAddressError,
    MissingDiscoveryMetadataError,
    MissingEntryPointError,
    NoHandlerRegisteredError,
    TransportError,
    UnsupportedRepresentationError,
    UpstreamStatusError,
)
from .hypermedia import (
    HandlerRegistry,
    HypermediaHandler,
    EnrichmentHook,
    JsonLdHypermediaHandler,
    TurtleHypermediaHandler,
    create_default_registry,
    separate_hypermedia,
)
from .models import ApiDocumentation, GraphNode, NodeKind, WebResource, classify

__version__ = "0.1.0"

__all__ = [
    "HydraClient",
    "ClientConfig",
    "HYDRA",
    "MediaTypes",
    "ResourceEnrichmentProvider",
    "HydraClientError",
    "MissingAddressError",
    "UpstreamStatusError",
    "MissingDiscoveryMetadataError",
    "UnsupportedRepresentationError",
    "MissingEntryPointError",
    "NoHandlerRegisteredError",
    "TransportError",
    "GraphNormalizationError",
    "HandlerRegistry",
    "HypermediaHandler",
    "EnrichmentHook",
    "JsonLdHypermediaHandler",
    "TurtleHypermediaHandler",
    "create_default_registry",
    "separate_hypermedia",
    "ApiDocumentation",
    "GraphNode",
    "NodeKind",
    "WebResource",
    "classify",
]
