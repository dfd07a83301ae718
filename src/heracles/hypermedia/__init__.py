"""
Hypermedia processing for the Heracles Hydra client.

Usage:
    from heracles.hypermedia import separate_hypermedia, create_default_registry
    from heracles.hypermedia import JsonLdHypermediaHandler, HandlerRegistry
"""

from .jsonld_handler import JsonLdHypermediaHandler
from .normalization import HYDRA_CONTEXT, GraphNormalizer
from .protocols import (
    EnrichmentHook,
    HypermediaHandler,
    is_enrichment_hook,
    is_hypermedia_handler,
)
from .registry import HandlerRegistry, create_default_registry
from .separation import (
    BlankNodeIdGenerator,
    HypermediaSeparator,
    remove_reference_stubs,
    separate_hypermedia,
)
from .turtle_handler import TurtleHypermediaHandler

__all__ = [
    "HYDRA_CONTEXT",
    "GraphNormalizer",
    "BlankNodeIdGenerator",
    "HypermediaSeparator",
    "remove_reference_stubs",
    "separate_hypermedia",
    "HypermediaHandler",
    "EnrichmentHook",
    "is_hypermedia_handler",
    "is_enrichment_hook",
    "HandlerRegistry",
    "create_default_registry",
    "JsonLdHypermediaHandler",
    "TurtleHypermediaHandler",
]
