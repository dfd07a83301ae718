"""
Data model for the Heracles Hydra client.

Usage:
    from heracles.models import GraphNode, NodeKind, classify
    from heracles.models import WebResource, ApiDocumentation
"""

from .graph_node import GraphNode, NodeKind, classify, is_hypermedia_iri
from .resource import ApiDocumentation, WebResource

__all__ = [
    "GraphNode",
    "NodeKind",
    "classify",
    "is_hypermedia_iri",
    "WebResource",
    "ApiDocumentation",
]
