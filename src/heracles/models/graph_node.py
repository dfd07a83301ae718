"""
Graph node model and hypermedia classification.

A ``GraphNode`` is a read-only view over an expanded JSON-LD node object.
Classification is a pure function of that view: it decides whether a node
is a hypermedia control (navigation or affordance metadata described with
the Hydra vocabulary) or application data.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterator, List, Optional

from ..constants import HYDRA, HYDRA_NAMESPACE


class NodeKind(Enum):
    """Classification of a graph node."""

    ENTRY_POINT = "EntryPoint"
    COLLECTION = "Collection"
    OPERATION = "Operation"
    API_DOCUMENTATION = "ApiDocumentation"
    HYPERMEDIA = "Hypermedia"
    LINK = "Link"
    DOMAIN = "Domain"

    @property
    def is_control(self) -> bool:
        """True for nodes that are moved into the hypermedia set as a whole."""
        return self in _CONTROL_KINDS


_CONTROL_KINDS = frozenset({
    NodeKind.COLLECTION,
    NodeKind.OPERATION,
    NodeKind.API_DOCUMENTATION,
    NodeKind.HYPERMEDIA,
})

# Checked in order; the first type found wins.
_CONTROL_TYPES = (
    (str(HYDRA.Collection), NodeKind.COLLECTION),
    (str(HYDRA.Operation), NodeKind.OPERATION),
    (str(HYDRA.ApiDocumentation), NodeKind.API_DOCUMENTATION),
)


def is_hypermedia_iri(iri: str) -> bool:
    """Check whether an IRI belongs to the Hydra vocabulary."""
    return isinstance(iri, str) and iri.startswith(HYDRA_NAMESPACE)


@dataclass(frozen=True)
class GraphNode:
    """
    Identity, type set and properties of one linked-data node.

    Attributes:
        iri: Node identifier, or None for an anonymous node.
        types: Expanded type IRIs.
        properties: Non-keyword entries of the node object.
        graph: Nested ``@graph`` block when the node names a graph.
    """

    iri: Optional[str] = None
    types: FrozenSet[str] = frozenset()
    properties: Dict[str, Any] = field(default_factory=dict)
    graph: Optional[List[Any]] = None

    @classmethod
    def from_jsonld(cls, obj: Dict[str, Any]) -> 'GraphNode':
        """Create a GraphNode from an expanded JSON-LD node object."""
        types = obj.get("@type", [])
        if isinstance(types, str):
            types = [types]
        graph = obj.get("@graph")
        if graph is not None and not isinstance(graph, list):
            graph = [graph]
        return cls(
            iri=obj.get("@id"),
            types=frozenset(types),
            properties={key: value for key, value in obj.items() if not key.startswith("@")},
            graph=graph,
        )

    @property
    def is_anonymous(self) -> bool:
        return not self.iri or self.iri.startswith("_:")

    @property
    def is_graph_container(self) -> bool:
        return self.graph is not None

    def hypermedia_properties(self) -> Iterator[str]:
        """Yield property IRIs that fall inside the Hydra namespace."""
        for name in self.properties:
            if is_hypermedia_iri(name):
                yield name


def classify(node: GraphNode) -> NodeKind:
    """
    Classify a node as a hypermedia control or as data.

    An EntryPoint is data even when typed only with Hydra terms; its
    hypermedia properties are extracted but the node stays in the payload.
    """
    if not node.types:
        return NodeKind.LINK

    if str(HYDRA.EntryPoint) in node.types:
        return NodeKind.ENTRY_POINT

    if not all(is_hypermedia_iri(type_) for type_ in node.types):
        return NodeKind.DOMAIN

    for type_iri, kind in _CONTROL_TYPES:
        if type_iri in node.types:
            return kind

    return NodeKind.HYPERMEDIA
