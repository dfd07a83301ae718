"""
Hypermedia/data separation engine.

Walks a flattened JSON-LD graph, partitions its nodes into hypermedia
controls and domain data, and optionally strips Hydra vocabulary from the
domain payload.

Components:
- BlankNodeIdGenerator: run-scoped identifiers for anonymous controls
- HypermediaSeparator: single recursive pass collecting controls
- remove_reference_stubs: post-framing cleanup
- separate_hypermedia: flatten -> collect -> reframe -> cleanup
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from ..constants import ClientDefaults
from ..models.graph_node import GraphNode, classify
from .normalization import GraphNormalizer

logger = logging.getLogger(__name__)


class BlankNodeIdGenerator:
    """Monotonic identifier source scoped to one separation run."""

    def __init__(self, prefix: str = ClientDefaults.BLANK_NODE_PREFIX):
        self.prefix = prefix
        self._counter = 0

    def __call__(self) -> str:
        self._counter += 1
        return f"{self.prefix}{self._counter}"


def _is_node_object(value: Any) -> bool:
    return isinstance(value, dict) and "@value" not in value and "@list" not in value


def _is_reference(value: Any) -> bool:
    return isinstance(value, dict) and len(value) == 1 and "@id" in value


def _merge_values(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    """
    Copy entries of ``source`` into ``target``, unioning list values.

    Merged values are written as new lists; value lists already held by
    ``target`` are never appended to. Node references are deduplicated
    by ``@id``.
    """
    for key, value in source.items():
        if key not in target:
            target[key] = value
            continue
        if key == "@id" or target[key] is value:
            continue

        merged = list(target[key]) if isinstance(target[key], list) else [target[key]]
        referenced = {item["@id"] for item in merged if _is_reference(item)}
        for item in value if isinstance(value, list) else [value]:
            if _is_reference(item):
                if item["@id"] in referenced:
                    continue
                referenced.add(item["@id"])
            elif item in merged:
                continue
            merged.append(item)
        target[key] = merged


class HypermediaSeparator:
    """
    Collects hypermedia controls from a flattened graph.

    Controls are kept in an ordered list and indexed by identity, including
    the identities synthesized for anonymous nodes, so that a node showing
    up again is merged into its first entry instead of duplicated.

    Args:
        strip_from_payload: Remove controls and Hydra properties from the
            graph while collecting.
        id_generator: Source of identifiers for anonymous nodes. A fresh
            generator is created when omitted.
    """

    def __init__(self, strip_from_payload: bool = False, id_generator: Optional[BlankNodeIdGenerator] = None):
        self.strip_from_payload = strip_from_payload
        self._generate_id = id_generator or BlankNodeIdGenerator()
        self._controls: List[Dict[str, Any]] = []
        self._index: Dict[str, Dict[str, Any]] = {}

    @property
    def controls(self) -> List[Dict[str, Any]]:
        return self._controls

    def collect(self, graph: Any) -> List[Dict[str, Any]]:
        """Walk ``graph`` and return the hypermedia controls found."""
        self._visit(graph)
        logger.debug(f"Collected {len(self._controls)} hypermedia controls")
        return self._controls

    def _visit(self, value: Any) -> None:
        if isinstance(value, list):
            self._visit_list(value)
        elif isinstance(value, dict) and "@list" in value:
            self._visit_list(value["@list"])
        elif _is_node_object(value):
            node = GraphNode.from_jsonld(value)
            if classify(node).is_control and not node.is_graph_container:
                self._register_control(value)
            else:
                self._visit_resource(value, node)

    def _visit_list(self, items: List[Any]) -> None:
        detached = []
        for item in items:
            if not _is_node_object(item):
                self._visit(item)
                continue

            node = GraphNode.from_jsonld(item)
            if node.is_graph_container or not classify(node).is_control:
                self._visit_resource(item, node)
                continue

            self._register_control(item)
            if self.strip_from_payload:
                detached.append(id(item))

        if detached:
            items[:] = [item for item in items if id(item) not in detached]

    def _register_control(self, resource: Dict[str, Any]) -> None:
        identity = resource.get("@id") or self._generate_id()
        existing = self._index.get(identity)
        if existing is not None:
            logger.debug(f"Merging control {identity} into its earlier occurrence")
            _merge_values(existing, resource)
            return

        # a graph left in place is never written to
        if not self.strip_from_payload:
            resource = dict(resource)
        self._index[identity] = resource
        self._controls.append(resource)

    def _control_for(self, node: GraphNode) -> Dict[str, Any]:
        if node.iri:
            control = self._index.get(node.iri)
            if control is None:
                control = {"@id": node.iri}
                self._index[node.iri] = control
                self._controls.append(control)
            else:
                control["@id"] = node.iri
            return control

        control = {}
        self._index[self._generate_id()] = control
        self._controls.append(control)
        return control

    def _visit_resource(self, resource: Dict[str, Any], node: GraphNode) -> None:
        """Extract Hydra properties of a data node and look for embedded controls."""
        control = None
        hypermedia_properties = set(node.hypermedia_properties())
        for name in list(resource):
            if name.startswith("@"):
                continue
            if name not in hypermedia_properties:
                self._visit(resource[name])
                continue

            if control is None:
                control = self._control_for(node)
            _merge_values(control, {name: resource[name]})
            if self.strip_from_payload:
                del resource[name]

        if node.graph is not None:
            self._visit(resource["@graph"])


def remove_reference_stubs(nodes: List[Dict[str, Any]], id_key: str = "iri") -> List[Dict[str, Any]]:
    """
    Drop framing artifacts from framed hypermedia.

    Identity-only nodes and empty nodes are removed; nodes sharing an
    identity are reconciled into the first occurrence.
    """
    result: List[Dict[str, Any]] = []
    seen: Dict[str, Dict[str, Any]] = {}
    for node in nodes:
        if not node or (len(node) == 1 and id_key in node):
            continue

        identity = node.get(id_key)
        if identity is not None and identity in seen:
            if seen[identity] is not node:
                _merge_values(seen[identity], node)
            continue

        if identity is not None:
            seen[identity] = node
        result.append(node)

    return result


def separate_hypermedia(
    payload: Any,
    strip_from_payload: bool = False,
    normalizer: Optional[GraphNormalizer] = None,
    base: Optional[str] = None,
) -> Tuple[Any, List[Dict[str, Any]]]:
    """
    Separate hypermedia controls from a JSON-LD payload.

    Args:
        payload: JSON-LD document as parsed from the response body.
        strip_from_payload: Remove hypermedia from the returned data.
        normalizer: Graph normalizer; a PyLD backed one is used when omitted.
        base: Base IRI for resolving relative identifiers.

    Returns:
        Tuple of (data, hypermedia). In non-strip mode ``data`` is
        ``payload`` itself.
    """
    normalizer = normalizer or GraphNormalizer()
    if not strip_from_payload:
        return payload, normalizer.reframe(payload, base)

    data = normalizer.flatten(payload, base)
    controls = HypermediaSeparator(strip_from_payload=True).collect(data)
    hypermedia = remove_reference_stubs(normalizer.reframe(controls, base))
    logger.debug(f"Separated {len(hypermedia)} hypermedia controls from payload")
    return data, hypermedia
