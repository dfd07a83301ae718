"""
Graph normalization backed by PyLD.

The separation engine never walks raw JSON-LD: documents are flattened
first, and the collected controls are framed back into nested shapes
(collections with their members, resources with their operations) using
the Hydra context below.
"""

import logging
from typing import Any, Dict, List, Optional

from pyld import jsonld

from ..constants import HYDRA_NAMESPACE
from ..exceptions import GraphNormalizationError

logger = logging.getLogger(__name__)


HYDRA_CONTEXT: Dict[str, Any] = {
    # keep compacted identifiers absolute
    "@base": None,
    "hydra": HYDRA_NAMESPACE,
    "iri": "@id",
    "isA": "@type",
    "ApiDocumentation": "hydra:ApiDocumentation",
    "Class": "hydra:Class",
    "Collection": "hydra:Collection",
    "EntryPoint": "hydra:EntryPoint",
    "IriTemplate": "hydra:IriTemplate",
    "IriTemplateMapping": "hydra:IriTemplateMapping",
    "Link": "hydra:Link",
    "Operation": "hydra:Operation",
    "PartialCollectionView": "hydra:PartialCollectionView",
    "Resource": "hydra:Resource",
    "SupportedProperty": "hydra:SupportedProperty",
    "collection": {"@id": "hydra:collection", "@container": "@set"},
    "description": "hydra:description",
    "entryPoint": "hydra:entryPoint",
    "expects": "hydra:expects",
    "first": "hydra:first",
    "last": "hydra:last",
    "mappings": {"@id": "hydra:mapping", "@container": "@set"},
    "members": {"@id": "hydra:member", "@container": "@set"},
    "method": "hydra:method",
    "next": "hydra:next",
    "operations": {"@id": "hydra:operation", "@container": "@set"},
    "previous": "hydra:previous",
    "property": "hydra:property",
    "readable": "hydra:readable",
    "required": "hydra:required",
    "returns": "hydra:returns",
    "supportedClasses": {"@id": "hydra:supportedClass", "@container": "@set"},
    "supportedOperations": {"@id": "hydra:supportedOperation", "@container": "@set"},
    "supportedProperties": {"@id": "hydra:supportedProperty", "@container": "@set"},
    "template": "hydra:template",
    "title": "hydra:title",
    "totalItems": "hydra:totalItems",
    "variable": "hydra:variable",
    "view": "hydra:view",
    "writeable": "hydra:writeable",
}


class GraphNormalizer:
    """
    Expansion, flattening and framing of linked-data documents.

    Args:
        context: Context used to compact framed hypermedia.
        document_loader: Optional PyLD document loader for remote contexts.
    """

    def __init__(self, context: Optional[Dict[str, Any]] = None, document_loader=None):
        self.context = context if context is not None else HYDRA_CONTEXT
        self.document_loader = document_loader

    def _options(self, **options: Any) -> Dict[str, Any]:
        if self.document_loader is not None:
            options["documentLoader"] = self.document_loader
        return options

    def flatten(self, document: Any, base: Optional[str] = None) -> List[Dict[str, Any]]:
        """Flatten a document into a list of expanded node objects."""
        try:
            return jsonld.flatten(document, None, self._options(base=base or ""))
        except jsonld.JsonLdError as e:
            logger.error(f"Failed to flatten document: {e}")
            raise GraphNormalizationError(f"Could not flatten document: {e}") from e

    def reframe(self, nodes: Any, base: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Frame nodes into nested shapes compacted with the Hydra context.

        Embedded nodes are linked rather than copied, so a node referenced
        from several places is represented by the same object.
        """
        try:
            framed = jsonld.frame(
                nodes,
                {"@context": self.context},
                self._options(embed="@link", omitGraph=False, base=base or ""),
            )
        except jsonld.JsonLdError as e:
            logger.error(f"Failed to frame hypermedia: {e}")
            raise GraphNormalizationError(f"Could not frame hypermedia: {e}") from e

        graph = framed.get("@graph", [])
        return graph if isinstance(graph, list) else [graph]

    def from_nquads(self, text: str) -> List[Dict[str, Any]]:
        """Convert an N-Quads (or N-Triples) serialization to expanded JSON-LD."""
        try:
            return jsonld.from_rdf(
                text,
                self._options(format="application/n-quads", useNativeTypes=True),
            )
        except jsonld.JsonLdError as e:
            logger.error(f"Failed to convert RDF dataset: {e}")
            raise GraphNormalizationError(f"Could not convert RDF dataset: {e}") from e
