"""
Turtle hypermedia handler.

Parses ``text/turtle`` representations with rdflib and converts them to
expanded JSON-LD, so that the same separation rules apply as for JSON-LD.
"""

import logging
from typing import Any, List

from rdflib import Graph

from ..constants import MediaTypes
from ..exceptions import UnsupportedRepresentationError
from .jsonld_handler import JsonLdHypermediaHandler

logger = logging.getLogger(__name__)


class TurtleHypermediaHandler(JsonLdHypermediaHandler):
    """Hypermedia handler for Turtle documents."""

    MEDIA_TYPES = [MediaTypes.TURTLE]

    def load_payload(self, response: Any) -> List[Any]:
        graph = Graph()
        try:
            graph.parse(data=response.text, format='turtle', publicID=response.url)
        except Exception as e:
            logger.error(f"Failed to parse Turtle response from {response.url}: {e}")
            raise UnsupportedRepresentationError(
                f"Response body is not valid Turtle: {e}",
                content_type=response.headers.get("Content-Type"),
            ) from e

        logger.debug(f"Parsed {len(graph)} triples from {response.url}")
        return self.normalizer.from_nquads(graph.serialize(format='nt'))
