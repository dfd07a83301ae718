"""
JSON-LD hypermedia handler.

Separates Hydra controls from ``application/ld+json`` representations.
"""

import json
import logging
from typing import Any, List, Optional

from ..constants import MediaTypes
from ..exceptions import UnsupportedRepresentationError
from ..models.resource import WebResource
from .normalization import GraphNormalizer
from .separation import separate_hypermedia

logger = logging.getLogger(__name__)


class JsonLdHypermediaHandler:
    """Hypermedia handler for JSON-LD documents."""

    MEDIA_TYPES = [MediaTypes.JSON_LD]

    def __init__(self, normalizer: Optional[GraphNormalizer] = None):
        self.normalizer = normalizer or GraphNormalizer()

    @property
    def supported_media_types(self) -> List[str]:
        return list(self.MEDIA_TYPES)

    def load_payload(self, response: Any) -> Any:
        """Read the JSON-LD document from the response body."""
        try:
            return response.json()
        except (json.JSONDecodeError, ValueError) as e:
            logger.error(f"Failed to parse JSON-LD response from {response.url}: {e}")
            raise UnsupportedRepresentationError(
                f"Response body is not valid JSON-LD: {e}",
                content_type=response.headers.get("Content-Type"),
            ) from e

    def process(self, response: Any, strip_from_payload: bool = False) -> WebResource:
        """
        Separate hypermedia controls from a response.

        Args:
            response: HTTP response carrying a supported representation.
            strip_from_payload: Remove hypermedia from the returned data.

        Returns:
            WebResource with the payload and its hypermedia controls.
        """
        payload = self.load_payload(response)
        data, hypermedia = separate_hypermedia(
            payload,
            strip_from_payload=strip_from_payload,
            normalizer=self.normalizer,
            base=response.url,
        )
        logger.info(f"Processed {response.url}: {len(hypermedia)} hypermedia controls")
        return WebResource(
            data=data,
            hypermedia=hypermedia,
            iri=response.url,
            media_type=response.headers.get("Content-Type"),
        )
