"""
Result values handed to callers.

A ``WebResource`` pairs the domain payload with the hypermedia controls
separated from it. An ``ApiDocumentation`` is the control that designates
an API's entry point, together with the client used to reach it.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from ..client import HydraClient

logger = logging.getLogger(__name__)


def _is_a(control: Dict[str, Any], type_name: str) -> bool:
    types = control.get("isA", [])
    if isinstance(types, str):
        types = [types]
    return type_name in types


@dataclass
class WebResource:
    """
    A fetched resource split into data and hypermedia.

    Attributes:
        data: Domain payload. The original document, or the flattened graph
            with hypermedia removed when stripping was requested.
        hypermedia: Hypermedia controls, top-level controls first.
        iri: URL the representation was obtained from.
        media_type: Content type of the representation.
    """

    data: Any
    hypermedia: List[Dict[str, Any]] = field(default_factory=list)
    iri: Optional[str] = None
    media_type: Optional[str] = None

    def find_hypermedia(self, predicate: Callable[[Dict[str, Any]], bool]) -> Optional[Dict[str, Any]]:
        """Return the first control matching ``predicate``."""
        return next((control for control in self.hypermedia if predicate(control)), None)

    @property
    def collections(self) -> List[Dict[str, Any]]:
        return [control for control in self.hypermedia if _is_a(control, "Collection")]

    @property
    def operations(self) -> List[Dict[str, Any]]:
        return [control for control in self.hypermedia if _is_a(control, "Operation")]


def _extract_iri(value: Any) -> Optional[str]:
    """Read an IRI from a compacted reference (string, {"iri": ...} or list)."""
    if isinstance(value, list):
        return _extract_iri(value[0]) if value else None
    if isinstance(value, dict):
        return value.get("iri")
    return value or None


@dataclass
class ApiDocumentation:
    """
    Hydra API documentation with a back-reference to its client.

    Attributes:
        iri: Identifier of the documentation resource.
        entry_point: IRI of the API entry point.
        hypermedia: The documentation control as separated from the payload.
        client: Client that fetched the documentation.
    """

    iri: Optional[str]
    entry_point: str
    hypermedia: Dict[str, Any]
    client: 'HydraClient' = field(repr=False)

    @classmethod
    def from_control(cls, control: Dict[str, Any], client: 'HydraClient') -> 'ApiDocumentation':
        """Build the documentation from the control exposing ``entryPoint``."""
        return cls(
            iri=control.get("iri"),
            entry_point=_extract_iri(control.get("entryPoint")),
            hypermedia=control,
            client=client,
        )

    def get_entry_point(self) -> WebResource:
        """Fetch the entry point resource through the originating client."""
        logger.info(f"Obtaining entry point {self.entry_point}")
        return self.client.get_resource(self.entry_point)
