"""
Hypermedia handler registry.

Handlers are tried in registration order; the first one declaring a media
type that prefixes the response ``Content-Type`` wins.

Usage:
    from heracles.hypermedia import create_default_registry

    registry = create_default_registry()
    handler = registry.select("application/ld+json; charset=utf-8")
"""

import logging
from typing import Iterator, List, Optional

from ..exceptions import NoHandlerRegisteredError
from .protocols import HypermediaHandler, is_hypermedia_handler

logger = logging.getLogger(__name__)


class HandlerRegistry:
    """Ordered collection of hypermedia handlers."""

    def __init__(self) -> None:
        self._handlers: List[HypermediaHandler] = []

    def register(self, handler: Optional[HypermediaHandler]) -> None:
        """
        Register a hypermedia handler.

        Raises:
            NoHandlerRegisteredError: If no handler was given.
            TypeError: If the handler does not implement HypermediaHandler.
        """
        if handler is None:
            raise NoHandlerRegisteredError()

        if not is_hypermedia_handler(handler):
            raise TypeError(f"handler must implement HypermediaHandler, got {type(handler)}")

        self._handlers.append(handler)
        logger.debug(
            f"Registered hypermedia handler {type(handler).__name__} "
            f"for {', '.join(handler.supported_media_types)}"
        )

    def select(self, content_type: Optional[str]) -> Optional[HypermediaHandler]:
        """Return the first handler supporting ``content_type``, or None."""
        if not content_type:
            return None

        for handler in self._handlers:
            if any(content_type.startswith(media_type) for media_type in handler.supported_media_types):
                return handler

        logger.debug(f"No hypermedia handler for content type '{content_type}'")
        return None

    @property
    def supported_media_types(self) -> List[str]:
        media_types: List[str] = []
        for handler in self._handlers:
            for media_type in handler.supported_media_types:
                if media_type not in media_types:
                    media_types.append(media_type)
        return media_types

    def clear(self) -> None:
        self._handlers.clear()

    def __iter__(self) -> Iterator[HypermediaHandler]:
        return iter(list(self._handlers))

    def __len__(self) -> int:
        return len(self._handlers)


def create_default_registry() -> HandlerRegistry:
    """Create a registry holding the built-in JSON-LD and Turtle handlers."""
    from .jsonld_handler import JsonLdHypermediaHandler
    from .turtle_handler import TurtleHypermediaHandler

    registry = HandlerRegistry()
    registry.register(JsonLdHypermediaHandler())
    registry.register(TurtleHypermediaHandler())
    return registry
