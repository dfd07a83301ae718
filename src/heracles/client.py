"""
Hydra API Client

This module provides the client for Hydra-powered Web APIs: it discovers an
API's documentation and entry point, fetches resources, and hands back
their payload with hypermedia controls separated out.

To learn more about Hydra please refer to https://www.hydra-cg.com/spec/latest/core/
"""

import logging
import re
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import urljoin, urlsplit

import requests
from requests.utils import parse_header_links

from .config import ClientConfig
from .constants import HYDRA
from .enrichment import ResourceEnrichmentProvider
from .exceptions import (
    MissingAddressError,
    MissingDiscoveryMetadataError,
    MissingEntryPointError,
    TransportError,
    UnsupportedRepresentationError,
    UpstreamStatusError,
)
from .hypermedia.protocols import EnrichmentHook, HypermediaHandler, is_enrichment_hook
from .hypermedia.registry import HandlerRegistry, create_default_registry
from .logging_config import setup_logging
from .models.resource import ApiDocumentation, WebResource

logger = logging.getLogger(__name__)

_SCHEME_PATTERN = re.compile(r'^[a-z][a-z0-9+\-.]*:', re.IGNORECASE)

UrlOrResource = Union[str, Mapping[str, Any], Any]


class HydraClient:
    """
    Generic client for Hydra-powered Web APIs.

    This client provides methods for:
    - Obtaining an API documentation and its entry point
    - Obtaining resources with their hypermedia controls separated
    - Registering hypermedia handlers and an enrichment hook
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        registry: Optional[HandlerRegistry] = None,
        enrichment: Optional[EnrichmentHook] = None,
    ):
        """
        Initialize the Hydra client.

        Args:
            config: ClientConfig instance; defaults are used when omitted.
            registry: Hypermedia handlers to choose from; the built-in
                JSON-LD and Turtle handlers are used when omitted.
            enrichment: Hook applied to every separated resource.

        A non-empty ``config.logging`` section is applied with
        ``setup_logging``.
        """
        if config is not None and not isinstance(config, ClientConfig):
            raise TypeError(f"config must be ClientConfig instance, got {type(config)}")

        self.config = config or ClientConfig()
        if self.config.logging:
            setup_logging(config=self.config.logging)
        self.registry = registry if registry is not None else create_default_registry()
        self._enrichment: EnrichmentHook = enrichment or ResourceEnrichmentProvider()

    @property
    def remove_hypermedia_from_payload(self) -> bool:
        return self.config.remove_hypermedia_from_payload

    def register_hypermedia_handler(self, handler: HypermediaHandler) -> None:
        """Register a hypermedia handler with this client's registry."""
        self.registry.register(handler)

    def register_resource_enrichment_provider(self, provider: Optional[EnrichmentHook]) -> None:
        """Replace the enrichment hook; ``None`` keeps the current one."""
        if provider is None:
            return

        if not is_enrichment_hook(provider):
            raise TypeError(f"provider must implement EnrichmentHook, got {type(provider)}")

        self._enrichment = provider

    def get_hypermedia_handler(self, response: requests.Response) -> Optional[HypermediaHandler]:
        """Get a hypermedia handler suitable for a given response."""
        return self.registry.select(response.headers.get("Content-Type"))

    def get_api_documentation(self, url_or_resource: UrlOrResource) -> ApiDocumentation:
        """
        Obtain the API documentation of a site.

        Args:
            url_or_resource: Url or object with an iri from which to obtain
                the API documentation.

        Returns:
            ApiDocumentation pointing at the API entry point.

        Raises:
            MissingAddressError: If no url was given.
            UpstreamStatusError: If the site or documentation is not served.
            MissingDiscoveryMetadataError: If the site does not link its documentation.
            MissingEntryPointError: If the documentation defines no entry point.
        """
        url = self._get_url(url_or_resource)
        api_documentation_url = self._get_api_documentation_url(url)
        logger.info(f"Obtaining API documentation from {api_documentation_url}")

        resource = self.get_resource(api_documentation_url)
        control = resource.find_hypermedia(lambda hypermedia_control: hypermedia_control.get("entryPoint"))
        if control is None:
            logger.error(f"API documentation at {api_documentation_url} has no entry point")
            raise MissingEntryPointError()

        return ApiDocumentation.from_control(control, self)

    def get_resource(self, url_or_resource: UrlOrResource) -> WebResource:
        """
        Obtain a representation of a resource.

        Args:
            url_or_resource: Url or object with an iri of the resource.

        Returns:
            WebResource with hypermedia separated from its payload.

        Raises:
            MissingAddressError: If no url was given.
            UpstreamStatusError: If the server does not respond with HTTP 200.
            UnsupportedRepresentationError: If no handler supports the response.
        """
        url = self._get_url(url_or_resource)
        response = self._fetch(url, f"Get resource {url}")

        handler = self.get_hypermedia_handler(response)
        if handler is None:
            content_type = response.headers.get("Content-Type")
            logger.error(f"No hypermedia handler for {url} (Content-Type: {content_type})")
            raise UnsupportedRepresentationError(content_type=content_type)

        result = handler.process(response, self.remove_hypermedia_from_payload)
        return self._enrichment.enrich_hypermedia(result)

    def _get_api_documentation_url(self, url: str) -> str:
        response = self._fetch(url, f"Discover API documentation at {url}")

        link = response.headers.get("Link")
        if not link:
            logger.error(f"{url} returned no Link header")
            raise MissingDiscoveryMetadataError()

        for entry in parse_header_links(link):
            if str(HYDRA.apiDocumentation) in entry.get("rel", "").split():
                return self._resolve_url(url, entry["url"])

        logger.error(f"{url} does not link an API documentation")
        raise MissingDiscoveryMetadataError()

    @staticmethod
    def _resolve_url(base_url: str, url: str) -> str:
        """Resolve a relative url against the scheme and authority of ``base_url``."""
        if _SCHEME_PATTERN.match(url):
            return url

        parts = urlsplit(base_url)
        return urljoin(f"{parts.scheme}://{parts.netloc}", url)

    @staticmethod
    def _get_url(url_or_resource: UrlOrResource) -> str:
        if isinstance(url_or_resource, str):
            url = url_or_resource
        elif isinstance(url_or_resource, Mapping):
            url = url_or_resource.get("iri")
        else:
            url = getattr(url_or_resource, "iri", None)

        if not url:
            raise MissingAddressError()

        return url

    def _get_headers(self) -> Dict[str, str]:
        """Get HTTP headers advertising the supported media types."""
        headers = {}
        media_types = self.registry.supported_media_types
        if media_types:
            headers["Accept"] = ", ".join(media_types)
        headers.update(self.config.headers)
        return headers

    def _fetch(self, url: str, operation_name: str) -> requests.Response:
        response = self._make_request('GET', url, operation_name, headers=self._get_headers())
        if response.status_code != 200:
            logger.error(f"{operation_name}: remote server responded with {response.status_code}")
            raise UpstreamStatusError(response.status_code, url)

        return response

    def _make_request(self, method: str, url: str, operation_name: str, **kwargs) -> requests.Response:
        """
        Make HTTP request with consistent error handling.

        Args:
            method: HTTP method
            url: URL to request
            operation_name: Description of operation (for logging)
            **kwargs: Additional arguments to pass to requests

        Returns:
            Response object

        Raises:
            TransportError: On any request failure
        """
        timeout = self.config.timeout
        try:
            logger.debug(f"{operation_name}: {method} {url}")
            return requests.request(method, url, timeout=timeout, verify=self.config.verify_ssl, **kwargs)

        except requests.exceptions.Timeout:
            logger.error(f"{operation_name}: Request timeout after {timeout}s")
            raise TransportError(
                status_code=408,
                error_code='RequestTimeout',
                message=f'{operation_name} timed out after {timeout} seconds'
            )

        except requests.exceptions.ConnectionError as e:
            logger.error(f"{operation_name}: Connection error: {e}")
            raise TransportError(
                status_code=503,
                error_code='ConnectionError',
                message=f'{operation_name} failed to connect: {e}'
            )

        except requests.exceptions.RequestException as e:
            logger.error(f"{operation_name}: Request error: {e}")
            raise TransportError(
                status_code=500,
                error_code='RequestError',
                message=f'{operation_name} request failed: {e}'
            )
