"""Resource enrichment applied after hypermedia separation."""

from .models.resource import WebResource


class ResourceEnrichmentProvider:
    """Default enrichment hook; returns the resource unchanged."""

    def enrich_hypermedia(self, resource: WebResource) -> WebResource:
        return resource
