"""Base URL configuration.

Both gateway hosts default to the public DocNexus API and can be
overridden through the environment before the package is imported.
"""

import os

DEFAULT_BASE_URL = "https://api.docnexus.ai"

DOCNEXUS_LINK_BASE_URL = os.getenv("DOCNEXUS_LINK_BASE_URL", DEFAULT_BASE_URL).rstrip("/")
ADVANCED_SEARCH_BASE_URL = os.getenv("DOCNEXUS_ADVANCED_SEARCH_BASE_URL", DEFAULT_BASE_URL).rstrip("/")

LINK_PREFIX = "v5/"
ADVANCED_SEARCH_PREFIX = "api/"


def get_base_url_for_endpoint(endpoint_name: str) -> str:
    """Return the base URL for an endpoint name

    ``v5/*`` routes to docnexus-link, ``api/*`` to advanced-search, and
    anything else falls back to docnexus-link.
    """
    if endpoint_name.startswith(LINK_PREFIX):
        return DOCNEXUS_LINK_BASE_URL
    if endpoint_name.startswith(ADVANCED_SEARCH_PREFIX):
        return ADVANCED_SEARCH_BASE_URL
    return DOCNEXUS_LINK_BASE_URL


__all__ = [
    "DEFAULT_BASE_URL",
    "DOCNEXUS_LINK_BASE_URL",
    "ADVANCED_SEARCH_BASE_URL",
    "get_base_url_for_endpoint",
]
