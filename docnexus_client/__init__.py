"""DocNexus API client.

Use ``DocnexusClient`` for the typed docnexus-link methods, or
``create_platform_client``/``call`` to reach any registered endpoint by
name with an API key from the API key platform.
"""

from .client import DocnexusClient
from .platform import (
    ENDPOINT_REGISTRY,
    AiohttpTransport,
    AuthenticationError,
    DocnexusError,
    EndpointDefinition,
    HttpError,
    HTTPMethod,
    InvalidParameterError,
    JsonBody,
    MissingPathParameterError,
    PathParameter,
    PlatformClient,
    ResponseBody,
    TextBody,
    Transport,
    TransportResponse,
    UnknownEndpointError,
    UnresolvedPlaceholderError,
    call,
    create_platform_client,
    list_endpoint_names,
)

__version__ = "0.1.0"

__all__ = [
    "DocnexusClient",
    "PlatformClient",
    "call",
    "create_platform_client",
    "list_endpoint_names",
    "ENDPOINT_REGISTRY",
    "EndpointDefinition",
    "HTTPMethod",
    "PathParameter",
    "JsonBody",
    "TextBody",
    "ResponseBody",
    "AiohttpTransport",
    "Transport",
    "TransportResponse",
    "DocnexusError",
    "AuthenticationError",
    "HttpError",
    "InvalidParameterError",
    "MissingPathParameterError",
    "UnknownEndpointError",
    "UnresolvedPlaceholderError",
]
