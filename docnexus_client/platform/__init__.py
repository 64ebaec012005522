"""Platform dispatch package.

This package lets callers invoke the fixed set of DocNexus endpoints by
name, either one-off through ``call`` or through a bound PlatformClient.
"""

from .core import PlatformClient, call, create_platform_client, send
from .errors import (
    AuthenticationError,
    DocnexusError,
    HttpError,
    InvalidParameterError,
    MissingPathParameterError,
    RegistryValidationError,
    UnknownEndpointError,
    UnresolvedPlaceholderError,
)
from .models import EndpointDefinition, HTTPMethod, JsonBody, PathParameter, ResponseBody, TextBody
from .registry import ENDPOINT_REGISTRY, list_endpoint_names, lookup
from .transport import AiohttpTransport, Transport, TransportResponse

__all__ = [
    "PlatformClient",
    "call",
    "create_platform_client",
    "send",
    "ENDPOINT_REGISTRY",
    "list_endpoint_names",
    "lookup",
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
    "RegistryValidationError",
    "UnknownEndpointError",
    "UnresolvedPlaceholderError",
]
