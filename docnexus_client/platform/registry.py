"""Endpoint registry for calling DocNexus routes by name.

The registry is built once at import time and exposed read-only. Names
double as path templates in the current data, but lookups always key on
the name and substitution always works on the definition's template.
"""

from types import MappingProxyType
from typing import Iterable, List, Mapping

from .errors import RegistryValidationError, UnknownEndpointError
from .models import EndpointDefinition, HTTPMethod, PathParameter
from .paths import canonicalize_npi


def _build_registry(definitions: Iterable[EndpointDefinition]) -> Mapping[str, EndpointDefinition]:
    """Index definitions by name after checking each against its template

    Raises:
        RegistryValidationError: On a duplicate name or a declared path
            parameter that has no placeholder in the template
    """
    registry = {}
    for definition in definitions:
        if definition.name in registry:
            raise RegistryValidationError(f"Endpoint '{definition.name}' already exists")
        segments = definition.path_template.split("/")
        for param in definition.path_params:
            if param.placeholder not in segments:
                raise RegistryValidationError(
                    f"Endpoint '{definition.name}' declares path parameter '{param.name}' "
                    f"missing from template '{definition.path_template}'"
                )
        registry[definition.name] = definition
    return MappingProxyType(registry)


ENDPOINT_REGISTRY: Mapping[str, EndpointDefinition] = _build_registry([
    # DocNexus Link
    EndpointDefinition("v5/search", HTTPMethod.POST, "v5/search"),
    EndpointDefinition(
        "v5/profile/us/:npi",
        HTTPMethod.GET,
        "v5/profile/us/:npi",
        (PathParameter("npi", canonicalize_npi),),
    ),
    EndpointDefinition("v5/health", HTTPMethod.GET, "v5/health"),
    # Advanced Search
    EndpointDefinition("api/query", HTTPMethod.POST, "api/query"),
    EndpointDefinition("api/generate-sql", HTTPMethod.POST, "api/generate-sql"),
    EndpointDefinition("api/generate-form-payload", HTTPMethod.POST, "api/generate-form-payload"),
    EndpointDefinition("api/export", HTTPMethod.POST, "api/export"),
])


def lookup(endpoint_name: str) -> EndpointDefinition:
    """Return the definition registered under ``endpoint_name``

    Raises:
        UnknownEndpointError: If the name is not registered; the message
            lists every known name
    """
    try:
        return ENDPOINT_REGISTRY[endpoint_name]
    except KeyError:
        raise UnknownEndpointError(endpoint_name, ENDPOINT_REGISTRY.keys()) from None


def list_endpoint_names() -> List[str]:
    """List all registered endpoint names in registration order"""
    return list(ENDPOINT_REGISTRY)


__all__ = [
    "ENDPOINT_REGISTRY",
    "lookup",
    "list_endpoint_names",
]
