"""Name-based dispatch to DocNexus platform endpoints.

This module provides ``call``, which turns an endpoint name and payload
into exactly one HTTP request, and PlatformClient, which binds an API key,
base URL and transport so callers only pass the endpoint name and payload.

Example:
    client = create_platform_client(api_key="dnx_xxx")
    results = await client.call("v5/search", {"first_name": "John", "last_name": "Doe"})
    profile = await client.call("v5/profile/us/:npi", {"npi": "1234567890"})
"""

import json
import logging
from typing import Any, Dict, List, Mapping, Optional

from ..config import get_base_url_for_endpoint
from .errors import HttpError
from .models import HTTPMethod, JsonBody, ResponseBody, TextBody
from .paths import resolve_path
from .registry import list_endpoint_names, lookup
from .transport import Body, Transport, TransportResponse, default_transport

API_KEY_HEADER = "apikey"
JSON_CONTENT_TYPE = "application/json"

Payload = Mapping[str, Any]


def build_url(base_url: str, path: str) -> str:
    """Join a resolved path to the base URL unless it is already absolute"""
    if path.startswith(("http://", "https://")):
        return path
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def extract_error_detail(response: TransportResponse) -> str:
    """Pick a human readable message out of an error response

    Prefers a ``detail`` then ``error`` field of a JSON object body, then
    the raw body text, then the status line.
    """
    text = response.text
    detail: Any = None
    try:
        parsed = json.loads(text)
    except ValueError:
        parsed = None

    if isinstance(parsed, dict):
        detail = parsed.get("detail")
        if detail is None:
            detail = parsed.get("error")

    if detail is not None and not isinstance(detail, str):
        detail = json.dumps(detail)
    return detail or text or response.status_line


def normalize_response(response: TransportResponse) -> ResponseBody:
    """Wrap a success body according to its declared content type"""
    if JSON_CONTENT_TYPE in response.content_type.lower():
        return JsonBody(response.json())
    return TextBody(response.text)


async def send(
    method: str,
    url: str,
    headers: Mapping[str, str],
    body: Body = None,
    transport: Optional[Transport] = None,
    error_label: str = "DocNexus API",
) -> ResponseBody:
    """Perform one HTTP exchange and normalize the outcome

    Args:
        method: HTTP method
        url: Absolute target URL
        headers: Request headers
        body: Serialized request body, if any
        transport: Transport to use; defaults to the aiohttp transport
        error_label: Prefix for the HttpError message

    Returns:
        JsonBody or TextBody depending on the declared content type

    Raises:
        HttpError: On a non-success status
    """
    transport = transport or default_transport
    logging.debug(f"[Dispatcher] {method} {url}")
    response = await transport(method, url, headers, body)

    if not response.ok:
        raise HttpError(response.status, extract_error_detail(response), label=error_label, url=url)
    return normalize_response(response)


async def call(
    endpoint_name: str,
    payload: Optional[Payload] = None,
    *,
    api_key: str,
    base_url: Optional[str] = None,
    transport: Optional[Transport] = None,
) -> ResponseBody:
    """Call a platform endpoint by name

    Args:
        endpoint_name: Registered endpoint name, e.g. ``"v5/search"``
        payload: JSON body for POST endpoints, path values for GET endpoints
        api_key: Key sent in the ``apikey`` header
        base_url: Gateway base URL; chosen from the endpoint prefix when omitted
        transport: Transport override

    Returns:
        JsonBody or TextBody

    Raises:
        UnknownEndpointError: If the name is not registered
        MissingPathParameterError: If a path value is missing from the payload
        InvalidParameterError: If a path value is rejected
        HttpError: On a non-success status
    """
    definition = lookup(endpoint_name)
    path = resolve_path(definition.path_template, definition.path_params, payload)
    url = build_url(base_url or get_base_url_for_endpoint(endpoint_name), path)

    headers: Dict[str, str] = {API_KEY_HEADER: api_key}
    body = None
    if definition.method is HTTPMethod.POST and payload is not None:
        headers["Content-Type"] = JSON_CONTENT_TYPE
        body = json.dumps(payload)

    return await send(definition.method.value, url, headers, body, transport)


class PlatformClient:
    """Dispatcher bound to a fixed API key, base URL and transport

    Args:
        api_key: Key sent in the ``apikey`` header
        base_url: Gateway base URL; per-endpoint defaults apply when omitted
        transport: Transport override shared by every call
    """

    def __init__(self, api_key: str, base_url: Optional[str] = None, transport: Optional[Transport] = None):
        self._api_key = api_key
        self._base_url = base_url
        self._transport = transport

    @property
    def base_url(self) -> Optional[str]:
        return self._base_url

    async def call(self, endpoint_name: str, payload: Optional[Payload] = None) -> ResponseBody:
        """Call an endpoint by name with the bound configuration"""
        return await call(
            endpoint_name,
            payload,
            api_key=self._api_key,
            base_url=self._base_url,
            transport=self._transport,
        )

    def get_endpoint_names(self) -> List[str]:
        return list_endpoint_names()

    def __repr__(self) -> str:
        return f"PlatformClient(base_url={self._base_url!r})"


def create_platform_client(
    api_key: str,
    base_url: Optional[str] = None,
    transport: Optional[Transport] = None,
) -> PlatformClient:
    """Create a client that calls platform endpoints by name. Performs no I/O."""
    return PlatformClient(api_key, base_url=base_url, transport=transport)


__all__ = [
    "API_KEY_HEADER",
    "build_url",
    "extract_error_detail",
    "normalize_response",
    "send",
    "call",
    "PlatformClient",
    "create_platform_client",
]
