"""Typed DocNexus client.

DocnexusClient wraps the docnexus-link routes in one method per endpoint.
It authenticates with an API key (Kong Key Auth) or a bearer JWT obtained
through ``login`` and shares path resolution and the HTTP exchange with
the name-based dispatcher.

Example:
    client = DocnexusClient(api_key="dnx_key_xxx")
    results = await client.search({"first_name": "John", "last_name": "Doe", "country": "US"})
    profile = await client.get_profile_by_npi("1234567890")
"""

import json
from typing import Any, Dict, Optional
from urllib.parse import urlencode

from . import config
from .platform.core import API_KEY_HEADER, JSON_CONTENT_TYPE, build_url, send
from .platform.errors import AuthenticationError
from .platform.models import HTTPMethod, JsonBody
from .platform.paths import resolve_path
from .platform.registry import ENDPOINT_REGISTRY
from .platform.transport import Body, Transport
from .types import HealthResponse, RefreshResponse, SearchParams, SearchResponse, TokenResponse, USProfileResponse

DEFAULT_VERSION = "v5"

_PROFILE_PARAMS = ENDPOINT_REGISTRY["v5/profile/us/:npi"].path_params


class DocnexusClient:
    """Client for the docnexus-link API

    Args:
        api_key: Key sent as the ``apikey`` header. Omit when only a bearer
            token will be used.
        version: API version prefix used when a method is not given one
        transport: Transport override
        base_url: Gateway base URL; defaults to the configured link URL
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        version: str = DEFAULT_VERSION,
        transport: Optional[Transport] = None,
        base_url: Optional[str] = None,
    ):
        self.base_url = (base_url or config.DOCNEXUS_LINK_BASE_URL).rstrip("/")
        self.version = version
        self._api_key = api_key
        self._bearer_token: Optional[str] = None
        self._transport = transport

    def set_api_key(self, key: str) -> None:
        self._api_key = key

    def set_bearer_token(self, token: str) -> None:
        """Set the bearer token (JWT). It takes precedence over the API key."""
        self._bearer_token = token

    @property
    def bearer_token(self) -> Optional[str]:
        return self._bearer_token

    def _auth_headers(self) -> Dict[str, str]:
        if self._bearer_token:
            return {"Authorization": f"Bearer {self._bearer_token}"}
        if self._api_key:
            return {API_KEY_HEADER: self._api_key}
        return {}

    async def _request(
        self,
        method: HTTPMethod,
        path: str,
        json_body: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        request_headers = self._auth_headers()
        request_headers.update(headers or {})
        body: Body = None
        if json_body is not None and method is not HTTPMethod.GET:
            request_headers["Content-Type"] = JSON_CONTENT_TYPE
            body = json.dumps(json_body)

        result = await send(method.value, build_url(self.base_url, path), request_headers, body, self._transport)
        return result.value

    async def search(self, params: SearchParams, version: Optional[str] = None) -> SearchResponse:
        """Search for providers. Requires an API key or bearer token."""
        body = {
            "first_name": params["first_name"],
            "last_name": params["last_name"],
            "specialty": params.get("specialty"),
            "country": params.get("country"),
            "other_info": params.get("other_info"),
            "is_refresh_data": params.get("is_refresh_data", False),
        }
        return await self._request(HTTPMethod.POST, f"{version or self.version}/search", json_body=body)

    async def get_profile_by_npi(self, npi: str, version: Optional[str] = None) -> USProfileResponse:
        """Get a US provider profile by NPI.

        Non-digit characters are stripped; exactly 10 digits must remain.

        Raises:
            InvalidParameterError: If the NPI is not 10 digits
        """
        path = resolve_path(f"{version or self.version}/profile/us/:npi", _PROFILE_PARAMS, {"npi": npi})
        return await self._request(HTTPMethod.GET, path)

    async def health(self, version: Optional[str] = None) -> HealthResponse:
        """Health check (no auth required)."""
        return await self._request(HTTPMethod.GET, f"{version or self.version}/health")

    async def login(self, username: str, password: str, version: Optional[str] = None) -> TokenResponse:
        """Exchange username and password for a JWT.

        The returned access token is stored and used for later requests.
        No API key is sent with this request.

        Raises:
            HttpError: On a non-success status
            AuthenticationError: If the response carries no JSON access token
        """
        url = build_url(self.base_url, f"{version or self.version}/token")
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        form = urlencode({"username": username, "password": password})

        result = await send(HTTPMethod.POST.value, url, headers, form, self._transport, error_label="Login failed")
        if not isinstance(result, JsonBody) or not isinstance(result.value, dict) or not result.value.get("access_token"):
            raise AuthenticationError(f"Login response has no access token: {result.value!r}")
        data = result.value
        self._bearer_token = data["access_token"]
        return data

    async def refresh(self, refresh_token: Optional[str] = None, version: Optional[str] = None) -> RefreshResponse:
        """Refresh the access token using a refresh token or the current bearer token.

        Raises:
            AuthenticationError: If no token is available
        """
        token = refresh_token or self._bearer_token
        if not token:
            raise AuthenticationError("No refresh token provided")
        return await self._request(
            HTTPMethod.POST,
            f"{version or self.version}/refresh",
            headers={"Authorization": f"Bearer {token}"},
        )

    def __repr__(self) -> str:
        return f"DocnexusClient(base_url={self.base_url!r}, version={self.version!r})"


__all__ = [
    "DEFAULT_VERSION",
    "DocnexusClient",
]
