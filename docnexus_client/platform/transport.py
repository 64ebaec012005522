"""HTTP transport boundary.

A transport is any async callable taking ``(method, url, headers, body)``
and returning a TransportResponse. The response body is read exactly once,
as text with undecodable bytes replaced, while the connection is open;
everything after that works on the immutable snapshot. AiohttpTransport
is the default implementation.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Protocol, Union

import aiohttp

Body = Union[str, bytes, None]


@dataclass(frozen=True)
class TransportResponse:
    """Snapshot of an HTTP response

    Args:
        status: HTTP status code
        reason: Status reason phrase, may be empty
        headers: Response headers; lookups through ``header`` ignore case
        text: The full response body decoded as text
    """
    status: int
    reason: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def status_line(self) -> str:
        return f"{self.status} {self.reason}".strip()

    @property
    def content_type(self) -> str:
        return self.header("content-type") or ""

    def header(self, name: str) -> Optional[str]:
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None

    def json(self) -> Any:
        """Parse the stored body as JSON

        Raises:
            ValueError: If the body is not valid JSON
        """
        return json.loads(self.text)


class Transport(Protocol):
    async def __call__(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Body = None,
    ) -> TransportResponse:
        ...


class AiohttpTransport:
    """Transport backed by aiohttp

    Args:
        session: Optional ClientSession to reuse. When omitted a session is
            opened and closed around every request.
        timeout: Optional total timeout in seconds for each request
    """

    def __init__(self, session: Optional[aiohttp.ClientSession] = None, timeout: Optional[float] = None):
        self.session = session
        self.timeout = timeout

    async def __call__(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Body = None,
    ) -> TransportResponse:
        if self.session is not None:
            return await self._send(self.session, method, url, headers, body)

        async with aiohttp.ClientSession() as session:
            return await self._send(session, method, url, headers, body)

    async def _send(
        self,
        session: aiohttp.ClientSession,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Body,
    ) -> TransportResponse:
        if isinstance(body, str):
            body = body.encode("utf-8")

        request_kwargs = {"headers": dict(headers), "data": body}
        if self.timeout is not None:
            request_kwargs["timeout"] = aiohttp.ClientTimeout(total=self.timeout)

        async with session.request(method, url, **request_kwargs) as response:
            text = await response.text(errors="replace")
            logging.debug(f"[Transport] {method} {url} -> {response.status}")
            return TransportResponse(
                status=response.status,
                reason=response.reason or "",
                headers={key: value for key, value in response.headers.items()},
                text=text,
            )


default_transport = AiohttpTransport()


__all__ = [
    "Body",
    "TransportResponse",
    "Transport",
    "AiohttpTransport",
    "default_transport",
]
