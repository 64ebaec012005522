"""Data models for platform endpoints and their responses.

This module contains the core data structures used to describe the fixed
set of DocNexus endpoints that can be called by name, plus the tagged
result returned by a successful call.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Tuple, Union


class HTTPMethod(Enum):
    """Supported HTTP methods for platform endpoints"""
    GET = "GET"
    POST = "POST"


@dataclass(frozen=True)
class PathParameter:
    """A placeholder in a path template that is filled from the payload

    Args:
        name: Placeholder name, written as ``:name`` in the template
        canonicalize: Optional rule turning the raw string value into the
            path segment. When omitted the value is percent-encoded.
    """
    name: str
    canonicalize: Optional[Callable[[str], str]] = field(default=None, compare=False)

    @property
    def placeholder(self) -> str:
        return f":{self.name}"


@dataclass(frozen=True)
class EndpointDefinition:
    """Configuration for one callable platform route

    Args:
        name: Symbolic endpoint name used for lookup
        method: HTTP method to use
        path_template: Slash-delimited path with ``:name`` placeholders
        path_params: Placeholders that must be supplied via the payload
    """
    name: str
    method: HTTPMethod
    path_template: str
    path_params: Tuple[PathParameter, ...] = ()

    @property
    def path_param_names(self) -> Tuple[str, ...]:
        return tuple(param.name for param in self.path_params)


@dataclass(frozen=True)
class JsonBody:
    """Successful response declared as JSON"""
    value: Any


@dataclass(frozen=True)
class TextBody:
    """Successful response with any other content type"""
    text: str

    @property
    def value(self) -> str:
        return self.text


ResponseBody = Union[JsonBody, TextBody]


__all__ = [
    "HTTPMethod",
    "PathParameter",
    "EndpointDefinition",
    "JsonBody",
    "TextBody",
    "ResponseBody",
]
