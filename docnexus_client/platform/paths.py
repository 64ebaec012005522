"""Path template resolution.

Turns a path template such as ``v5/profile/us/:npi`` into a concrete
request path using values from the call payload. Each declared
PathParameter either brings its own canonicalization rule or is
percent-encoded as a single path segment.
"""

import json
import re
from typing import Any, Mapping, Optional, Sequence
from urllib.parse import quote

from .errors import InvalidParameterError, MissingPathParameterError, UnresolvedPlaceholderError
from .models import PathParameter

NPI_LENGTH = 10

_NON_DIGITS = re.compile(r"[^0-9]")
_PLACEHOLDER_SEGMENT = re.compile(r"(?:^|/):\w+")

# Characters encodeURIComponent leaves alone besides the unreserved set
_SEGMENT_SAFE = "!*'()"


def canonicalize_npi(value: str) -> str:
    """Strip everything but digits and require a 10 digit NPI.

    Raises:
        ValueError: If the digits left over are not exactly 10
    """
    digits = _NON_DIGITS.sub("", value)
    if len(digits) != NPI_LENGTH:
        raise ValueError(f"NPI must be {NPI_LENGTH} digits")
    return digits


def encode_segment(value: str) -> str:
    return quote(value, safe=_SEGMENT_SAFE)


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def has_placeholder(path: str) -> bool:
    return _PLACEHOLDER_SEGMENT.search(path) is not None


def resolve_path(
    template: str,
    path_params: Sequence[PathParameter] = (),
    payload: Optional[Mapping[str, Any]] = None,
) -> str:
    """Substitute payload values into a path template

    Args:
        template: Path template with ``:name`` placeholder segments
        path_params: Parameters to fill, in declaration order
        payload: Caller supplied values; may be None when nothing is needed

    Returns:
        The resolved path

    Raises:
        MissingPathParameterError: If a parameter is absent or None
        InvalidParameterError: If a canonicalization rule rejects a value
        UnresolvedPlaceholderError: If a placeholder is left after substitution
    """
    payload = payload or {}
    segments = template.split("/")

    for param in path_params:
        value = payload.get(param.name)
        if value is None:
            raise MissingPathParameterError(param.name)

        raw = _stringify(value)
        if param.canonicalize is not None:
            try:
                resolved = param.canonicalize(raw)
            except ValueError as exc:
                raise InvalidParameterError(param.name, str(exc)) from exc
        else:
            resolved = encode_segment(raw)

        segments = [resolved if segment == param.placeholder else segment for segment in segments]

    path = "/".join(segments)
    if has_placeholder(path):
        raise UnresolvedPlaceholderError(template, path)
    return path


__all__ = [
    "NPI_LENGTH",
    "canonicalize_npi",
    "encode_segment",
    "has_placeholder",
    "resolve_path",
]
