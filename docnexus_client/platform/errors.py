"""Error taxonomy for the platform client.

Every error raised by the library derives from DocnexusError. Caller
mistakes (unknown endpoint, bad path parameters) are raised before any
network traffic; HttpError is raised after a non-success response.
Transport failures from aiohttp are not wrapped.
"""

from typing import Iterable, Optional


class DocnexusError(Exception):
    """Base class for all DocNexus client errors"""


class RegistryValidationError(DocnexusError):
    """An endpoint definition contradicts its own path template"""


class UnknownEndpointError(DocnexusError, LookupError):
    """The endpoint name is not in the registry"""

    def __init__(self, endpoint_name: str, known_names: Iterable[str]):
        self.endpoint_name = endpoint_name
        self.known_names = list(known_names)
        super().__init__(
            f'Unknown endpoint: "{endpoint_name}". Known: {", ".join(self.known_names)}'
        )


class MissingPathParameterError(DocnexusError, ValueError):
    """A required path parameter is absent from the payload"""

    def __init__(self, param_name: str):
        self.param_name = param_name
        super().__init__(f"Missing path parameter: {param_name}")


class InvalidParameterError(DocnexusError, ValueError):
    """A path parameter failed its canonicalization rule"""

    def __init__(self, param_name: str, message: str):
        self.param_name = param_name
        super().__init__(message)


class UnresolvedPlaceholderError(DocnexusError):
    """A placeholder survived substitution"""

    def __init__(self, template: str, path: str):
        self.template = template
        self.path = path
        super().__init__(f"Unresolved path placeholder in {template}")


class HttpError(DocnexusError):
    """The backend answered with a non-success status"""

    def __init__(self, status: int, detail: str, label: str = "DocNexus API", url: Optional[str] = None):
        self.status = status
        self.detail = detail
        self.url = url
        super().__init__(f"{label} {status}: {detail}")


class AuthenticationError(DocnexusError):
    """No credential is available for an operation that needs one"""


__all__ = [
    "DocnexusError",
    "RegistryValidationError",
    "UnknownEndpointError",
    "MissingPathParameterError",
    "InvalidParameterError",
    "UnresolvedPlaceholderError",
    "HttpError",
    "AuthenticationError",
]
