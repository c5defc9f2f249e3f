"""
services/errors.py
------------------
Typed failures raised by ApiService for outbound HTTP calls.

Every error carries enough context (URL, field, identifier) to diagnose
the failure from a single log line. Handlers catch ``ServiceError`` and
turn it into a short user-facing reply.
"""

from typing import Optional


class ServiceError(Exception):
    """Base class for all outbound API call failures."""


class NetworkError(ServiceError):
    """Transport-level failure (connect, timeout, DNS)."""

    def __init__(self, url: str, cause: object):
        self.url = url
        self.cause = str(cause) or type(cause).__name__
        super().__init__(f"Network error for {url}: {self.cause}")


class ParseError(ServiceError):
    """Response body did not deserialize into the expected shape."""

    def __init__(self, url: str, cause: object):
        self.url = url
        self.cause = str(cause)
        super().__init__(f"Parse error for {url}: {self.cause}")


class NotFoundError(ServiceError):
    """Upstream signaled a 404-equivalent."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class MissingCredentialError(ServiceError):
    """A required API key is absent from configuration."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing required credential: {name}")


class UpstreamError(ServiceError):
    """Upstream answered, but its payload reports an application-level failure."""

    DEFAULT_MESSAGE = "Unknown API error"

    def __init__(self, url: str, message: Optional[str] = None, code: Optional[int] = None):
        self.url = url
        self.message = message or self.DEFAULT_MESSAGE
        self.code = code
        detail = f"{self.message} (code={code})" if code is not None else self.message
        super().__init__(f"API error from {url}: {detail}")


class UnexpectedStatusError(ServiceError):
    """HTTP status outside the expected success/known-failure set."""

    def __init__(self, url: str, status: int):
        self.url = url
        self.status = status
        super().__init__(f"Unexpected status {status} from {url}")


class MissingFieldError(ServiceError):
    """Expected field absent from an otherwise well-formed success payload."""

    def __init__(self, field: str, url: str):
        self.field = field
        self.url = url
        super().__init__(f"Missing field '{field}' in response from {url}")
