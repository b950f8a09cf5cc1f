"""Exception hierarchy for ghfetch."""

from typing import Optional


class GhFetchError(Exception):
    """Base class for every error that ends a ghfetch invocation."""


class ConfigError(GhFetchError):
    """Missing token, missing target or malformed input."""


class TransportError(GhFetchError):
    """The request could not be sent or no response arrived."""


class DecodeError(GhFetchError):
    """The response body did not have the expected shape."""


class UpstreamError(GhFetchError):
    """GitHub answered with a non-success status or GraphQL errors."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
