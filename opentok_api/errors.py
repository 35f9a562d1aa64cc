"""Exceptions raised by the OpenTok client."""

from __future__ import annotations


class OpenTokError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(OpenTokError, ValueError):
    """Credentials or deployment mode are unusable. Raised before any request."""


class RequestError(OpenTokError):
    """Catch-all for failures of the create-session request."""


class AuthError(RequestError):
    """
    The server rejected the request.

    Covers both non-2xx HTTP responses and ``Errors`` documents returned by the
    platform (bad partner key, invalid signature, validation failures).
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        code: str | None = None,
        error_type: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.error_type = error_type


class TransportError(RequestError):
    """No response was received (connection failure, timeout)."""


class ProtocolError(OpenTokError):
    """The response body is not XML or does not have a known shape."""
