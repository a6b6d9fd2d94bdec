"""Error taxonomy shared by services and route handlers.

Handlers raise ``HTTPError`` subclasses; the supervising route class in
``authly.api.routing`` is the single place that turns them into responses.
Anything that is not an ``HTTPError`` becomes a generic 500.
"""

from __future__ import annotations

from fastapi import status


class HTTPError(Exception):
    """Structured failure carrying the status code and client-facing message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None, *, status_code: int | None = None) -> None:
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(HTTPError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(HTTPError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class UnauthorizedError(HTTPError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class ForbiddenError(HTTPError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class PayloadTooLargeError(HTTPError):
    status_code = 413
    default_message = "Payload too large"


class BadUpstreamError(HTTPError):
    """Raised when the CDN rejects or fails an upload."""

    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Upload to CDN failed"


class ConfigurationError(RuntimeError):
    """A required secret or credential is missing from the process configuration."""


class InvalidTokenError(ValueError):
    """A token is malformed, carries a bad signature, or has expired."""
