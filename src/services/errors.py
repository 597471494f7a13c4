"""Error taxonomy shared by the quote and webhook routes."""

from __future__ import annotations


class CatalogServiceError(Exception):
    """Base error carrying the HTTP status the routes respond with."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(CatalogServiceError):
    """Required server credentials are missing."""

    status_code = 500


class ValidationError(CatalogServiceError):
    """Caller input violates a quote constraint."""

    status_code = 400


class AuthorizationError(CatalogServiceError):
    """Webhook shared secret did not match."""

    status_code = 403


class UpstreamError(CatalogServiceError):
    """The remote catalog API answered with a non-success status."""

    status_code = 502

    def __init__(self, action: str, remote_status: int, body: str) -> None:
        super().__init__(f"{action} failed: {remote_status} {body}")
        self.remote_status = remote_status
        self.body = body


class InternalError(CatalogServiceError):
    """Unexpected failure such as a network error or malformed JSON."""

    status_code = 500

    @classmethod
    def from_exception(cls, exc: BaseException) -> InternalError:
        return cls(str(exc) or exc.__class__.__name__)
