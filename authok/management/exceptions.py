"""Authok-specific exceptions for error handling."""
from __future__ import annotations

from http import HTTPStatus
from typing import Any, Optional


class AuthokError(Exception):
    """Base exception for all Authok Management API operations."""
    pass


class InvalidDomainError(AuthokError, ValueError):
    """The tenant domain given to the client cannot be used to build URLs."""

    def __init__(self, domain: str):
        self.domain = domain
        super().__init__(f"invalid domain {domain!r}")


class TransportError(AuthokError):
    """The HTTP call failed before a response was received."""
    pass


class RequestCancelledError(AuthokError):
    """The request context was cancelled before the call completed."""
    pass


class DeadlineExceededError(AuthokError):
    """The request context deadline passed before the call completed."""
    pass


class TokenError(AuthokError):
    """The token endpoint refused to issue an access token."""
    pass


class DecodeError(AuthokError, ValueError):
    """Response payload does not match the expected shape."""
    pass


class ManagementError(AuthokError):
    """HTTP error from the Authok Management API.

    Attributes:
        status_code: HTTP status code
        error: Short error name (e.g. "Not Found")
        message: Human readable message from the response
        error_code: Machine readable code, when the API sends one
    """

    def __init__(self, status_code: int, error: str, message: str, error_code: Optional[str] = None):
        self.status_code = status_code
        self.error = error
        self.message = message
        self.error_code = error_code
        super().__init__(f"{status_code} {error}: {message}")

    @property
    def status(self) -> int:
        """HTTP status code of the failed call."""
        return self.status_code

    @classmethod
    def from_response(cls, response: Any) -> "ManagementError":
        """Decode the vendor error envelope of a failed response.

        The envelope is ``{"statusCode": ..., "error": ..., "message": ...}``.
        Missing parts fall back to the HTTP status line and raw body.
        """
        status_code = response.status_code
        try:
            reason = HTTPStatus(status_code).phrase
        except ValueError:
            reason = getattr(response, "reason", "") or ""

        payload: Any = None
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not isinstance(payload, dict):
            return cls(status_code, reason, (response.text or "").strip())

        return cls(
            payload.get("statusCode") or status_code,
            payload.get("error") or reason,
            payload.get("message") or "",
            payload.get("errorCode"),
        )
