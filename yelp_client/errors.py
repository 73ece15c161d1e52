"""Exceptions raised by the Yelp Fusion client."""

from __future__ import annotations

from typing import Optional


class YelpError(RuntimeError):
    """Base class for every error surfaced by the client."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MissingRequiredError(YelpError, ValueError):
    """Raised when the caller omits an input the request requires."""


class BusinessNotFoundError(YelpError):
    """Raised when the business endpoint does not know the requested id."""


class RemoteError(YelpError):
    """Raised when the API answers with a non-200 status."""

    def __init__(self, status_code: int, reason: str = "", body: str = "") -> None:
        message = f"{status_code} {reason}".strip()
        super().__init__(message, status_code=status_code)
        self.reason = reason
        self.body = body


class TransportError(YelpError):
    """Raised when no HTTP response could be obtained."""


class DecodeError(YelpError):
    """Raised when a response body cannot be decoded into the expected record."""
