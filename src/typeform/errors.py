"""Exceptions raised by the Typeform client.

Every failure stage of a fetch has its own type so callers can decide on
retry policy by catching the one they care about.
"""

from __future__ import annotations

from typing import Any


class TypeformError(Exception):
    """Base class for all client errors."""


class RequestBuildError(TypeformError):
    """The HTTP request could not be constructed (bad URL or header value)."""


class TransportError(TypeformError):
    """The request was sent but no complete response came back."""


class ApiError(TypeformError):
    """Typeform answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Typeform API returned {status_code}: {body[:500]}")


class DecodeError(TypeformError):
    """The response body is not JSON or does not match the expected shape."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class AnswerPayloadError(DecodeError):
    """An answer's payload does not match its type discriminant."""
