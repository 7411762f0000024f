from __future__ import annotations

from typing import Any


class HTTPCallerError(Exception):
    """Base class for every failure raised by a caller."""


class SerializationError(HTTPCallerError):
    """Raised when the request payload cannot be encoded as JSON."""


class RequestConstructionError(HTTPCallerError):
    """Raised when the resolved URL or headers cannot form a request."""


class TransportError(HTTPCallerError):
    """Raised when the transport fails or the call deadline expires."""

    def __init__(self, message: str, method: str) -> None:
        super().__init__(message)
        self.method = method


class BodyReadError(HTTPCallerError):
    """Raised when the response body cannot be read in full."""


class DecodeError(HTTPCallerError):
    """Raised when the response body cannot be decoded."""


class ValidationError(HTTPCallerError):
    """Raised when the response does not match the base success response.

    Values are compared by their string form, so ``1`` and ``"1"`` match.
    ``actual`` is ``None`` and ``missing`` is true when the key is absent.
    """

    def __init__(
        self,
        message: str,
        key: str,
        expected: Any,
        actual: Any = None,
        missing: bool = False,
    ) -> None:
        super().__init__(message)
        self.key = key
        self.expected = expected
        self.actual = actual
        self.missing = missing
