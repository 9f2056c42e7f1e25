"""Custom exception hierarchy for the Graph API client."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class GraphError(RuntimeError):
    """Base error for Graph API failures."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        headers: Mapping[str, str] | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.headers = headers
        self.details = details


class FacebookException(GraphError):
    """An error reported by Facebook itself, either in the body or a header.

    Only ever built from a fully decoded error source, see `from_json` and
    `www_authenticate.parse_www_authenticate`.
    """

    def __init__(self, error_type: str, message: str, *, status_code: int | None = None) -> None:
        super().__init__(f"{error_type}: {message}", status_code=status_code)
        self._type = error_type
        self._message = message

    @property
    def type(self) -> str:
        return self._type

    @property
    def message(self) -> str:
        return self._message

    @classmethod
    def from_json(cls, payload: Any, *, status_code: int | None = None) -> FacebookException:
        """Decode ``{"type": ..., "message": ...}``; raise `ValueError` on any other shape."""

        if not isinstance(payload, Mapping):
            raise ValueError("Facebook error payload must be a JSON object")
        error_type = payload.get("type")
        message = payload.get("message")
        if not isinstance(error_type, str) or not isinstance(message, str):
            raise ValueError("Facebook error payload needs string 'type' and 'message' fields")
        return cls(error_type, message, status_code=status_code)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FacebookException):
            return NotImplemented
        return (self._type, self._message) == (other._type, other._message)

    def __hash__(self) -> int:
        return hash((self._type, self._message))

    def __reduce__(self):
        return (type(self), (self._type, self._message), self.__dict__)

    def __repr__(self) -> str:
        return f"FacebookException(type={self._type!r}, message={self._message!r})"


class StatusCodeError(GraphError):
    """Raised for a non-2xx response carrying no decodable Facebook error."""

    def __init__(self, status_code: int, headers: Mapping[str, str]) -> None:
        super().__init__(
            f"Graph API returned status {status_code}",
            status_code=status_code,
            headers=headers,
        )

    def __reduce__(self):
        return (type(self), (self.status_code, self.headers), self.__dict__)


class UnexpectedResponseError(GraphError):
    """Raised when a successful response does not have the expected shape."""


class ConfigurationError(GraphError):
    """Raised when the client lacks settings an operation needs."""


class HeaderParseError(ValueError):
    """Raised when a ``WWW-Authenticate`` header does not follow Facebook's format."""
