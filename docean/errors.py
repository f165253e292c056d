"""Exceptions raised by the DigitalOcean client.

Everything derives from ``DigitalOceanError``:

- ``TransportError``: the request never got an HTTP response.
- ``ApiError``: the API answered with a non-2xx status.
  ``NotFoundError`` is the 404 case.
- ``MalformedResponseError``: a 2xx body without the expected envelope.
"""

from __future__ import annotations

import json
from typing import Literal

from docean.infra.http import HttpError, NetworkError


class DigitalOceanError(Exception):
    """Base error for the DigitalOcean client."""


class TransportError(DigitalOceanError):
    """DNS, connect or timeout failure before any response arrived."""

    def __init__(self, method: str, path: str, reason: str) -> None:
        self.method = method
        self.path = path
        self.reason = reason
        super().__init__(f"{method} {path} failed: {reason}")

    @classmethod
    def from_network(cls, error: NetworkError, *, path: str) -> TransportError:
        return cls(error.method, path, error.reason)


class ApiError(DigitalOceanError):
    """Non-2xx response from the DigitalOcean API.

    ``body`` is the raw response text. When it is DigitalOcean's JSON
    error document (``{"id": ..., "message": ...}``) the two fields are
    decoded into ``error_id`` and ``message``.
    """

    def __init__(self, status: int, body: str, *, method: str = "", path: str = "") -> None:
        self.status = status
        self.body = body
        self.method = method
        self.path = path
        self.error_id, self.message = _decode_error_body(body)
        super().__init__(self._describe())

    def _describe(self) -> str:
        where = f"{self.method} {self.path}: " if self.method else ""
        detail = self.message or self.body or "<empty body>"
        return f"{where}HTTP {self.status}: {detail}"

    @classmethod
    def from_http(cls, error: HttpError, *, method: str = "", path: str = "") -> ApiError:
        match error.status:
            case 404:
                return NotFoundError(error.status, error.body, method=method, path=path)
            case _:
                return cls(error.status, error.body, method=method, path=path)


class NotFoundError(ApiError):
    """HTTP 404: the addressed resource does not exist."""


class MalformedResponseError(DigitalOceanError):
    """A successful response whose body lacks the expected envelope field."""

    def __init__(self, path: str, field: str, expected: Literal["object", "array"]) -> None:
        self.path = path
        self.field = field
        self.expected = expected
        super().__init__(
            f"Malformed response from {path}: expected {expected} under '{field}'"
        )


def _decode_error_body(body: str) -> tuple[str | None, str | None]:
    try:
        doc = json.loads(body)
    except ValueError:
        return None, None
    if not isinstance(doc, dict):
        return None, None
    error_id = doc.get("id")
    message = doc.get("message")
    return (
        error_id if isinstance(error_id, str) else None,
        message if isinstance(message, str) else None,
    )


__all__ = [
    "ApiError",
    "DigitalOceanError",
    "MalformedResponseError",
    "NotFoundError",
    "TransportError",
]
