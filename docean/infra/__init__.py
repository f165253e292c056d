"""Internal machinery: the HTTP transport."""

from .http import (
    Auth,
    BearerAuth,
    HttpClient,
    HttpError,
    NetworkError,
)

__all__ = [
    "Auth",
    "BearerAuth",
    "HttpClient",
    "HttpError",
    "NetworkError",
]
