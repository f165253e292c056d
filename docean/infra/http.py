from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias, runtime_checkable

import aiohttp
from loguru import logger

# ─── Errors ──────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class HttpError(Exception):
    status: int
    body: str

    def __str__(self) -> str:
        return f"HTTP {self.status}: {self.body}"


@dataclass(frozen=True, slots=True)
class NetworkError(Exception):
    method: str
    url: str
    reason: str

    def __str__(self) -> str:
        return f"{self.method} {self.url} failed: {self.reason}"


# ─── Auth ────────────────────────────────────────────────────────────


@runtime_checkable
class Auth(Protocol):
    def headers(self) -> dict[str, str]: ...


class BearerAuth:
    def __init__(self, token: str) -> None:
        self._token = token

    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Accept": "application/json",
        }

    def __repr__(self) -> str:
        return "BearerAuth(token=***)"


# ─── Client ──────────────────────────────────────────────────────────


Body: TypeAlias = dict[str, Any] | list[Any]
Params: TypeAlias = dict[str, Any]


class HttpClient:
    """One aiohttp session bound to a base URL and its own headers.

    Headers live on the instance, so clients built with different
    credentials never see each other's Authorization header. Without
    ``timeout`` the session keeps aiohttp's own default.
    """

    def __init__(
        self,
        base_url: str,
        auth: Auth | None = None,
        *,
        timeout: float | None = None,
        default_headers: dict[str, str] | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._auth = auth
        self._timeout = aiohttp.ClientTimeout(total=timeout) if timeout is not None else None
        self._default_headers = default_headers or {}
        self._session: aiohttp.ClientSession | None = None
        self._log = logger.bind(component="http")

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            if self._timeout is None:
                self._session = aiohttp.ClientSession()
            else:
                self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session

    def _headers(self) -> dict[str, str]:
        headers = dict(self._default_headers)
        if self._auth:
            headers.update(self._auth.headers())
        return headers

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Body | None = None,
        params: Params | None = None,
    ) -> Any:
        """Send one request and return the decoded body.

        Returns parsed JSON, ``None`` for an empty body, or the raw text when
        a 2xx body is not JSON. Non-2xx raises HttpError; a connection or
        timeout failure raises NetworkError.
        """
        session = await self._ensure_session()
        url = f"{self._base_url}{path}"
        self._log.debug("{method} {path}", method=method, path=path)

        try:
            async with session.request(
                method, url, headers=self._headers(), json=json, params=params
            ) as resp:
                return await self._decode(resp)
        except (aiohttp.ClientError, TimeoutError) as e:
            self._log.warning(
                "{method} {path} failed: {error}",
                method=method, path=path, error=repr(e),
            )
            raise NetworkError(method=method, url=url, reason=str(e) or type(e).__name__) from e

    async def _decode(self, resp: aiohttp.ClientResponse) -> Any:
        if not 200 <= resp.status < 300:
            body = await resp.text()
            self._log.warning(
                "HTTP {status} from {url}: {body}",
                status=resp.status, url=str(resp.url), body=body[:500],
            )
            raise HttpError(status=resp.status, body=body)
        if not await resp.read():
            return None
        try:
            return await resp.json(content_type=None)
        except ValueError:
            return await resp.text()

    # ─── Lifecycle ───────────────────────────────────────────────────

    async def close(self) -> None:
        if self._session and not self._session.closed:
            self._log.debug("Closing HTTP session")
            await self._session.close()

    async def __aenter__(self) -> HttpClient:
        await self._ensure_session()
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()
