from __future__ import annotations

import asyncio

import aiohttp
import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from docean.infra.http import BearerAuth, HttpClient, HttpError, NetworkError

pytestmark = [pytest.mark.unit]


def make_app(*, token: str = "valid-token") -> web.Application:
    app = web.Application()

    async def json_echo(request: web.Request) -> web.Response:
        auth = request.headers.get("Authorization", "")
        if auth != f"Bearer {token}":
            return web.Response(status=401, text="unauthorized")
        body = await request.json() if request.can_read_body else {}
        return web.json_response({
            "echo": body,
            "params": dict(request.query),
            "method": request.method,
            "headers": dict(request.headers),
        })

    async def whoami(request: web.Request) -> web.Response:
        return web.json_response({"authorization": request.headers.get("Authorization")})

    async def plain_text(_: web.Request) -> web.Response:
        return web.Response(text="plain-text-response")

    async def no_content(_: web.Request) -> web.Response:
        return web.Response(status=204)

    async def error_endpoint(_: web.Request) -> web.Response:
        return web.json_response({"id": "not_found", "message": "not found"}, status=404)

    async def server_error(_: web.Request) -> web.Response:
        return web.Response(status=500, text="internal server error")

    async def not_modified(_: web.Request) -> web.Response:
        return web.Response(status=304)

    async def stalled(_: web.Request) -> web.Response:
        await asyncio.sleep(0.5)
        return web.json_response({})

    app.router.add_route("*", "/echo", json_echo)
    app.router.add_get("/whoami", whoami)
    app.router.add_route("*", "/empty", no_content)
    app.router.add_get("/text", plain_text)
    app.router.add_get("/not-found", error_endpoint)
    app.router.add_get("/server-error", server_error)
    app.router.add_get("/not-modified", not_modified)
    app.router.add_get("/stalled", stalled)
    return app


@pytest.fixture
async def server():
    srv = TestServer(make_app())
    await srv.start_server()
    yield srv
    await srv.close()


@pytest.fixture
def base_url(server: TestServer) -> str:
    return f"http://{server.host}:{server.port}"


# ─── BearerAuth ──────────────────────────────────────────────────────


def test_bearer_auth_headers():
    h = BearerAuth("my-token").headers()
    assert h["Authorization"] == "Bearer my-token"
    assert h["Accept"] == "application/json"


def test_bearer_auth_repr_hides_token():
    assert "my-token" not in repr(BearerAuth("my-token"))


# ─── HttpClient basic requests ───────────────────────────────────────


async def test_get_json(base_url: str):
    async with HttpClient(base_url, BearerAuth("valid-token")) as http:
        result = await http.request("GET", "/echo", params={"tag_name": "web"})
    assert result["params"]["tag_name"] == "web"


async def test_post_json(base_url: str):
    async with HttpClient(base_url, BearerAuth("valid-token")) as http:
        result = await http.request("POST", "/echo", json={"key": "value"})
    assert result["echo"]["key"] == "value"


async def test_empty_body_returns_none(base_url: str):
    async with HttpClient(base_url) as http:
        result = await http.request("DELETE", "/empty")
    assert result is None


async def test_non_json_body_returned_as_text(base_url: str):
    async with HttpClient(base_url) as http:
        result = await http.request("GET", "/text")
    assert result == "plain-text-response"


# ─── Errors ──────────────────────────────────────────────────────────


async def test_http_error_on_4xx(base_url: str):
    async with HttpClient(base_url) as http:
        with pytest.raises(HttpError) as exc_info:
            await http.request("GET", "/not-found")
    assert exc_info.value.status == 404
    assert "not_found" in exc_info.value.body


async def test_http_error_on_5xx(base_url: str):
    async with HttpClient(base_url) as http:
        with pytest.raises(HttpError) as exc_info:
            await http.request("GET", "/server-error")
    assert exc_info.value.status == 500
    assert exc_info.value.body == "internal server error"


async def test_http_error_on_401(base_url: str):
    async with HttpClient(base_url, BearerAuth("wrong")) as http:
        with pytest.raises(HttpError) as exc_info:
            await http.request("GET", "/echo")
    assert exc_info.value.status == 401


def test_http_error_str():
    err = HttpError(status=429, body="rate limited")
    assert str(err) == "HTTP 429: rate limited"


async def test_network_error_when_unreachable():
    async with HttpClient("http://127.0.0.1:1", timeout=5) as http:
        with pytest.raises(NetworkError) as exc_info:
            await http.request("GET", "/droplets")
    assert exc_info.value.method == "GET"
    assert exc_info.value.url == "http://127.0.0.1:1/droplets"


# ─── Headers ─────────────────────────────────────────────────────────


async def test_default_headers(base_url: str):
    async with HttpClient(
        base_url,
        BearerAuth("valid-token"),
        default_headers={"Content-Type": "application/json", "X-Custom": "yes"},
    ) as http:
        result = await http.request("GET", "/echo")
    assert result["headers"]["X-Custom"] == "yes"


async def test_headers_are_per_client(base_url: str):
    async with (
        HttpClient(base_url, BearerAuth("alpha")) as first,
        HttpClient(base_url, BearerAuth("beta")) as second,
    ):
        a = await first.request("GET", "/whoami")
        b = await second.request("GET", "/whoami")
        a_again = await first.request("GET", "/whoami")
    assert a["authorization"] == "Bearer alpha"
    assert b["authorization"] == "Bearer beta"
    assert a_again["authorization"] == "Bearer alpha"


# ─── Context manager & session lifecycle ─────────────────────────────


async def test_close_idempotent(base_url: str):
    http = HttpClient(base_url)
    await http.close()
    await http.close()


async def test_session_created_lazily(base_url: str):
    http = HttpClient(base_url)
    assert http._session is None
    await http.request("GET", "/whoami")
    assert http._session is not None
    await http.close()


async def test_base_url_trailing_slash_stripped():
    http = HttpClient("http://example.com/v2/")
    assert http.base_url == "http://example.com/v2"
    await http.close()


async def test_non_2xx_status_is_an_error(base_url: str):
    async with HttpClient(base_url) as http:
        with pytest.raises(HttpError) as exc_info:
            await http.request("GET", "/not-modified")
    assert exc_info.value.status == 304


# ─── Timeout ─────────────────────────────────────────────────────────


async def test_default_timeout_is_aiohttp_default():
    async with HttpClient("http://example.com") as http:
        assert http._session is not None
        assert http._session.timeout == aiohttp.client.DEFAULT_TIMEOUT


async def test_explicit_timeout_applies_to_session():
    async with HttpClient("http://example.com", timeout=7) as http:
        assert http._session is not None
        assert http._session.timeout.total == 7


async def test_stalled_response_raises_network_error(base_url: str):
    async with HttpClient(base_url, timeout=0.1) as http:
        with pytest.raises(NetworkError) as exc_info:
            await http.request("GET", "/stalled")
    assert exc_info.value.url.endswith("/stalled")
