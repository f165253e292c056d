from __future__ import annotations

import asyncio
from pathlib import Path

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from docean import DigitalOcean, get_token
from docean.config import DEFAULT_BASE_URL, ClientConfig
from docean.errors import TransportError
from tests.conftest import StubAPI

pytestmark = [pytest.mark.unit]


class TestGetToken:
    def test_explicit_wins(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DIGITALOCEAN_TOKEN", "from-env")
        assert get_token("explicit") == "explicit"

    def test_env_fallback(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DIGITALOCEAN_TOKEN", "from-env")
        assert get_token() == "from-env"

    def test_missing(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("DIGITALOCEAN_TOKEN", raising=False)
        with pytest.raises(ValueError, match="DIGITALOCEAN_TOKEN"):
            get_token()


async def test_defaults():
    async with DigitalOcean("t") as do:
        assert do.config.base_url == DEFAULT_BASE_URL
        assert do.config.timeout is None


async def test_clients_with_different_tokens_coexist(base_url: str, stub: StubAPI):
    stub.respond("GET", "/account", json={"account": {"uuid": "x"}})

    async with (
        DigitalOcean("token-a", base_url=base_url) as a,
        DigitalOcean("token-b", base_url=base_url) as b,
    ):
        await a.account.get()
        await b.account.get()
        await a.account.get()

    sent = [r.headers["Authorization"] for r in stub.requests]
    assert sent == ["Bearer token-a", "Bearer token-b", "Bearer token-a"]


async def test_services_share_one_session(client: DigitalOcean):
    assert client.droplets._http is client.apps._http is client.account._http


async def test_from_config(base_url: str, stub: StubAPI):
    stub.respond("GET", "/droplets", json={"droplets": []})
    config = ClientConfig(token="cfg-token", base_url=base_url, timeout=5)

    async with DigitalOcean.from_config(config) as do:
        assert await do.droplets.list() == []

    assert stub.last.headers["Authorization"] == "Bearer cfg-token"


async def test_from_config_reads_project_file(tmp_path: Path, base_url: str):
    (tmp_path / "docean.toml").write_text(
        f'[client]\ntoken = "file-token"\nbase_url = "{base_url}"\n'
    )

    async with DigitalOcean.from_config(project_dir=tmp_path) as do:
        assert do.config.token == "file-token"
        assert do.config.base_url == base_url


async def test_unreachable_api_raises_transport_error():
    async with DigitalOcean("t", base_url="http://127.0.0.1:1/v2", timeout=5) as do:
        with pytest.raises(TransportError) as exc_info:
            await do.droplets.list()

    assert exc_info.value.method == "GET"
    assert exc_info.value.path == "/droplets"
    assert exc_info.value.__cause__ is not None


async def test_stalled_api_raises_transport_error():
    async def stalled(_: web.Request) -> web.Response:
        await asyncio.sleep(0.5)
        return web.json_response({"droplets": []})

    app = web.Application()
    app.router.add_get("/v2/droplets", stalled)
    srv = TestServer(app)
    await srv.start_server()
    try:
        async with DigitalOcean("t", base_url=f"http://{srv.host}:{srv.port}/v2", timeout=0.1) as do:
            with pytest.raises(TransportError) as exc_info:
                await do.droplets.list()
    finally:
        await srv.close()

    assert exc_info.value.path == "/droplets"
    assert exc_info.value.__cause__ is not None
