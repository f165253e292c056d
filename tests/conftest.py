from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from docean import DigitalOcean

API_PREFIX = "/v2"
TOKEN = "test-token"


@dataclass(frozen=True, slots=True)
class Recorded:
    method: str
    path: str
    query: dict[str, str]
    headers: dict[str, str]
    json: Any


@dataclass(frozen=True, slots=True)
class Canned:
    status: int
    json: Any = None
    text: str | None = None


@dataclass
class StubAPI:
    """In-process stand-in for api.digitalocean.com.

    Routes are registered relative to ``/v2``; every request is recorded.
    Unregistered routes answer 404 with DigitalOcean's error document.
    """

    routes: dict[tuple[str, str], Canned] = field(default_factory=dict)
    requests: list[Recorded] = field(default_factory=list)

    def respond(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        status: int = 200,
        text: str | None = None,
    ) -> None:
        self.routes[(method, API_PREFIX + path)] = Canned(status=status, json=json, text=text)

    @property
    def last(self) -> Recorded:
        return self.requests[-1]

    async def handle(self, request: web.Request) -> web.Response:
        body = await request.json() if request.can_read_body else None
        self.requests.append(
            Recorded(
                method=request.method,
                path=request.path.removeprefix(API_PREFIX),
                query=dict(request.query),
                headers=dict(request.headers),
                json=body,
            )
        )
        canned = self.routes.get((request.method, request.path))
        if canned is None:
            return web.json_response(
                {"id": "not_found", "message": "The resource you were accessing could not be found."},
                status=404,
            )
        if canned.text is not None:
            return web.Response(status=canned.status, text=canned.text)
        if canned.json is None:
            return web.Response(status=canned.status)
        return web.json_response(canned.json, status=canned.status)

    def app(self) -> web.Application:
        app = web.Application()
        app.router.add_route("*", "/{tail:.*}", self.handle)
        return app


@pytest.fixture
def stub() -> StubAPI:
    return StubAPI()


@pytest.fixture
async def server(stub: StubAPI):
    srv = TestServer(stub.app())
    await srv.start_server()
    yield srv
    await srv.close()


@pytest.fixture
def base_url(server: TestServer) -> str:
    return f"http://{server.host}:{server.port}{API_PREFIX}"


@pytest.fixture
async def client(base_url: str):
    async with DigitalOcean(TOKEN, base_url=base_url) as do:
        yield do


def droplet_payload(droplet_id: int = 1, name: str = "web-1", **extra: Any) -> dict[str, Any]:
    return {
        "id": droplet_id,
        "name": name,
        "memory": 1024,
        "vcpus": 1,
        "disk": 25,
        "locked": False,
        "status": "active",
        "created_at": "2024-01-15T12:00:00Z",
        "tags": ["web"],
        "networks": {
            "v4": [
                {"ip_address": "10.10.0.2", "netmask": "255.255.0.0", "gateway": "", "type": "private"},
                {"ip_address": "203.0.113.7", "netmask": "255.255.240.0", "gateway": "203.0.113.1", "type": "public"},
            ],
            "v6": [],
        },
        "region": {"slug": "nyc3", "name": "New York 3"},
        "size_slug": "s-1vcpu-1gb",
        **extra,
    }


@pytest.fixture
def make_droplet():
    return droplet_payload
