"""Entry point: one authenticated client exposing every resource service."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from loguru import logger

from docean.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, TOKEN_ENV, ClientConfig, resolve_config
from docean.infra.http import BearerAuth, HttpClient
from docean.services.account import AccountService
from docean.services.apps import AppService
from docean.services.droplets import DropletService


class DigitalOcean:
    """Async client for the DigitalOcean API.

    Each instance owns its own HTTP session and Authorization header, so
    clients for different tokens can be used side by side.

    Example:
        async with DigitalOcean("dop_v1_...") as do:
            account = await do.account.get()
            droplet = await do.droplets.create({
                "name": "web-1",
                "region": "nyc3",
                "size": "s-1vcpu-1gb",
                "image": "ubuntu-24-04-x64",
                "tags": ["web"],
            })
            apps = await do.apps.list()
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = DEFAULT_TIMEOUT,
    ) -> None:
        token = get_token(token)
        self._config = ClientConfig(token=token, base_url=base_url, timeout=timeout)
        self._http = HttpClient(
            base_url,
            BearerAuth(token),
            timeout=timeout,
            default_headers={"Content-Type": "application/json"},
        )
        self.droplets = DropletService(self._http)
        self.apps = AppService(self._http)
        self.account = AccountService(self._http)
        logger.bind(component="client").debug(
            "DigitalOcean client for {base_url}", base_url=base_url,
        )

    @classmethod
    def from_config(cls, config: ClientConfig | None = None, *, project_dir: Path | None = None) -> DigitalOcean:
        """Build a client from a ClientConfig, or from docean.toml and the environment."""
        config = config or resolve_config(project_dir=project_dir)
        return cls(config.token, base_url=config.base_url, timeout=config.timeout)

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> DigitalOcean:
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()


def get_token(explicit: str | None = None) -> str:
    """Get DigitalOcean API token, from the argument or the environment."""
    token = explicit or os.environ.get(TOKEN_ENV)
    if not token:
        raise ValueError(
            "DigitalOcean API token not found. "
            f"Pass token= or set the {TOKEN_ENV} environment variable."
        )
    return token


__all__ = ["DigitalOcean", "get_token"]
