"""TOML-based client configuration.

Loads ~/.docean/defaults.toml (global) and docean.toml (project), merges
them, and resolves the ``[client]`` table into a ClientConfig. Values
missing from both files fall back to environment variables::

    # docean.toml
    [client]
    token = "dop_v1_..."
    base_url = "https://api.digitalocean.com/v2"
    timeout = 15
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, TypeAlias

RawConfig: TypeAlias = dict[str, Any]

DEFAULT_BASE_URL = "https://api.digitalocean.com/v2"
DEFAULT_TIMEOUT: float | None = None

TOKEN_ENV = "DIGITALOCEAN_TOKEN"
BASE_URL_ENV = "DIGITALOCEAN_API_URL"

GLOBAL_CONFIG_PATH = Path.home() / ".docean" / "defaults.toml"
PROJECT_CONFIG_NAME = "docean.toml"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Settings for one DigitalOcean client.

    Args:
        token: API token. Falls back to DIGITALOCEAN_TOKEN env var.
        base_url: API root. Default: https://api.digitalocean.com/v2.
        timeout: Total per-request timeout in seconds. Default: None (aiohttp default).
    """

    token: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = DEFAULT_TIMEOUT

    def __repr__(self) -> str:
        token = "***" if self.token else None
        return f"ClientConfig(token={token!r}, base_url={self.base_url!r}, timeout={self.timeout!r})"


def _deep_merge(base: RawConfig, override: RawConfig) -> RawConfig:
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_toml(path: Path) -> RawConfig:
    if not path.is_file():
        return {}
    with path.open("rb") as f:
        return tomllib.load(f)


def load_config(
    *,
    project_dir: Path | None = None,
    global_path: Path | None = None,
) -> RawConfig:
    global_cfg = _read_toml(global_path or GLOBAL_CONFIG_PATH)
    project_path = (project_dir or Path.cwd()) / PROJECT_CONFIG_NAME
    project_cfg = _read_toml(project_path)

    merged = _deep_merge(global_cfg, project_cfg)
    merged.setdefault("client", {})
    return merged


def resolve_config(
    *,
    project_dir: Path | None = None,
    global_path: Path | None = None,
    environ: dict[str, str] | None = None,
) -> ClientConfig:
    """Build a ClientConfig from the merged TOML files and the environment.

    File values win over environment variables; unknown keys in the
    ``[client]`` table raise ValueError.
    """
    env = os.environ if environ is None else environ
    raw = dict(load_config(project_dir=project_dir, global_path=global_path)["client"])

    valid = {f.name for f in fields(ClientConfig)}
    if unknown := sorted(set(raw) - valid):
        raise ValueError(
            f"Unknown [client] keys: {', '.join(unknown)}. "
            f"Valid: {', '.join(sorted(valid))}"
        )

    if "token" not in raw and (token := env.get(TOKEN_ENV)):
        raw["token"] = token
    if "base_url" not in raw and (base_url := env.get(BASE_URL_ENV)):
        raw["base_url"] = base_url
    if "timeout" in raw:
        raw["timeout"] = float(raw["timeout"])

    return ClientConfig(**raw)


__all__ = [
    "BASE_URL_ENV",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "GLOBAL_CONFIG_PATH",
    "PROJECT_CONFIG_NAME",
    "TOKEN_ENV",
    "ClientConfig",
    "load_config",
    "resolve_config",
]
