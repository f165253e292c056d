"""docean - async client for the DigitalOcean API.

Example:

    from docean import DigitalOcean

    async with DigitalOcean("dop_v1_...") as do:
        web = await do.droplets.list_by_tag("web")
        for droplet in web:
            print(droplet["id"], droplet["name"])
"""

from docean.client import DigitalOcean, get_token
from docean.config import ClientConfig, load_config, resolve_config
from docean.errors import (
    ApiError,
    DigitalOceanError,
    MalformedResponseError,
    NotFoundError,
    TransportError,
)
from docean.logging import LogConfig, setup_logging, teardown_logging
from docean.models import (
    Account,
    Action,
    App,
    AppRequest,
    AppSpec,
    Backup,
    Deployment,
    Droplet,
    DropletRequest,
    Kernel,
    Snapshot,
    private_ipv4,
    public_ipv4,
)
from docean.services import AccountService, AppService, DropletService, Resource, ResourceService

__all__ = [
    # Client
    "DigitalOcean",
    "get_token",
    # Configuration
    "ClientConfig",
    "load_config",
    "resolve_config",
    "LogConfig",
    "setup_logging",
    "teardown_logging",
    # Errors
    "ApiError",
    "DigitalOceanError",
    "MalformedResponseError",
    "NotFoundError",
    "TransportError",
    # Models
    "Account",
    "Action",
    "App",
    "AppRequest",
    "AppSpec",
    "Backup",
    "Deployment",
    "Droplet",
    "DropletRequest",
    "Kernel",
    "Snapshot",
    "private_ipv4",
    "public_ipv4",
    # Services
    "AccountService",
    "AppService",
    "DropletService",
    "Resource",
    "ResourceService",
]
