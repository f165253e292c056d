"""DigitalOcean API data shapes.

Plain TypedDicts: decoding a response is a dict lookup, and any model can
be serialized back into a request body as-is.
"""

from docean.models.account import Account, AccountStatus, Team
from docean.models.app import (
    App,
    AppEnvSpec,
    AppGitHubSource,
    AppRequest,
    AppRouteSpec,
    AppSpec,
    AppSpecDomain,
    AppSpecFunction,
    AppSpecService,
    AppSpecStaticSite,
    AppSpecWorker,
    Deployment,
)
from docean.models.common import Action, ActionStatus, Backup, Kernel, Links, Meta, Snapshot
from docean.models.droplet import (
    Droplet,
    DropletNetworks,
    DropletRequest,
    DropletStatus,
    Image,
    NetworkV4,
    NetworkV6,
    Region,
    Size,
    private_ipv4,
    public_ipv4,
)

__all__ = [
    # Account
    "Account",
    "AccountStatus",
    "Team",
    # Apps
    "App",
    "AppEnvSpec",
    "AppGitHubSource",
    "AppRequest",
    "AppRouteSpec",
    "AppSpec",
    "AppSpecDomain",
    "AppSpecFunction",
    "AppSpecService",
    "AppSpecStaticSite",
    "AppSpecWorker",
    "Deployment",
    # Droplet records
    "Action",
    "ActionStatus",
    "Backup",
    "Kernel",
    "Links",
    "Meta",
    "Snapshot",
    # Droplets
    "Droplet",
    "DropletNetworks",
    "DropletRequest",
    "DropletStatus",
    "Image",
    "NetworkV4",
    "NetworkV6",
    "Region",
    "Size",
    "private_ipv4",
    "public_ipv4",
]
