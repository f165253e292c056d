"""Droplet API types.

TypedDicts mirror the wire format exactly, so a droplet read from one
response can be sent back in the next request unchanged.
"""

from __future__ import annotations

from typing import Literal, NotRequired, TypeAlias, TypedDict

from .common import Kernel

DropletStatus: TypeAlias = Literal["new", "active", "off", "archive"]

# =============================================================================
# Nested Records
# =============================================================================


class Region(TypedDict):
    slug: str
    name: str
    available: NotRequired[bool]
    sizes: NotRequired[list[str]]
    features: NotRequired[list[str]]


class Size(TypedDict):
    slug: str
    memory: int
    vcpus: int
    disk: int
    transfer: NotRequired[float]
    price_monthly: NotRequired[float]
    price_hourly: NotRequired[float]
    regions: NotRequired[list[str]]
    available: NotRequired[bool]
    description: NotRequired[str]


class Image(TypedDict):
    id: int
    name: str
    distribution: NotRequired[str]
    slug: NotRequired[str | None]
    public: NotRequired[bool]
    regions: NotRequired[list[str]]
    type: NotRequired[str]
    min_disk_size: NotRequired[int]
    size_gigabytes: NotRequired[float]
    created_at: NotRequired[str]
    status: NotRequired[str]


class NetworkV4(TypedDict):
    ip_address: str
    netmask: str
    gateway: str
    type: Literal["public", "private"]


class NetworkV6(TypedDict):
    ip_address: str
    netmask: int
    gateway: str
    type: Literal["public"]


class DropletNetworks(TypedDict, total=False):
    v4: list[NetworkV4]
    v6: list[NetworkV6]


# =============================================================================
# Droplet
# =============================================================================


class Droplet(TypedDict):
    """Droplet as returned by the DigitalOcean API."""

    id: int
    name: str
    memory: NotRequired[int]
    vcpus: NotRequired[int]
    disk: NotRequired[int]
    locked: NotRequired[bool]
    status: NotRequired[DropletStatus]
    created_at: NotRequired[str]
    features: NotRequired[list[str]]
    backup_ids: NotRequired[list[int]]
    snapshot_ids: NotRequired[list[int]]
    next_backup_window: NotRequired[dict[str, str] | None]
    image: NotRequired[Image]
    size: NotRequired[Size]
    size_slug: NotRequired[str]
    networks: NotRequired[DropletNetworks]
    region: NotRequired[Region]
    kernel: NotRequired[Kernel | None]
    tags: NotRequired[list[str]]
    volume_ids: NotRequired[list[str]]
    vpc_uuid: NotRequired[str]


class DropletRequest(TypedDict, total=False):
    """Body for ``POST /droplets``.

    Set ``name`` to create one droplet, or ``names`` to create several
    droplets with the same specs in one call.
    """

    name: str
    names: list[str]
    region: str
    size: str  # Required
    image: str | int  # Required
    ssh_keys: list[str | int]
    backups: bool
    ipv6: bool
    monitoring: bool
    tags: list[str]
    user_data: str
    volumes: list[str]
    vpc_uuid: str
    with_droplet_agent: bool


# =============================================================================
# Helper Functions
# =============================================================================


def _ipv4(droplet: Droplet, kind: Literal["public", "private"]) -> str | None:
    for network in droplet.get("networks", {}).get("v4", []):
        if network.get("type") == kind:
            return network["ip_address"]
    return None


def public_ipv4(droplet: Droplet) -> str | None:
    """First public IPv4 address of a droplet, if it has one yet."""
    return _ipv4(droplet, "public")


def private_ipv4(droplet: Droplet) -> str | None:
    """First private (VPC) IPv4 address of a droplet."""
    return _ipv4(droplet, "private")


__all__ = [
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
