"""Read-only records attached to a droplet or app.

TypedDicts for API responses - no conversion needed.
"""

from __future__ import annotations

from typing import Literal, NotRequired, TypeAlias, TypedDict

ActionStatus: TypeAlias = Literal["in-progress", "completed", "errored"]


class Links(TypedDict, total=False):
    """Pagination links returned beside collection payloads."""

    pages: dict[str, str]
    actions: list[dict[str, str | int]]


class Meta(TypedDict):
    total: int


class Kernel(TypedDict):
    """Kernel available to a droplet."""

    id: int
    name: str
    version: str


class Snapshot(TypedDict):
    """Snapshot image created from a droplet."""

    id: int | str
    name: str
    type: NotRequired[str]  # "snapshot"
    distribution: NotRequired[str]
    slug: NotRequired[str | None]
    public: NotRequired[bool]
    regions: NotRequired[list[str]]
    created_at: str
    min_disk_size: NotRequired[int]
    size_gigabytes: NotRequired[float]
    description: NotRequired[str]
    tags: NotRequired[list[str]]
    status: NotRequired[str]
    error_message: NotRequired[str]
    resource_id: NotRequired[str]
    resource_type: NotRequired[str]


class Backup(TypedDict):
    """Automatic backup image of a droplet."""

    id: int
    name: str
    type: NotRequired[str]  # "backup"
    distribution: NotRequired[str]
    slug: NotRequired[str | None]
    public: NotRequired[bool]
    regions: NotRequired[list[str]]
    created_at: str
    min_disk_size: NotRequired[int]
    size_gigabytes: NotRequired[float]
    status: NotRequired[str]


class Action(TypedDict):
    """An event executed on a resource (power on, resize, snapshot...)."""

    id: int
    status: ActionStatus
    type: str
    started_at: str
    completed_at: str | None
    resource_id: int
    resource_type: str
    region: NotRequired[dict[str, object] | None]
    region_slug: NotRequired[str | None]


__all__ = [
    "Action",
    "ActionStatus",
    "Backup",
    "Kernel",
    "Links",
    "Meta",
    "Snapshot",
]
