"""Droplet endpoints: ``/droplets`` and the droplet neighbors report."""

from __future__ import annotations

from typing import Any

from docean.models.common import Action, Backup, Kernel, Snapshot
from docean.models.droplet import Droplet, DropletRequest

from .base import Resource, ResourceId, ResourceService, unwrap_many

NEIGHBORS_REPORT_PATH = "/reports/droplet_neighbors"


class DropletService(ResourceService[Droplet, DropletRequest]):
    """Droplet operations.

    Example:
        async with DigitalOcean(token) as do:
            web = await do.droplets.list_by_tag("web")
            await do.droplets.delete_by_tag("staging")
    """

    resource = Resource("/droplets", "droplet", "droplets")

    # =========================================================================
    # Associated Records
    # =========================================================================

    async def kernels(self, droplet_id: ResourceId) -> list[Kernel]:
        """Kernels available to a droplet."""
        return await self.list_associated(droplet_id, "kernels", "kernels", Kernel)

    async def snapshots(self, droplet_id: ResourceId) -> list[Snapshot]:
        """Snapshots created from a droplet."""
        return await self.list_associated(droplet_id, "snapshots", "snapshots", Snapshot)

    async def backups(self, droplet_id: ResourceId) -> list[Backup]:
        """Backups associated with a droplet."""
        return await self.list_associated(droplet_id, "backups", "backups", Backup)

    async def actions(self, droplet_id: ResourceId) -> list[Action]:
        """Actions that have been executed on a droplet."""
        return await self.list_associated(droplet_id, "actions", "actions", Action)

    # =========================================================================
    # Neighbors
    # =========================================================================

    async def neighbors(self, droplet_id: ResourceId) -> list[Droplet]:
        """Droplets running on the same physical server as ``droplet_id``."""
        return await self.list_associated(droplet_id, "neighbors", "droplets", Droplet)

    async def neighbors_report(self) -> list[list[Droplet]]:
        """Every group of the account's droplets that share physical hardware."""
        body = await self._request("GET", NEIGHBORS_REPORT_PATH)
        return unwrap_many(body, "neighbors", NEIGHBORS_REPORT_PATH)

    # =========================================================================
    # Droplet Actions
    # =========================================================================

    async def perform_action(
        self, droplet_id: ResourceId, action_type: str, **params: Any,
    ) -> Action:
        """Start an action (``reboot``, ``power_off``, ``snapshot``...) on a droplet.

        Extra keyword arguments are sent as action parameters, e.g.
        ``perform_action(1, "snapshot", name="before-upgrade")``. A ``type``
        keyword never overrides ``action_type``.
        """
        self._log.debug(
            "Droplet {id}: {action}", id=droplet_id, action=action_type,
        )
        return await self._one(
            "POST",
            self.resource.sub(droplet_id, "actions"),
            "action",
            json={**params, "type": action_type},
        )

    async def get_action(self, droplet_id: ResourceId, action_id: int) -> Action:
        """Current state of one action executed on a droplet."""
        return await self._one(
            "GET", self.resource.sub(droplet_id, f"actions/{action_id}"), "action",
        )


__all__ = ["NEIGHBORS_REPORT_PATH", "DropletService"]
