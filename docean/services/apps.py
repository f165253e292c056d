"""App Platform endpoints: ``/apps``."""

from __future__ import annotations

from docean.models.app import App, AppRequest, Deployment

from .base import Resource, ResourceId, ResourceService


class AppService(ResourceService[App, AppRequest]):
    """App Platform operations.

    ``create`` and ``update`` take an ``AppRequest`` (``{"spec": {...}}``).
    """

    resource = Resource("/apps", "app", "apps")

    async def deployments(self, app_id: ResourceId) -> list[Deployment]:
        """Deployments of an app, most recent first."""
        return await self.list_associated(app_id, "deployments", "deployments", Deployment)


__all__ = ["AppService"]
