"""Per-resource services, each generated from a ``Resource`` descriptor."""

from .account import AccountService
from .apps import AppService
from .base import Resource, ResourceId, ResourceService, Service, unwrap_many, unwrap_one
from .droplets import DropletService

__all__ = [
    "AccountService",
    "AppService",
    "DropletService",
    "Resource",
    "ResourceId",
    "ResourceService",
    "Service",
    "unwrap_many",
    "unwrap_one",
]
