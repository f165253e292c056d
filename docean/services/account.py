"""Account endpoint: ``/account``."""

from __future__ import annotations

from docean.models.account import Account

from .base import Resource, Service


class AccountService(Service):
    """The account the client's token belongs to.

    ``/account`` is a singleton: there is no collection to list, create
    in or delete from, only the one record to read.
    """

    resource = Resource("/account", "account", "account")

    async def get(self) -> Account:
        """Information about the authenticated account."""
        r = self.resource
        return await self._one("GET", r.collection, r.singular)


__all__ = ["AccountService"]
