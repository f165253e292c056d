"""Account API types."""

from __future__ import annotations

from typing import Literal, NotRequired, TypeAlias, TypedDict

AccountStatus: TypeAlias = Literal["active", "warning", "locked"]


class Team(TypedDict):
    uuid: str
    name: str


class Account(TypedDict):
    """The account tied to the token the client authenticates with."""

    uuid: str
    email: str
    email_verified: bool
    status: AccountStatus
    status_message: str
    droplet_limit: NotRequired[int]
    floating_ip_limit: NotRequired[int]
    volume_limit: NotRequired[int]
    reserved_ip_limit: NotRequired[int]
    team: NotRequired[Team]


__all__ = ["Account", "AccountStatus", "Team"]
