"""Generic request/unwrap template shared by every resource service.

Every DigitalOcean endpoint answers with its payload nested under a field
named after the resource: singular for one item, plural for collections::

    GET /droplets/1   ->  {"droplet": {...}}
    GET /droplets     ->  {"droplets": [...], "links": {...}, "meta": {...}}

A ``Resource`` names the collection path and both envelope keys; a
``ResourceService`` turns that descriptor into the CRUD operations. Each
operation is one HTTP round trip: build the path, send, unwrap.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeAlias, TypeVar, cast
from urllib.parse import quote

from loguru import logger

from docean.errors import ApiError, MalformedResponseError, TransportError
from docean.infra.http import Body, HttpClient, HttpError, NetworkError, Params

ResourceId: TypeAlias = int | str

T = TypeVar("T")
R = TypeVar("R")
U = TypeVar("U")

# =============================================================================
# Resource Descriptor
# =============================================================================


@dataclass(frozen=True, slots=True)
class Resource:
    """Collection path plus singular/plural envelope keys.

    Example:
        >>> Resource("/droplets", "droplet", "droplets").item(42)
        '/droplets/42'
    """

    collection: str
    singular: str
    plural: str

    def item(self, resource_id: ResourceId) -> str:
        return f"{self.collection}/{quote(str(resource_id), safe='')}"

    def sub(self, resource_id: ResourceId, subpath: str) -> str:
        return f"{self.item(resource_id)}/{subpath}"


# =============================================================================
# Envelope Decoding
# =============================================================================


def unwrap_one(body: Any, field: str, path: str) -> dict[str, Any]:
    """Return the object nested under ``field`` or raise MalformedResponseError."""
    match body:
        case {**envelope} if isinstance(envelope.get(field), dict):
            return envelope[field]
        case _:
            raise MalformedResponseError(path, field, "object")


def unwrap_many(body: Any, field: str, path: str) -> list[Any]:
    """Return the array nested under ``field`` or raise MalformedResponseError.

    An empty array decodes to ``[]``; a missing or null field is malformed.
    """
    match body:
        case {**envelope} if isinstance(envelope.get(field), list):
            return envelope[field]
        case _:
            raise MalformedResponseError(path, field, "array")


# =============================================================================
# Resource Service
# =============================================================================


class Service:
    """Sends requests through a shared HttpClient and maps transport errors."""

    resource: ClassVar[Resource]

    def __init__(self, http: HttpClient) -> None:
        self._http = http
        self._log = logger.bind(component="service", resource=self.resource.plural)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Body | None = None,
        params: Params | None = None,
    ) -> Any:
        try:
            return await self._http.request(method, path, json=json, params=params)
        except HttpError as e:
            self._log.debug(
                "API error {method} {path}: {status}",
                method=method, path=path, status=e.status,
            )
            raise ApiError.from_http(e, method=method, path=path) from e
        except NetworkError as e:
            raise TransportError.from_network(e, path=path) from e

    async def _one(
        self,
        method: str,
        path: str,
        field: str,
        *,
        json: Body | None = None,
        params: Params | None = None,
    ) -> Any:
        body = await self._request(method, path, json=json, params=params)
        return unwrap_one(body, field, path)

    async def _many(
        self,
        method: str,
        path: str,
        field: str,
        *,
        json: Body | None = None,
        params: Params | None = None,
    ) -> list[Any]:
        body = await self._request(method, path, json=json, params=params)
        return unwrap_many(body, field, path)


class ResourceService(Service, Generic[T, R]):
    """CRUD operations for one collection, generated from ``resource``.

    ``T`` is the model a response decodes into, ``R`` the request body
    accepted by ``create``. Subclasses only set ``resource`` and add
    operations specific to their endpoint.
    """

    # -------------------------------------------------------------------------
    # Create
    # -------------------------------------------------------------------------

    async def create(self, spec: R) -> T:
        """POST the spec to the collection and return the created item."""
        r = self.resource
        self._log.debug("Creating {singular}", singular=r.singular)
        return await self._one("POST", r.collection, r.singular, json=cast(Body, spec))

    async def create_multiple(self, spec: R) -> list[T]:
        """POST a multi-item spec (e.g. ``names``) and return every created item."""
        r = self.resource
        self._log.debug("Creating several {plural}", plural=r.plural)
        return await self._many("POST", r.collection, r.plural, json=cast(Body, spec))

    # -------------------------------------------------------------------------
    # Read
    # -------------------------------------------------------------------------

    async def get(self, resource_id: ResourceId) -> T:
        """Fetch one item. Raises NotFoundError if it does not exist."""
        r = self.resource
        return await self._one("GET", r.item(resource_id), r.singular)

    async def list(self) -> list[T]:
        """Every item in the collection; ``[]`` when there are none."""
        r = self.resource
        return await self._many("GET", r.collection, r.plural)

    async def list_by_tag(self, tag: str) -> list[T]:
        """Items carrying ``tag``, in the order the API returns them."""
        r = self.resource
        return await self._many(
            "GET", r.collection, r.plural, params={"tag_name": tag},
        )

    async def list_associated(
        self, resource_id: ResourceId, subpath: str, field: str, model: type[U],
    ) -> list[U]:
        """GET ``{collection}/{id}/{subpath}`` and unwrap the ``field`` array."""
        _ = model
        return await self._many("GET", self.resource.sub(resource_id, subpath), field)

    # -------------------------------------------------------------------------
    # Update
    # -------------------------------------------------------------------------

    async def update(self, resource_id: ResourceId, spec: R) -> T:
        """PUT a full replacement spec and return the updated item."""
        r = self.resource
        return await self._one(
            "PUT", r.item(resource_id), r.singular, json=cast(Body, spec),
        )

    # -------------------------------------------------------------------------
    # Delete
    # -------------------------------------------------------------------------

    async def delete(self, resource_id: ResourceId) -> None:
        r = self.resource
        self._log.debug("Deleting {singular} {id}", singular=r.singular, id=resource_id)
        await self._request("DELETE", r.item(resource_id))

    async def delete_by_tag(self, tag: str) -> None:
        """Delete every item carrying ``tag``. Zero matches is not an error."""
        r = self.resource
        self._log.debug("Deleting {plural} tagged {tag}", plural=r.plural, tag=tag)
        await self._request("DELETE", r.collection, params={"tag_name": tag})


__all__ = [
    "Resource",
    "ResourceId",
    "ResourceService",
    "Service",
    "unwrap_many",
    "unwrap_one",
]
