"""REST collection client — implements the CollectionClient interface.

Maps collection operations onto the admin API's per-entity endpoints:

    GET    /api/{scope}/{entity}          list (query params narrow it)
    GET    /api/{scope}/{entity}/{id}     get
    POST   /api/{scope}/{entity}          create
    PUT    /api/{scope}/{entity}/{id}     update
    PATCH  /api/{scope}/{entity}/{id}     partial status change
    DELETE /api/{scope}/{entity}/{id}     delete
"""

import logging
from typing import Any

from admin_console.application.interfaces import CollectionClient
from admin_console.domain.entities import Entity
from admin_console.domain.exceptions import ApiError, ApiErrorKind
from admin_console.infrastructure.http.base_client import BaseApiClient

logger = logging.getLogger(__name__)


class RestCollectionClient(BaseApiClient, CollectionClient):
    """Infrastructure adapter — one entity collection of the admin API."""

    def __init__(self, base_url: str, resource_path: str, **options: Any):
        super().__init__(base_url, **options)
        self._resource_path = resource_path.strip("/")

    @property
    def resource_path(self) -> str:
        return self._resource_path

    def nested(self, parent_id: str, child: str) -> "RestCollectionClient":
        """Client for a sub-collection such as ``plans/{id}/features``."""
        return RestCollectionClient(
            self._base_url,
            f"{self._resource_path}/{parent_id}/{child.strip('/')}",
            **self._connection_options(),
        )

    def _url(self, entity_id: str | None = None) -> str:
        if entity_id is None:
            return self._api_url(self._resource_path)
        return self._api_url(f"{self._resource_path}/{entity_id}")

    async def list(self, params: dict[str, Any] | None = None) -> list[Entity]:
        query = {k: v for k, v in (params or {}).items() if v not in (None, "")}
        response = await self._send("GET", self._url(), params=query or None)
        data = self._parse_json(response)
        if not isinstance(data, list):
            raise self._malformed(response.status_code, "Expected a JSON array")
        return [self._to_entity(item, response.status_code) for item in data]

    async def get(self, entity_id: str) -> Entity:
        response = await self._send("GET", self._url(entity_id))
        return self._to_entity(self._parse_json(response), response.status_code)

    async def create(self, payload: dict[str, Any]) -> Entity:
        response = await self._send("POST", self._url(), json=payload)
        return self._to_entity(self._parse_json(response), response.status_code)

    async def update(self, entity_id: str, payload: dict[str, Any]) -> Entity:
        response = await self._send("PUT", self._url(entity_id), json=payload)
        return self._to_entity(self._parse_json(response), response.status_code)

    async def patch(self, entity_id: str, payload: dict[str, Any]) -> Entity | None:
        response = await self._send("PATCH", self._url(entity_id), json=payload)
        data = self._parse_json(response, allow_empty=True)
        if data is None:
            return None
        return self._to_entity(data, response.status_code)

    async def delete(self, entity_id: str) -> None:
        await self._send("DELETE", self._url(entity_id))

    def _to_entity(self, data: Any, status_code: int) -> Entity:
        try:
            return Entity.from_dict(data)
        except ValueError as exc:
            raise self._malformed(status_code, str(exc)) from exc

    def _malformed(self, status_code: int, detail: str) -> ApiError:
        logger.warning("Malformed %s response: %s", self._resource_path, detail)
        return ApiError(
            ApiErrorKind.MALFORMED,
            self._malformed_response_message,
            status_code=status_code,
        )
