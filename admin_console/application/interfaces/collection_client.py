"""Abstract collection client interface — port for REST-backed entity collections.

One implementation talks to the admin HTTP API; tests use in-memory fakes.
"""

from abc import ABC, abstractmethod
from typing import Any

from admin_console.domain.entities import Entity


class CollectionClient(ABC):
    """Port — everything a list controller needs from one remote collection."""

    @property
    @abstractmethod
    def resource_path(self) -> str:
        """Collection path relative to the API root (e.g. 'superadmin/companies')."""
        ...

    @abstractmethod
    async def list(self, params: dict[str, Any] | None = None) -> list[Entity]:
        """Fetch the collection, optionally narrowed by query parameters.

        Raises:
            ApiError: On transport failure, non-2xx status or unreadable body.
        """
        ...

    @abstractmethod
    async def get(self, entity_id: str) -> Entity:
        """Fetch a single entity with its embedded relations."""
        ...

    @abstractmethod
    async def create(self, payload: dict[str, Any]) -> Entity:
        """Create an entity and return it as the server stored it."""
        ...

    @abstractmethod
    async def update(self, entity_id: str, payload: dict[str, Any]) -> Entity:
        """Replace an entity's attributes and return the server's version."""
        ...

    @abstractmethod
    async def patch(self, entity_id: str, payload: dict[str, Any]) -> Entity | None:
        """Apply a partial (status-only) change.

        Returns the updated entity, or ``None`` when the server answers
        with an empty body.
        """
        ...

    @abstractmethod
    async def delete(self, entity_id: str) -> None:
        """Delete an entity permanently."""
        ...
