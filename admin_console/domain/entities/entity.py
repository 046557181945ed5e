"""Domain entity — one record of any admin resource as held client-side."""

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any

_MISSING = object()


@dataclass
class Entity:
    """A record with an opaque string identity and free-form attributes.

    Attributes may embed denormalised relations (``{"student": {"name": ...}}``)
    or counts (``{"userCount": 3}``); they are reachable with dotted paths.
    """

    id: str
    attributes: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Entity":
        """Build an entity from a JSON object; the ``id`` key is mandatory."""
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
        if data.get("id") in (None, ""):
            raise ValueError("Entity payload has no 'id'")
        attributes = {k: v for k, v in data.items() if k != "id"}
        return cls(id=str(data["id"]), attributes=attributes)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, **deepcopy(self.attributes)}

    def get(self, path: str, default: Any = None) -> Any:
        """Read an attribute by name or dotted path (``test.courseId``)."""
        if path == "id":
            return self.id
        current: Any = self.attributes
        for part in path.split("."):
            if not isinstance(current, dict):
                return default
            current = current.get(part, _MISSING)
            if current is _MISSING:
                return default
        return current

    def with_attributes(self, **changes: Any) -> "Entity":
        """Return a copy with the given top-level attributes replaced."""
        attributes = deepcopy(self.attributes)
        attributes.update(changes)
        return Entity(id=self.id, attributes=attributes)
