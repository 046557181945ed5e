"""Domain-specific exceptions — framework-independent."""

from enum import Enum


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist in a collection."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ApiErrorKind(str, Enum):
    """Where a remote call went wrong."""

    TRANSPORT = "transport"
    SERVER = "server"
    MALFORMED = "malformed"


class ApiError(Exception):
    """Raised by a remote client for every failed call.

    Network failures, non-2xx responses and unreadable bodies all end up
    here so callers only ever handle one error type.
    """

    def __init__(
        self,
        kind: ApiErrorKind,
        message: str,
        status_code: int | None = None,
    ):
        self.kind = kind
        self.message = message
        self.status_code = status_code
        prefix = f"{status_code}: " if status_code is not None else ""
        super().__init__(f"[{kind.value}] {prefix}{message}")

    @property
    def is_unauthenticated(self) -> bool:
        return self.status_code == 401


class PayloadValidationError(Exception):
    """Raised when a form payload fails local validation.

    ``field_errors`` maps each offending field to a readable message.
    """

    def __init__(self, entity_type: str, field_errors: dict[str, str]):
        self.entity_type = entity_type
        self.field_errors = field_errors
        fields = ", ".join(sorted(field_errors))
        super().__init__(f"Invalid {entity_type} payload: {fields}")


class InvalidTransitionError(Exception):
    """Raised when a confirmation flow is asked for a move its state does not allow."""

    def __init__(self, state: str, action: str):
        self.state = state
        self.action = action
        super().__init__(f"Action '{action}' is not allowed in state '{state}'")


class UnknownResourceError(Exception):
    """Raised when a resource name is not present in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown resource '{name}'")
