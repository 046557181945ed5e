"""Entity list controller: the state behind every admin list page.

Owns one collection, its filter state, the create/edit form and the
delete confirmation. Talks to the server only through a CollectionClient
and applies successful mutations locally so the page never refetches
after a change.

Every public coroutine returns normally: remote failures become ``error``
(and ``field_errors`` for local validation), never exceptions. The
collection is only ever replaced by a new list after a success, so a
failed call leaves it exactly as it was.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar

from admin_console.application.interfaces import CollectionClient
from admin_console.application.resources import ResourceSpec
from admin_console.application.schemas import validate_payload
from admin_console.application.services.deduplication import reconcile_duplicates
from admin_console.application.services.filtering import filtered_view
from admin_console.domain.entities import (
    ConfirmationCopy,
    ConfirmationFlow,
    Entity,
    FilterState,
)
from admin_console.domain.exceptions import (
    ApiError,
    EntityNotFoundError,
    InvalidTransitionError,
    PayloadValidationError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

VALIDATION_MESSAGE = "Please fix the highlighted fields."
READ_ONLY_MESSAGE = "This list is read-only."
NO_STATUS_MESSAGE = "This record has no status that can be switched."
UNKNOWN_STATUS_MESSAGE = "This record is in a status that cannot be switched here."
NO_CONFIRMATION_MESSAGE = "There is no deletion waiting for confirmation."
INVALID_STEP_MESSAGE = "That option is not available at this step."


class _Dropped(Exception):
    """The controller was disposed while a request was in flight."""


class EntityListController:
    """List + filter + form + confirmation state for one resource."""

    def __init__(
        self,
        resource: ResourceSpec,
        client: CollectionClient,
        *,
        on_unauthenticated: Callable[[], None] | None = None,
        confirmation_copy: Callable[[Entity], ConfirmationCopy] | None = None,
    ):
        self.resource = resource
        self._client = client
        self._on_unauthenticated = on_unauthenticated
        self._confirmation_copy = confirmation_copy or self._default_copy

        self.collection: list[Entity] = []
        self.error: str | None = None
        self.field_errors: dict[str, str] = {}
        self.filter_state = FilterState()
        self.editing_entity: Entity | None = None
        self.is_form_open = False
        self.viewing_entity: Entity | None = None
        self.confirmation: ConfirmationFlow | None = None

        self._in_flight: set[str] = set()
        self._tasks: set[asyncio.Task] = set()
        self._disposed = False

    # ── Derived state ───────────────────────────────────────────────

    @property
    def loading(self) -> bool:
        return bool(self._in_flight)

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def filtered_view(self) -> list[Entity]:
        return filtered_view(
            self.collection, self.filter_state, self.resource.search_fields
        )

    def is_pending(self, operation: str) -> bool:
        return operation in self._in_flight

    def find(self, entity_id: str) -> Entity | None:
        return next((e for e in self.collection if e.id == entity_id), None)

    # ── Fetching ────────────────────────────────────────────────────

    async def refresh(self, params: dict[str, Any] | None = None) -> bool:
        """Reload the collection. On failure the previous one stays visible."""
        query = {**self.resource.list_params, **(params or {})}
        ok, items = await self._run(
            "refresh", lambda: self._client.list(query or None)
        )
        if not ok:
            return False
        self.collection, _ = reconcile_duplicates(items, resource=self.resource.name)
        self.error = None
        logger.debug(
            "Loaded %d %s record(s)", len(self.collection), self.resource.name
        )
        return True

    async def view(self, entity_id: str) -> Entity | None:
        """Fetch one entity with its relations for the detail panel."""
        ok, entity = await self._run("view", lambda: self._client.get(entity_id))
        if not ok:
            return None
        self.viewing_entity = entity
        self.error = None
        return entity

    def close_view(self) -> None:
        self.viewing_entity = None

    # ── Form ────────────────────────────────────────────────────────

    def open_create(self) -> None:
        self.editing_entity = None
        self.field_errors = {}
        self.is_form_open = True

    def open_edit(self, entity: Entity) -> None:
        self.editing_entity = entity
        self.field_errors = {}
        self.is_form_open = True

    def close_form(self) -> None:
        self.editing_entity = None
        self.field_errors = {}
        self.is_form_open = False

    async def submit_form(self, payload: dict[str, Any]) -> Entity | None:
        if self.editing_entity is not None:
            return await self.submit_update(self.editing_entity.id, payload)
        return await self.submit_create(payload)

    async def submit_create(self, payload: dict[str, Any]) -> Entity | None:
        body = self._validated(payload)
        if body is None:
            return None
        ok, created = await self._run("create", lambda: self._client.create(body))
        if not ok:
            return None
        if self.find(created.id) is not None:
            self.collection = self._replaced(created)
        else:
            self.collection = [*self.collection, created]
        logger.info("Created %s %s", self.resource.label, created.id)
        self._form_succeeded()
        return created

    async def submit_update(
        self, entity_id: str, payload: dict[str, Any]
    ) -> Entity | None:
        body = self._validated(payload)
        if body is None:
            return None
        ok, updated = await self._run(
            "update", lambda: self._client.update(entity_id, body)
        )
        if not ok:
            return None
        self.collection = self._replaced(updated, entity_id)
        logger.info("Updated %s %s", self.resource.label, entity_id)
        self._form_succeeded()
        return updated

    # ── Delete & confirmation ───────────────────────────────────────

    async def request_delete(self, entity: Entity) -> None:
        """Start the confirmation flow, or delete straight away.

        Destructive resources always go through the three confirmation
        steps; everything else is deleted immediately.
        """
        if self.resource.destructive_delete:
            self.confirmation = ConfirmationFlow(
                entity_id=entity.id, copy=self._confirmation_copy(entity)
            )
            return
        await self._hard_delete(entity.id)

    def confirmation_continue(self) -> bool:
        return self._advance_confirmation(ConfirmationFlow.proceed) is not None

    def confirmation_cancel(self) -> bool:
        if self._advance_confirmation(ConfirmationFlow.cancel) is None:
            return False
        self.confirmation = None
        return True

    async def confirmation_delete(self) -> bool:
        flow = self._advance_confirmation(ConfirmationFlow.delete_permanently)
        if flow is None:
            return False
        self.confirmation = None
        return await self._hard_delete(flow.entity_id)

    async def confirmation_deactivate(self) -> bool:
        flow = self._advance_confirmation(ConfirmationFlow.deactivate_instead)
        if flow is None:
            return False
        self.confirmation = None
        return await self._set_status(flow.entity_id, active=False)

    # ── Status ──────────────────────────────────────────────────────

    async def toggle_status(self, entity_id: str) -> bool:
        """Flip the status attribute right away and undo it if the server refuses."""
        field = self.resource.status_field
        current = self.find(entity_id)
        if field is None:
            self.error = NO_STATUS_MESSAGE
            return False
        if current is None:
            self.error = str(EntityNotFoundError(self.resource.label, entity_id))
            return False
        if self.is_pending(f"status:{entity_id}"):
            return False

        active_value, inactive_value = self.resource.status_values
        value = current.get(field)
        # Only the two declared values toggle; "completed", "expired" etc. stay put
        if value not in (active_value, inactive_value):
            self.error = UNKNOWN_STATUS_MESSAGE
            return False
        is_active = value == active_value
        optimistic = self._status_changed(current, active=not is_active)
        self.collection = self._replaced(optimistic)

        ok, saved = await self._run(
            f"status:{entity_id}",
            lambda: self._client.patch(entity_id, {field: optimistic.get(field)}),
        )
        if not ok:
            if not self._disposed and self.find(entity_id) is optimistic:
                self.collection = self._replaced(current)
            return False
        self.collection = self._replaced(saved or optimistic)
        self.error = None
        return True

    # ── Filters ─────────────────────────────────────────────────────

    def set_search(self, term: str) -> None:
        self.filter_state = self.filter_state.with_search(term)

    def set_filter(self, key: str, value: str | None) -> None:
        """Set a categorical filter, clearing every filter that depends on it."""
        self.filter_state = self.filter_state.with_selector(
            key, value, self.resource.dependents_of(key)
        )

    def set_range(self, key: str, lower: float | None, upper: float | None) -> bool:
        """Set a declared numeric filter, clamping both bounds into its domain.

        Keys the resource does not declare are ignored.
        """
        spec = self.resource.range(key)
        if spec is None:
            logger.debug("No range filter '%s' on %s", key, self.resource.name)
            return False

        def clamp(bound: float | None) -> float | None:
            if bound is None:
                return None
            return min(max(bound, spec.minimum), spec.maximum)

        self.filter_state = self.filter_state.with_range(key, clamp(lower), clamp(upper))
        return True

    def range_bounds(self, key: str) -> tuple[float, float] | None:
        """Current (lower, upper) of a range filter, defaulting to its full domain."""
        spec = self.resource.range(key)
        if spec is None:
            return None
        lower, upper = self.filter_state.ranges.get(key, (None, None))
        return (
            spec.minimum if lower is None else lower,
            spec.maximum if upper is None else upper,
        )

    def reset_filters(self) -> None:
        self.filter_state = FilterState()

    def options_for(self, key: str, options: Sequence[Entity]) -> list[Entity]:
        """Narrow the option list of a dependent filter to the chosen parent."""
        spec = self.resource.selector(key)
        if spec is None or spec.parent is None or spec.parent_field is None:
            return list(options)
        parent_value = self.filter_state.selector(spec.parent)
        if not parent_value:
            return list(options)
        return [o for o in options if str(o.get(spec.parent_field)) == parent_value]

    # ── Lifetime ────────────────────────────────────────────────────

    def dispose(self) -> None:
        """Abandon the page: cancel in-flight requests and ignore late results."""
        self._disposed = True
        for task in list(self._tasks):
            task.cancel()
        self._tasks.clear()
        self._in_flight.clear()

    async def __aenter__(self) -> "EntityListController":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.dispose()

    # ── Internals ───────────────────────────────────────────────────

    async def _run(
        self, operation: str, call: Callable[[], Awaitable[T]]
    ) -> tuple[bool, T | None]:
        """Execute one client call with the double-submit guard.

        Returns ``(True, value)`` on success and ``(False, None)`` when the
        call failed, was ignored as a duplicate, or the controller was
        disposed meanwhile.
        """
        if self._disposed:
            return False, None
        if operation in self._in_flight:
            logger.debug("Ignoring duplicate '%s' on %s", operation, self.resource.name)
            return False, None

        self._in_flight.add(operation)
        try:
            value = await self._track(call())
        except _Dropped:
            return False, None
        except ApiError as exc:
            self._fail(operation, exc)
            return False, None
        finally:
            self._in_flight.discard(operation)
        return True, value

    async def _track(self, awaitable: Awaitable[T]) -> T:
        task = asyncio.ensure_future(awaitable)
        self._tasks.add(task)
        try:
            result = await task
        except asyncio.CancelledError:
            if self._disposed:
                raise _Dropped() from None
            raise
        finally:
            self._tasks.discard(task)
        if self._disposed:
            raise _Dropped()
        return result

    def _fail(self, operation: str, exc: ApiError) -> None:
        logger.warning(
            "%s '%s' failed: %s", self.resource.name, operation, exc
        )
        self.error = exc.message
        if exc.is_unauthenticated and self._on_unauthenticated is not None:
            self._on_unauthenticated()

    def _validated(self, payload: dict[str, Any]) -> dict[str, Any] | None:
        schema = self.resource.schema
        if schema is None:
            self.error = READ_ONLY_MESSAGE
            return None
        try:
            body = validate_payload(schema, payload, self.resource.label)
        except PayloadValidationError as exc:
            self.field_errors = exc.field_errors
            self.error = VALIDATION_MESSAGE
            return None
        self.field_errors = {}
        return body

    def _form_succeeded(self) -> None:
        self.close_form()
        self.error = None

    async def _hard_delete(self, entity_id: str) -> bool:
        ok, _ = await self._run(
            f"delete:{entity_id}", lambda: self._client.delete(entity_id)
        )
        if not ok:
            return False
        self.collection = [e for e in self.collection if e.id != entity_id]
        if self.viewing_entity is not None and self.viewing_entity.id == entity_id:
            self.viewing_entity = None
        self.error = None
        logger.info("Deleted %s %s", self.resource.label, entity_id)
        return True

    async def _set_status(self, entity_id: str, *, active: bool) -> bool:
        field = self.resource.status_field
        current = self.find(entity_id)
        if field is None or current is None:
            self.error = NO_STATUS_MESSAGE
            return False
        changed = self._status_changed(current, active=active)
        ok, saved = await self._run(
            f"status:{entity_id}",
            lambda: self._client.patch(entity_id, {field: changed.get(field)}),
        )
        if not ok:
            return False
        self.collection = self._replaced(saved or changed)
        self.error = None
        logger.info(
            "%s %s %s", self.resource.label.capitalize(), entity_id,
            "activated" if active else "deactivated",
        )
        return True

    def _status_changed(self, entity: Entity, *, active: bool) -> Entity:
        active_value, inactive_value = self.resource.status_values
        value = active_value if active else inactive_value
        return entity.with_attributes(**{self.resource.status_field: value})

    def _replaced(self, entity: Entity, entity_id: str | None = None) -> list[Entity]:
        target = entity_id or entity.id
        return [entity if e.id == target else e for e in self.collection]

    def _default_copy(self, entity: Entity) -> ConfirmationCopy:
        name = entity.get(self.resource.display_field) or ""
        return ConfirmationCopy.for_entity(self.resource.label, str(name))

    def _advance_confirmation(
        self, action: Callable[[ConfirmationFlow], object]
    ) -> ConfirmationFlow | None:
        """Apply one move to the open flow; a rejected move leaves it unchanged."""
        flow = self.confirmation
        if flow is None:
            self.error = NO_CONFIRMATION_MESSAGE
            return None
        try:
            action(flow)
        except InvalidTransitionError as exc:
            logger.debug("Ignoring confirmation move on %s: %s", self.resource.name, exc)
            self.error = INVALID_STEP_MESSAGE
            return None
        return flow
