"""Pure filter predicates deriving the visible subset of a collection.

Every sub-predicate is independent and an empty input means "no
constraint". ``matches`` ANDs them; ``filtered_view`` applies ``matches``
to a collection without touching it.
"""

from typing import Any, Sequence

from admin_console.domain.entities import Entity, FilterState


def matches_search(entity: Entity, term: str, fields: Sequence[str]) -> bool:
    """Case-insensitive substring match against any of ``fields``."""
    needle = term.strip().casefold()
    if not needle:
        return True
    for path in fields:
        value = entity.get(path)
        if isinstance(value, str) and needle in value.casefold():
            return True
    return False


def matches_selector(entity: Entity, path: str, value: str) -> bool:
    """Exact match of a foreign-key or enum attribute; empty selects all."""
    if not value:
        return True
    actual = entity.get(path)
    if actual is None:
        return False
    if isinstance(actual, bool):
        return str(actual).lower() == value.lower()
    return str(actual) == value


def matches_range(
    entity: Entity,
    path: str,
    lower: float | None,
    upper: float | None,
) -> bool:
    """Inclusive numeric bound check; open bounds always pass."""
    if lower is None and upper is None:
        return True
    actual = _as_number(entity.get(path))
    if actual is None:
        return False
    if lower is not None and actual < lower:
        return False
    if upper is not None and actual > upper:
        return False
    return True


def matches(
    entity: Entity,
    filter_state: FilterState,
    search_fields: Sequence[str] = (),
) -> bool:
    if not matches_search(entity, filter_state.search, search_fields):
        return False
    for path, value in filter_state.selectors.items():
        if not matches_selector(entity, path, value):
            return False
    for path, (lower, upper) in filter_state.ranges.items():
        if not matches_range(entity, path, lower, upper):
            return False
    return True


def filtered_view(
    collection: Sequence[Entity],
    filter_state: FilterState,
    search_fields: Sequence[str] = (),
) -> list[Entity]:
    """Return the entities that satisfy ``filter_state``, in collection order."""
    return [e for e in collection if matches(e, filter_state, search_fields)]


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None
