"""Duplicate reconciliation for freshly fetched collections."""

import logging
from typing import Iterable

from admin_console.domain.entities import Entity

logger = logging.getLogger(__name__)


def reconcile_duplicates(
    items: Iterable[Entity], *, resource: str = "entity"
) -> tuple[list[Entity], int]:
    """Keep the first entity seen for each id, preserving fetch order.

    Later entities with an already-seen id are dropped. Running the result
    through again returns it unchanged.

    Returns:
        The deduplicated list and how many entities were discarded.
    """
    seen: dict[str, Entity] = {}
    discarded = 0
    for entity in items:
        if entity.id in seen:
            discarded += 1
            continue
        seen[entity.id] = entity

    if discarded:
        logger.warning(
            "Discarded %d duplicate %s record(s) from fetched collection",
            discarded,
            resource,
        )
    return list(seen.values()), discarded
