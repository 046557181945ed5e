"""Unit tests for duplicate reconciliation."""

import logging

from admin_console.application.services.deduplication import reconcile_duplicates
from admin_console.domain.entities import Entity


def _e(entity_id: str, name: str) -> Entity:
    return Entity(id=entity_id, attributes={"name": name})


def test_first_seen_wins_and_order_is_kept():
    raw = [_e("1", "Ana"), _e("2", "Bruno"), _e("1", "Ana-dup")]

    deduped, discarded = reconcile_duplicates(raw)

    assert deduped == [_e("1", "Ana"), _e("2", "Bruno")]
    assert discarded == 1


def test_reconcile_is_idempotent():
    raw = [_e("3", "C"), _e("1", "A"), _e("3", "C2"), _e("2", "B"), _e("1", "A2")]

    once, _ = reconcile_duplicates(raw)
    twice, discarded = reconcile_duplicates(once)

    assert twice == once
    assert discarded == 0


def test_exactly_one_entity_per_id():
    raw = [_e(str(i % 4), f"n{i}") for i in range(20)]

    deduped, discarded = reconcile_duplicates(raw)

    ids = [e.id for e in deduped]
    assert sorted(ids) == ["0", "1", "2", "3"]
    assert len(ids) == len(set(ids))
    assert discarded == 16
    # first occurrence of each id
    assert [e.get("name") for e in deduped] == ["n0", "n1", "n2", "n3"]


def test_empty_input():
    assert reconcile_duplicates([]) == ([], 0)


def test_duplicates_are_logged(caplog):
    with caplog.at_level(logging.WARNING):
        reconcile_duplicates([_e("1", "a"), _e("1", "b")], resource="companies")

    assert "1 duplicate companies" in caplog.text


def test_clean_input_is_not_logged(caplog):
    with caplog.at_level(logging.WARNING):
        reconcile_duplicates([_e("1", "a"), _e("2", "b")])

    assert caplog.text == ""
