"""Unit tests for the filter predicate set and FilterState."""

import pytest

from admin_console.application.services.filtering import (
    filtered_view,
    matches,
    matches_range,
    matches_search,
    matches_selector,
)
from admin_console.domain.entities import Entity, FilterState


@pytest.fixture
def people() -> list[Entity]:
    return [
        Entity(id="1", attributes={"name": "Ana"}),
        Entity(id="2", attributes={"name": "Bruno"}),
    ]


@pytest.fixture
def results() -> list[Entity]:
    return [
        Entity(
            id="r1",
            attributes={
                "studentId": "s1",
                "testId": "t1",
                "status": "passed",
                "score": 85,
                "student": {"name": "Carla Souza"},
                "test": {"title": "Safety basics", "courseId": "c1"},
            },
        ),
        Entity(
            id="r2",
            attributes={
                "studentId": "s2",
                "testId": "t2",
                "status": "failed",
                "score": 40,
                "student": {"name": "Diego Lima"},
                "test": {"title": "Fire drill", "courseId": "c2"},
            },
        ),
        Entity(
            id="r3",
            attributes={
                "studentId": "s1",
                "testId": "t3",
                "status": "passed",
                "score": 100,
                "student": {"name": "Carla Souza"},
                "test": {"title": "Ergonomics", "courseId": "c1"},
            },
        ),
    ]


def test_search_matches_name_case_insensitively(people):
    state = FilterState(search="bru")

    assert filtered_view(people, state, ["name"]) == [
        Entity(id="2", attributes={"name": "Bruno"})
    ]


def test_empty_search_matches_everything(people):
    assert filtered_view(people, FilterState(search="   "), ["name"]) == people


def test_search_reads_embedded_relations(results):
    state = FilterState(search="fire")

    view = filtered_view(results, state, ["student.name", "test.title"])

    assert [e.id for e in view] == ["r2"]


def test_search_ignores_non_string_fields():
    entity = Entity(id="1", attributes={"score": 123})

    assert not matches_search(entity, "12", ["score"])


def test_selector_on_nested_path(results):
    state = FilterState().with_selector("test.courseId", "c1")

    assert [e.id for e in filtered_view(results, state)] == ["r1", "r3"]


def test_empty_selector_is_no_constraint(results):
    state = FilterState(selectors={"status": ""})

    assert filtered_view(results, state) == results


def test_boolean_selector():
    active = Entity(id="1", attributes={"isActive": True})
    inactive = Entity(id="2", attributes={"isActive": False})

    assert matches_selector(active, "isActive", "true")
    assert not matches_selector(inactive, "isActive", "true")
    assert matches_selector(inactive, "isActive", "false")


def test_selector_rejects_missing_attribute():
    assert not matches_selector(Entity(id="1"), "courseId", "c1")


def test_range_is_inclusive(results):
    state = FilterState().with_range("score", 40, 85)

    assert [e.id for e in filtered_view(results, state)] == ["r1", "r2"]


def test_open_range_bounds(results):
    assert matches_range(results[0], "score", None, None)
    assert matches_range(results[2], "score", 90, None)
    assert not matches_range(results[1], "score", 50, None)


def test_range_on_non_numeric_value_fails():
    entity = Entity(id="1", attributes={"score": "n/a"})

    assert not matches_range(entity, "score", 0, 100)


def test_filters_are_conjunctive(results):
    state = (
        FilterState(search="carla")
        .with_selector("status", "passed")
        .with_range("score", 90, 100)
    )

    view = filtered_view(results, state, ["student.name"])

    assert [e.id for e in view] == ["r3"]


def test_filtered_view_never_grows_and_every_item_matches(results):
    states = [
        FilterState(),
        FilterState(search="a"),
        FilterState(search="zzz"),
        FilterState().with_selector("studentId", "s1"),
        FilterState().with_range("score", 0, 50),
        FilterState(search="o").with_selector("status", "failed"),
    ]
    fields = ["student.name", "test.title"]

    for state in states:
        view = filtered_view(results, state, fields)
        assert len(view) <= len(results)
        assert all(matches(e, state, fields) for e in view)


def test_filtered_view_does_not_mutate_inputs(results):
    snapshot = [e.to_dict() for e in results]
    state = FilterState(search="carla").with_range("score", 0, 90)

    filtered_view(results, state, ["student.name"])

    assert [e.to_dict() for e in results] == snapshot
    assert state.search == "carla"


def test_changing_parent_selector_resets_dependents():
    state = (
        FilterState()
        .with_selector("courseId", "c1")
        .with_selector("moduleId", "m1")
    )

    changed = state.with_selector("courseId", "c2", dependents=["moduleId"])

    assert changed.selector("courseId") == "c2"
    assert changed.selector("moduleId") == ""
    # the original state is untouched
    assert state.selector("moduleId") == "m1"


def test_reselecting_same_parent_keeps_dependents():
    state = FilterState(selectors={"courseId": "c1", "moduleId": "m1"})

    same = state.with_selector("courseId", "c1", dependents=["moduleId"])

    assert same.selector("moduleId") == "m1"


def test_is_empty():
    assert FilterState().is_empty
    assert FilterState(ranges={"score": (None, None)}).is_empty
    assert not FilterState(search="x").is_empty
    assert not FilterState().with_range("score", 0, None).is_empty
