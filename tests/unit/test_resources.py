"""Unit tests for the resource registry."""

import pytest

from admin_console.application.resources import (
    RESOURCES,
    ResourceSpec,
    SelectorSpec,
    get_resource,
)
from admin_console.domain.exceptions import UnknownResourceError


def test_resource_paths_follow_scope():
    assert get_resource("companies").resource_path == "superadmin/companies"
    assert get_resource("global-questions").resource_path == "superadmin/questions"
    assert get_resource("courses").resource_path == "admin/training/courses"
    assert get_resource("student-progress").resource_path == "admin/training/progress"


def test_unknown_resource():
    with pytest.raises(UnknownResourceError):
        get_resource("invoices")


def test_read_only_resources_have_no_schema():
    read_only = {name for name, spec in RESOURCES.items() if spec.read_only}

    assert read_only == {"test-results", "student-progress"}


def test_only_companies_and_users_need_confirmation():
    destructive = {name for name, spec in RESOURCES.items() if spec.destructive_delete}

    assert destructive == {"companies", "users"}


def test_every_dependent_selector_has_a_declared_parent():
    for spec in RESOURCES.values():
        keys = {s.key for s in spec.selectors}
        for selector in spec.selectors:
            if selector.parent is not None:
                assert selector.parent in keys, (spec.name, selector.key)


def test_dependents_are_transitive():
    spec = ResourceSpec(
        name="chain",
        label="chain",
        scope="admin/training",
        path="chain",
        selectors=(
            SelectorSpec("courseId", "Course"),
            SelectorSpec("moduleId", "Module", parent="courseId", parent_field="courseId"),
            SelectorSpec("lessonId", "Lesson", parent="moduleId", parent_field="moduleId"),
        ),
    )

    assert spec.dependents_of("courseId") == ("moduleId", "lessonId")
    assert spec.dependents_of("lessonId") == ()


def test_test_result_course_filter_resets_test():
    assert get_resource("test-results").dependents_of("test.courseId") == ("testId",)
