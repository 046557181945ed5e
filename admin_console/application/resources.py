"""Declarative registry of every admin collection.

Each ``ResourceSpec`` tells a list controller where the collection lives,
how to search and filter it, which attribute carries its active/inactive
status, whether deleting it needs the escalating confirmation, and which
form schema guards its payloads.
"""

from dataclasses import dataclass, field
from typing import Any

from admin_console.application.schemas import (
    CategoryForm,
    CertificateForm,
    CompanyForm,
    CourseForm,
    EnrollmentForm,
    FormSchema,
    GlobalQuestionForm,
    GlobalTestForm,
    LessonForm,
    MaterialForm,
    ModuleForm,
    PaymentForm,
    PlanForm,
    SectorForm,
    StudentForm,
    TrainingQuestionForm,
    TrainingTestForm,
    UserForm,
)
from admin_console.domain.exceptions import UnknownResourceError

SUPERADMIN = "superadmin"
COMPANY_ADMIN = "admin"
TRAINING = "admin/training"


@dataclass(frozen=True)
class SelectorSpec:
    """A categorical filter on ``key``.

    ``parent`` names another selector this one depends on; ``parent_field``
    is the attribute of a candidate option that references the parent value.
    """

    key: str
    label: str
    parent: str | None = None
    parent_field: str | None = None


@dataclass(frozen=True)
class RangeSpec:
    """An inclusive numeric filter.

    ``minimum`` and ``maximum`` bound every value the filter can take; they
    are also the slider defaults before the user narrows the range.
    """

    key: str
    label: str
    minimum: float
    maximum: float


@dataclass(frozen=True)
class ResourceSpec:
    name: str
    label: str
    scope: str
    path: str
    schema: type[FormSchema] | None = None
    search_fields: tuple[str, ...] = ()
    selectors: tuple[SelectorSpec, ...] = ()
    ranges: tuple[RangeSpec, ...] = ()
    status_field: str | None = None
    # (active, inactive) values of status_field
    status_values: tuple[Any, Any] = (True, False)
    destructive_delete: bool = False
    display_field: str = "name"
    list_params: dict[str, Any] = field(default_factory=dict)

    @property
    def resource_path(self) -> str:
        return f"{self.scope}/{self.path}"

    @property
    def read_only(self) -> bool:
        return self.schema is None

    def selector(self, key: str) -> SelectorSpec | None:
        return next((s for s in self.selectors if s.key == key), None)

    def range(self, key: str) -> RangeSpec | None:
        return next((r for r in self.ranges if r.key == key), None)

    def dependents_of(self, key: str) -> tuple[str, ...]:
        """Every selector that must reset when ``key`` changes, transitively."""
        result: list[str] = []
        pending = [key]
        while pending:
            parent = pending.pop()
            for spec in self.selectors:
                if spec.parent == parent and spec.key not in result:
                    result.append(spec.key)
                    pending.append(spec.key)
        return tuple(result)


_RESOURCES: tuple[ResourceSpec, ...] = (
    # ── Super-admin ─────────────────────────────────────────────────
    ResourceSpec(
        name="companies",
        label="company",
        scope=SUPERADMIN,
        path="companies",
        schema=CompanyForm,
        search_fields=("name", "cnpj", "planType"),
        selectors=(
            SelectorSpec("planType", "Plan"),
            SelectorSpec("isActive", "Status"),
        ),
        status_field="isActive",
        destructive_delete=True,
    ),
    ResourceSpec(
        name="users",
        label="user",
        scope=SUPERADMIN,
        path="users",
        schema=UserForm,
        search_fields=("name", "email", "company.name"),
        selectors=(
            SelectorSpec("role", "Role"),
            SelectorSpec("companyId", "Company"),
        ),
        status_field="isActive",
        destructive_delete=True,
    ),
    ResourceSpec(
        name="plans",
        label="plan",
        scope=SUPERADMIN,
        path="plans",
        schema=PlanForm,
        search_fields=("name", "description"),
        ranges=(RangeSpec("price", "Price", 0, 1_000_000),),
        status_field="isActive",
    ),
    ResourceSpec(
        name="payments",
        label="payment",
        scope=SUPERADMIN,
        path="payments",
        schema=PaymentForm,
        search_fields=("company.name", "transactionId", "notes"),
        selectors=(
            SelectorSpec("companyId", "Company"),
            SelectorSpec("status", "Status"),
            SelectorSpec("paymentMethod", "Payment method"),
        ),
        ranges=(RangeSpec("amount", "Amount", 0, 1_000_000),),
        display_field="transactionId",
    ),
    ResourceSpec(
        name="global-questions",
        label="question",
        scope=SUPERADMIN,
        path="questions",
        schema=GlobalQuestionForm,
        search_fields=("text",),
        selectors=(
            SelectorSpec("type", "Type"),
            SelectorSpec("difficulty", "Difficulty"),
        ),
        display_field="text",
    ),
    ResourceSpec(
        name="global-tests",
        label="test",
        scope=SUPERADMIN,
        path="global-tests",
        schema=GlobalTestForm,
        search_fields=("title", "description"),
        status_field="isActive",
        display_field="title",
    ),
    ResourceSpec(
        name="global-categories",
        label="category",
        scope=SUPERADMIN,
        path="globalcategories",
        schema=CategoryForm,
        search_fields=("name", "description"),
    ),
    ResourceSpec(
        name="categories",
        label="category",
        scope=SUPERADMIN,
        path="categories",
        schema=CategoryForm,
        search_fields=("name", "description"),
    ),
    # ── Company admin ───────────────────────────────────────────────
    ResourceSpec(
        name="company-users",
        label="user",
        scope=COMPANY_ADMIN,
        path="users",
        schema=UserForm,
        search_fields=("name", "email"),
        selectors=(SelectorSpec("role", "Role"),),
        status_field="isActive",
    ),
    # ── Training ────────────────────────────────────────────────────
    ResourceSpec(
        name="sectors",
        label="sector",
        scope=TRAINING,
        path="sectors",
        schema=SectorForm,
        search_fields=("name", "description"),
    ),
    ResourceSpec(
        name="courses",
        label="course",
        scope=TRAINING,
        path="courses",
        schema=CourseForm,
        search_fields=("name", "description"),
        selectors=(SelectorSpec("sectorId", "Sector"),),
        status_field="isActive",
    ),
    ResourceSpec(
        name="modules",
        label="module",
        scope=TRAINING,
        path="modules",
        schema=ModuleForm,
        search_fields=("title", "description", "course.name"),
        selectors=(SelectorSpec("courseId", "Course"),),
        display_field="title",
    ),
    ResourceSpec(
        name="lessons",
        label="lesson",
        scope=TRAINING,
        path="lessons",
        schema=LessonForm,
        search_fields=("name", "description"),
        selectors=(
            SelectorSpec("module.courseId", "Course"),
            SelectorSpec("moduleId", "Module", parent="module.courseId", parent_field="courseId"),
            SelectorSpec("type", "Type"),
        ),
    ),
    ResourceSpec(
        name="materials",
        label="material",
        scope=TRAINING,
        path="materials",
        schema=MaterialForm,
        search_fields=("title", "description"),
        selectors=(
            SelectorSpec("moduleId", "Module"),
            SelectorSpec("lessonId", "Lesson", parent="moduleId", parent_field="moduleId"),
            SelectorSpec("type", "Type"),
        ),
        display_field="title",
    ),
    ResourceSpec(
        name="students",
        label="student",
        scope=TRAINING,
        path="students",
        schema=StudentForm,
        search_fields=("name", "email", "department"),
        selectors=(SelectorSpec("sectorId", "Sector"),),
        status_field="isActive",
    ),
    ResourceSpec(
        name="enrollments",
        label="enrollment",
        scope=TRAINING,
        path="enrollments",
        schema=EnrollmentForm,
        search_fields=("student.name", "course.name"),
        selectors=(
            SelectorSpec("courseId", "Course"),
            SelectorSpec("studentId", "Student"),
            SelectorSpec("status", "Status"),
        ),
        ranges=(RangeSpec("progress", "Progress", 0, 100),),
        status_field="status",
        status_values=("active", "cancelled"),
        display_field="student.name",
    ),
    ResourceSpec(
        name="certificates",
        label="certificate",
        scope=TRAINING,
        path="certificates",
        schema=CertificateForm,
        search_fields=("student.name", "course.name", "certificateNumber"),
        selectors=(
            SelectorSpec("courseId", "Course"),
            SelectorSpec("studentId", "Student"),
            SelectorSpec("status", "Status"),
        ),
        status_field="status",
        status_values=("valid", "revoked"),
        display_field="certificateNumber",
    ),
    ResourceSpec(
        name="training-tests",
        label="test",
        scope=TRAINING,
        path="tests",
        schema=TrainingTestForm,
        search_fields=("title", "description"),
        selectors=(SelectorSpec("courseId", "Course"),),
        status_field="active",
        display_field="title",
    ),
    ResourceSpec(
        name="training-questions",
        label="question",
        scope=TRAINING,
        path="questions",
        schema=TrainingQuestionForm,
        search_fields=("text",),
        selectors=(
            SelectorSpec("testId", "Test"),
            SelectorSpec("type", "Type"),
        ),
        display_field="text",
    ),
    ResourceSpec(
        name="training-categories",
        label="category",
        scope=TRAINING,
        path="categories",
        schema=CategoryForm,
        search_fields=("name", "description"),
    ),
    ResourceSpec(
        name="test-results",
        label="test result",
        scope=TRAINING,
        path="test-results",
        search_fields=("student.name", "test.title"),
        selectors=(
            SelectorSpec("studentId", "Student"),
            SelectorSpec("test.courseId", "Course"),
            SelectorSpec("testId", "Test", parent="test.courseId", parent_field="courseId"),
            SelectorSpec("status", "Status"),
        ),
        ranges=(RangeSpec("score", "Score", 0, 100),),
        display_field="student.name",
    ),
    ResourceSpec(
        name="student-progress",
        label="progress record",
        scope=TRAINING,
        path="progress",
        search_fields=("student.name", "course.name"),
        selectors=(
            SelectorSpec("courseId", "Course"),
            SelectorSpec("status", "Status"),
        ),
        ranges=(RangeSpec("progress", "Progress", 0, 100),),
        display_field="student.name",
    ),
)

RESOURCES: dict[str, ResourceSpec] = {spec.name: spec for spec in _RESOURCES}


def get_resource(name: str) -> ResourceSpec:
    """Look up a resource by registry name."""
    try:
        return RESOURCES[name]
    except KeyError:
        raise UnknownResourceError(name) from None
