"""Form schemas for the per-company training admin screens."""

from datetime import date
from typing import Literal

from pydantic import Field, model_validator

from admin_console.application.schemas.base import FormSchema
from admin_console.application.schemas.superadmin import EMAIL_PATTERN


class SectorForm(FormSchema):
    name: str = Field(..., min_length=1)
    description: str = ""


class CourseForm(FormSchema):
    name: str = Field(..., min_length=1)
    description: str = ""
    sector_id: str | None = None
    duration: int | None = Field(None, ge=0)
    final_test_required: bool = False
    is_active: bool = True


class ModuleForm(FormSchema):
    title: str = Field(..., min_length=1)
    course_id: str = Field(..., min_length=1)
    description: str = ""
    order: int | None = Field(None, ge=0)


class LessonForm(FormSchema):
    name: str = Field(..., min_length=1)
    module_id: str | None = None
    description: str = ""
    type: Literal["VIDEO", "AUDIO", "SLIDES", "TEXT"] = "TEXT"
    content: str = ""
    duration: int = Field(0, ge=0)


class MaterialForm(FormSchema):
    title: str = Field(..., min_length=1)
    module_id: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    description: str = ""
    type: Literal["pdf", "video", "link", "other"] = "pdf"
    lesson_id: str | None = None


class StudentForm(FormSchema):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1, pattern=EMAIL_PATTERN)
    department: str = ""
    sector_id: str | None = None
    is_active: bool = True


class EnrollmentForm(FormSchema):
    student_id: str = Field(..., min_length=1)
    course_id: str = Field(..., min_length=1)
    status: Literal["active", "completed", "cancelled"] = "active"


class CertificateForm(FormSchema):
    student_id: str = Field(..., min_length=1)
    course_id: str = Field(..., min_length=1)
    issue_date: date | None = None
    expiry_date: date | None = None
    status: Literal["valid", "expired", "revoked"] = "valid"

    @model_validator(mode="after")
    def _expiry_after_issue(self) -> "CertificateForm":
        if self.issue_date and self.expiry_date and self.expiry_date < self.issue_date:
            raise ValueError("Expiry date must not be before the issue date")
        return self


class TrainingTestForm(FormSchema):
    title: str = Field(..., min_length=1)
    description: str = ""
    course_id: str | None = None
    time_limit: int | None = Field(None, ge=1)
    passing_score: int | None = Field(None, ge=0, le=100)
    active: bool = True


class TrainingQuestionOptionForm(FormSchema):
    text: str = Field(..., min_length=1)
    is_correct: bool = False


class TrainingQuestionForm(FormSchema):
    text: str = Field(..., min_length=1)
    test_id: str | None = None
    type: Literal["MULTIPLE_CHOICE", "TRUE_FALSE", "OPINION_MULTIPLE"] = "MULTIPLE_CHOICE"
    options: list[TrainingQuestionOptionForm] = Field(default_factory=list)

