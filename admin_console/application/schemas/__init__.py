from .base import FormSchema, REQUIRED_MESSAGE, validate_payload
from .superadmin import (
    CategoryForm,
    CompanyForm,
    GlobalQuestionForm,
    GlobalTestForm,
    PaymentForm,
    PlanForm,
    QuestionOptionForm,
    UserForm,
)
from .training import (
    CertificateForm,
    CourseForm,
    EnrollmentForm,
    LessonForm,
    MaterialForm,
    ModuleForm,
    SectorForm,
    StudentForm,
    TrainingQuestionForm,
    TrainingTestForm,
)

__all__ = [
    "FormSchema",
    "REQUIRED_MESSAGE",
    "validate_payload",
    "CategoryForm",
    "CompanyForm",
    "GlobalQuestionForm",
    "GlobalTestForm",
    "PaymentForm",
    "PlanForm",
    "QuestionOptionForm",
    "UserForm",
    "CertificateForm",
    "CourseForm",
    "EnrollmentForm",
    "LessonForm",
    "MaterialForm",
    "ModuleForm",
    "SectorForm",
    "StudentForm",
    "TrainingQuestionForm",
    "TrainingTestForm",
]
