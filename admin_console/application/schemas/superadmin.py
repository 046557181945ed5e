"""Form schemas for the super-admin screens."""

import re
from datetime import date
from typing import Literal

from pydantic import Field, field_validator, model_validator

from admin_console.application.schemas.base import FormSchema

CNPJ_PATTERN = r"^\d{2}\.\d{3}\.\d{3}/\d{4}-\d{2}$"
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
URL_PATTERN = r"^https?://\S+$"


class CompanyForm(FormSchema):
    name: str = Field(..., min_length=1, max_length=200)
    cnpj: str | None = None
    plan_type: str = Field(..., min_length=1)
    max_users: int = Field(10, ge=1)
    max_candidates: int = Field(100, ge=1)
    is_active: bool = True

    @field_validator("cnpj")
    @classmethod
    def _cnpj_format(cls, value: str | None) -> str | None:
        if not value:
            return None
        if not re.match(CNPJ_PATTERN, value):
            raise ValueError("Invalid CNPJ. Use the format XX.XXX.XXX/XXXX-XX")
        return value


class UserForm(FormSchema):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1, pattern=EMAIL_PATTERN)
    role: Literal["SUPER_ADMIN", "COMPANY_ADMIN", "INSTRUCTOR", "STUDENT", "USER"]
    company_id: str | None = None
    password: str | None = Field(None, min_length=6)
    is_active: bool = True


class PlanForm(FormSchema):
    name: str = Field(..., min_length=1)
    description: str = ""
    price: float = Field(..., ge=0)
    is_active: bool = True


class PaymentForm(FormSchema):
    company_id: str = Field(..., min_length=1)
    subscription_id: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0)
    payment_date: date
    payment_method: Literal["CREDIT_CARD", "BANK_SLIP", "PIX", "BANK_TRANSFER", "OTHER"]
    status: Literal["PENDING", "PAID", "FAILED", "REFUNDED", "CANCELLED"]
    transaction_id: str | None = None
    invoice_url: str | None = Field(None, pattern=URL_PATTERN)
    notes: str | None = None


class CategoryForm(FormSchema):
    name: str = Field(..., min_length=1)
    description: str = ""


class QuestionOptionForm(FormSchema):
    text: str = Field(..., min_length=1)
    is_correct: bool = False


class GlobalQuestionForm(FormSchema):
    text: str = Field(..., min_length=1)
    type: Literal["MULTIPLE_CHOICE", "ESSAY", "OPINION_MULTIPLE"]
    difficulty: Literal["EASY", "MEDIUM", "HARD"]
    category_ids: list[str] = Field(..., min_length=1)
    options: list[QuestionOptionForm] = Field(default_factory=list)

    @model_validator(mode="after")
    def _one_correct_option(self) -> "GlobalQuestionForm":
        if self.type != "MULTIPLE_CHOICE":
            return self
        if len(self.options) < 2:
            raise ValueError("Multiple choice questions need at least two options")
        if not any(option.is_correct for option in self.options):
            raise ValueError("Mark at least one option as correct")
        return self


class GlobalTestForm(FormSchema):
    title: str = Field(..., min_length=1)
    description: str = ""
    is_active: bool = True
