"""Unit tests for form schemas and payload validation."""

import pytest

from admin_console.application.schemas import (
    REQUIRED_MESSAGE,
    CertificateForm,
    CompanyForm,
    GlobalQuestionForm,
    MaterialForm,
    PaymentForm,
    TrainingTestForm,
    UserForm,
    validate_payload,
)
from admin_console.domain.exceptions import PayloadValidationError


def _errors(schema, payload) -> dict[str, str]:
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_payload(schema, payload, "record")
    return exc_info.value.field_errors


def test_company_payload_is_normalised_to_camel_case():
    body = validate_payload(
        CompanyForm,
        {"name": " Acme ", "plan_type": "Pro", "cnpj": "12.345.678/0001-90"},
        "company",
    )

    assert body == {"name": "Acme", "planType": "Pro", "cnpj": "12.345.678/0001-90"}


def test_unset_defaults_are_not_sent():
    body = validate_payload(CompanyForm, {"name": "Acme", "planType": "Free"}, "company")

    assert "maxUsers" not in body
    assert "isActive" not in body


def test_unknown_keys_are_kept():
    body = validate_payload(
        CompanyForm, {"name": "Acme", "planType": "Free", "notes": "vip"}, "company"
    )

    assert body["notes"] == "vip"


@pytest.mark.parametrize("cnpj", ["12345678000190", "12.345.678/0001-9", "ab.cde.fgh/ijkl-mn"])
def test_invalid_cnpj_is_rejected(cnpj):
    errors = _errors(CompanyForm, {"name": "Acme", "planType": "Free", "cnpj": cnpj})

    assert errors == {"cnpj": "Invalid CNPJ. Use the format XX.XXX.XXX/XXXX-XX"}


def test_blank_cnpj_is_allowed():
    body = validate_payload(CompanyForm, {"name": "Acme", "planType": "Free", "cnpj": ""}, "company")

    assert body["cnpj"] is None


def test_required_fields_report_uniform_message():
    errors = _errors(CompanyForm, {"name": "   "})

    assert errors == {"name": REQUIRED_MESSAGE, "planType": REQUIRED_MESSAGE}


def test_company_limits_must_be_positive():
    errors = _errors(CompanyForm, {"name": "Acme", "planType": "Free", "maxUsers": 0})

    assert set(errors) == {"maxUsers"}


def test_user_email_and_password_rules():
    errors = _errors(
        UserForm,
        {"name": "Ana", "email": "not-an-email", "role": "COMPANY_ADMIN", "password": "123"},
    )

    assert set(errors) == {"email", "password"}


def test_user_role_must_be_known():
    errors = _errors(UserForm, {"name": "Ana", "email": "ana@acme.com", "role": "ROOT"})

    assert set(errors) == {"role"}


def test_payment_dates_are_serialised_as_iso_strings():
    body = validate_payload(
        PaymentForm,
        {
            "companyId": "c1",
            "subscriptionId": "s1",
            "amount": 99.9,
            "paymentDate": "2024-03-01",
            "paymentMethod": "PIX",
            "status": "PAID",
        },
        "payment",
    )

    assert body["paymentDate"] == "2024-03-01"


def test_payment_invoice_url_must_be_http():
    errors = _errors(
        PaymentForm,
        {
            "companyId": "c1",
            "subscriptionId": "s1",
            "amount": 10,
            "paymentDate": "2024-03-01",
            "paymentMethod": "PIX",
            "status": "PAID",
            "invoiceUrl": "ftp://files/invoice.pdf",
        },
    )

    assert set(errors) == {"invoiceUrl"}


def test_multiple_choice_needs_a_correct_option():
    errors = _errors(
        GlobalQuestionForm,
        {
            "text": "Which?",
            "type": "MULTIPLE_CHOICE",
            "difficulty": "EASY",
            "categoryIds": ["cat1"],
            "options": [{"text": "A"}, {"text": "B"}],
        },
    )

    assert errors == {"__root__": "Mark at least one option as correct"}


def test_essay_question_needs_no_options():
    body = validate_payload(
        GlobalQuestionForm,
        {"text": "Explain.", "type": "ESSAY", "difficulty": "HARD", "categoryIds": ["cat1"]},
        "question",
    )

    assert body["categoryIds"] == ["cat1"]


def test_nested_option_errors_use_dotted_paths():
    errors = _errors(
        GlobalQuestionForm,
        {
            "text": "Which?",
            "type": "ESSAY",
            "difficulty": "EASY",
            "categoryIds": ["cat1"],
            "options": [{"text": ""}],
        },
    )

    assert errors == {"options.0.text": REQUIRED_MESSAGE}


def test_question_needs_a_category():
    errors = _errors(
        GlobalQuestionForm,
        {"text": "Which?", "type": "ESSAY", "difficulty": "EASY", "categoryIds": []},
    )

    assert set(errors) == {"categoryIds"}


def test_material_requires_module_and_url():
    errors = _errors(MaterialForm, {"title": "Handbook"})

    assert errors == {"moduleId": REQUIRED_MESSAGE, "url": REQUIRED_MESSAGE}


def test_certificate_expiry_after_issue():
    errors = _errors(
        CertificateForm,
        {
            "studentId": "s1",
            "courseId": "c1",
            "issueDate": "2024-05-01",
            "expiryDate": "2024-04-01",
        },
    )

    assert errors == {"__root__": "Expiry date must not be before the issue date"}


@pytest.mark.parametrize("score", [-1, 101])
def test_passing_score_is_a_percentage(score):
    errors = _errors(TrainingTestForm, {"title": "Final", "passingScore": score})

    assert set(errors) == {"passingScore"}


def test_validation_error_names_the_entity():
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_payload(CompanyForm, {}, "company")

    assert "company" in str(exc_info.value)
