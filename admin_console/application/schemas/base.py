"""Shared base for form schemas and the payload validation entry point."""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from admin_console.domain.exceptions import PayloadValidationError

REQUIRED_MESSAGE = "This field is required."


class FormSchema(BaseModel):
    """Base for every form payload schema.

    Fields are declared in snake_case and exchanged with the API in
    camelCase. Unknown keys are kept so forms can carry attributes the
    schema does not care about.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="allow",
    )


def validate_payload(
    schema: type[FormSchema],
    payload: dict[str, Any],
    entity_type: str,
) -> dict[str, Any]:
    """Validate a form payload and return the normalised API body.

    Raises:
        PayloadValidationError: With one message per offending field.
    """
    try:
        model = schema.model_validate(payload)
    except ValidationError as exc:
        raise PayloadValidationError(entity_type, _field_errors(exc)) from exc
    return model.model_dump(by_alias=True, exclude_unset=True, mode="json")


def _field_errors(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = ".".join(str(part) for part in error["loc"]) or "__root__"
        if loc in errors:
            continue
        errors[loc] = _message_for(error)
    return errors


def _message_for(error: dict[str, Any]) -> str:
    kind = error.get("type", "")
    if kind == "missing":
        return REQUIRED_MESSAGE
    if kind == "string_too_short" and error.get("ctx", {}).get("min_length") == 1:
        return REQUIRED_MESSAGE
    message = str(error.get("msg", "Invalid value."))
    # Custom validators surface as "Value error, <text>"
    return message.removeprefix("Value error, ")
