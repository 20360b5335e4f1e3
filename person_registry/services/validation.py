"""Request Validation — turns DTO constraint violations into ValidationFailureError.

Invariants:
    - Required fields (REQUIRED_FIELDS on the DTO class) are checked first;
      None, empty and whitespace-only strings count as missing
    - Field constraints are then re-checked by re-validating the DTO's data
    - The first violation becomes the error's message and field; details lists all
"""

from typing import Any, Sequence

from pydantic import BaseModel, ValidationError

from person_registry.core.errors import ValidationFailureError


def validate_request(request: BaseModel) -> None:
    """Raise ValidationFailureError on the first violated constraint of request."""
    required: dict[str, str] = getattr(type(request), "REQUIRED_FIELDS", {})
    for field_name, message in required.items():
        value = getattr(request, field_name, None)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationFailureError(message, field_name)

    try:
        type(request).model_validate(request.model_dump())
    except ValidationError as e:
        raise failure_from_errors(e.errors()) from e


def failure_from_errors(
    errors: Sequence[dict[str, Any]], loc_offset: int = 0,
) -> ValidationFailureError:
    """Build a ValidationFailureError from pydantic error dicts.

    loc_offset drops leading location parts (FastAPI prefixes "body"/"query").
    """
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"][loc_offset:]),
            "message": e["msg"],
        }
        for e in errors
    ]
    first = details[0]
    return ValidationFailureError(first["message"], first["field"], details)
