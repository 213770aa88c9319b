"""
Payload validation for the Inventory API.

Runs a resource schema over an untyped payload and turns every violation into
a readable message naming the offending field, e.g. ``"supplierName" is required``.
"""
from typing import Any, Dict, List, Type, get_args
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError

# Message templates keyed by pydantic error type
MESSAGES = {
    "missing": '"{field}" is required',
    "model_type": '"{field}" must be of type object',
    "string_type": '"{field}" must be a string',
    "string_too_short": '"{field}" is not allowed to be empty',
    "string_too_long": '"{field}" length must be less than or equal to {max_length} characters long',
    "int_type": '"{field}" must be an integer',
    "int_parsing": '"{field}" must be an integer',
    "int_from_float": '"{field}" must be an integer',
    "float_type": '"{field}" must be a number',
    "float_parsing": '"{field}" must be a number',
    "finite_number": '"{field}" must be a number',
    "greater_than_equal": '"{field}" must be greater than or equal to {ge}',
    "datetime_type": '"{field}" must be a valid date',
    "datetime_parsing": '"{field}" must be a valid date',
    "datetime_from_date_parsing": '"{field}" must be a valid date',
}


def _allowed_values(schema: Type[BaseModel], field: str) -> List[Any]:
    model_field = schema.model_fields.get(field)
    if model_field is None:
        return []
    return list(get_args(model_field.annotation))


def format_error(schema: Type[BaseModel], error: Dict[str, Any]) -> str:
    """
    Render one pydantic error as a field message.

    Args:
        schema: Schema the payload was validated against
        error: One entry of ``pydantic.ValidationError.errors()``

    Returns:
        Message naming the field and the violated rule
    """
    loc = error.get("loc") or ()
    field = ".".join(str(part) for part in loc) or "value"
    error_type = error.get("type")
    ctx = error.get("ctx") or {}

    if error_type == "literal_error":
        allowed = _allowed_values(schema, field) or [ctx.get("expected")]
        return f'"{field}" must be one of [{", ".join(str(value) for value in allowed)}]'

    template = MESSAGES.get(error_type)
    if template is None:
        return f'"{field}" {error.get("msg", "is invalid")}'
    return template.format(field=field, **{key: _plain_number(value) for key, value in ctx.items()})


def _plain_number(value: Any) -> Any:
    # Bounds on float fields arrive as floats; 0.0 reads as 0
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def validate_payload(schema: Type[BaseModel], payload: Any) -> Dict[str, Any]:
    """
    Validate a payload against a resource schema.

    All violations are collected in a single pass, in field declaration order.

    Args:
        schema: Pydantic schema holding the field rules of a resource
        payload: Untyped request body

    Returns:
        Normalized value: exactly the declared fields, JSON-ready, with
        declared defaults applied and unset optional fields left out

    Raises:
        ValidationError: if any field rule is violated
    """
    try:
        value = schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError([format_error(schema, error) for error in exc.errors()])
    return value.model_dump(mode="json", exclude_none=True)
