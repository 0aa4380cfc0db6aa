# =============================================================================
# core/validation.py - Form Payload Validation
# =============================================================================
# Checks a nested form payload such as {"hotel": {...}} against its pydantic
# model before anything touches the database.
#
# All violations are reported at once, comma-joined, each naming the field
# path that failed:
#   "hotel.name" is required,"hotel.price" input should be greater than or equal to 0
# =============================================================================

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.exceptions import PayloadValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def format_error(prefix: str, error: dict[str, Any]) -> str:
    """Turn one pydantic error into a `"path" message` string."""
    path = ".".join([prefix, *(str(part) for part in error["loc"])])

    if error["type"] == "missing":
        return f'"{path}" is required'

    msg = error["msg"]
    return f'"{path}" {msg[:1].lower()}{msg[1:]}'


def validate_payload(model: type[ModelT], payload: dict[str, Any], key: str) -> ModelT:
    """
    Validate payload[key] against a model.

    Args:
        model: Pydantic model class (HotelCreate, ReviewCreate)
        payload: Parsed form body
        key: Top-level key holding the object ("hotel", "review")

    Returns:
        The validated model instance

    Raises:
        PayloadValidationError: With every violated field listed
    """
    data = payload.get(key)
    if not isinstance(data, dict):
        raise PayloadValidationError([f'"{key}" is required'])

    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise PayloadValidationError([format_error(key, error) for error in e.errors()]) from e
