# 📄 File: app/shared/core/schemas.py
# 🧭 Purpose (Layman Explanation):
# Shared building blocks for the shape of request and response data, so every part of
# the API speaks the same camelCase JSON the Clubbera apps expect.
# 🧪 Purpose (Technical Summary):
# Base pydantic models with camelCase aliases, the common message/error bodies and a
# helper that validates partial-update payloads into the application ValidationError.
# 🔗 Dependencies:
# pydantic v2, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# Every module's presentation/api/schemas package, PATCH endpoints

from typing import Any, Dict, Iterable, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from app.shared.core.exceptions import ValidationError
from app.shared.utils.validators import validate_allowed_updates

ModelT = TypeVar("ModelT", bound=BaseModel)


class CamelModel(BaseModel):
    """Serializes snake_case attributes as camelCase keys and accepts either on input."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Body of every error response."""
    error: str
    code: Optional[str] = None
    details: Optional[Dict[str, Any]] = None


def parse_update_payload(
    model_cls: Type[ModelT],
    payload: Dict[str, Any],
    allowed: Iterable[str],
) -> Dict[str, Any]:
    """
    Validate a PATCH body against a whitelist of camelCase keys and a schema.

    Returns:
        The provided fields only, keyed by attribute (snake_case) name

    Raises:
        ValidationError: "Invalid updates!" for unknown keys, or the schema errors
    """
    validate_allowed_updates(payload, allowed)
    try:
        parsed = model_cls.model_validate(payload)
    except PydanticValidationError as e:
        errors = [
            {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        raise ValidationError("Invalid updates!", details={"errors": errors}) from e
    return parsed.model_dump(exclude_unset=True)
