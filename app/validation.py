"""Input validation independent of the HTTP layer.

``validate`` runs a raw mapping through a schema and returns a
``ValidationResult`` holding either the parsed value or every field error
found, never just the first one.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.errors import ValidationError
from app.schemas.common import check_uuid_syntax

T = TypeVar("T")
SchemaT = TypeVar("SchemaT", bound=BaseModel)


@dataclass
class FieldError:
    field: str
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass
class ValidationResult(Generic[T]):
    value: Optional[T] = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def unwrap(self, message: str = "Validation Error") -> T:
        if not self.ok:
            raise ValidationError(message, [e.as_dict() for e in self.errors])
        return self.value


def field_errors_from_pydantic(exc: PydanticValidationError | Any) -> List[FieldError]:
    """Flatten pydantic (or FastAPI request) errors into ``FieldError`` entries."""
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        message = err.get("msg", "Invalid value")
        ctx_error = (err.get("ctx") or {}).get("error")
        if err.get("type") == "value_error" and ctx_error is not None:
            message = str(ctx_error)
        errors.append(FieldError(field=".".join(loc), message=message))
    return errors


def validate(schema: Type[SchemaT], data: Any) -> ValidationResult[SchemaT]:
    if not isinstance(data, Mapping):
        return ValidationResult(errors=[FieldError(field="", message="Expected a JSON object")])
    try:
        return ValidationResult(value=schema.model_validate(dict(data)))
    except PydanticValidationError as e:
        return ValidationResult(errors=field_errors_from_pydantic(e))


def validate_uuid(value: Any, field_name: str = "id") -> ValidationResult[uuid.UUID]:
    try:
        return ValidationResult(value=check_uuid_syntax(value))
    except ValueError as e:
        return ValidationResult(errors=[FieldError(field=field_name, message=str(e))])
