import re
import uuid
from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, AfterValidator, BeforeValidator
from pydantic.alias_generators import to_camel

UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


def check_uuid_syntax(value):
    if isinstance(value, uuid.UUID):
        return value
    if not isinstance(value, str) or not UUID_PATTERN.match(value):
        raise ValueError("Invalid UUID format")
    return uuid.UUID(value)


def as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo; everything is stored in UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UUIDStr = Annotated[uuid.UUID, BeforeValidator(check_uuid_syntax)]
UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]


class CamelSchema(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class MessageResponseSchema(BaseModel):
    message: str
