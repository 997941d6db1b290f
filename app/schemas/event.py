import uuid
from datetime import datetime, timedelta, timezone
from typing import Annotated, Optional

from pydantic import AnyUrl, AfterValidator, BeforeValidator, EmailStr, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from app.schemas.common import CamelSchema, UTCDateTime, UUIDStr, as_utc
from app.schemas.category import CategoryResponseSchema
from app.schemas.subcategory import SubcategoryResponseSchema

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
CONTACT_PHONE_MIN_LENGTH = 8

_url_adapter = TypeAdapter(AnyUrl)


def parse_event_date(value):
    """Accept epoch milliseconds or a calendar date string and return a UTC datetime."""
    if isinstance(value, datetime):
        return as_utc(value)
    if isinstance(value, bool):
        raise ValueError("Date must be an integer timestamp or a date string")
    if isinstance(value, float):
        # JSON has a single number type; 1732000000000.0 is still a whole timestamp.
        if not value.is_integer():
            raise ValueError("Date must be an integer timestamp or a date string")
        value = int(value)
    if isinstance(value, int):
        if value <= 0:
            raise ValueError("Date must be a valid timestamp")
        try:
            return EPOCH + timedelta(milliseconds=value)
        except OverflowError:
            raise ValueError("Invalid timestamp")
    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            raise ValueError("Invalid date")
        return as_utc(parsed)
    raise ValueError("Date must be an integer timestamp or a date string")


def check_url(value: str) -> str:
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValueError("Invalid url")
    return value


EventDate = Annotated[datetime, BeforeValidator(parse_event_date)]
ImageUrl = Annotated[str, AfterValidator(check_url)]


class EventSchema(CamelSchema):
    """Full event payload, used for both creation and replacement."""

    name: str = Field(..., min_length=1)
    date: EventDate
    venue: str = Field(..., min_length=1)
    image_url: Optional[ImageUrl] = None
    category_id: UUIDStr
    subcategory_id: UUIDStr
    # May be omitted but not sent as null; only imageUrl accepts null.
    contact_phone: str = Field(default=None, min_length=CONTACT_PHONE_MIN_LENGTH)
    contact_email: EmailStr = None


class EventFilterSchema(CamelSchema):
    category_id: Optional[UUIDStr] = None
    subcategory_id: Optional[UUIDStr] = None


class EventResponseSchema(CamelSchema):
    id: uuid.UUID
    name: str
    date: UTCDateTime
    venue: str
    image_url: Optional[str] = None
    category_id: uuid.UUID
    subcategory_id: uuid.UUID
    contact_phone: Optional[str] = None
    contact_email: Optional[str] = None
    created_at: UTCDateTime

    category: Optional[CategoryResponseSchema] = None
    subcategory: Optional[SubcategoryResponseSchema] = None
