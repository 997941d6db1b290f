import uuid

from pydantic import Field

from app.schemas.common import CamelSchema

class CategorySchema(CamelSchema):
    name: str = Field(..., min_length=1)

class CategoryResponseSchema(CamelSchema):
    id: uuid.UUID
    name: str
