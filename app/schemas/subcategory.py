import uuid
from typing import Optional

from pydantic import Field

from app.schemas.common import CamelSchema, UUIDStr
from app.schemas.category import CategoryResponseSchema


class SubcategorySchema(CamelSchema):
    name: str = Field(..., min_length=1)
    category_id: UUIDStr

class SubcategoryResponseSchema(CamelSchema):
    id: uuid.UUID
    name: str
    category_id: uuid.UUID

class SubcategoryWithCategoryResponseSchema(SubcategoryResponseSchema):
    # None once the parent category has been deleted; deletes do not cascade.
    category: Optional[CategoryResponseSchema] = None
