from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.services.category_service import CategoryService
from app.services.subcategory_service import SubcategoryService
from app.services.event_service import EventService


async def get_category_service(db: AsyncSession = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


async def get_subcategory_service(db: AsyncSession = Depends(get_db)) -> SubcategoryService:
    return SubcategoryService(db)


async def get_event_service(db: AsyncSession = Depends(get_db)) -> EventService:
    return EventService(db)
