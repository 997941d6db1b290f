import uuid
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete

from app.models.category import Category, name_key

async def get_category_by_id(db: AsyncSession, category_id: uuid.UUID) -> Category | None:
    result = await db.execute(select(Category).filter(Category.id == category_id))
    return result.scalars().first()

async def get_category_by_name(db: AsyncSession, name: str) -> Category | None:
    result = await db.execute(select(Category).filter(Category.name_key == name_key(name)))
    return result.scalars().first()

async def get_categories(db: AsyncSession) -> List[Category]:
    result = await db.execute(select(Category))
    return result.scalars().all()

async def create_category(db: AsyncSession, name: str) -> Category:
    db_category = Category(name=name, name_key=name_key(name))
    db.add(db_category)
    await db.commit()
    return db_category

async def delete_category(db: AsyncSession, category_id: uuid.UUID) -> bool:
    result = await db.execute(delete(Category).where(Category.id == category_id))
    await db.commit()
    return result.rowcount > 0
