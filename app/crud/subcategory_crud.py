import uuid
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from sqlalchemy.orm import selectinload

from app.models.category import name_key
from app.models.subcategory import Subcategory

def _subcategory_query(with_category: bool):
    query = select(Subcategory)
    if with_category:
        query = query.options(selectinload(Subcategory.category)).execution_options(populate_existing=True)
    return query

async def get_subcategory_by_id(db: AsyncSession, subcategory_id: uuid.UUID) -> Subcategory | None:
    result = await db.execute(select(Subcategory).filter(Subcategory.id == subcategory_id))
    return result.scalars().first()

async def get_subcategory_by_name(db: AsyncSession, category_id: uuid.UUID, name: str) -> Subcategory | None:
    result = await db.execute(
        select(Subcategory).filter(
            Subcategory.category_id == category_id,
            Subcategory.name_key == name_key(name)
        )
    )
    return result.scalars().first()

async def get_subcategories(
    db: AsyncSession,
    category_id: Optional[uuid.UUID] = None,
    with_category: bool = False
) -> List[Subcategory]:
    query = _subcategory_query(with_category)
    if category_id is not None:
        query = query.where(Subcategory.category_id == category_id)
    result = await db.execute(query)
    return result.scalars().all()

async def create_subcategory(db: AsyncSession, name: str, category_id: uuid.UUID) -> Subcategory:
    db_subcategory = Subcategory(name=name, name_key=name_key(name), category_id=category_id)
    db.add(db_subcategory)
    await db.commit()
    return db_subcategory

async def delete_subcategory(db: AsyncSession, subcategory_id: uuid.UUID) -> bool:
    result = await db.execute(delete(Subcategory).where(Subcategory.id == subcategory_id))
    await db.commit()
    return result.rowcount > 0
