import uuid
from typing import Any, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from sqlalchemy.orm import selectinload

from app.models.event import Event

def _event_query(with_relations: bool):
    query = select(Event)
    if with_relations:
        query = query.options(
            selectinload(Event.category),
            selectinload(Event.subcategory)
        ).execution_options(populate_existing=True)
    return query

async def get_event_by_id(
    db: AsyncSession,
    event_id: uuid.UUID,
    with_relations: bool = False
) -> Event | None:
    result = await db.execute(_event_query(with_relations).filter(Event.id == event_id))
    return result.scalars().first()

async def get_events(
    db: AsyncSession,
    category_id: Optional[uuid.UUID] = None,
    subcategory_id: Optional[uuid.UUID] = None,
    with_relations: bool = False
) -> List[Event]:
    query = _event_query(with_relations)
    if category_id is not None:
        query = query.where(Event.category_id == category_id)
    if subcategory_id is not None:
        query = query.where(Event.subcategory_id == subcategory_id)
    query = query.order_by(Event.created_at.desc())
    result = await db.execute(query)
    return result.scalars().all()

async def create_event(db: AsyncSession, values: dict[str, Any]) -> Event:
    db_event = Event(**values)
    db.add(db_event)
    await db.commit()
    return db_event

async def update_event(db: AsyncSession, db_event: Event, values: dict[str, Any]) -> Event:
    for key, value in values.items():
        setattr(db_event, key, value)
    await db.commit()
    return db_event

async def delete_event(db: AsyncSession, event_id: uuid.UUID) -> bool:
    result = await db.execute(delete(Event).where(Event.id == event_id))
    await db.commit()
    return result.rowcount > 0
