from fastapi import APIRouter, Body, Depends, Query
from typing import Any, Dict, List, Optional

from app.dependencies import get_event_service
from app.schemas.common import MessageResponseSchema
from app.schemas.event import EventResponseSchema
from app.services.event_service import EventService

router = APIRouter(
    prefix="/events",
    tags=["Events"]
)

@router.post(
    "",
    summary="Create a new event",
    response_model=EventResponseSchema
)
async def create_event(
    payload: Dict[str, Any] = Body(...),
    service: EventService = Depends(get_event_service)
):
    return await service.create(payload)

@router.get(
    "",
    summary="Get all events, newest first",
    response_model=List[EventResponseSchema]
)
async def get_events(
    service: EventService = Depends(get_event_service)
):
    return await service.list()

# Registered before /{event_id} so "filter" is not taken for an id.
@router.get(
    "/filter",
    summary="Get events by category and/or subcategory",
    response_model=List[EventResponseSchema]
)
async def filter_events(
    category_id: Optional[str] = Query(default=None, alias="categoryId"),
    subcategory_id: Optional[str] = Query(default=None, alias="subcategoryId"),
    service: EventService = Depends(get_event_service)
):
    return await service.filter(category_id=category_id, subcategory_id=subcategory_id)

@router.get(
    "/{event_id}",
    summary="Get a specific event by ID",
    response_model=EventResponseSchema
)
async def get_event(
    event_id: str,
    service: EventService = Depends(get_event_service)
):
    return await service.get(event_id)

@router.put(
    "/{event_id}",
    summary="Replace an event",
    response_model=EventResponseSchema
)
async def update_event(
    event_id: str,
    payload: Dict[str, Any] = Body(...),
    service: EventService = Depends(get_event_service)
):
    return await service.update(event_id, payload)

@router.delete(
    "/{event_id}",
    summary="Delete an event",
    response_model=MessageResponseSchema
)
async def delete_event(
    event_id: str,
    service: EventService = Depends(get_event_service)
):
    await service.delete(event_id)
    return {"message": "Event deleted"}
