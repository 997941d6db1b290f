import logging
from typing import Any, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from app.crud import category_crud, event_crud, subcategory_crud
from app.errors import NotFoundError, StoreError
from app.models.event import Event
from app.schemas.event import EventFilterSchema, EventSchema
from app.validation import validate, validate_uuid

logger = logging.getLogger(__name__)


class EventService:
    """Events are always returned with their category and subcategory loaded."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: Any) -> Event:
        event_data = validate(EventSchema, data).unwrap()
        try:
            if not await category_crud.get_category_by_id(self.db, event_data.category_id):
                logger.warning(f"Event '{event_data.name}' references missing category ID {event_data.category_id}.")
                raise NotFoundError(f"Category with ID {event_data.category_id} does not exist")

            if not await subcategory_crud.get_subcategory_by_id(self.db, event_data.subcategory_id):
                logger.warning(f"Event '{event_data.name}' references missing subcategory ID {event_data.subcategory_id}.")
                raise NotFoundError(f"Subcategory with ID {event_data.subcategory_id} does not exist")

            db_event = await event_crud.create_event(self.db, event_data.model_dump())
            db_event = await event_crud.get_event_by_id(self.db, db_event.id, with_relations=True)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error creating event '{event_data.name}': {str(e)}", exc_info=True)
            raise StoreError()

        logger.info(f"Event '{db_event.name}' (ID: {db_event.id}) created.")
        return db_event

    async def list(self) -> List[Event]:
        return await self.filter()

    async def filter(self, category_id: Optional[Any] = None, subcategory_id: Optional[Any] = None) -> List[Event]:
        filters = validate(
            EventFilterSchema,
            {"categoryId": category_id, "subcategoryId": subcategory_id}
        ).unwrap()
        try:
            return await event_crud.get_events(
                self.db,
                category_id=filters.category_id,
                subcategory_id=filters.subcategory_id,
                with_relations=True
            )
        except SQLAlchemyError as e:
            logger.error(
                f"Error fetching events (category ID: {filters.category_id}, subcategory ID: {filters.subcategory_id}): {str(e)}",
                exc_info=True
            )
            raise StoreError()

    async def get(self, event_id: Any) -> Event:
        valid_id = validate_uuid(event_id).unwrap("Valid Event ID is required")
        try:
            db_event = await event_crud.get_event_by_id(self.db, valid_id, with_relations=True)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching event with id {valid_id}: {str(e)}", exc_info=True)
            raise StoreError()

        if not db_event:
            raise NotFoundError("Event not found")
        return db_event

    async def update(self, event_id: Any, data: Any) -> Event:
        valid_id = validate_uuid(event_id).unwrap("Valid Event ID is required")
        event_data = validate(EventSchema, data).unwrap()
        try:
            db_event = await event_crud.get_event_by_id(self.db, valid_id)
            if not db_event:
                logger.warning(f"Update requested for missing event ID {valid_id}.")
                raise NotFoundError("Event not found")

            await event_crud.update_event(self.db, db_event, event_data.model_dump())
            db_event = await event_crud.get_event_by_id(self.db, valid_id, with_relations=True)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error updating event with id {valid_id}: {str(e)}", exc_info=True)
            raise StoreError()

        logger.info(f"Event ID {valid_id} (name: '{db_event.name}') updated.")
        return db_event

    async def delete(self, event_id: Any) -> None:
        valid_id = validate_uuid(event_id).unwrap("Valid Event ID is required")
        try:
            deleted = await event_crud.delete_event(self.db, valid_id)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error deleting event with id {valid_id}: {str(e)}", exc_info=True)
            raise StoreError()

        if not deleted:
            logger.error(f"Delete of event with id {valid_id} removed no rows.")
            raise StoreError(details="Record to delete does not exist.")
        logger.info(f"Event ID {valid_id} deleted.")
