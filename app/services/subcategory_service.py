import logging
from typing import Any, List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.crud import category_crud, subcategory_crud
from app.errors import ConflictError, NotFoundError, StoreError
from app.models.subcategory import Subcategory
from app.schemas.subcategory import SubcategorySchema
from app.validation import validate, validate_uuid

logger = logging.getLogger(__name__)


class SubcategoryService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: Any) -> Subcategory:
        subcategory_data = validate(SubcategorySchema, data).unwrap()
        name, category_id = subcategory_data.name, subcategory_data.category_id
        try:
            if not await category_crud.get_category_by_id(self.db, category_id):
                logger.warning(f"Subcategory '{name}' references missing category ID {category_id}.")
                raise NotFoundError(f"Category with ID {category_id} does not exist")

            if await subcategory_crud.get_subcategory_by_name(self.db, category_id, name):
                logger.warning(f"Subcategory name '{name}' already exists in category ID {category_id}.")
                raise ConflictError("Subcategory with this name already exists in this category")

            db_subcategory = await subcategory_crud.create_subcategory(self.db, name, category_id)
        except IntegrityError as e_integrity:
            await self.db.rollback()
            logger.warning(f"IntegrityError creating subcategory '{name}' in category ID {category_id}: {str(e_integrity)}")
            raise ConflictError("Subcategory with this name already exists in this category")
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error creating subcategory '{name}' in category ID {category_id}: {str(e)}", exc_info=True)
            raise StoreError()

        logger.info(f"Subcategory '{db_subcategory.name}' (ID: {db_subcategory.id}) created in category ID {category_id}.")
        return db_subcategory

    async def list(self) -> List[Subcategory]:
        try:
            return await subcategory_crud.get_subcategories(self.db, with_category=True)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching subcategories: {str(e)}", exc_info=True)
            raise StoreError()

    async def list_by_category(self, category_id: Any) -> List[Subcategory]:
        valid_id = validate_uuid(category_id, "categoryId").unwrap("Valid Category ID is required")
        try:
            return await subcategory_crud.get_subcategories(self.db, category_id=valid_id, with_category=True)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching subcategories for category ID {valid_id}: {str(e)}", exc_info=True)
            raise StoreError()

    async def delete(self, subcategory_id: Any) -> None:
        valid_id = validate_uuid(subcategory_id).unwrap("Valid Subcategory ID is required")
        try:
            deleted = await subcategory_crud.delete_subcategory(self.db, valid_id)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error deleting subcategory with id {valid_id}: {str(e)}", exc_info=True)
            raise StoreError()

        if not deleted:
            logger.error(f"Delete of subcategory with id {valid_id} removed no rows.")
            raise StoreError(details="Record to delete does not exist.")
        logger.info(f"Subcategory ID {valid_id} deleted.")
