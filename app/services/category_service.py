import logging
from typing import Any, List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.crud import category_crud
from app.errors import ConflictError, StoreError
from app.models.category import Category
from app.schemas.category import CategorySchema
from app.validation import validate, validate_uuid

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: Any) -> Category:
        category_data = validate(CategorySchema, data).unwrap()
        try:
            existing = await category_crud.get_category_by_name(self.db, category_data.name)
            if existing:
                logger.warning(f"Category name '{category_data.name}' conflicts with existing category ID {existing.id}.")
                raise ConflictError("Category with this name already exists")

            db_category = await category_crud.create_category(self.db, category_data.name)
        except IntegrityError as e_integrity:
            await self.db.rollback()
            logger.warning(f"IntegrityError creating category '{category_data.name}': {str(e_integrity)}")
            raise ConflictError("Category with this name already exists")
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error creating category '{category_data.name}': {str(e)}", exc_info=True)
            raise StoreError()

        logger.info(f"Category '{db_category.name}' (ID: {db_category.id}) created.")
        return db_category

    async def list(self) -> List[Category]:
        try:
            return await category_crud.get_categories(self.db)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching categories: {str(e)}", exc_info=True)
            raise StoreError()

    async def delete(self, category_id: Any) -> None:
        valid_id = validate_uuid(category_id).unwrap("Valid Category ID is required")
        try:
            deleted = await category_crud.delete_category(self.db, valid_id)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error deleting category with id {valid_id}: {str(e)}", exc_info=True)
            raise StoreError()

        if not deleted:
            logger.error(f"Delete of category with id {valid_id} removed no rows.")
            raise StoreError(details="Record to delete does not exist.")
        logger.info(f"Category ID {valid_id} deleted.")
