from fastapi import APIRouter, Body, Depends
from typing import Any, Dict, List

from app.dependencies import get_category_service
from app.schemas.category import CategoryResponseSchema
from app.schemas.common import MessageResponseSchema
from app.services.category_service import CategoryService

router = APIRouter(
    prefix="/categories",
    tags=["Categories"]
)

@router.post(
    "",
    summary="Create new category",
    response_model=CategoryResponseSchema
)
async def create_category(
    payload: Dict[str, Any] = Body(...),
    service: CategoryService = Depends(get_category_service)
):
    return await service.create(payload)

@router.get(
    "",
    summary="Get all categories",
    response_model=List[CategoryResponseSchema]
)
async def get_categories(
    service: CategoryService = Depends(get_category_service)
):
    return await service.list()

@router.delete(
    "/{category_id}",
    summary="Delete a category",
    response_model=MessageResponseSchema
)
async def delete_category(
    category_id: str,
    service: CategoryService = Depends(get_category_service)
):
    await service.delete(category_id)
    return {"message": "Category deleted"}
